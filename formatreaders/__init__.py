"""Small readers and writers for media headers, data files and source-code files."""

__version__ = "0.1.0"

__all__ = [
    "fbx",
    "fortran",
    "gdscript",
    "gobin",
    "javaprops",
    "jpeg",
    "jsonfile",
    "julia",
    "kotlin",
    "makefile",
    "matfile",
    "mdfile",
    "mkv",
    "mov",
    "mp3",
    "mp4",
    "objfile",
    "pascal",
    "plistfile",
    "png",
    "prolog",
    "psd",
    "pyc",
    "scripts",
]