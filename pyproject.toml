[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "formatreaders"
version = "0.1.0"
description = "Small readers and writers for media, document, data and source-code file formats"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "file formats",
    "parser",
    "mp3",
    "png",
    "jpeg",
    "fbx",
    "mp4",
    "mov",
    "mkv",
    "psd",
    "plist",
    "properties",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: File Formats",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
formatreaders-mp3 = "formatreaders.mp3:main"
formatreaders-png = "formatreaders.png:main"
formatreaders-fbx = "formatreaders.fbx:main"
formatreaders-mp4 = "formatreaders.mp4:main"
formatreaders-psd = "formatreaders.psd:main"
formatreaders-mkv = "formatreaders.mkv:main"
formatreaders-kotlin = "formatreaders.kotlin:main"

[tool.hatch.build.targets.wheel]
packages = ["formatreaders"]

[tool.hatch.build.targets.sdist]
include = ["formatreaders", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
