# formatreaders

A collection of small, dependency-free readers (and a few writers) for
common file formats. Each format lives in its own module. The binary
readers raise their own exception class, a subclass of `ValueError`,
when the input is truncated or malformed.

## What is covered

Binary media and image headers:

- `formatreaders.mp3`: the header of the first MPEG audio frame
  (`open_mp3`, `parse_header`, `Mp3Header`, `Mp3Error`), with the
  `bitrate_for` and `sample_rate_for` lookup tables.
- `formatreaders.png`: PNG signature and the `IHDR` chunk
  (`read_png_file`, `read_png_header`, `PngHeader`, `PngError`).
- `formatreaders.jpeg`: image width and height taken from the baseline
  `SOF0` segment (`parse_jpeg`, `read_dimensions`, `JpegImage`, `JpegError`).
- `formatreaders.psd`: Photoshop file header (`open_psd`,
  `read_psd_header`, `PsdHeader`; `PsdError`, `UnsupportedVersionError`,
  `UnsupportedDepthError`).
- `formatreaders.fbx`: binary FBX header and node tree with typed
  properties (`read_fbx_file`, `read_header`, `read_node`,
  `read_property`, `format_node_tree`, `FbxError`).
- `formatreaders.mp4`: top-level MP4 atoms with their payloads
  (`parse_mp4`, `read_atoms`, `Mp4Atom`, `Mp4Error`).
- `formatreaders.mov`: QuickTime atoms, with the direct children of
  `moov` (`parse_mov`, `MovParser`, `MovAtom`, `MovError`).
- `formatreaders.mkv`: the EBML signature and a list of top-level
  elements with four-byte IDs and eight-byte sizes (`open_mkv`,
  `MkvParser`, `MkvSegment`, `MkvError`).
- `formatreaders.objfile`: a length-prefixed container of named blobs
  starting with `OBJ\0` (`load_obj`, `read_obj`, `ObjFile`, `ObjObject`,
  `ObjFormatError`).

Data files:

- `formatreaders.matfile`: named arrays of little-endian doubles behind a
  64-byte name field (`read_mat_file`, `write_mat_file`, `read_variable`,
  `write_variable`, `MatVariable`). A variable cut off part way raises
  `EOFError`.
- `formatreaders.jsonfile`: a quick key lookup over the raw text of a JSON
  document (`read_json_file`, `JsonFile.get_value`); it returns the value's
  text and does not build a full JSON object.
- `formatreaders.makefile`: `KEY=value` assignments (`load_makefile`,
  `parse_assignments`, `MakefileVariables`).
- `formatreaders.javaprops`: `key = value` properties files
  (`JavaProperties.load`, `JavaProperties.save`, plus item access).
- `formatreaders.plistfile`: property lists whose root is a dictionary
  (`read_plist`, `write_plist`, written as XML).
- `formatreaders.gobin`: a compact binary record of name, version and flag
  (`GoData`, `encode_go_data`, `decode_go_data`, `read_go_file`,
  `write_go_file`, `GoDataError`).
- `formatreaders.fortran`: whitespace-separated numbers
  (`FortranFile.read`, `FortranFile.write`); tokens that are not numbers
  are skipped with a warning on standard error.
- `formatreaders.pyc`: the magic number, timestamp and raw code bytes of a
  compiled Python file (`PycFile.read_from_file`, `PycFile.write_to_file`).

Source and text files:

- `formatreaders.scripts`: Perl files as lines (`read_perl_file`,
  `PerlFile`) and a scan of PHP files for opening tags and `echo`
  (`process_php_file`, `scan_php_lines`).
- `formatreaders.julia` (`JuliaFile.load`), `formatreaders.kotlin`
  (`KotlinFile`, `is_kotlin_file`), `formatreaders.pascal` (`PascalFile`),
  `formatreaders.gdscript` (`GDScriptFile`), `formatreaders.mdfile`
  (`read_md_file`, `MdFile.word_count`).
- `formatreaders.prolog`: classifies each non-comment line as a term, a
  rule or unknown (`PrologParser`, `classify_prolog_line`, `LineKind`).

## Installation

```
pip install .
```

The package needs nothing beyond the Python standard library (3.10 or later).
To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

```python
from formatreaders.jpeg import parse_jpeg, JpegError

try:
    image = parse_jpeg("photo.jpg")
    print(image.width, image.height)
except JpegError as exc:
    print("not a usable JPEG:", exc)
```

```python
from formatreaders.matfile import MatVariable, read_mat_file, write_mat_file

write_mat_file("values.mat", [MatVariable("x", [1.0, 2.0, 3.0])])
for variable in read_mat_file("values.mat"):
    print(variable.name, variable.data)
```

```python
from formatreaders.javaprops import JavaProperties

props = JavaProperties()
props.load("app.properties")
props.save("copy.properties")
```

```python
from formatreaders.png import read_png_file

header = read_png_file("image.png")
print(header)
```

## Command-line tools

A few modules can be run directly on a file:

```
formatreaders-mp3 song.mp3
formatreaders-png image.png
formatreaders-fbx model.fbx
formatreaders-mp4 clip.mp4
formatreaders-psd picture.psd
formatreaders-mkv movie.mkv
```

Each prints what it found, or an error message and exit status 1 when the
file cannot be read or is not in the expected format. Without a path,
`formatreaders-psd` writes a small example header to `example.psd` in the
current directory and reads it back.

`formatreaders-kotlin [path]` writes an example Kotlin program to the given
path (default `example.kt`), prints its lines, reports whether the path has
the `.kt` extension and then deletes the file.

## What the package does not do

The readers look at headers and structure only. They do not decode audio,
video or image data, do not verify PNG CRCs, do not parse the contents of
FBX, MOV or MKV payloads beyond what is listed above, and do not execute or
deeply parse any of the source languages.