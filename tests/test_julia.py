import pytest

from formatreaders.julia import JuliaFile

CONTENT = 'println("Hello, Julia!")\nfunction add(a, b)\n    return a + b\nend'


def test_load_julia_file(tmp_path):
    path = tmp_path / "test.jl"
    path.write_text(CONTENT, encoding="utf-8")
    julia = JuliaFile.load(str(path))
    assert julia.lines[0] == 'println("Hello, Julia!")'
    assert julia.lines == [
        'println("Hello, Julia!")',
        "function add(a, b)",
        "    return a + b",
        "end",
    ]
    assert julia.path == str(path)


def test_trailing_newline_and_crlf(tmp_path):
    path = tmp_path / "crlf.jl"
    path.write_bytes(b"x = 1\r\ny = 2\r\n")
    assert JuliaFile.load(path).lines == ["x = 1", "y = 2"]


def test_empty_file(tmp_path):
    path = tmp_path / "empty.jl"
    path.write_bytes(b"")
    assert JuliaFile.load(path).lines == []


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        JuliaFile.load(tmp_path / "missing.jl")


def test_invalid_utf8(tmp_path):
    path = tmp_path / "bad.jl"
    path.write_bytes(b"\xff\xfe\n")
    with pytest.raises(UnicodeDecodeError):
        JuliaFile.load(path)


def test_print_lines(tmp_path, capsys):
    path = tmp_path / "test.jl"
    path.write_text(CONTENT, encoding="utf-8")
    JuliaFile.load(path).print_lines()
    assert capsys.readouterr().out == CONTENT + "\n"