import io
import struct

import pytest

from formatreaders.mov import MovAtom, MovError, MovParser, parse_mov


def _atom(kind, payload=b""):
    return struct.pack(">I", 8 + len(payload)) + kind + payload


def _sample():
    children = _atom(b"mvhd", b"\x00" * 12) + _atom(b"trak", b"\x01" * 4)
    return (
        _atom(b"ftyp", b"qt  ")
        + _atom(b"moov", children)
        + _atom(b"mdat", b"\xaa" * 20)
    )


def test_parse_top_level_and_moov_children():
    data = _sample()
    atoms = MovParser(io.BytesIO(data)).parse()
    assert [a.atom_type for a in atoms] == [b"ftyp", b"moov", b"mdat"]
    assert [a.size for a in atoms] == [12, 8 + 20 + 12, 28]
    moov = atoms[1]
    assert moov.children == [MovAtom(b"mvhd", 20), MovAtom(b"trak", 12)]
    assert sum(a.size for a in atoms) == len(data)


def test_type_name():
    atoms = MovParser(io.BytesIO(_atom(b"free"))).parse()
    assert atoms[0].type_name == "free"


def test_parse_from_path(tmp_path):
    path = tmp_path / "clip.mov"
    path.write_bytes(_sample())
    assert [a.atom_type for a in parse_mov(path)] == [b"ftyp", b"moov", b"mdat"]


def test_explicit_size_stops_early():
    data = _sample()
    parser = MovParser(io.BytesIO(data), size=12)
    atoms = parser.parse()
    assert [a.atom_type for a in atoms] == [b"ftyp"]
    assert parser.position == 12


def test_empty_stream_has_no_atoms():
    assert MovParser(io.BytesIO(b"")).parse() == []


def test_atom_beyond_end_raises():
    data = struct.pack(">I", 100) + b"mdat" + b"\x00" * 4
    with pytest.raises(MovError):
        MovParser(io.BytesIO(data)).parse()


def test_truncated_header_raises():
    with pytest.raises(MovError):
        MovParser(io.BytesIO(b"\x00\x00\x00\x10mo")).parse()


def test_atom_smaller_than_header_raises():
    data = struct.pack(">I", 4) + b"junk"
    with pytest.raises(MovError):
        MovParser(io.BytesIO(data)).parse()