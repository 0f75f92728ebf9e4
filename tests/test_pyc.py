import pytest

from formatreaders.pyc import PycFile


def test_read_write_pyc(tmp_path):
    path = tmp_path / "test_optimized.pyc"
    pyc = PycFile(
        magic_number=3494,
        modification_timestamp=1678886400,
        code_object=bytes([101, 0, 0, 0, 100, 0, 0, 0, 83, 0, 0, 0]),
    )
    pyc.write_to_file(path)

    read = PycFile.read_from_file(path)
    assert read.magic_number == pyc.magic_number
    assert read.modification_timestamp == pyc.modification_timestamp
    assert read.code_object == pyc.code_object


def test_header_is_little_endian(tmp_path):
    path = tmp_path / "le.pyc"
    PycFile(magic_number=3494, modification_timestamp=1, code_object=b"\xaa").write_to_file(path)
    assert path.read_bytes() == b"\xa6\x0d\x00\x00\x01\x00\x00\x00\xaa"


def test_truncated_header_raises(tmp_path):
    path = tmp_path / "short.pyc"
    path.write_bytes(b"\x01\x02\x03\x04\x05")
    with pytest.raises(EOFError):
        PycFile.read_from_file(path)


def test_header_only_gives_empty_code(tmp_path):
    path = tmp_path / "empty.pyc"
    path.write_bytes(b"\x01\x00\x00\x00\x02\x00\x00\x00")
    read = PycFile.read_from_file(path)
    assert (read.magic_number, read.modification_timestamp, read.code_object) == (1, 2, b"")


def test_out_of_range_field_raises(tmp_path):
    with pytest.raises(ValueError):
        PycFile(magic_number=-1, modification_timestamp=0).write_to_file(tmp_path / "bad.pyc")