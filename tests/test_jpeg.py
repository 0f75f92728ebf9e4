import io

import pytest

from formatreaders.jpeg import JpegError, JpegImage, parse_jpeg, read_dimensions


def _minimal_jpeg() -> bytes:
    parts = [
        b"\xff\xd8",
        # APP0
        b"\xff\xe0",
        b"\x00\x10",
        b"\x4a\x46\x49\x46\x00",
        b"\x01\x01",
        b"\x00",
        b"\x00\x01",
        b"\x00\x01",
        b"\x00\x00",
        # SOF0
        b"\xff\xc0",
        b"\x00\x11",
        b"\x08",
        b"\x00\xa0",
        b"\x00\xc8",
        b"\x03",
        b"\x01\x22\x00",
        b"\x02\x11\x01",
        b"\x03\x11\x01",
        # SOS
        b"\xff\xda",
        b"\x00\x0c",
        b"\x03",
        b"\x01\x00",
        b"\x02\x11",
        b"\x03\x11",
        b"\x00\x3f\x00",
        # EOI
        b"\xff\xd9",
    ]
    return b"".join(parts)


def test_parse_jpeg(tmp_path):
    path = tmp_path / "test_minimal.jpg"
    path.write_bytes(_minimal_jpeg())
    image = parse_jpeg(path)
    assert image.width == 200
    assert image.height == 160


def test_read_dimensions_from_stream():
    assert read_dimensions(io.BytesIO(_minimal_jpeg())) == JpegImage(width=200, height=160)


def test_parse_jpeg_invalid_soi(tmp_path):
    path = tmp_path / "test_invalid_soi.jpg"
    path.write_bytes(bytes([0x00, 0x00, 0xFF, 0xD8]))
    with pytest.raises(JpegError, match="SOI marker not found"):
        parse_jpeg(path)


def test_parse_jpeg_no_sof0(tmp_path):
    path = tmp_path / "test_no_sof0.jpg"
    path.write_bytes(bytes([0xFF, 0xD8, 0xFF, 0xD9]))
    with pytest.raises(JpegError, match="SOF0 marker not found before EOI"):
        parse_jpeg(path)


def test_end_of_file_before_sof0():
    with pytest.raises(JpegError, match="before SOF0"):
        read_dimensions(io.BytesIO(b"\xff\xd8"))


def test_empty_input():
    with pytest.raises(JpegError):
        read_dimensions(io.BytesIO(b""))


def test_invalid_marker():
    with pytest.raises(JpegError, match="Invalid marker"):
        read_dimensions(io.BytesIO(b"\xff\xd8\x00\x00"))


def test_sof0_too_short():
    data = b"\xff\xd8\xff\xc0\x00\x05\x08\x00\x01"
    with pytest.raises(JpegError, match="too short"):
        read_dimensions(io.BytesIO(data))


def test_truncated_sof0_data():
    data = b"\xff\xd8\xff\xc0\x00\x11\x08\x00\xa0"
    with pytest.raises(JpegError, match="SOF0 data"):
        read_dimensions(io.BytesIO(data))


def test_zero_dimension_rejected():
    data = b"\xff\xd8\xff\xc0\x00\x08\x08\x00\x00\x00\x10\x01"
    with pytest.raises(JpegError, match="dimensions"):
        read_dimensions(io.BytesIO(data))


def test_segment_with_no_payload_is_skipped():
    data = b"\xff\xd8\xff\xe1\x00\x02\xff\xc0\x00\x08\x08\x00\x20\x00\x40\x01"
    assert read_dimensions(io.BytesIO(data)) == JpegImage(width=0x40, height=0x20)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_jpeg(tmp_path / "absent.jpg")