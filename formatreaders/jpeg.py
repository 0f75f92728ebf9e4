"""Reading the image dimensions from the baseline frame header of a JPEG."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

__all__ = ["JpegError", "JpegImage", "read_dimensions", "parse_jpeg"]

SOI = b"\xff\xd8"
MARKER_SOF0 = 0xC0
MARKER_EOI = 0xD9
MIN_SOF0_LENGTH = 8


class JpegError(ValueError):
    """Raised when the data is not a JPEG whose dimensions can be read."""


@dataclass(frozen=True)
class JpegImage:
    """Dimensions of a JPEG image in pixels."""

    width: int
    height: int


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise JpegError(
            f"Invalid JPEG file: Unexpected end of file while reading {what} "
            f"(read {len(data)} bytes, expected {size})"
        )
    return data


def _read_length(stream: BinaryIO, what: str) -> int:
    return struct.unpack(">H", _read_exact(stream, 2, what))[0]


def read_dimensions(stream: BinaryIO) -> JpegImage:
    """Walk the segments of a JPEG stream up to SOF0 and return its size."""
    if _read_exact(stream, 2, "SOI marker") != SOI:
        raise JpegError("Invalid JPEG file: SOI marker not found")

    while True:
        marker = stream.read(2)
        if len(marker) != 2:
            raise JpegError("Invalid JPEG file: Unexpected end of file before SOF0")
        if marker[0] != 0xFF:
            raise JpegError(f"Invalid JPEG file: Invalid marker {list(marker)}")

        kind = marker[1]
        if kind == MARKER_SOF0:
            length = _read_length(stream, "SOF0 length")
            if length < MIN_SOF0_LENGTH:
                raise JpegError("Invalid JPEG file: SOF0 segment length too short")
            data = _read_exact(stream, length - 2, "SOF0 data")
            height, width = struct.unpack(">HH", data[1:5])
            break
        if kind == MARKER_EOI:
            raise JpegError("Invalid JPEG file: SOF0 marker not found before EOI")

        length = _read_length(stream, "segment length")
        if length > 2:
            _read_exact(stream, length - 2, "segment data")

    if width == 0 or height == 0:
        raise JpegError("Invalid JPEG file: Could not parse image dimensions")
    return JpegImage(width=width, height=height)


def parse_jpeg(path: str | Path) -> JpegImage:
    """Open ``path`` and read the dimensions of the JPEG image in it."""
    with open(path, "rb") as stream:
        return read_dimensions(stream)