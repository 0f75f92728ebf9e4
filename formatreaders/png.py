"""Reading the IHDR header of a PNG image."""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

__all__ = ["PngError", "PngHeader", "read_png_header", "read_png_file", "main"]

PNG_SIGNATURE = bytes([137, 80, 78, 71, 13, 10, 26, 10])
IHDR_DATA_SIZE = 13


class PngError(ValueError):
    """Raised when the data is not a PNG with a readable IHDR chunk."""


@dataclass(frozen=True)
class PngHeader:
    """Image properties stored in the IHDR chunk."""

    width: int
    height: int
    bit_depth: int
    color_type: int
    compression_method: int
    filter_method: int
    interlace_method: int


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise PngError(f"unexpected end of data while reading {what}")
    return data


def read_png_header(stream: BinaryIO) -> PngHeader:
    """Read the signature and IHDR chunk from a binary stream."""
    if stream.read(len(PNG_SIGNATURE)) != PNG_SIGNATURE:
        raise PngError("invalid PNG signature")

    # The declared chunk length is read but not checked.
    _read_exact(stream, 4, "IHDR length")
    if _read_exact(stream, 4, "IHDR type") != b"IHDR":
        raise PngError("first chunk is not IHDR")

    data = _read_exact(stream, IHDR_DATA_SIZE, "IHDR data")
    width, height, bit_depth, color_type, compression, filter_, interlace = (
        struct.unpack(">IIBBBBB", data)
    )

    # The CRC follows; it is consumed and not verified.
    stream.read(4)

    return PngHeader(
        width=width,
        height=height,
        bit_depth=bit_depth,
        color_type=color_type,
        compression_method=compression,
        filter_method=filter_,
        interlace_method=interlace,
    )


def read_png_file(path: str | Path) -> PngHeader:
    """Open ``path`` and read its PNG header."""
    with open(path, "rb") as stream:
        return read_png_header(stream)


def main(argv: list[str] | None = None) -> int:
    """Print the header of a PNG file."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else "ornek.png"
    try:
        header = read_png_file(path)
    except OSError as exc:
        print(f"Dosya açma hatası: {exc}", file=sys.stderr)
        return 1
    except PngError as exc:
        print(f"PNG başlığı okuma hatası: {exc}", file=sys.stderr)
        return 1
    print(f"PNG Başlığı: {header}")
    return 0