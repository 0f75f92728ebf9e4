"""Reading the file header of a Photoshop PSD document."""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

__all__ = [
    "PsdError",
    "UnsupportedVersionError",
    "UnsupportedDepthError",
    "PsdHeader",
    "read_psd_header",
    "open_psd",
    "main",
]

PSD_SIGNATURE = b"8BPS"
SUPPORTED_VERSIONS = frozenset({1, 2})
SUPPORTED_DEPTHS = frozenset({1, 8, 16, 32})

EXAMPLE_PSD = bytes(
    [
        0x38, 0x42, 0x50, 0x53,
        0x00, 0x01,
        0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
        0x00, 0x03,
        0x00, 0x00, 0x01, 0x00,
        0x00, 0x00, 0x01, 0x00,
        0x00, 0x08,
        0x00, 0x03,
    ]
)


class PsdError(ValueError):
    """Raised when a PSD header is truncated or malformed."""


class UnsupportedVersionError(PsdError):
    """Raised when the header version is neither 1 nor 2."""


class UnsupportedDepthError(PsdError):
    """Raised when the bits per channel are not 1, 8, 16 or 32."""


@dataclass(frozen=True)
class PsdHeader:
    """Fields of the fixed 26-byte PSD file header."""

    signature: bytes
    version: int
    reserved: bytes
    channels: int
    height: int
    width: int
    depth: int
    color_mode: int


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise PsdError("unexpected end of data in PSD header")
    return data


def _read_u16(stream: BinaryIO) -> int:
    return struct.unpack(">H", _read_exact(stream, 2))[0]


def _read_u32(stream: BinaryIO) -> int:
    return struct.unpack(">I", _read_exact(stream, 4))[0]


def read_psd_header(stream: BinaryIO) -> PsdHeader:
    """Read and validate the PSD header at the current stream position."""
    signature = _read_exact(stream, 4)
    if signature != PSD_SIGNATURE:
        raise PsdError("invalid PSD signature")

    version = _read_u16(stream)
    if version not in SUPPORTED_VERSIONS:
        raise UnsupportedVersionError(f"unsupported PSD version {version}")

    # Reserved bytes should be zero but are not checked.
    reserved = _read_exact(stream, 6)
    channels = _read_u16(stream)
    height = _read_u32(stream)
    width = _read_u32(stream)

    depth = _read_u16(stream)
    if depth not in SUPPORTED_DEPTHS:
        raise UnsupportedDepthError(f"unsupported PSD depth {depth}")

    color_mode = _read_u16(stream)
    return PsdHeader(
        signature=signature,
        version=version,
        reserved=reserved,
        channels=channels,
        height=height,
        width=width,
        depth=depth,
        color_mode=color_mode,
    )


def open_psd(path: str | Path) -> PsdHeader:
    """Open ``path`` and read its PSD header."""
    with open(path, "rb") as stream:
        return read_psd_header(stream)


def main(argv: list[str] | None = None) -> int:
    """Print a PSD header; without a path, write and read an example file."""
    args = sys.argv[1:] if argv is None else argv
    if args:
        path = Path(args[0])
    else:
        path = Path("example.psd")
        path.write_bytes(EXAMPLE_PSD)
    try:
        header = open_psd(path)
    except (OSError, PsdError) as exc:
        print(f"Hata: {exc}", file=sys.stderr)
        return 1
    print(header)
    return 0