"""Checking the EBML magic of an MKV file and listing its top-level segments."""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

__all__ = ["MkvError", "MkvSegment", "MkvParser", "open_mkv", "main"]

EBML_MAGIC = bytes([0x1A, 0x45, 0xDF, 0xA3])
SEGMENT_ID = 0x18538067
INFO_ID = 0x1549A966
TRACKS_ID = 0x1654AE6B
_SKIP_CHUNK = 4096

_NAMES = {SEGMENT_ID: "Segment", INFO_ID: "Info", TRACKS_ID: "Tracks"}


class MkvError(ValueError):
    """Raised when the header is wrong or the data ends unexpectedly."""


@dataclass(frozen=True)
class MkvSegment:
    """A top-level element: its four-byte ID and its payload size."""

    id: int
    size: int

    @property
    def name(self) -> str | None:
        """Known name of the element, or None."""
        return _NAMES.get(self.id)

    def describe(self) -> str:
        """One-line description of the element."""
        if self.id == SEGMENT_ID:
            return f"Segment bulundu (boyut: {self.size} bayt)"
        if self.name is not None:
            return f"{self.name} segmenti bulundu (boyut: {self.size} bayt)"
        return f"Bilinmeyen segment ID: 0x{self.id:X} (boyut: {self.size} bayt)"


class MkvParser:
    """Reads the MKV header and the elements that follow it from a stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def parse_header(self) -> None:
        """Check the four-byte EBML magic."""
        header = self._stream.read(4)
        if len(header) != 4 or header != EBML_MAGIC:
            raise MkvError("Geçersiz MKV başlığı")

    def parse_segments(self) -> list[MkvSegment]:
        """Read elements up to the end of the stream, skipping their payloads."""
        segments = []
        while True:
            id_bytes = self._stream.read(4)
            if not id_bytes:
                return segments
            if len(id_bytes) != 4:
                raise MkvError("Beklenmedik dosya sonu")
            size_bytes = self._stream.read(8)
            if len(size_bytes) != 8:
                raise MkvError("Beklenmedik dosya sonu")
            (element_id,) = struct.unpack(">I", id_bytes)
            (size,) = struct.unpack(">Q", size_bytes)
            self._skip(size)
            segments.append(MkvSegment(id=element_id, size=size))

    def _skip(self, size: int) -> None:
        remaining = size
        while remaining > 0:
            chunk = self._stream.read(min(remaining, _SKIP_CHUNK))
            if not chunk:
                raise MkvError("Beklenmedik dosya sonu")
            remaining -= len(chunk)


def open_mkv(path: str | Path) -> list[MkvSegment]:
    """Open ``path``, check its header and list its top-level elements."""
    with open(path, "rb") as stream:
        parser = MkvParser(stream)
        parser.parse_header()
        return parser.parse_segments()


def main(argv: list[str] | None = None) -> int:
    """Print the top-level elements of an MKV file."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else "test.mkv"
    try:
        with open(path, "rb") as stream:
            parser = MkvParser(stream)
            parser.parse_header()
            print("MKV başlığı doğrulandı.")
            segments = parser.parse_segments()
    except FileNotFoundError:
        print("Dosya bulunamadı", file=sys.stderr)
        return 1
    except (OSError, MkvError) as exc:
        print(f"Hata: {exc}", file=sys.stderr)
        return 1
    for segment in segments:
        print(segment.describe())
    print("Segmentlerin sonuna gelindi.")
    return 0