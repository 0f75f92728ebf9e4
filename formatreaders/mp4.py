"""Reading the top-level atoms of an MP4 file."""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

__all__ = ["Mp4Error", "Mp4Atom", "read_atoms", "parse_mp4", "main"]

ATOM_HEADER_SIZE = 8


class Mp4Error(ValueError):
    """Raised when the atom structure is truncated or invalid."""


@dataclass(frozen=True)
class Mp4Atom:
    """One top-level atom: its declared size, four-byte type and payload."""

    size: int
    atom_type: bytes
    data: bytes

    @property
    def type_name(self) -> str:
        """The atom type as text, with undecodable bytes replaced."""
        return self.atom_type.decode("utf-8", errors="replace")


def read_atoms(stream: BinaryIO) -> list[Mp4Atom]:
    """Read atoms one after another until the stream ends."""
    atoms = []
    while True:
        size_bytes = stream.read(4)
        if not size_bytes:
            break
        if len(size_bytes) != 4:
            raise Mp4Error("truncated atom size")
        (size,) = struct.unpack(">I", size_bytes)
        if size < ATOM_HEADER_SIZE:
            raise Mp4Error(f"atom size {size} is smaller than {ATOM_HEADER_SIZE}")

        atom_type = stream.read(4)
        if len(atom_type) != 4:
            raise Mp4Error("truncated atom type")

        data = stream.read(size - ATOM_HEADER_SIZE)
        if len(data) != size - ATOM_HEADER_SIZE:
            raise Mp4Error("truncated atom data")
        atoms.append(Mp4Atom(size=size, atom_type=atom_type, data=data))
    return atoms


def parse_mp4(path: str | Path) -> list[Mp4Atom]:
    """Open ``path`` and read its top-level atoms."""
    with open(path, "rb") as stream:
        return read_atoms(stream)


def main(argv: list[str] | None = None) -> int:
    """Print the type of every top-level atom in an MP4 file."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else "ornek.mp4"
    try:
        atoms = parse_mp4(path)
    except (OSError, Mp4Error) as exc:
        print(f"Hata: {exc}", file=sys.stderr)
        return 1
    for atom in atoms:
        print(f"Atom: {atom.type_name}")
    return 0