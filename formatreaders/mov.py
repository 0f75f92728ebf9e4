"""Walking the atom structure of a QuickTime MOV file."""

from __future__ import annotations

import io
import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

__all__ = ["MovError", "MovAtom", "MovParser", "parse_mov"]

ATOM_HEADER_SIZE = 8


class MovError(ValueError):
    """Raised when the atom structure is truncated or out of bounds."""


@dataclass
class MovAtom:
    """An atom with its declared size and, for ``moov``, its child atoms."""

    atom_type: bytes
    size: int
    children: list[MovAtom] = field(default_factory=list)

    @property
    def type_name(self) -> str:
        """The atom type as text, with undecodable bytes replaced."""
        return self.atom_type.decode("utf-8", errors="replace")


class MovParser:
    """Reads atoms from a seekable stream holding ``size`` bytes of MOV data."""

    def __init__(self, stream: BinaryIO, size: int | None = None) -> None:
        self._stream = stream
        if size is None:
            size = stream.seek(0, io.SEEK_END)
            stream.seek(0)
        self.size = size
        self.position = 0

    def parse(self) -> list[MovAtom]:
        """Read top-level atoms until the position reaches the data size."""
        atoms = []
        while self.position < self.size:
            size, atom_type = self._read_atom_header()
            if atom_type == b"moov":
                children = self._parse_moov(size)
            else:
                self._skip(size - ATOM_HEADER_SIZE)
                children = []
            atoms.append(MovAtom(atom_type=atom_type, size=size, children=children))
        return atoms

    def _parse_moov(self, size: int) -> list[MovAtom]:
        end = self.position + size - ATOM_HEADER_SIZE
        children = []
        while self.position < end:
            child_size, child_type = self._read_atom_header()
            self._skip(child_size - ATOM_HEADER_SIZE)
            children.append(MovAtom(atom_type=child_type, size=child_size))
        return children

    def _read_atom_header(self) -> tuple[int, bytes]:
        (size,) = struct.unpack(">I", self._read_exact(4))
        atom_type = self._read_exact(4)
        if size < ATOM_HEADER_SIZE:
            raise MovError(f"atom size {size} is smaller than {ATOM_HEADER_SIZE}")
        return size, atom_type

    def _read_exact(self, size: int) -> bytes:
        data = self._stream.read(size)
        if len(data) != size:
            raise MovError("unexpected end of file")
        self.position += size
        return data

    def _skip(self, offset: int) -> None:
        new_position = self.position + offset
        if new_position > self.size:
            raise MovError("atom extends beyond the end of the file")
        self.position = new_position
        self._stream.seek(new_position)


def parse_mov(path: str | Path) -> list[MovAtom]:
    """Open ``path`` and read its atom structure."""
    with open(path, "rb") as stream:
        return MovParser(stream).parse()