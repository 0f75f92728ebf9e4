"""Reading and writing the header and body of compiled Python bytecode files."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path

__all__ = ["PycFile"]

_HEADER = struct.Struct("<II")


@dataclass
class PycFile:
    """A magic number, a modification timestamp and the raw code object bytes."""

    magic_number: int
    modification_timestamp: int
    code_object: bytes = b""

    @classmethod
    def read_from_file(cls, path: str | Path) -> PycFile:
        """Read the two little-endian 32-bit header fields and the remaining bytes."""
        with open(path, "rb") as stream:
            header = stream.read(_HEADER.size)
            if len(header) != _HEADER.size:
                raise EOFError("unexpected end of file in header")
            magic_number, timestamp = _HEADER.unpack(header)
            code_object = stream.read()
        return cls(
            magic_number=magic_number,
            modification_timestamp=timestamp,
            code_object=code_object,
        )

    def write_to_file(self, path: str | Path) -> None:
        """Write the header fields and the code object to ``path``."""
        for name, value in (
            ("magic_number", self.magic_number),
            ("modification_timestamp", self.modification_timestamp),
        ):
            if not 0 <= value <= 0xFFFFFFFF:
                raise ValueError(f"{name} {value} does not fit in 32 bits")
        with open(path, "wb") as stream:
            stream.write(_HEADER.pack(self.magic_number, self.modification_timestamp))
            stream.write(bytes(self.code_object))