"""Reading and writing a simple binary store of named float64 arrays."""

from __future__ import annotations

import struct
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

__all__ = [
    "MatVariable",
    "read_variable",
    "write_variable",
    "read_mat_file",
    "write_mat_file",
]

NAME_FIELD_SIZE = 64
_COUNT = struct.Struct("<Q")
_VALUE = struct.Struct("<d")


@dataclass
class MatVariable:
    """A named array of double-precision values."""

    name: str
    data: list[float] = field(default_factory=list)


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise EOFError(f"EOF while reading {what}")
    return data


def read_variable(stream: BinaryIO) -> MatVariable | None:
    """Read one variable; return None when the stream ends before it starts.

    A variable cut off part way through raises EOFError.
    """
    name_field = stream.read(NAME_FIELD_SIZE)
    if not name_field:
        return None
    if len(name_field) != NAME_FIELD_SIZE:
        raise EOFError("EOF while reading variable name")
    name = name_field.decode("utf-8", errors="replace").rstrip("\0")

    (count,) = _COUNT.unpack(_read_exact(stream, _COUNT.size, "data size"))
    payload = _read_exact(stream, count * _VALUE.size, "data")
    data = [value for (value,) in _VALUE.iter_unpack(payload)]
    return MatVariable(name=name, data=data)


def write_variable(stream: BinaryIO, variable: MatVariable) -> None:
    """Write a variable: a 64-byte NUL-padded name, a count and the values."""
    name_bytes = variable.name.encode("utf-8")
    if len(name_bytes) > NAME_FIELD_SIZE:
        raise ValueError(
            f"variable name is {len(name_bytes)} bytes, at most {NAME_FIELD_SIZE} fit"
        )
    stream.write(name_bytes.ljust(NAME_FIELD_SIZE, b"\0"))
    stream.write(_COUNT.pack(len(variable.data)))
    stream.write(b"".join(_VALUE.pack(value) for value in variable.data))


def read_mat_file(path: str | Path) -> list[MatVariable]:
    """Read every variable stored in ``path``."""
    variables = []
    with open(path, "rb") as stream:
        while (variable := read_variable(stream)) is not None:
            variables.append(variable)
    return variables


def write_mat_file(path: str | Path, variables: Iterable[MatVariable]) -> None:
    """Write ``variables`` to ``path``, replacing its contents."""
    with open(path, "wb") as stream:
        for variable in variables:
            write_variable(stream, variable)