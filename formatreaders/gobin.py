"""A fixed binary encoding of a small name/version/enabled record."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "GoDataError",
    "GoData",
    "encode_go_data",
    "decode_go_data",
    "read_go_file",
    "write_go_file",
]

_LENGTH = struct.Struct("<Q")
_VERSION = struct.Struct("<I")


class GoDataError(ValueError):
    """Raised when an encoded record is truncated or malformed."""


@dataclass(frozen=True)
class GoData:
    """The record: a name, a 32-bit unsigned version and a flag."""

    name: str
    version: int
    enabled: bool


def encode_go_data(data: GoData) -> bytes:
    """Encode as: u64 LE name length, UTF-8 name, u32 LE version, one bool byte."""
    if not 0 <= data.version <= 0xFFFFFFFF:
        raise GoDataError(f"version {data.version} does not fit in 32 bits")
    name = data.name.encode("utf-8")
    return (
        _LENGTH.pack(len(name))
        + name
        + _VERSION.pack(data.version)
        + (b"\x01" if data.enabled else b"\x00")
    )


def decode_go_data(payload: bytes) -> GoData:
    """Decode a record from the start of ``payload``; trailing bytes are ignored."""
    view = memoryview(payload)
    offset = 0

    def take(size: int) -> bytes:
        nonlocal offset
        if offset + size > len(view):
            raise GoDataError("unexpected end of data")
        chunk = bytes(view[offset:offset + size])
        offset += size
        return chunk

    (name_length,) = _LENGTH.unpack(take(_LENGTH.size))
    try:
        name = take(name_length).decode("utf-8")
    except UnicodeDecodeError:
        raise GoDataError("name is not valid UTF-8") from None
    (version,) = _VERSION.unpack(take(_VERSION.size))
    flag = take(1)[0]
    if flag > 1:
        raise GoDataError(f"invalid boolean value {flag}")
    return GoData(name=name, version=version, enabled=bool(flag))


def read_go_file(path: str | Path) -> GoData:
    """Read and decode the record stored in ``path``."""
    return decode_go_data(Path(path).read_bytes())


def write_go_file(path: str | Path, data: GoData) -> None:
    """Encode ``data`` and write it to ``path``."""
    Path(path).write_bytes(encode_go_data(data))