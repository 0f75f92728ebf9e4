"""Reading the simple binary object container with the ``OBJ\\0`` magic."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

__all__ = ["ObjFormatError", "ObjObject", "ObjFile", "read_obj", "load_obj"]

OBJ_MAGIC = b"OBJ\0"
MAX_NAME_LENGTH = 256
MAX_DATA_LENGTH = 1024 * 1024


class ObjFormatError(ValueError):
    """Raised when an object container is truncated or malformed."""


@dataclass(frozen=True)
class ObjObject:
    """A named blob of data stored in the container."""

    name: str
    data: bytes


@dataclass
class ObjFile:
    """All objects read from a container, in file order."""

    objects: list[ObjObject] = field(default_factory=list)


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise ObjFormatError("Geçersiz OBJ dosyası: beklenmedik dosya sonu")
    return data


def _read_u32(stream: BinaryIO) -> int:
    return struct.unpack("<I", _read_exact(stream, 4))[0]


def read_obj(stream: BinaryIO) -> ObjFile:
    """Read the magic, the object count and every object from ``stream``."""
    if _read_exact(stream, len(OBJ_MAGIC)) != OBJ_MAGIC:
        raise ObjFormatError("Geçersiz OBJ dosyası: Sihirli sayı hatalı")

    count = _read_u32(stream)
    objects = []
    for _ in range(count):
        name_length = _read_u32(stream)
        if name_length > MAX_NAME_LENGTH:
            raise ObjFormatError(
                "Geçersiz OBJ dosyası: Nesne adı uzunluğu çok büyük "
                f"({name_length}>{MAX_NAME_LENGTH} bytes)"
            )
        try:
            name = _read_exact(stream, name_length).decode("utf-8")
        except UnicodeDecodeError:
            raise ObjFormatError(
                "Geçersiz OBJ dosyası: Geçersiz UTF-8 nesne adı"
            ) from None

        data_length = _read_u32(stream)
        if data_length > MAX_DATA_LENGTH:
            raise ObjFormatError(
                "Geçersiz OBJ dosyası: Nesne veri uzunluğu çok büyük "
                f"({data_length}>{MAX_DATA_LENGTH} bytes)"
            )
        objects.append(ObjObject(name=name, data=_read_exact(stream, data_length)))
    return ObjFile(objects=objects)


def load_obj(path: str | Path) -> ObjFile:
    """Open ``path`` and read the container in it."""
    with open(path, "rb") as stream:
        return read_obj(stream)