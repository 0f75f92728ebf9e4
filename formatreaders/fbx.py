"""Reading the node tree of a binary FBX file."""

from __future__ import annotations

import enum
import struct
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

__all__ = [
    "FbxError",
    "PropertyType",
    "FbxProperty",
    "FbxHeader",
    "FbxNode",
    "read_header",
    "read_property",
    "read_node",
    "read_fbx_file",
    "format_node_tree",
    "main",
]

MAGIC_SIZE = 21
UNKNOWN_SIZE = 2
NODE_RECORD = struct.Struct("<IIIB")


class FbxError(ValueError):
    """Raised when FBX data is truncated or malformed."""


class PropertyType(enum.Enum):
    """Type codes of node properties."""

    BOOL = "C"
    INTEGER = "I"
    LONG = "L"
    FLOAT = "F"
    DOUBLE = "D"
    STRING = "S"
    RAW = "R"


_LABELS = {
    PropertyType.BOOL: "Bool",
    PropertyType.INTEGER: "Integer",
    PropertyType.LONG: "Long",
    PropertyType.FLOAT: "Float",
    PropertyType.DOUBLE: "Double",
    PropertyType.STRING: "String",
    PropertyType.RAW: "RawBytes",
}

_SCALAR_FORMATS = {
    PropertyType.INTEGER: struct.Struct("<i"),
    PropertyType.LONG: struct.Struct("<q"),
    PropertyType.FLOAT: struct.Struct("<f"),
    PropertyType.DOUBLE: struct.Struct("<d"),
}


@dataclass(frozen=True)
class FbxProperty:
    """A typed value attached to a node."""

    type: PropertyType
    value: bool | int | float | str | bytes

    def __str__(self) -> str:
        return f"{_LABELS[self.type]}({self.value!r})"


@dataclass(frozen=True)
class FbxHeader:
    """The fixed header at the start of a binary FBX file."""

    magic_number: bytes
    unknown: bytes
    version: int


@dataclass
class FbxNode:
    """A node record with its properties and nested nodes."""

    end_offset: int
    num_properties: int
    property_list_len: int
    name: str
    properties: list[FbxProperty] = field(default_factory=list)
    nested_nodes: list[FbxNode] = field(default_factory=list)


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise FbxError("Unexpected end of file")
    return data


def _read_u32(stream: BinaryIO) -> int:
    return struct.unpack("<I", _read_exact(stream, 4))[0]


def read_header(stream: BinaryIO) -> FbxHeader:
    """Read the magic bytes, the two unknown bytes and the version."""
    magic = _read_exact(stream, MAGIC_SIZE)
    unknown = _read_exact(stream, UNKNOWN_SIZE)
    version = _read_u32(stream)
    return FbxHeader(magic_number=magic, unknown=unknown, version=version)


def read_property(stream: BinaryIO) -> FbxProperty:
    """Read one property: a type code followed by its value."""
    code = _read_exact(stream, 1)[0]
    try:
        ptype = PropertyType(chr(code))
    except ValueError:
        raise FbxError(f"Bilinmeyen özellik tipi: {code}") from None

    if ptype is PropertyType.BOOL:
        return FbxProperty(ptype, _read_exact(stream, 1)[0] != 0)

    scalar = _SCALAR_FORMATS.get(ptype)
    if scalar is not None:
        (value,) = scalar.unpack(_read_exact(stream, scalar.size))
        return FbxProperty(ptype, value)

    payload = _read_exact(stream, _read_u32(stream))
    if ptype is PropertyType.STRING:
        try:
            return FbxProperty(ptype, payload.decode("utf-8"))
        except UnicodeDecodeError:
            raise FbxError("UTF8 hatası") from None
    return FbxProperty(ptype, payload)


def read_node(stream: BinaryIO) -> FbxNode | None:
    """Read a node and its nested nodes; return None at a null record."""
    end_offset, num_properties, property_list_len, name_len = NODE_RECORD.unpack(
        _read_exact(stream, NODE_RECORD.size)
    )
    if not (end_offset or num_properties or property_list_len or name_len):
        return None

    try:
        name = _read_exact(stream, name_len).decode("utf-8")
    except UnicodeDecodeError:
        raise FbxError("UTF8 hatası") from None

    properties_end = stream.tell() + property_list_len
    properties = [read_property(stream) for _ in range(num_properties)]
    stream.seek(properties_end)

    nested: list[FbxNode] = []
    while stream.tell() < end_offset:
        child = read_node(stream)
        if child is None:
            break
        nested.append(child)

    return FbxNode(
        end_offset=end_offset,
        num_properties=num_properties,
        property_list_len=property_list_len,
        name=name,
        properties=properties,
        nested_nodes=nested,
    )


def read_fbx_file(path: str | Path) -> tuple[FbxHeader, list[FbxNode]]:
    """Read the header and the top-level nodes of the file at ``path``."""
    with open(path, "rb") as stream:
        header = read_header(stream)
        nodes = []
        while (node := read_node(stream)) is not None:
            nodes.append(node)
    return header, nodes


def format_node_tree(node: FbxNode, indent_level: int = 0) -> str:
    """Render a node and its descendants, one indented line per node."""
    indent = "  " * indent_level
    props = ", ".join(str(p) for p in node.properties)
    lines = [f"{indent}{node.name}: [{props}]"]
    lines.extend(
        format_node_tree(child, indent_level + 1) for child in node.nested_nodes
    )
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Print the header and the root node names of an FBX file."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else "model.fbx"
    try:
        header, nodes = read_fbx_file(path)
    except (OSError, FbxError) as exc:
        print(f"FBX dosyası okuma hatası: {exc}", file=sys.stderr)
        return 1
    print(f"FBX Başlığı: {header}")
    print("FBX Dosyası Başarıyla Okundu ve Ayrıştırıldı.\n")
    for node in nodes:
        print(f'Kök Düğüm: "{node.name}"')
    return 0