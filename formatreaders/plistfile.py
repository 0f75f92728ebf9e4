"""Reading and writing property lists whose root is a dictionary."""

from __future__ import annotations

import plistlib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

__all__ = ["read_plist", "write_plist"]


def read_plist(path: str | Path) -> dict[str, Any]:
    """Load the property list in ``path``; its root must be a dictionary."""
    with open(path, "rb") as stream:
        value = plistlib.load(stream)
    if not isinstance(value, dict):
        raise ValueError("property list root is not a dictionary")
    return value


def write_plist(path: str | Path, data: Mapping[str, Any]) -> None:
    """Write ``data`` to ``path`` as an XML property list."""
    with open(path, "wb") as stream:
        plistlib.dump(dict(data), stream, fmt=plistlib.FMT_XML)