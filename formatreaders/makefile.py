"""Collecting ``key=value`` assignments from a Makefile-like text file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

__all__ = ["MakefileVariables", "parse_assignments", "load_makefile"]


def parse_assignments(text: str) -> dict[str, str]:
    """Map keys to values for every line holding ``=``.

    The line is stripped and split at its first ``=``; the value is stripped,
    the key is kept as written before the ``=``. Later lines win.
    """
    data: dict[str, str] = {}
    for line in text.split("\n"):
        key, sep, value = line.strip().partition("=")
        if sep:
            data[key] = value.strip()
    return data


@dataclass
class MakefileVariables:
    """Assignments read from a file."""

    data: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        """Return the value assigned to ``key``, or None."""
        return self.data.get(key)


def load_makefile(path: str | Path) -> MakefileVariables:
    """Read ``path`` as UTF-8 and collect its assignments."""
    text = Path(path).read_bytes().decode("utf-8")
    return MakefileVariables(data=parse_assignments(text))