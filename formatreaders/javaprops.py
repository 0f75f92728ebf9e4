"""Loading and saving ``key = value`` properties files."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

__all__ = ["JavaProperties"]


@dataclass
class JavaProperties:
    """A mapping of property names to values."""

    properties: dict[str, str] = field(default_factory=dict)

    def load(self, path: str | Path) -> None:
        """Add the properties in ``path``; ``#`` lines and blank lines are skipped,
        and the rest are split at the first ``=``."""
        with open(path, encoding="utf-8") as stream:
            for raw in stream:
                line = raw.strip()
                if not line or line.startswith("#"):
                    continue
                key, sep, value = line.partition("=")
                if sep:
                    self.properties[key.strip()] = value.strip()

    def save(self, path: str | Path) -> None:
        """Write every property as ``key = value``, one per line."""
        with open(path, "w", encoding="utf-8", newline="\n") as stream:
            for key, value in self.properties.items():
                stream.write(f"{key} = {value}\n")

    def __getitem__(self, key: str) -> str:
        return self.properties[key]

    def __setitem__(self, key: str, value: str) -> None:
        self.properties[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self.properties

    def __iter__(self) -> Iterator[str]:
        return iter(self.properties)

    def __len__(self) -> int:
        return len(self.properties)