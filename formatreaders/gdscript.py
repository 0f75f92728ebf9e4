"""Loading, saving and line-splitting GDScript source files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

__all__ = ["GDScriptFile"]


@dataclass
class GDScriptFile:
    """A GDScript file's path and text."""

    path: str
    content: str

    @classmethod
    def load(cls, path: str | Path) -> GDScriptFile:
        """Read ``path`` as UTF-8 text."""
        return cls(path=str(path), content=Path(path).read_bytes().decode("utf-8"))

    def save(self, path: str | Path) -> None:
        """Write the text to ``path`` unchanged."""
        Path(path).write_bytes(self.content.encode("utf-8"))

    def parse(self) -> list[str]:
        """Split the text into lines, dropping ``\\n`` or ``\\r\\n`` endings."""
        lines = self.content.split("\n")
        if lines[-1] == "":
            lines.pop()
        return [line.removesuffix("\r") for line in lines]