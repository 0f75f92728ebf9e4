"""Holding a Julia source file as a list of lines."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

__all__ = ["JuliaFile"]


@dataclass
class JuliaFile:
    """A Julia source file and its lines, without line endings."""

    path: str
    lines: list[str] = field(default_factory=list)

    @classmethod
    def load(cls, path: str | Path) -> JuliaFile:
        """Read ``path`` as UTF-8 and split it into lines."""
        text = Path(path).read_bytes().decode("utf-8")
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return cls(path=str(path), lines=[line.removesuffix("\r") for line in lines])

    def print_lines(self) -> None:
        """Print every line."""
        for line in self.lines:
            print(line)