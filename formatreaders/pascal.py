"""Holding a Pascal source file as an editable list of lines."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

__all__ = ["PascalFile"]


@dataclass
class PascalFile:
    """The lines of a Pascal source file."""

    lines: list[str] = field(default_factory=list)

    def read_from_file(self, path: str | Path) -> None:
        """Replace the held lines with those of ``path``, without line endings."""
        text = Path(path).read_bytes().decode("utf-8")
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        self.lines = [line.removesuffix("\r") for line in lines]

    def write_to_file(self, path: str | Path) -> None:
        """Write every line followed by a newline, replacing ``path``."""
        with open(path, "w", encoding="utf-8", newline="\n") as stream:
            stream.writelines(f"{line}\n" for line in self.lines)

    def append_line(self, line: str) -> None:
        """Add ``line`` at the end."""
        self.lines.append(line)

    def get_line(self, index: int) -> str | None:
        """The line at ``index``, or None if there is no such line."""
        if 0 <= index < len(self.lines):
            return self.lines[index]
        return None

    def line_count(self) -> int:
        """Number of lines held."""
        return len(self.lines)