"""Holding a Markdown file as lines and counting its words."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

__all__ = ["MdFile", "read_md_file"]


@dataclass
class MdFile:
    """A Markdown file split into lines at newline bytes."""

    path: str
    content: list[str] = field(default_factory=list)

    def print_content(self) -> None:
        """Print every line."""
        for line in self.content:
            print(line)

    def word_count(self) -> int:
        """Number of whitespace-separated words over all lines."""
        return sum(len(line.split()) for line in self.content)


def read_md_file(path: str | Path) -> MdFile:
    """Read ``path``, taking each byte as one character."""
    text = Path(path).read_bytes().decode("latin-1")
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return MdFile(path=str(path), content=lines)