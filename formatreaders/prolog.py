"""Classifying the lines of a Prolog source file as terms or rules."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path

__all__ = ["LineKind", "PrologParser", "classify_prolog_line"]


class LineKind(enum.Enum):
    """How a non-comment line was classified."""

    TERM = "Terim"
    RULE = "Kural"
    UNKNOWN = "Bilinmeyen"


def classify_prolog_line(line: str) -> LineKind:
    """A line ending in ``.`` is a term; one holding ``:-`` is a rule."""
    if line.endswith("."):
        return LineKind.TERM
    if ":-" in line:
        return LineKind.RULE
    return LineKind.UNKNOWN


@dataclass
class PrologParser:
    """Collects the classified lines of the files it parses."""

    clauses: list[tuple[LineKind, str]] = field(default_factory=list)

    def parse_file(self, path: str | Path) -> list[tuple[LineKind, str]]:
        """Classify every non-empty, non-comment line of ``path``."""
        text = Path(path).read_bytes().decode("utf-8")
        found = []
        for raw in text.split("\n"):
            line = raw.strip()
            if not line or line.startswith("%"):
                continue
            found.append(self.parse_line(line))
        return found

    def parse_line(self, line: str) -> tuple[LineKind, str]:
        """Classify one line, record it and print it with its kind."""
        kind = classify_prolog_line(line)
        entry = (kind, line)
        self.clauses.append(entry)
        print(f"{kind.value}: {line}")
        return entry