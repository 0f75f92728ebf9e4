"""Reading and writing whitespace-separated floating-point data files."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path

__all__ = ["FortranFile"]


def _parse_number(token: str) -> float | None:
    if "_" in token:
        return None
    try:
        return float(token)
    except ValueError:
        return None


def _format_value(value: float) -> str:
    """Plain decimal notation: no exponent, integral values without ``.0``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text.removesuffix(".0")


@dataclass
class FortranFile:
    """A sequence of floating-point values."""

    data: list[float] = field(default_factory=list)

    @classmethod
    def read(cls, path: str | Path) -> FortranFile:
        """Read every number in ``path``; tokens that are not numbers are skipped
        with a warning on standard error."""
        data = []
        with open(path, encoding="utf-8") as stream:
            for line in stream:
                for token in line.split():
                    number = _parse_number(token)
                    if number is None:
                        print(
                            f"Uyarı: Geçersiz sayı formatı bulundu: {token}",
                            file=sys.stderr,
                        )
                    else:
                        data.append(number)
        return cls(data=data)

    def write(self, path: str | Path) -> None:
        """Write one value per line, replacing the contents of ``path``."""
        with open(path, "w", encoding="utf-8", newline="\n") as stream:
            for value in self.data:
                stream.write(_format_value(value) + "\n")