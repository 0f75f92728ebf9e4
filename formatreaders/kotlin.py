"""Reading and writing Kotlin source files line by line."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path, PurePath

__all__ = ["KotlinFile", "is_kotlin_file", "main"]

_EXAMPLE_LINES = [
    "fun main() {",
    '    println("Merhaba, Koltin Dünyası!")',
    '    val name = "Koltin";',
    '    println("Benim adım: $name")',
    "}",
]


@dataclass(frozen=True)
class KotlinFile:
    """A Kotlin source file at ``path``."""

    path: str

    def read_lines(self) -> list[str]:
        """Return the lines of the file without their line endings."""
        text = Path(self.path).read_bytes().decode("utf-8")
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return [line.removesuffix("\r") for line in lines]

    def write_lines(self, lines: Iterable[str]) -> None:
        """Replace the file with ``lines``, each followed by a newline."""
        with open(self.path, "w", encoding="utf-8", newline="\n") as stream:
            for line in lines:
                stream.write(f"{line}\n")


def is_kotlin_file(path: str | Path) -> bool:
    """True if ``path`` has the ``kt`` extension."""
    return PurePath(path).suffix == ".kt"


def main(argv: list[str] | None = None) -> int:
    """Write an example Kotlin file, read it back, check it and remove it."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else "example.kt"
    kotlin_file = KotlinFile(path)
    try:
        kotlin_file.write_lines(_EXAMPLE_LINES)
        print(f"Dosyaya yazma işlemi tamamlandı: {path}")
        lines = kotlin_file.read_lines()
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Hata: {exc}", file=sys.stderr)
        return 1

    print("\nDosyadan okunan satırlar:")
    for line in lines:
        print(line)

    if is_kotlin_file(path):
        print(f"\n'{path}' bir Koltin dosyasıdır.")
    else:
        print(f"\n'{path}' bir Koltin dosyası değildir.")

    Path(path).unlink()
    print(f"\n'{path}' dosyası silindi.")
    return 0