"""Line-oriented readers for Perl and PHP source files."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

__all__ = ["PerlFile", "read_perl_file", "scan_php_lines", "process_php_file"]

PHP_OPEN_TAG = "php_open_tag"
PHP_ECHO = "echo"

_MESSAGES = {
    PHP_OPEN_TAG: "PHP başlangıç etiketi bulundu: {}",
    PHP_ECHO: "Echo ifadesi bulundu: {}",
}


def _read_raw_lines(path: str | Path) -> list[str]:
    """Split a UTF-8 file on newlines, without a trailing empty entry."""
    text = Path(path).read_text(encoding="utf-8")
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


@dataclass
class PerlFile:
    """A Perl source file held as lines without trailing whitespace."""

    path: str
    lines: list[str] = field(default_factory=list)

    def print_lines(self) -> None:
        """Print every line."""
        for line in self.lines:
            print(line)


def read_perl_file(path: str | Path) -> PerlFile:
    """Read ``path``, stripping trailing whitespace from each line."""
    return PerlFile(path=str(path), lines=[line.rstrip() for line in _read_raw_lines(path)])


def scan_php_lines(lines: Iterable[str]) -> Iterator[tuple[str, str]]:
    """Yield (kind, line) for lines holding an opening tag or an echo."""
    for line in lines:
        if "<?php" in line:
            yield PHP_OPEN_TAG, line
        elif "echo" in line:
            yield PHP_ECHO, line


def process_php_file(path: str | Path) -> list[tuple[str, str]]:
    """Report PHP opening tags and echo statements found in ``path``."""
    lines = (line.removesuffix("\r") for line in _read_raw_lines(path))
    findings = list(scan_php_lines(lines))
    for kind, line in findings:
        print(_MESSAGES[kind].format(line))
    return findings