"""A minimal key lookup over the raw text of a JSON document."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

__all__ = ["JsonFile", "read_json_file"]

_WHITESPACE = " \t\n\r"


@dataclass
class JsonFile:
    """The text of a JSON document."""

    content: str

    def get_value(self, key: str) -> str | None:
        """Return the raw text of the value following ``"key":``.

        Surrounding quotes of a string value are removed; nested arrays and
        objects are returned as their source text. None if the key is absent.
        """
        quoted = f'"{key}"'
        key_pos = self.content.find(quoted)
        if key_pos < 0:
            return None
        colon = self.content.find(":", key_pos + len(quoted))
        if colon < 0:
            return None

        start = colon + 1
        while start < len(self.content) and self.content[start] in _WHITESPACE:
            start += 1

        end = start
        in_string = False
        depth = 0
        while end < len(self.content):
            char = self.content[end]
            if char == '"':
                in_string = not in_string
            elif not in_string:
                if char in "[{":
                    depth += 1
                elif char in "]}":
                    if depth == 0:
                        break
                    depth -= 1
                elif char == "," and depth == 0:
                    break
            end += 1

        value = self.content[start:end].strip()
        if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
            return value[1:-1]
        return value


def read_json_file(path: str | Path) -> JsonFile:
    """Read ``path`` as UTF-8 text."""
    return JsonFile(content=Path(path).read_bytes().decode("utf-8"))