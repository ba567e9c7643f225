"""Reader for ``$key = "value"`` configuration files."""

from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import Iterator

from sctoolkit.schead import is_space
from sctoolkit.tstring import read_file

DEFAULT_PATH = "module/schead/config/config.ini"


def _skip_line(char: str | None, chars: Iterator[str]) -> None:
    """Consume characters up to and including the next newline."""
    if char is None or char == "\n":
        return
    for char in chars:
        if char == "\n":
            return


def parse_config(text: str) -> dict[str, str]:
    """Parse configuration text into a mapping; the first entry for a key wins.

    A valid line starts (after whitespace) with ``$`` immediately followed by
    the key, then ``=`` and a double-quoted value.  Whitespace inside the key
    and before the opening quote is dropped; non-space characters between
    ``=`` and the opening quote become a prefix of the value.  A backslash
    before a quote keeps the quote (and the backslash) in the value.  Lines
    not starting with ``$`` are ignored; a malformed entry ends parsing.
    """
    entries: dict[str, str] = {}
    chars = iter(text)
    for char in chars:
        current: str | None = char
        while current is not None and is_space(current):
            current = next(chars, None)
        if current != "$":
            _skip_line(current, chars)
            continue

        current = next(chars, None)
        if current is not None and is_space(current):
            _skip_line(current, chars)
            continue

        key: list[str] = []
        while current is not None and current != "=":
            if not is_space(current):
                key.append(current)
            current = next(chars, None)
        if current != "=":
            break

        value: list[str] = []
        current = next(chars, None)
        while current is not None and current != '"':
            if not is_space(current):
                value.append(current)
            current = next(chars, None)
        if current != '"':
            break

        previous = current
        closed = False
        for current in chars:
            if current == '"' and previous != "\\":
                closed = True
                break
            value.append(current)
            previous = current
        if not closed:
            break

        entries.setdefault("".join(key), "".join(value))
        _skip_line('"', chars)
    return entries


class Config:
    """Configuration loaded from a file; ``start`` loads or reloads it."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_PATH) -> None:
        self.path = Path(path)
        self._entries: dict[str, str] = {}
        self._lock = threading.Lock()

    def start(self) -> "Config":
        """Read the file and replace the current entries with its content."""
        entries = parse_config(read_file(self.path))
        with self._lock:
            self._entries = entries
        return self

    def get(self, key: str | None) -> str | None:
        """Return the value for ``key``, or None when it is empty or unknown."""
        if not key:
            return None
        with self._lock:
            return self._entries.get(key)