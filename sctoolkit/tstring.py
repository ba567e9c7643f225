"""A growable text buffer, string helpers and whole-file helpers."""

from __future__ import annotations

import itertools
import os

_MIN_CAPACITY = 32
_MASK32 = 0xFFFFFFFF


class TextBuffer:
    """Text that grows by appending, tracking a power-of-two style capacity."""

    def __init__(self, text: str | None = None) -> None:
        self._parts: list[str] = []
        self._length = 0
        self._capacity = 0
        if text:
            self.extend(text)

    def _reserve(self, needed: int) -> None:
        if needed <= self._capacity:
            return
        size = max(self._capacity, _MIN_CAPACITY)
        while size < needed:
            size <<= 1
        self._capacity = size

    def append(self, char: str) -> None:
        """Append a single character."""
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        self._reserve(self._length + 2)
        self._parts.append(char)
        self._length += 1

    def extend(self, text: str) -> None:
        """Append a non-empty string."""
        if not text:
            raise ValueError("text to append must not be empty")
        self._reserve(self._length + len(text) + 1)
        self._parts.append(text)
        self._length += len(text)

    @property
    def capacity(self) -> int:
        """Room reserved, including space for a terminator."""
        return self._capacity

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        if len(self._parts) > 1:
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def __repr__(self) -> str:
        return f"TextBuffer({str(self)!r})"


def str_hash(text: str) -> int:
    """Return a 32-bit JS-style hash of the UTF-8 bytes of ``text``; never 0."""
    data = text.encode("utf-8")
    h = len(data) & _MASK32
    step = (h >> 5) + 1
    i = h
    while i >= step:
        h ^= ((h << 5) + (h >> 2) + data[i - 1]) & _MASK32
        i -= step
    return h or 1


def _fold(char: str) -> int:
    code = ord(char)
    if ord("a") <= code <= ord("z"):
        code -= ord("a") - ord("A")
    return code


def str_icmp(left: str | None, right: str | None) -> int:
    """Compare ASCII-case-insensitively; negative, zero or positive like strcmp."""
    if left is None or right is None:
        if left is right:
            return 0
        return -1 if left is None else 1
    for lc, rc in itertools.zip_longest(left, right, fillvalue="\0"):
        lcode, rcode = _fold(lc), _fold(rc)
        if lcode != rcode or lcode == 0:
            return lcode - rcode
    return 0


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the whole content of a text file."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def write_file(path: str | os.PathLike[str], text: str) -> None:
    """Replace the content of a file with ``text``."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(text)


def append_file(path: str | os.PathLike[str], text: str) -> None:
    """Append ``text`` to the end of a file, creating it if needed."""
    with open(path, "a", encoding="utf-8", newline="") as handle:
        handle.write(text)