"""A small CSV reader producing a fixed rows-by-columns table of strings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterator

from sctoolkit.tstring import read_file


class CsvError(ValueError):
    """Raised when CSV text is malformed."""


@dataclass(frozen=True)
class CsvTable:
    """Cells stored row by row; ``cells`` holds ``rows * columns`` strings."""

    rows: int
    columns: int
    cells: tuple[str, ...]

    def get(self, row: int, column: int) -> str:
        """Return the cell at ``row``, ``column``."""
        if not 0 <= row < self.rows or not 0 <= column < self.columns:
            raise IndexError(
                f"cell ({row}, {column}) outside {self.rows}x{self.columns} table"
            )
        return self.cells[row * self.columns + column]

    def __iter__(self) -> Iterator[tuple[str, ...]]:
        for start in range(0, self.rows * self.columns, self.columns):
            yield self.cells[start:start + self.columns]


def _read_quoted(chars: Iterator[str], field: list[str]) -> str:
    """Read a quoted section into ``field``; return the character after it."""
    for char in chars:
        if char == '"':
            following = next(chars, None)
            if following is None:
                raise CsvError("quoted field closed at end of input")
            if following != '"':
                return following
        field.append(char)
    raise CsvError("unterminated quoted field")


def parse_csv(text: str) -> CsvTable:
    """Parse CSV text; each row must end with a newline.

    Fields end at ``,`` or a newline; carriage returns are dropped; a doubled
    quote inside quotes is a literal quote.  Text after the last newline that
    is not ended by a comma is ignored.
    """
    cells: list[str] = []
    field: list[str] = []
    rows = 0
    chars = iter(text)
    char = next(chars, None)
    while char is not None:
        if char == '"':
            char = _read_quoted(chars, field)
            continue
        if char in ",\n":
            cells.append("".join(field))
            field.clear()
            if char == "\n":
                rows += 1
        elif char != "\r":
            field.append(char)
        char = next(chars, None)

    if rows == 0:
        raise CsvError("no complete row in CSV input")
    if len(cells) % rows:
        raise CsvError(f"{len(cells)} fields cannot be split into {rows} equal rows")
    return CsvTable(rows=rows, columns=len(cells) // rows, cells=tuple(cells))


def read_csv(path: str | os.PathLike[str]) -> CsvTable:
    """Parse the CSV file at ``path``."""
    return parse_csv(read_file(path))