"""A small JSON tree: lenient parsing, compact printing and node helpers."""

from __future__ import annotations

import itertools
import math
import os
import sys
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Iterable, Iterator

from sctoolkit.schead import is_space
from sctoolkit.tstring import read_file, str_icmp

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_EPSILON = sys.float_info.epsilon
_DIGITS = frozenset("0123456789")
_HEX = frozenset("0123456789abcdefABCDEF")

_UNESCAPE = {"b": "\b", "f": "\f", "n": "\n", "r": "\r", "t": "\t"}
_ESCAPE = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


class JsonType(IntEnum):
    """Kinds of JSON node."""

    FALSE = 0
    TRUE = 1
    NULL = 2
    NUMBER = 3
    STRING = 4
    ARRAY = 5
    OBJECT = 6


class JsonParseError(ValueError):
    """Raised when JSON text cannot be parsed."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at position {position}")
        self.position = position


@dataclass
class JsonNode:
    """One value of a JSON tree; arrays and objects keep their children in order."""

    kind: JsonType
    key: str | None = None
    text: str | None = None
    number: float = 0.0
    children: list["JsonNode"] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator["JsonNode"]:
        return iter(self.children)

    def item(self, index: int) -> "JsonNode":
        """Return the child at ``index``."""
        if index < 0 or index >= len(self.children):
            raise IndexError(f"index {index} out of range for length {len(self.children)}")
        return self.children[index]

    def get(self, key: str) -> "JsonNode | None":
        """Return the first child whose key matches ``key`` ignoring ASCII case."""
        if not key:
            return None
        return next((child for child in self.children if str_icmp(key, child.key) == 0), None)

    def as_int(self) -> int:
        """Return the numeric value truncated to an int (true is 1, false is 0)."""
        return int(self.number)

    def append(self, child: "JsonNode") -> None:
        """Add ``child`` at the end of an array or object."""
        if self.kind not in (JsonType.ARRAY, JsonType.OBJECT):
            raise TypeError(f"cannot append to a {self.kind.name} node")
        if self.kind is JsonType.OBJECT and child.key is None:
            raise ValueError("a child of an object needs a key")
        self.children.append(child)

    def detach_index(self, index: int) -> "JsonNode":
        """Remove and return the child at ``index``."""
        if index < 0 or index >= len(self.children):
            raise IndexError(f"index {index} out of range for length {len(self.children)}")
        return self.children.pop(index)

    def detach_key(self, key: str) -> "JsonNode":
        """Remove and return the child whose key matches ``key`` ignoring ASCII case."""
        for position, child in enumerate(self.children):
            if str_icmp(child.key, key) == 0:
                return self.children.pop(position)
        raise KeyError(key)

    def dumps(self) -> str:
        """Return compact JSON text for this node."""
        return _dump(self)


def _format_number(value: float) -> str:
    if value == 0:
        return "0"
    finite = math.isfinite(value)
    if finite and _INT_MIN <= value <= _INT_MAX:
        truncated = int(value)
        if abs(value - truncated) <= _EPSILON:
            return "%d" % truncated
    magnitude = abs(value)
    if finite and abs(math.floor(value) - value) <= _EPSILON and magnitude < 1.0e60:
        return "%.0f" % value
    if magnitude < 1.0e-6 or magnitude > 1.0e9:
        return "%e" % value
    return "%f" % value


def _quote(text: str | None) -> str:
    if not text:
        return '""'
    body = "".join(
        _ESCAPE.get(char) or (f"\\u{ord(char):04x}" if ord(char) < 32 else char)
        for char in text
    )
    return f'"{body}"'


def _dump(node: JsonNode) -> str:
    kind = node.kind
    if kind is JsonType.FALSE:
        return "false"
    if kind is JsonType.TRUE:
        return "true"
    if kind is JsonType.NULL:
        return "null"
    if kind is JsonType.NUMBER:
        return _format_number(node.number)
    if kind is JsonType.STRING:
        return _quote(node.text)
    if kind is JsonType.ARRAY:
        return "[" + ",".join(_dump(child) for child in node.children) + "]"
    return "{" + ",".join(f"{_quote(child.key)}:{_dump(child)}" for child in node.children) + "}"


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.end = len(text)

    def peek(self, pos: int) -> str:
        return self.text[pos] if pos < self.end else ""

    def skip(self, pos: int) -> int:
        while pos < self.end and ord(self.text[pos]) <= 32:
            pos += 1
        return pos

    def hex4(self, pos: int) -> int:
        digits = self.text[pos:pos + 4]
        if len(digits) < 4 or not all(char in _HEX for char in digits):
            return 0
        return int(digits, 16)

    def value(self, pos: int) -> tuple[JsonNode, int]:
        char = self.peek(pos)
        if char == "n":
            return JsonNode(JsonType.NULL), min(pos + 4, self.end)
        if char == "f":
            return JsonNode(JsonType.FALSE), min(pos + 5, self.end)
        if char == "t":
            return JsonNode(JsonType.TRUE, number=1.0), min(pos + 4, self.end)
        if char == '"':
            text, pos = self.string(pos)
            return JsonNode(JsonType.STRING, text=text), pos
        if char in _DIGITS or char in ("+", "-"):
            return self.number(pos)
        if char == "[":
            return self.array(pos)
        if char == "{":
            return self.object(pos)
        raise JsonParseError(f"unexpected {char!r}" if char else "unexpected end of input", pos)

    def string(self, pos: int) -> tuple[str, int]:
        if self.peek(pos) != '"':
            raise JsonParseError("expected a string", pos)
        text, out = self.text, []
        pos += 1
        while pos < self.end:
            char = text[pos]
            if char == '"':
                return "".join(out), pos + 1
            if char != "\\":
                out.append(char)
                pos += 1
                continue
            pos += 1
            if pos >= self.end:
                break
            escaped = text[pos]
            if escaped in _UNESCAPE:
                out.append(_UNESCAPE[escaped])
            elif escaped == "u":
                code = self.hex4(pos + 1)
                pos += 4
                if code == 0 or 0xDC00 <= code <= 0xDFFF:
                    pass
                elif 0xD800 <= code <= 0xDBFF:
                    if text.startswith("\\u", pos + 1):
                        low = self.hex4(pos + 3)
                        pos += 6
                        if 0xDC00 <= low <= 0xDFFF:
                            out.append(chr(0x10000 + (((code & 0x3FF) << 10) | (low & 0x3FF))))
                else:
                    out.append(chr(code))
            else:
                out.append(escaped)
            pos += 1
        return "".join(out), self.end

    def _digits(self, pos: int) -> Iterator[int]:
        while pos < self.end and self.text[pos] in _DIGITS:
            yield int(self.text[pos])
            pos += 1

    def number(self, pos: int) -> tuple[JsonNode, int]:
        sign = 1.0
        if self.peek(pos) in ("+", "-"):
            sign = -1.0 if self.peek(pos) == "-" else 1.0
            pos += 1
        mantissa = 0.0
        for digit in self._digits(pos):
            mantissa = mantissa * 10 + digit
            pos += 1
        decimals = 0
        if self.peek(pos) == ".":
            pos += 1
            for digit in self._digits(pos):
                mantissa = mantissa * 10 + digit
                decimals -= 1
                pos += 1
        exponent, exp_sign = 0, 1
        if self.peek(pos) in ("e", "E"):
            pos += 1
            if self.peek(pos) == "+":
                pos += 1
            elif self.peek(pos) == "-":
                exp_sign = -1
                pos += 1
            for digit in self._digits(pos):
                exponent = exponent * 10 + digit
                pos += 1
        try:
            scale = 10.0 ** (decimals + exp_sign * exponent)
        except OverflowError:
            scale = math.inf
        return JsonNode(JsonType.NUMBER, number=sign * mantissa * scale), pos

    def array(self, pos: int) -> tuple[JsonNode, int]:
        node = JsonNode(JsonType.ARRAY)
        pos = self.skip(pos + 1)
        if self.peek(pos) == "]":
            return node, pos + 1
        while True:
            child, pos = self.value(pos)
            node.children.append(child)
            pos = self.skip(pos)
            if self.peek(pos) != ",":
                break
            pos = self.skip(pos + 1)
        if self.peek(pos) != "]":
            raise JsonParseError("expected ']'", pos)
        return node, pos + 1

    def object(self, pos: int) -> tuple[JsonNode, int]:
        node = JsonNode(JsonType.OBJECT)
        pos = self.skip(pos + 1)
        if self.peek(pos) == "}":
            return node, pos + 1
        while True:
            key, pos = self.string(pos)
            pos = self.skip(pos)
            if self.peek(pos) != ":":
                raise JsonParseError("expected ':'", pos)
            child, pos = self.value(self.skip(pos + 1))
            child.key = key
            node.children.append(child)
            pos = self.skip(pos)
            if self.peek(pos) != ",":
                break
            pos = self.skip(pos + 1)
        if self.peek(pos) != "}":
            raise JsonParseError("expected '}'", pos)
        return node, pos + 1


def parse(text: str) -> JsonNode:
    """Parse JSON text; content after the first value is ignored."""
    parser = _Parser(text)
    node, _ = parser.value(parser.skip(0))
    return node


def parse_file(path: str | os.PathLike[str]) -> JsonNode:
    """Parse the JSON content of a file."""
    return parse(read_file(path))


def minify(text: str) -> str:
    """Drop whitespace and // or /* */ comments outside strings."""
    out: list[str] = []
    pos, end = 0, len(text)
    while pos < end:
        char = text[pos]
        if is_space(char):
            pos += 1
        elif text.startswith("//", pos):
            newline = text.find("\n", pos)
            pos = end if newline < 0 else newline
        elif text.startswith("/*", pos):
            close = text.find("*/", pos + 1)
            pos = end if close < 0 else close + 2
        elif char == '"':
            stop = pos + 1
            while stop < end and (text[stop] != '"' or text[stop - 1] == "\\"):
                stop += 1
            out.append(text[pos:stop])
            if stop < end:
                out.append('"')
                stop += 1
            pos = stop
        else:
            out.append(char)
            pos += 1
    return "".join(out)


def new_null() -> JsonNode:
    return JsonNode(JsonType.NULL)


def new_bool(value: Any) -> JsonNode:
    if value:
        return JsonNode(JsonType.TRUE, number=1.0)
    return JsonNode(JsonType.FALSE, number=0.0)


def new_number(value: float) -> JsonNode:
    return JsonNode(JsonType.NUMBER, number=float(value))


def new_string(value: str) -> JsonNode:
    if not isinstance(value, str):
        raise TypeError(f"expected a str, got {type(value).__name__}")
    return JsonNode(JsonType.STRING, text=value)


def new_array() -> JsonNode:
    return JsonNode(JsonType.ARRAY)


def new_object() -> JsonNode:
    return JsonNode(JsonType.OBJECT)


def new_type_array(
    kind: JsonType | int,
    values: Iterable[Any] | None = None,
    length: int | None = None,
) -> JsonNode:
    """Build an array of ``length`` null, bool, number or string nodes."""
    kind = JsonType(kind)
    if kind > JsonType.STRING:
        raise ValueError(f"unsupported element kind {kind.name}")
    if length is None:
        if values is None:
            raise ValueError("length is required when no values are given")
        values = list(values)
        length = len(values)
    if length <= 0:
        raise ValueError(f"length must be positive, got {length}")

    items: list[Any] | None = None
    if values is not None:
        items = list(itertools.islice(values, length))
        if len(items) < length:
            raise ValueError(f"expected {length} values, got {len(items)}")
    elif kind in (JsonType.NUMBER, JsonType.STRING):
        raise ValueError(f"values are required for {kind.name} arrays")

    array = new_array()
    if kind is JsonType.NULL:
        array.children = [new_null() for _ in range(length)]
    elif kind in (JsonType.FALSE, JsonType.TRUE):
        if items is None:
            array.children = [new_bool(kind is JsonType.TRUE) for _ in range(length)]
        else:
            array.children = [new_bool(item) for item in items]
    elif kind is JsonType.NUMBER:
        array.children = [new_number(item) for item in items or []]
    else:
        array.children = [new_string(item) for item in items or []]
    return array