"""Reader and writer for RSN, a Rust-style record notation.

Supported syntax:
- named structs ``Name { field: value, ... }`` and anonymous maps
  ``{ key: value, ... }``; bare identifiers are allowed as keys
- lists ``[a, b]``, tuples ``(a, b)`` and named tuples ``Name(a, b)``
- strings ``"..."`` with Rust escapes, raw strings ``r"..."`` / ``r#"..."#``,
  byte strings ``b"..."`` and chars ``'c'``
- integers (decimal, ``0x``, ``0o``, ``0b``, ``_`` separators), floats,
  ``true``/``false``, ``None``/``Some(x)``
- ``//`` line comments and nestable ``/* */`` block comments
- trailing commas everywhere

Struct names are not kept: a named struct decodes to a plain dict, a
newtype ``Name(x)`` to ``x`` and any other bare identifier to its name.
"""

from __future__ import annotations

import re
from collections.abc import Hashable
from typing import Any

IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
NUMBER_RE = re.compile(
    r"[+-]?(?:0x[0-9A-Fa-f][0-9A-Fa-f_]*"
    r"|0o[0-7][0-7_]*"
    r"|0b[01][01_]*"
    r"|\d[\d_]*(?:\.\d[\d_]*)?(?:[eE][+-]?\d+)?)"
)
_COLON_RE = re.compile(r"\s*:")
_RAW_START_RE = re.compile(r'r#*"')
_UNICODE_ESCAPE_RE = re.compile(r"u\{([0-9A-Fa-f_]{1,8})\}")

_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    '"': '"',
    "'": "'",
    "0": "\0",
}

_KEYWORDS = {"true", "false", "None", "Some"}


class RSNError(ValueError):
    """Malformed RSN input.

    Attributes:
        message: Description of the problem.
        line: 1-based line of the problem.
        column: 1-based column of the problem.
        duplicate_key: True when the error is a repeated map key.
    """

    def __init__(self, message: str, line: int, column: int, duplicate_key: bool = False):
        self.message = message
        self.line = line
        self.column = column
        self.duplicate_key = duplicate_key
        super().__init__(f"{message} (line {line}, column {column})")


def loads(text: str) -> Any:
    """Decode an RSN document into plain Python data."""
    return _Reader(text).document()


def dumps(data: Any, indent: str = "    ") -> str:
    """Encode plain Python data as an RSN document."""
    return _write(data, 0, indent) + "\n"


class _Reader:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def error(self, message: str, pos: int | None = None, duplicate_key: bool = False) -> RSNError:
        pos = self.pos if pos is None else pos
        line = self.text.count("\n", 0, pos) + 1
        column = pos - (self.text.rfind("\n", 0, pos) + 1) + 1
        return RSNError(message, line, column, duplicate_key)

    def document(self) -> Any:
        value = self.value()
        if self.peek():
            raise self.error("unexpected content after the document")
        return value

    # -- lexing helpers -------------------------------------------------

    def skip(self) -> None:
        """Skip whitespace and comments."""
        text = self.text
        while self.pos < len(text):
            ch = text[self.pos]
            if ch.isspace():
                self.pos += 1
            elif text.startswith("//", self.pos):
                end = text.find("\n", self.pos)
                self.pos = len(text) if end < 0 else end + 1
            elif text.startswith("/*", self.pos):
                self.block_comment()
            else:
                return

    def block_comment(self) -> None:
        start = self.pos
        depth = 0
        while self.pos < len(self.text):
            if self.text.startswith("/*", self.pos):
                depth += 1
                self.pos += 2
            elif self.text.startswith("*/", self.pos):
                depth -= 1
                self.pos += 2
                if depth == 0:
                    return
            else:
                self.pos += 1
        raise self.error("unterminated block comment", start)

    def peek(self) -> str:
        self.skip()
        return self.text[self.pos : self.pos + 1]

    def expect(self, ch: str) -> None:
        if self.peek() != ch:
            found = self.text[self.pos : self.pos + 1] or "end of input"
            raise self.error(f"expected {ch!r}, found {found!r}")
        self.pos += 1

    # -- values ---------------------------------------------------------

    def value(self) -> Any:
        ch = self.peek()
        if not ch:
            raise self.error("unexpected end of input")
        if ch == '"':
            return self.string()
        if ch == "'":
            return self.char()
        if ch == "[":
            return self.sequence("[", "]")
        if ch == "(":
            return self.sequence("(", ")")
        if ch == "{":
            return self.mapping()
        if ch == "r" and _RAW_START_RE.match(self.text, self.pos):
            return self.raw_string()
        if ch == "b" and self.text.startswith('b"', self.pos):
            self.pos += 1
            return self.string()
        if ch in "+-0123456789":
            return self.number()
        match = IDENT_RE.match(self.text, self.pos)
        if match:
            self.pos = match.end()
            return self.identified(match.group())
        raise self.error(f"unexpected character {ch!r}")

    def identified(self, name: str) -> Any:
        if name == "true":
            return True
        if name == "false":
            return False
        if name == "None":
            return None
        ch = self.peek()
        if ch == "{":
            return self.mapping()
        if ch == "(":
            items = self.sequence("(", ")")
            if name == "Some" or len(items) == 1:
                if len(items) != 1:
                    raise self.error(f"{name}(...) takes exactly one value")
                return items[0]
            return items
        return name

    def sequence(self, open_ch: str, close_ch: str) -> list[Any]:
        self.expect(open_ch)
        items: list[Any] = []
        while True:
            if self.peek() == close_ch:
                self.pos += 1
                return items
            items.append(self.value())
            ch = self.peek()
            if ch == ",":
                self.pos += 1
            elif ch != close_ch:
                raise self.error(f"expected ',' or {close_ch!r}")

    def mapping(self) -> dict[Any, Any]:
        self.expect("{")
        result: dict[Any, Any] = {}
        while True:
            if self.peek() == "}":
                self.pos += 1
                return result
            key_pos = self.pos
            key = self.key()
            if not isinstance(key, Hashable):
                raise self.error("map keys must be scalar values", key_pos)
            if key in result:
                raise self.error(f"duplicate key {key!r}", key_pos, duplicate_key=True)
            self.expect(":")
            result[key] = self.value()
            ch = self.peek()
            if ch == ",":
                self.pos += 1
            elif ch != "}":
                raise self.error("expected ',' or '}'")

    def key(self) -> Any:
        match = IDENT_RE.match(self.text, self.pos)
        if match and match.group() not in _KEYWORDS:
            if _COLON_RE.match(self.text, match.end()):
                self.pos = match.end()
                return match.group()
        return self.value()

    def string(self) -> str:
        start = self.pos
        self.pos += 1  # opening quote
        parts: list[str] = []
        text = self.text
        while self.pos < len(text):
            ch = text[self.pos]
            if ch == '"':
                self.pos += 1
                return "".join(parts)
            if ch == "\\":
                parts.append(self.escape())
            else:
                parts.append(ch)
                self.pos += 1
        raise self.error("unterminated string", start)

    def char(self) -> str:
        start = self.pos
        self.pos += 1
        if self.text.startswith("\\", self.pos):
            value = self.escape()
        else:
            value = self.text[self.pos : self.pos + 1]
            self.pos += 1
        if not self.text.startswith("'", self.pos) or not value:
            raise self.error("unterminated character literal", start)
        self.pos += 1
        return value

    def escape(self) -> str:
        start = self.pos
        self.pos += 1  # backslash
        ch = self.text[self.pos : self.pos + 1]
        if ch in _ESCAPES:
            self.pos += 1
            return _ESCAPES[ch]
        if ch == "\n":
            # Line continuation: drop the newline and leading whitespace.
            self.pos += 1
            while self.pos < len(self.text) and self.text[self.pos].isspace():
                self.pos += 1
            return ""
        if ch == "x":
            digits = self.text[self.pos + 1 : self.pos + 3]
            if re.fullmatch(r"[0-7][0-9A-Fa-f]", digits):
                self.pos += 3
                return chr(int(digits, 16))
        if ch == "u":
            match = _UNICODE_ESCAPE_RE.match(self.text, self.pos)
            if match:
                code = int(match.group(1).replace("_", ""), 16)
                if code <= 0x10FFFF:
                    self.pos = match.end()
                    return chr(code)
        raise self.error("invalid escape sequence", start)

    def raw_string(self) -> str:
        start = self.pos
        self.pos += 1  # r
        hashes = 0
        while self.text.startswith("#", self.pos):
            hashes += 1
            self.pos += 1
        self.pos += 1  # opening quote
        terminator = '"' + "#" * hashes
        end = self.text.find(terminator, self.pos)
        if end < 0:
            raise self.error("unterminated raw string", start)
        value = self.text[self.pos : end]
        self.pos = end + len(terminator)
        return value

    def number(self) -> int | float:
        match = NUMBER_RE.match(self.text, self.pos)
        if not match:
            raise self.error("invalid number")
        self.pos = match.end()
        literal = match.group().replace("_", "")
        sign = -1 if literal.startswith("-") else 1
        digits = literal.lstrip("+-")
        for prefix, base in (("0x", 16), ("0o", 8), ("0b", 2)):
            if digits.startswith(prefix):
                return sign * int(digits[2:], base)
        if any(c in digits for c in ".eE"):
            return float(literal)
        return int(literal)


def _write(value: Any, level: int, indent: str) -> str:
    if value is None:
        return "None"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return _quote(value)

    inner = indent * (level + 1)
    outer = indent * level
    if isinstance(value, dict):
        if not value:
            return "{}"
        lines = [f"{inner}{_key(k)}: {_write(v, level + 1, indent)}," for k, v in value.items()]
        return "{\n" + "\n".join(lines) + f"\n{outer}}}"
    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        lines = [f"{inner}{_write(v, level + 1, indent)}," for v in value]
        return "[\n" + "\n".join(lines) + f"\n{outer}]"
    raise TypeError(f"cannot encode {type(value).__name__} as RSN")


def _key(key: Any) -> str:
    if isinstance(key, str) and IDENT_RE.fullmatch(key) and key not in _KEYWORDS:
        return key
    return _write(key, 0, "")


def _quote(text: str) -> str:
    if "\n" in text and "\r" not in text:
        hashes = 0
        while '"' + "#" * hashes in text:
            hashes += 1
        fence = "#" * hashes
        return f'r{fence}"{text}"{fence}'
    out = []
    for ch in text:
        if ch == "\\":
            out.append("\\\\")
        elif ch == '"':
            out.append('\\"')
        elif ch == "\n":
            out.append("\\n")
        elif ch == "\r":
            out.append("\\r")
        elif ch == "\t":
            out.append("\\t")
        elif ord(ch) < 0x20:
            out.append(f"\\u{{{ord(ch):x}}}")
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'
