"""Blank out every scalar value of a JSON document, keeping its shape."""

from __future__ import annotations

import json
import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto
from json.decoder import scanstring

from jsnscan.get import _to_bytes

_WHITESPACE = " \t\n\r"
_SEPARATORS = ",:"
_DELIMITERS = "{}[]"
_NUMBER = re.compile(r"-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][-+]?\d+)?")


class _Kind(Enum):
    DELIM = auto()
    STRING = auto()
    NUMBER = auto()
    BOOL = auto()
    NULL = auto()


_WORDS = (("true", _Kind.BOOL), ("false", _Kind.BOOL), ("null", _Kind.NULL))

_BLANKS = {
    _Kind.STRING: '""',
    _Kind.NUMBER: "0.0",
    _Kind.BOOL: "false",
    _Kind.NULL: "null",
}


@dataclass(frozen=True)
class _Token:
    kind: _Kind
    text: str
    start: int
    end: int


def _skip_whitespace(text: str, pos: int) -> int:
    """Return the first position at or after ``pos`` that is not whitespace."""
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    return pos


def _reject_constant(name: str) -> None:
    raise ValueError(f"invalid number literal: {name}")


def _validate(text: str) -> None:
    """Raise ValueError unless ``text`` is a stream of valid JSON values."""
    decoder = json.JSONDecoder(parse_constant=_reject_constant)
    pos = _skip_whitespace(text, 0)
    while pos < len(text):
        _, pos = decoder.raw_decode(text, pos)
        pos = _skip_whitespace(text, pos)


def _tokens(text: str) -> Iterator[_Token]:
    """Yield the delimiters and scalars of already validated JSON text."""
    pos = 0
    while pos < len(text):
        c = text[pos]
        if c in _WHITESPACE or c in _SEPARATORS:
            pos += 1
        elif c in _DELIMITERS:
            yield _Token(_Kind.DELIM, c, pos, pos + 1)
            pos += 1
        elif c == '"':
            _, end = scanstring(text, pos + 1)
            yield _Token(_Kind.STRING, text[pos:end], pos, end)
            pos = end
        else:
            for word, kind in _WORDS:
                if text.startswith(word, pos):
                    end = pos + len(word)
                    yield _Token(kind, word, pos, end)
                    pos = end
                    break
            else:
                match = _NUMBER.match(text, pos)
                if match is None:
                    raise ValueError(f"invalid json at offset {pos}")
                yield _Token(_Kind.NUMBER, match.group(), pos, match.end())
                pos = match.end()


def _pop(stack: list[int]) -> int:
    return stack.pop() if stack else -1


def clear(b: bytes | bytearray | str) -> bytes:
    """Return ``b`` compacted, with scalars set to empty values.

    Object values become ``""``, ``0.0``, ``false`` or ``null`` by type;
    scalars held directly in a list are dropped. Raises ValueError on
    invalid JSON.
    """
    text = _to_bytes(b).decode("utf-8")
    _validate(text)

    out: list[str] = []
    counts: list[int] = []
    is_value = False
    in_array = False
    count = 0

    for token in _tokens(text):
        if token.kind is _Kind.DELIM:
            if token.text == "[":
                counts.append(count)
                in_array = True
                count = 0
            elif token.text == "]":
                count = _pop(counts) + 1
                in_array = False
                is_value = False
            elif token.text == "{":
                if count and not is_value:
                    out.append(",")
                counts.append(count)
                in_array = False
                is_value = False
                count = 0
            else:
                count = _pop(counts) + 1
                is_value = False
            out.append(token.text)
        elif token.kind is _Kind.STRING and not is_value:
            if token.start <= 0:
                raise ValueError("invalid json")
            if count:
                out.append(",")
            out.append(token.text)
            out.append(":")
            is_value = True
        elif is_value and not in_array:
            out.append(_BLANKS[token.kind])
            is_value = False
            count += 1

    return "".join(out).encode("utf-8")