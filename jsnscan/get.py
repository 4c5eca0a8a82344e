"""Pull the raw values of selected keys straight out of JSON bytes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

_QUOTE, _BACKSLASH, _COLON, _LBRACE, _RBRACE, _LBRACKET, _RBRACKET = b'"\\:{}[]'
_LOWER_L, _LOWER_N = b"ln"
_OPENERS = b"{["
_CLOSERS = b"}]"
_DIGITS = b"0123456789"
_NUMBER_CHARS = b"0123456789.eE+-"
_BOOL_START = b"fFtT"
_BOOL_END = b"eE"
_LIST_PADDING = b" \t\n"


class _State(Enum):
    KEY = auto()
    KEY_CLOSE = auto()
    COLON = auto()
    VALUE = auto()
    STRING = auto()
    NULL = auto()
    LIST_CLOSE = auto()
    OBJ_CLOSE = auto()
    BOOL_CLOSE = auto()
    NUM_CLOSE = auto()


class _Event(Enum):
    NONE = auto()
    KEY_START = auto()
    KEY_END = auto()
    VALUE_START = auto()
    VALUE_END = auto()


_CONTAINER_STATES = (_State.OBJ_CLOSE, _State.LIST_CLOSE)


def _to_bytes(data: bytes | bytearray | str) -> bytes:
    """Return ``data`` as bytes, encoding text as UTF-8."""
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _track_depth(state: _State, c: int, in_string: bool, depth: int) -> int:
    """Adjust the nesting depth while skipping over a list or object value."""
    if state in _CONTAINER_STATES and not in_string:
        if c in _OPENERS:
            return depth + 1
        if c in _CLOSERS:
            return depth - 1
    return depth


def _transition(
    state: _State, b: bytes, i: int, depth: int, even: bool
) -> tuple[_State, _Event, int]:
    """Advance the key/value scanner by the byte at ``b[i]``.

    ``even`` tells whether the run of backslashes before this byte is even,
    i.e. whether a quote here is a real delimiter.
    """
    c = b[i]
    if state is _State.KEY:
        if c == _QUOTE:
            return _State.KEY_CLOSE, _Event.KEY_START, depth
    elif state is _State.KEY_CLOSE:
        if c == _QUOTE and even:
            return _State.COLON, _Event.KEY_END, depth
    elif state is _State.COLON:
        if c == _COLON:
            return _State.VALUE, _Event.NONE, depth
    elif state is _State.VALUE:
        if c == _QUOTE:
            return _State.STRING, _Event.VALUE_START, depth
        if c == _LBRACKET:
            return _State.LIST_CLOSE, _Event.VALUE_START, depth + 1
        if c == _LBRACE:
            return _State.OBJ_CLOSE, _Event.VALUE_START, depth + 1
        if c in _DIGITS:
            return _State.NUM_CLOSE, _Event.VALUE_START, depth
        if c in _BOOL_START:
            return _State.BOOL_CLOSE, _Event.VALUE_START, depth
        if c == _LOWER_N:
            return _State.NULL, _Event.VALUE_START, depth
    elif state is _State.STRING:
        if c == _QUOTE and even:
            return state, _Event.VALUE_END, depth
    elif state is _State.LIST_CLOSE:
        if depth == 0 and c == _RBRACKET:
            return state, _Event.VALUE_END, depth
    elif state is _State.OBJ_CLOSE:
        if depth == 0 and c == _RBRACE:
            return state, _Event.VALUE_END, depth
    elif state is _State.NUM_CLOSE:
        if c not in _NUMBER_CHARS:
            return state, _Event.VALUE_END, depth
    elif state is _State.BOOL_CLOSE:
        if c in _BOOL_END:
            return state, _Event.VALUE_END, depth
    elif state is _State.NULL:
        if b[i - 1] == _LOWER_L and c == _LOWER_L:
            return state, _Event.VALUE_END, depth
    return state, _Event.NONE, depth


def _value_end(state: _State, i: int) -> int:
    """Index of the last byte of a value that finished at position ``i``."""
    return i - 1 if state is _State.NUM_CLOSE else i


@dataclass(frozen=True)
class Field:
    """A JSON key and its raw, undecoded value."""

    key: bytes
    value: bytes


def value(b: bytes | bytearray | str) -> bytes | None:
    """Unquote a raw string value; return None for lists and objects."""
    data = _to_bytes(b)
    if not data:
        raise ValueError("empty value")
    first, last = data[0], data[-1]
    if first == _QUOTE and last == _QUOTE:
        return data[1:-1]
    if (first == _LBRACKET and last == _RBRACKET) or (
        first == _LBRACE and last == _RBRACE
    ):
        return None
    return data


def get(b: bytes | bytearray | str, keys: Iterable[bytes | str]) -> list[Field]:
    """Return every key/value pair in ``b`` whose key is one of ``keys``.

    Nested objects, and lists of objects, are searched too; matches come back
    in the order they appear in the document.
    """
    data = _to_bytes(b)
    wanted = frozenset(_to_bytes(k) for k in keys)
    results: list[Field] = []

    state = _State.KEY
    start = depth = 0
    key = b""
    in_string = False
    slashes = 0
    i = 0

    while i < len(data):
        c = data[i]
        if in_string and c == _BACKSLASH:
            slashes += 1
            i += 1
            continue

        even = slashes % 2 == 0
        if c == _QUOTE and even:
            in_string = not in_string

        depth = _track_depth(state, c, in_string, depth)
        state, event, depth = _transition(state, data, i, depth, even)

        if event is _Event.KEY_START or event is _Event.VALUE_START:
            start = i
        elif event is _Event.KEY_END:
            key = data[start + 1 : i]
        elif event is _Event.VALUE_END:
            end = _value_end(state, i)
            if key in wanted:
                results.append(Field(key, data[start : end + 1]))

            if state in _CONTAINER_STATES:
                # Rescan the container so that nested keys are found as well.
                i = start
            if state is _State.LIST_CLOSE:
                rest = data[i + 1 :].lstrip(_LIST_PADDING)
                if rest and rest[0] != _LBRACE:
                    i = end

            state = _State.KEY

        slashes = 0
        i += 1

    return results