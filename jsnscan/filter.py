"""Keep only selected top-level keys of a JSON object or list of objects."""

from __future__ import annotations

from collections.abc import Iterable

from jsnscan.get import (
    _BACKSLASH,
    _LBRACE,
    _LBRACKET,
    _QUOTE,
    _Event,
    _State,
    _to_bytes,
    _track_depth,
    _transition,
    _value_end,
)


def filter_json(b: bytes | bytearray | str, keys: Iterable[bytes | str]) -> bytes:
    """Return ``b`` with every key/value pair not named in ``keys`` removed.

    Kept values are copied as-is apart from newlines and tabs, which are dropped.
    """
    data = _to_bytes(b)
    wanted = frozenset(_to_bytes(k) for k in keys)
    out = bytearray()

    is_list = False
    items = 0
    fields = 0

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

        if state is _State.KEY:
            if c == _LBRACKET:
                if not is_list:
                    out += b"["
                is_list = True
            elif c == _LBRACE:
                out += b"{" if items == 0 else b"},{"
                fields = 0
                items += 1

        state, event, depth = _transition(state, data, i, depth, even)

        if event is _Event.KEY_START:
            start = i
        elif event is _Event.KEY_END:
            key = data[start + 1 : i]
        elif event is _Event.VALUE_END:
            end = _value_end(state, i)
            state = _State.KEY
            if key in wanted:
                if fields:
                    out += b","
                out += data[start : end + 1].translate(None, b"\n\t")
                fields += 1

        i += 1

    if items:
        out += b"}"
    if is_list:
        out += b"]"
    return bytes(out)