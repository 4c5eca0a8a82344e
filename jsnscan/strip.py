"""Cut a JSON document down to the value found at a key path."""

from __future__ import annotations

from collections.abc import Sequence

from jsnscan.get import (
    _BACKSLASH,
    _OPENERS,
    _QUOTE,
    _Event,
    _State,
    _to_bytes,
    _track_depth,
    _transition,
    _value_end,
)


def strip(b: bytes | bytearray | str, path: Sequence[bytes | str]) -> bytes:
    """Return the list or object reached by following ``path`` through ``b``.

    If the full path cannot be followed the original document is returned.
    """
    keys = [_to_bytes(k) for k in path]
    if not keys:
        raise ValueError("path must not be empty")

    original = data = _to_bytes(b)
    state = _State.KEY
    start = depth = 0
    depth_in_path = 0
    matched = False
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
            if depth_in_path == len(keys):
                depth_in_path = 0
            matched = data[start + 1 : i] == keys[depth_in_path]
            if matched:
                depth_in_path += 1
        elif event is _Event.VALUE_END:
            if matched and data[start] in _OPENERS:
                data = data[start : _value_end(state, i) + 1]
                i = 0
                if depth_in_path == len(keys):
                    return data
            state = _State.KEY

        slashes = 0
        i += 1

    return original