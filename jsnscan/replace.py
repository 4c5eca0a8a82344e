"""Swap selected key/value pairs in JSON bytes for other pairs."""

from __future__ import annotations

from collections.abc import Iterable

from jsnscan.get import (
    _BACKSLASH,
    _OPENERS,
    _QUOTE,
    Field,
    _Event,
    _State,
    _to_bytes,
    _track_depth,
    _transition,
    _value_end,
)

_COMMA = ord(",")


def replace(
    b: bytes | bytearray | str,
    from_fields: Iterable[Field],
    to_fields: Iterable[Field],
) -> bytes:
    """Return ``b`` with each pair in ``from_fields`` replaced by its partner.

    A pair matches when both its key and its raw value are identical to one in
    ``from_fields``; it is then written as the key and value of the field at
    the same position in ``to_fields``. An empty replacement value becomes
    ``null``; an empty replacement key drops the pair's key and value.
    Leading whitespace before the document is removed whenever a replacement
    is made.
    """
    data = _to_bytes(b)
    sources = list(from_fields)
    targets = list(to_fields)

    if len(sources) != len(targets):
        raise ValueError("'from' and 'to' must be of the same length")
    if not sources:
        return data

    lookup = {
        _to_bytes(field.key) + _to_bytes(field.value): n
        for n, field in enumerate(sources)
    }

    out = bytearray()
    state = _State.KEY
    start = depth = 0
    key = b""
    write_start, write_end = -1, len(data)
    in_string = False
    slashes = 0
    i = 0

    while i < len(data):
        c = data[i]
        if in_string and c == _BACKSLASH:
            slashes += 1
            i += 1
            continue

        if write_start == -1 and c in _OPENERS:
            write_start = i

        even = slashes % 2 == 0
        if c == _QUOTE and even:
            in_string = not in_string

        depth = _track_depth(state, c, in_string, depth)
        state, event, depth = _transition(state, data, i, depth, even)

        if event is _Event.KEY_START or event is _Event.VALUE_START:
            start = i
        elif event is _Event.KEY_END:
            key = data[start + 1 : i]
            write_end = start
        elif event is _Event.VALUE_END:
            end = _value_end(state, i) + 1
            if end <= start or write_end + 1 <= write_start:
                raise ValueError("invalid json")

            n = lookup.get(key + data[start:end])
            if n is not None:
                out += data[write_start : write_end + 1]
                target_key = _to_bytes(targets[n].key)
                if target_key:
                    target_value = _to_bytes(targets[n].value)
                    out += target_key + b'":' + (target_value or b"null")
                    write_start = end
                elif end < len(data) and data[end] == _COMMA:
                    write_start = end + 1
                else:
                    write_start = end
            elif data[start] in _OPENERS:
                # Step back into the container to look for nested matches.
                i = start - 1

            state = _State.KEY
            write_end = len(data)
            depth = 0

        slashes = 0
        i += 1

    if write_start == -1 or (write_start == 0 and write_end == len(data)):
        out += data
    elif write_start < write_end:
        out += data[write_start:write_end]
    return bytes(out)