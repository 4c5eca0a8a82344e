"""Split the top level of a JSON object into raw member values."""

from __future__ import annotations

import json
from json.decoder import scanstring

from jsnscan.clear import _reject_constant, _skip_whitespace
from jsnscan.get import _to_bytes


def tree(v: bytes | bytearray | str) -> tuple[dict[str, bytes], bool]:
    """Return the members of the first object in ``v`` and whether it was in a list.

    ``v`` is an object, or a list whose first item is an object. Each member
    value comes back as its raw JSON bytes. A leading list is recognised only
    when nothing but spaces precede it. Raises ValueError if no object is
    found or the JSON is invalid.
    """
    text = _to_bytes(v).decode("utf-8")
    stripped = text.lstrip(" ")
    is_array = stripped.startswith("[")

    pos = len(text) - len(stripped) + 1 if is_array else 0
    pos = _skip_whitespace(text, pos)
    if pos >= len(text):
        raise ValueError("unexpected end of JSON input")
    if text.startswith("null", pos):
        return {}, is_array
    if text[pos] != "{":
        raise ValueError(f"expected a JSON object at offset {pos}")

    decoder = json.JSONDecoder(parse_constant=_reject_constant)
    fields: dict[str, bytes] = {}
    pos = _skip_whitespace(text, pos + 1)
    if text.startswith("}", pos):
        return fields, is_array

    while True:
        if not text.startswith('"', pos):
            raise ValueError(f"expected an object key at offset {pos}")
        key, pos = scanstring(text, pos + 1)
        pos = _skip_whitespace(text, pos)
        if not text.startswith(":", pos):
            raise ValueError(f"expected ':' at offset {pos}")
        pos = _skip_whitespace(text, pos + 1)
        _, end = decoder.raw_decode(text, pos)
        fields[key] = text[pos:end].encode("utf-8")
        pos = _skip_whitespace(text, end)
        if text.startswith(",", pos):
            pos = _skip_whitespace(text, pos + 1)
        elif text.startswith("}", pos):
            return fields, is_array
        else:
            raise ValueError(f"expected ',' or '}}' at offset {pos}")