# jsnscan

Small, dependency-free helpers that work directly on the bytes of a JSON
document. `get`, `filter_json`, `strip` and `replace` scan the text once with
a simple state machine instead of building an object tree, so they keep the
original formatting of the values they hand back and put up with slightly
malformed input. `clear` and `tree` check that their input is valid JSON.

Every function accepts `bytes`, `bytearray` or `str` (text is encoded as
UTF-8); keys and paths may likewise be given as `bytes` or `str`.

## Installation

```
pip install jsnscan
```

## What it offers

| Function | Module | Purpose |
| --- | --- | --- |
| `get(b, keys)` | `jsnscan.get` | Find every value stored under any of the given keys, at any depth, including inside lists of objects. Returns a list of `Field` items (frozen dataclass with `key` and raw `value` bytes), in document order. |
| `value(b)` | `jsnscan.get` | Clean up a raw value: strips the quotes from a string, returns `None` for objects and arrays, returns numbers and literals unchanged. Raises `ValueError` on empty input. |
| `filter_json(b, keys)` | `jsnscan.filter` | Keep only the given keys of a top-level object, or of each object in a top-level list. Kept values are copied as they are, minus newlines and tabs. |
| `strip(b, path)` | `jsnscan.strip` | Return the object or array reached by following a key path such as `[b"data", b"users"]`; the input is returned unchanged when the path cannot be followed. Raises `ValueError` for an empty path. |
| `replace(b, from_fields, to_fields)` | `jsnscan.replace` | Swap each key/value pair whose key and raw value equal a `Field` in `from_fields` for the `Field` at the same position in `to_fields`. An empty replacement value is written as `null`; an empty replacement key removes the pair. Raises `ValueError` when the two lists differ in length. |
| `clear(b)` | `jsnscan.clear` | Return the document compacted with its shape kept: object values become `""`, `0.0`, `false` or `null` by type, and scalars held directly in a list are dropped. |
| `tree(v)` | `jsnscan.tree` | Split the first object of a document (or the first item of a top-level list) into a `dict` of key to raw JSON bytes, and report whether the document was a list. A leading `null` gives an empty `dict`. |

## Example

```python
from jsnscan.get import get, value
from jsnscan.filter import filter_json
from jsnscan.strip import strip
from jsnscan.clear import clear

doc = b'{"data": {"users": [{"id": 1, "email": "ann@example.com"}]}}'

for field in get(doc, [b"email"]):
    print(field.key, value(field.value))        # b'email' b'ann@example.com'

print(strip(doc, [b"data", b"users"]))          # b'[{"id": 1, "email": "ann@example.com"}]'

print(filter_json(b'[{"id":1,"name":"a"},{"id":2,"name":"b"}]', ["id"]))
# b'[{"id":1},{"id":2}]'

print(clear(b'{"user": 123, "tags": [1, 2, "what"]}'))
# b'{"user":0.0,"tags":[]}'
```

## Errors

Problems are raised as `ValueError`: invalid JSON given to `clear` or `tree`
(or `tree` finding no object), mismatched or malformed input to `replace`, an
empty value for `value` and an empty path for `strip`.

## What it does not do

The scanning functions do not validate JSON and do not decode values into
Python objects; they return raw bytes. Use the standard `json` module when a
fully parsed document is needed.

## Running the tests

```
pip install -e ".[test]"
pytest
```