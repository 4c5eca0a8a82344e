import json

import pytest

from jsnscan.clear import clear


def test_clear_source_case():
    document = b"""{
        "insert": {
            "created_at": "now",
            "test_1a": { "type1": "a", "type2": [{ "a": 2 }] },
            "name": "Hello",
            "updated_at": "now",
            "description": "World"
        },
        "user": 123,
        "tags": [1, 2, "what"]
    }"""
    expected = (
        b'{"insert":{"created_at":"","test_1a":{"type1":"","type2":[{"a":0.0}]},'
        b'"name":"","updated_at":"","description":""},"user":0.0,"tags":[]}'
    )
    assert clear(document) == expected


def test_clear_list_of_objects():
    assert clear(b'[{"a": 1}, {"b": "x"}]') == b'[{"a":0.0},{"b":""}]'


def test_clear_bool_and_null():
    assert clear(b'{"t": true, "n": null}') == b'{"t":false,"n":null}'


def test_clear_keeps_keys():
    document = {"a": {"b": [1, {"c": "x"}], "d": 4.5}, "e": None}
    result = json.loads(clear(json.dumps(document)))
    assert set(result) == {"a", "e"}
    assert set(result["a"]) == {"b", "d"}
    assert result["a"]["b"] == [{"c": ""}]


def test_clear_empty_input():
    assert clear(b"") == b""


def test_clear_top_level_string_is_invalid():
    with pytest.raises(ValueError):
        clear(b'"abc"')


def test_clear_malformed_json():
    with pytest.raises(ValueError):
        clear(b'{"a": }')


def test_clear_rejects_nan():
    with pytest.raises(ValueError):
        clear(b'{"a": NaN}')