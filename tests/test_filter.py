from jsnscan.filter import filter_json

INPUT2 = "\n".join(
    [
        "",
        "\t[{",
        '\t\t"id": 1,',
        '\t\t"full_name": "Sidney St[1]roman",',
        '\t\t"email": "[email]",',
        '\t\t"__twitter_id": "2048666903444506956",',
        '\t\t"something": null,',
        '\t\t"embed": {',
        '\t\t\t"id": 8,',
        '\t\t\t"full_name": "Caroll Orn Sr.",',
        '\t\t\t"email": "[email]",',
        '\t\t\t"__twitter_id": "ABC123"',
        "\t\t}",
        "\t},",
        "\t{",
        '\t\t"m": 1,',
        '\t\t"id": 2,',
        '\t\t"full_name": "Jerry Dickinson",',
        '\t\t"email": "[email]",',
        '\t\t"__twitter_id": [{ "name": "hello" }, { "name": "world"}]',
        "\t}]",
    ]
)


def test_filter_list_with_nested_object():
    result = filter_json(INPUT2.encode(), ["id", "full_name", "embed"])
    expected = (
        b'[{"id": 1,"full_name": "Sidney St[1]roman","embed": {"id": 8,'
        b'"full_name": "Caroll Orn Sr.","email": "[email]","__twitter_id": "ABC123"}},'
        b'{"id": 2,"full_name": "Jerry Dickinson"}]'
    )
    assert result == expected


def test_filter_compact_list():
    value = (
        '[{"id":1,"customer_id":"cus_2TbMGf3cl0","object":"charge","amount":100,'
        '"amount_refunded":0,"date":"01/01/2019","application":null,'
        '"billing_details":{"address":"1 Infinity Drive","zipcode":"94024"}},   '
        '{"id":2,"customer_id":"cus_2TbMGf3cl0","object":"charge","amount":150,'
        '"amount_refunded":0,"date":"02/18/2019",'
        '"billing_details":{"address":"1 Infinity Drive","zipcode":"94024"}},'
        '{"id":3,"customer_id":"cus_2TbMGf3cl0","object":"charge","amount":150,'
        '"amount_refunded":50,"date":"03/21/2019",'
        '"billing_details":{"address":"1 Infinity Drive","zipcode":"94024"}}]'
    )
    assert filter_json(value.encode(), ["id"]) == b'[{"id":1},{"id":2},{"id":3}]'


def test_filter_single_object():
    assert filter_json(b'{"a": 1, "b": 2}', [b"a"]) == b'{"a": 1}'


def test_filter_no_matching_keys_leaves_empty_object():
    assert filter_json(b'{"a": 1}', ["z"]) == b"{}"


def test_filter_empty_input():
    assert filter_json(b"", ["a"]) == b""


def test_filter_text_and_byte_keys_agree():
    data = '{"a": true, "b": "x", "c": null}'
    assert filter_json(data, ["b", "c"]) == filter_json(data.encode(), [b"b", b"c"])
    assert filter_json(data, ["b", "c"]) == b'{"b": "x","c": null}'