import pytest

from dasel.storage.base import BasicMultiDocument, BasicSingleDocument
from dasel.storage.colourise import colourise
from dasel.storage.json_parser import JSONParser
from dasel.storage.options import (
    colourise_option,
    escape_html_option,
    indent_option,
    pretty_print_option,
)

JSON_BYTES = b'{\n  "name": "Tom"\n}\n'
JSON_MAP = {"name": "Tom"}

JSON_BYTES_MULTI = b'{\n  "name": "Tom"\n}\n{\n  "name": "Ellis"\n}\n'
JSON_MAP_MULTI = [{"name": "Tom"}, {"name": "Ellis"}]

JSON_BYTES_MULTI_MIXED = (
    b'{\n  "name": "Tom",\n  "other": true\n}\n{\n  "name": "Ellis"\n}\n'
)
JSON_MAP_MULTI_MIXED = [{"name": "Tom", "other": True}, {"name": "Ellis"}]

YAML_BYTES = b"name: Tom\nnumbers:\n- 1\n- 2\n"


def test_from_bytes_valid():
    assert JSONParser().from_bytes(JSON_BYTES) == BasicSingleDocument(JSON_MAP)


def test_from_bytes_valid_multi_document():
    assert JSONParser().from_bytes(JSON_BYTES_MULTI) == BasicMultiDocument(JSON_MAP_MULTI)


def test_from_bytes_valid_multi_document_mixed():
    got = JSONParser().from_bytes(JSON_BYTES_MULTI_MIXED)
    assert got == BasicMultiDocument(JSON_MAP_MULTI_MIXED)


def test_from_bytes_concatenated_without_whitespace():
    got = JSONParser().from_bytes(b'{"people": []}{"people": []}')
    assert got == BasicMultiDocument([{"people": []}, {"people": []}])


def test_from_bytes_empty():
    assert JSONParser().from_bytes(b"") is None


def test_from_bytes_error():
    with pytest.raises(ValueError, match="could not unmarshal data"):
        JSONParser().from_bytes(YAML_BYTES)


def test_to_bytes_valid():
    assert JSONParser().to_bytes(JSON_MAP) == JSON_BYTES


def test_to_bytes_valid_single():
    assert JSONParser().to_bytes(BasicSingleDocument(JSON_MAP)) == JSON_BYTES


def test_to_bytes_no_pretty_print():
    got = JSONParser().to_bytes(BasicSingleDocument(JSON_MAP), pretty_print_option(False))
    assert got == b'{"name":"Tom"}\n'


def test_to_bytes_colourise():
    got = JSONParser().to_bytes(BasicSingleDocument(JSON_MAP), colourise_option(True))
    assert got == colourise('{\n  "name": "Tom"\n}\n', "json").encode("utf-8")


def test_to_bytes_custom_indent():
    got = JSONParser().to_bytes(BasicSingleDocument(JSON_MAP), indent_option("   "))
    assert got == b'{\n   "name": "Tom"\n}\n'


def test_to_bytes_valid_multi():
    assert JSONParser().to_bytes(BasicMultiDocument(JSON_MAP_MULTI)) == JSON_BYTES_MULTI


def test_to_bytes_valid_multi_mixed():
    got = JSONParser().to_bytes(BasicMultiDocument(JSON_MAP_MULTI_MIXED))
    assert got == JSON_BYTES_MULTI_MIXED


def test_to_bytes_sorts_keys():
    got = JSONParser().to_bytes({"rank": 5, "number": "five"}, pretty_print_option(False))
    assert got == b'{"number":"five","rank":5}\n'


def test_to_bytes_empty_collections():
    assert JSONParser().to_bytes({}) == b"{}\n"
    assert JSONParser().to_bytes([]) == b"[]\n"


def test_to_bytes_escape_html_on_by_default():
    got = JSONParser().to_bytes({"user": "Tom <tom@example.com>"})
    assert got == b'{\n  "user": "Tom \\u003ctom@example.com\\u003e"\n}\n'


def test_to_bytes_escape_html_off():
    got = JSONParser().to_bytes(
        {"user": "Tom <tom@example.com>"}, escape_html_option(False)
    )
    assert got == b'{\n  "user": "Tom <tom@example.com>"\n}\n'


def test_round_trip():
    parser = JSONParser()
    assert parser.from_bytes(parser.to_bytes(BasicMultiDocument(JSON_MAP_MULTI))) == (
        BasicMultiDocument(JSON_MAP_MULTI)
    )


def test_to_bytes_unencodable_value():
    with pytest.raises(ValueError, match="could not encode single document"):
        JSONParser().to_bytes(BasicSingleDocument({"x": object()}))