import pytest

from dasel.storage.base import BasicMultiDocument, BasicSingleDocument
from dasel.storage.plain import PlainParser, PlainParserNotImplementedError


def test_from_bytes_raises():
    with pytest.raises(PlainParserNotImplementedError):
        PlainParser().from_bytes(None)


def test_to_bytes_basic():
    assert PlainParser().to_bytes("asd") == b"asd\n"


def test_to_bytes_single_document():
    assert PlainParser().to_bytes(BasicSingleDocument("asd")) == b"asd\n"


def test_to_bytes_multi_document():
    assert PlainParser().to_bytes(BasicMultiDocument(["asd", "123"])) == b"asd\n123\n"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (["x", "y"], b"[x y]\n"),
        (None, b"<nil>\n"),
        (True, b"true\n"),
        (False, b"false\n"),
        (5, b"5\n"),
        (1.5, b"1.5\n"),
        (1.0, b"1\n"),
        (100000.0, b"100000\n"),
        (1000000.0, b"1e+06\n"),
        (0.0001, b"0.0001\n"),
        ({"b": 2, "a": "x"}, b"map[a:x b:2]\n"),
    ],
)
def test_to_bytes_value_formatting(value, expected):
    assert PlainParser().to_bytes(value) == expected