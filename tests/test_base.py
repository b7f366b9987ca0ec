import pytest

from dasel.storage.base import (
    BasicMultiDocument,
    BasicSingleDocument,
    MultiDocument,
    ReadParser,
    SingleDocument,
    UnknownParserError,
    WriteParser,
)


def test_unknown_parser_error_message():
    error = UnknownParserError("x")
    assert str(error) == "unknown parser: x"
    assert error.parser == "x"


def test_unknown_parser_error_with_extension():
    error = UnknownParserError(".txt")
    assert isinstance(error, Exception)
    assert error.parser == ".txt"
    assert str(error) == "unknown parser: .txt"


def test_basic_single_document():
    value = {"name": "Tom"}
    doc = BasicSingleDocument(value)
    assert doc.real_value() is value
    assert doc.document() is value
    assert doc.original_required() is True
    assert isinstance(doc, SingleDocument)


def test_basic_multi_document():
    values = [{"name": "Tom"}, {"name": "Jim"}]
    doc = BasicMultiDocument(values)
    assert doc.real_value() is values
    assert doc.documents() is values
    assert doc.original_required() is True
    assert isinstance(doc, MultiDocument)


def test_documents_compare_by_value():
    assert BasicSingleDocument({"a": 1}) == BasicSingleDocument({"a": 1})
    assert BasicMultiDocument([1, 2]) == BasicMultiDocument([1, 2])
    assert BasicSingleDocument([1, 2]) != BasicMultiDocument([1, 2])


@pytest.mark.parametrize("abstract", [ReadParser, WriteParser, SingleDocument, MultiDocument])
def test_interfaces_cannot_be_instantiated(abstract):
    with pytest.raises(TypeError):
        abstract()