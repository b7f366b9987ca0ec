import pytest

from dasel.storage.base import BasicMultiDocument, BasicSingleDocument
from dasel.storage.csv_parser import CSVDocument, CSVParser

CSV_BYTES = b"id,name\n1,Tom\n2,Jim\n"


def csv_rows():
    return [{"id": "1", "name": "Tom"}, {"id": "2", "name": "Jim"}]


def test_from_bytes():
    got = CSVParser().from_bytes(CSV_BYTES)
    assert got == CSVDocument(csv_rows(), ["id", "name"])


@pytest.mark.parametrize("data", [None, b"a,b\na,b,c", b"a,b,c\na,b"])
def test_from_bytes_error(data):
    with pytest.raises(ValueError):
        CSVParser().from_bytes(data)


def test_from_bytes_empty_is_none():
    assert CSVParser().from_bytes(b"") is None


def test_from_bytes_skips_blank_rows():
    got = CSVParser().from_bytes(b"a,b\n,\n1,2\n")
    assert got.value == [{"a": "1", "b": "2"}]


def test_to_bytes_csv_document():
    got = CSVParser().to_bytes(CSVDocument(csv_rows(), ["id", "name"]))
    assert got == CSV_BYTES


def test_to_bytes_single_document():
    got = CSVParser().to_bytes(BasicSingleDocument({"id": "1", "name": "Tom"}))
    assert got == b"id,name\n1,Tom\n"


def test_to_bytes_single_document_slice():
    got = CSVParser().to_bytes(
        BasicSingleDocument(
            [{"id": "1", "name": "Tom"}, {"id": "2", "name": "Tommy"}]
        )
    )
    assert got == b"id,name\n1,Tom\n2,Tommy\n"


def test_to_bytes_multi_document():
    got = CSVParser().to_bytes(
        BasicMultiDocument([{"id": "1", "name": "Tom"}, {"id": "2", "name": "Jim"}])
    )
    assert got == b"id,name\n1,Tom\nid,name\n2,Jim\n"


def test_to_bytes_default_doc_type():
    assert CSVParser().to_bytes(["x", "y"]) == b"[x y]\n"


def test_to_bytes_new_header_appended():
    doc = CSVDocument([{"id": "1", "name": "Tom", "age": "27"}, {"id": "2"}], ["id", "name"])
    assert CSVParser().to_bytes(doc) == b"id,name,age\n1,Tom,27\n2,,\n"


def test_to_bytes_quotes_fields():
    doc = CSVDocument([{"a": "x,y"}], ["a"])
    assert CSVParser().to_bytes(doc) == b'a\n"x,y"\n'


def test_to_bytes_unsupported_type():
    with pytest.raises(ValueError):
        CSVParser().to_bytes(BasicSingleDocument("asd"))


def test_round_trip():
    parser = CSVParser()
    assert parser.to_bytes(parser.from_bytes(CSV_BYTES)) == CSV_BYTES


def test_documents():
    rows = [{"id": 1, "name": "Tom"}, {"id": 2, "name": "Jim"}]
    doc = CSVDocument(rows, ["id", "name"])
    assert doc.documents() == [{"id": 1, "name": "Tom"}, {"id": 2, "name": "Jim"}]


def test_real_value():
    rows = [{"id": 1, "name": "Tom"}, {"id": 2, "name": "Jim"}]
    assert CSVDocument(rows, ["id", "name"]).real_value() == rows