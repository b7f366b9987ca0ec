"""Reading and writing of CSV data."""

import csv
import io
from dataclasses import dataclass, field
from typing import Any

from .base import MultiDocument, ReadParser, SingleDocument, WriteParser, _format_value


@dataclass
class CSVDocument(MultiDocument):
    """A CSV file: its rows plus the headers in their original order."""

    value: list[dict[str, Any]] = field(default_factory=list)
    headers: list[str] = field(default_factory=list)

    def real_value(self) -> list[dict[str, Any]]:
        return self.value

    def documents(self) -> list[Any]:
        return list(self.value)

    def original_required(self) -> bool:
        return True


def _to_csv_document(value: Any) -> CSVDocument:
    if isinstance(value, dict):
        return CSVDocument([value], sorted(value))
    if isinstance(value, list):
        rows = [item for item in value if isinstance(item, dict)]
        headers = sorted({key for row in rows for key in row})
        return CSVDocument(rows, headers)
    raise ValueError(f"CSVParser.to_bytes cannot handle type {type(value).__name__}")


def _quote_field(text: str) -> str:
    needs_quotes = text != "" and (
        text == "\\."
        or any(char in text for char in ',"\r\n')
        or text[0].isspace()
    )
    if not needs_quotes:
        return text
    return '"' + text.replace('"', '""') + '"'


def _csv_line(fields: list[str]) -> str:
    return ",".join(_quote_field(item) for item in fields) + "\n"


class CSVParser(ReadParser, WriteParser):
    """Parser for CSV data with a header row."""

    def from_bytes(self, byte_data: bytes | None) -> Any:
        if byte_data is None:
            raise ValueError("could not read csv file: no data")
        try:
            text = byte_data.decode("utf-8")
            records = [row for row in csv.reader(io.StringIO(text)) if row]
        except (UnicodeDecodeError, csv.Error) as exc:
            raise ValueError(f"could not read csv file: {exc}") from exc
        if not records:
            return None

        headers = records[0]
        for line, row in enumerate(records[1:], start=2):
            if len(row) != len(headers):
                raise ValueError(
                    f"could not read csv file: record on line {line}: "
                    "wrong number of fields"
                )

        rows = [
            dict(zip(headers, row))
            for row in records[1:]
            if any(cell != "" for cell in row)
        ]
        return CSVDocument(rows, list(headers))

    def to_bytes(self, value: Any, *args) -> bytes:
        if isinstance(value, CSVDocument):
            docs = [value]
        elif isinstance(value, SingleDocument):
            docs = [_to_csv_document(value.document())]
        elif isinstance(value, MultiDocument):
            docs = [_to_csv_document(item) for item in value.documents()]
        else:
            return f"{_format_value(value)}\n".encode("utf-8")

        return "".join(self._write_document(doc) for doc in docs).encode("utf-8")

    @staticmethod
    def _write_document(doc: CSVDocument) -> str:
        for row in doc.value:
            for key in row:
                if key not in doc.headers:
                    doc.headers.append(key)
        if not doc.value:
            return ""
        lines = [_csv_line(doc.headers)]
        for row in doc.value:
            lines.append(
                _csv_line(
                    [_format_value(row[h]) if h in row else "" for h in doc.headers]
                )
            )
        return "".join(lines)