"""Plain text output of values."""

from typing import Any

from .base import MultiDocument, ReadParser, SingleDocument, WriteParser, _format_value


class PlainParserNotImplementedError(NotImplementedError):
    """Raised when the plain parser is asked to read data."""

    def __init__(self) -> None:
        super().__init__("plain parser cannot read data")


class PlainParser(ReadParser, WriteParser):
    """Writes each document as a single line of plain text."""

    def from_bytes(self, byte_data: bytes | None) -> Any:
        raise PlainParserNotImplementedError()

    def to_bytes(self, value: Any, *args) -> bytes:
        if isinstance(value, SingleDocument):
            documents = [value.document()]
        elif isinstance(value, MultiDocument):
            documents = list(value.documents())
        else:
            documents = [value]
        return "".join(f"{_format_value(doc)}\n" for doc in documents).encode("utf-8")