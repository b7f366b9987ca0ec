"""Reading and writing of JSON, including streams of several documents."""

import datetime
import json
from typing import Any

from .base import (
    BasicMultiDocument,
    BasicSingleDocument,
    MultiDocument,
    ReadParser,
    SingleDocument,
    WriteParser,
)
from .colourise import colourise
from .options import OptionKey

_WHITESPACE = " \t\n\r"
_ALWAYS_ESCAPED = str.maketrans({"\u2028": "\\u2028", "\u2029": "\\u2029"})
_HTML_ESCAPED = str.maketrans(
    {
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
    }
)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON value {name}")


def _default(value: Any) -> Any:
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    raise TypeError(f"object of type {type(value).__name__} is not JSON serializable")


def _encode(document: Any, indent: str, escape_html: bool) -> str:
    separators = (",", ": ") if indent else (",", ":")
    text = json.dumps(
        document,
        indent=indent or None,
        separators=separators,
        sort_keys=True,
        ensure_ascii=False,
        allow_nan=False,
        default=_default,
    )
    return text.translate(_HTML_ESCAPED if escape_html else _ALWAYS_ESCAPED) + "\n"


class JSONParser(ReadParser, WriteParser):
    """Parser for JSON data."""

    def from_bytes(self, byte_data: bytes | None) -> Any:
        try:
            text = (byte_data or b"").decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError(f"could not unmarshal data: {exc}") from exc

        decoder = json.JSONDecoder(parse_constant=_reject_constant)
        documents = []
        position = 0
        while True:
            while position < len(text) and text[position] in _WHITESPACE:
                position += 1
            if position >= len(text):
                break
            try:
                document, position = decoder.raw_decode(text, position)
            except ValueError as exc:
                raise ValueError(f"could not unmarshal data: {exc}") from exc
            documents.append(document)

        match documents:
            case []:
                return None
            case [single]:
                return BasicSingleDocument(single)
            case _:
                return BasicMultiDocument(documents)

    def to_bytes(self, value: Any, *args) -> bytes:
        indent = "  "
        pretty_print = True
        use_colour = False
        escape_html = True

        for option in args:
            match option.key:
                case OptionKey.INDENT if isinstance(option.value, str):
                    indent = option.value
                case OptionKey.PRETTY_PRINT if isinstance(option.value, bool):
                    pretty_print = option.value
                case OptionKey.COLOURISE if isinstance(option.value, bool):
                    use_colour = option.value
                case OptionKey.ESCAPE_HTML if isinstance(option.value, bool):
                    escape_html = option.value

        if not pretty_print:
            indent = ""

        chunks = []
        if isinstance(value, SingleDocument):
            try:
                chunks.append(_encode(value.document(), indent, escape_html))
            except (TypeError, ValueError) as exc:
                raise ValueError(f"could not encode single document: {exc}") from exc
        elif isinstance(value, MultiDocument):
            for index, document in enumerate(value.documents()):
                try:
                    chunks.append(_encode(document, indent, escape_html))
                except (TypeError, ValueError) as exc:
                    raise ValueError(
                        f"could not encode multi document [{index}]: {exc}"
                    ) from exc
        else:
            try:
                chunks.append(_encode(value, indent, escape_html))
            except (TypeError, ValueError) as exc:
                raise ValueError(f"could not encode default document type: {exc}") from exc

        output = "".join(chunks)
        if use_colour:
            output = colourise(output, "json")
        return output.encode("utf-8")