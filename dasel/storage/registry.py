"""Lookup of parsers by name or file extension, and loading and writing data."""

import io
import os
from typing import Any, BinaryIO, TextIO

from .base import ReadParser, UnknownParserError, WriteParser
from .csv_parser import CSVParser
from .json_parser import JSONParser
from .plain import PlainParser
from .toml_parser import TOMLParser
from .xml_parser import XMLParser
from .yaml_parser import YAMLParser

_read_by_extension: dict[str, ReadParser] = {}
_write_by_extension: dict[str, WriteParser] = {}
_read_by_name: dict[str, ReadParser] = {}
_write_by_name: dict[str, WriteParser] = {}


def _register_read(names: list[str], extensions: list[str], parser: ReadParser) -> None:
    _read_by_name.update(dict.fromkeys(names, parser))
    _read_by_extension.update(dict.fromkeys(extensions, parser))


def _register_write(names: list[str], extensions: list[str], parser: WriteParser) -> None:
    _write_by_name.update(dict.fromkeys(names, parser))
    _write_by_extension.update(dict.fromkeys(extensions, parser))


def _register_defaults() -> None:
    formats = [
        (["json"], [".json"], JSONParser()),
        (["yaml", "yml"], [".yaml", ".yml"], YAMLParser()),
        (["toml"], [".toml"], TOMLParser()),
        (["xml"], [".xml"], XMLParser()),
        (["csv"], [".csv"], CSVParser()),
    ]
    for names, extensions, parser in formats:
        _register_read(names, extensions, parser)
        _register_write(names, extensions, parser)
    _register_write(["-", "plain"], [], PlainParser())


_register_defaults()


def _extension(filename: str) -> str:
    """Return the lower-cased extension of the last path element, dot included."""
    name = filename.rsplit("/", 1)[-1]
    if os.sep != "/":
        name = name.rsplit(os.sep, 1)[-1]
    dot = name.rfind(".")
    return name[dot:].lower() if dot >= 0 else ""


def new_read_parser_from_filename(filename: str) -> ReadParser:
    """Return the read parser matching the extension of ``filename``."""
    ext = _extension(filename)
    try:
        return _read_by_extension[ext]
    except KeyError:
        raise UnknownParserError(ext) from None


def new_read_parser_from_string(parser: str) -> ReadParser:
    """Return the read parser registered under ``parser``."""
    try:
        return _read_by_name[parser]
    except KeyError:
        raise UnknownParserError(parser) from None


def new_write_parser_from_filename(filename: str) -> WriteParser:
    """Return the write parser matching the extension of ``filename``."""
    ext = _extension(filename)
    try:
        return _write_by_extension[ext]
    except KeyError:
        raise UnknownParserError(ext) from None


def new_write_parser_from_string(parser: str) -> WriteParser:
    """Return the write parser registered under ``parser``."""
    try:
        return _write_by_name[parser]
    except KeyError:
        raise UnknownParserError(parser) from None


def load_from_file(filename: str, parser: ReadParser) -> Any:
    """Load data from the file at ``filename`` using ``parser``."""
    try:
        handle = open(filename, "rb")
    except OSError as exc:
        raise OSError(f"could not open file: {exc}") from exc
    with handle:
        return load(parser, handle)


def load(parser: ReadParser, reader: BinaryIO | TextIO) -> Any:
    """Read everything from ``reader`` and parse it with ``parser``."""
    try:
        data = reader.read()
    except Exception as exc:
        raise OSError(f"could not read data: {exc}") from exc
    if isinstance(data, str):
        data = data.encode("utf-8")
    return parser.from_bytes(data)


def write(
    parser: WriteParser,
    value: Any,
    original_value: Any,
    writer: BinaryIO | TextIO,
    *args,
) -> None:
    """Convert ``value`` with ``parser`` and write the result to ``writer``.

    If ``original_value`` says the original is required, it is written instead
    of ``value``. Extra arguments are write options passed to the parser.
    """
    original_required = getattr(original_value, "original_required", None)
    if callable(original_required) and original_required():
        value = original_value
    try:
        data = parser.to_bytes(value, *args)
    except Exception as exc:
        raise ValueError(f"could not get byte data for file: {exc}") from exc
    try:
        if isinstance(writer, io.TextIOBase):
            writer.write(data.decode("utf-8"))
        else:
            writer.write(data)
    except Exception as exc:
        raise OSError(f"could not write data: {exc}") from exc