"""Reading and writing of TOML data."""

import datetime
import math
import re
import tomllib
from typing import Any

from .base import (
    BasicSingleDocument,
    MultiDocument,
    ReadParser,
    SingleDocument,
    WriteParser,
    _format_value,
)
from .colourise import colourise
from .options import OptionKey

_BARE_KEY = re.compile(r"^[A-Za-z0-9_-]+$")
_ESCAPES = {
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
    '"': '\\"',
    "\\": "\\\\",
}


def _rfc3339(value: datetime.datetime) -> str:
    value = value.replace(microsecond=0)
    offset = value.utcoffset()
    if offset is None or offset == datetime.timedelta(0):
        return value.replace(tzinfo=None).isoformat() + "Z"
    return value.isoformat()


def _key(name: str) -> str:
    return name if _BARE_KEY.match(name) else _string(name)


def _string(text: str) -> str:
    out = []
    for char in text:
        if char in _ESCAPES:
            out.append(_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            out.append(f"\\u{ord(char):04X}")
        else:
            out.append(char)
    return '"' + "".join(out) + '"'


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "nan"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        text = repr(value)
        return text if any(c in text for c in ".en") else text + ".0"
    if isinstance(value, datetime.datetime):
        return _rfc3339(value)
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, list):
        return "[" + ", ".join(_scalar(item) for item in value if item is not None) + "]"
    if isinstance(value, dict):
        inner = ", ".join(
            f"{_key(k)} = {_scalar(v)}" for k, v in sorted(value.items()) if v is not None
        )
        return "{ " + inner + " }" if inner else "{}"
    return _string(str(value))


def _is_table_array(value: Any) -> bool:
    return isinstance(value, list) and bool(value) and all(
        isinstance(item, dict) for item in value
    )


def _write_table(table: dict, path: list[str], indent: str, lines: list[str]) -> None:
    value_indent = indent * len(path)
    header_indent = indent * max(len(path), 1)
    simple = []
    nested = []
    for key in sorted(table):
        item = table[key]
        if item is None:
            continue
        if isinstance(item, dict) or _is_table_array(item):
            nested.append(key)
        else:
            simple.append(key)

    for key in simple:
        lines.append(f"{value_indent}{_key(key)} = {_scalar(table[key])}")

    for key in nested:
        item = table[key]
        sub_path = path + [key]
        name = ".".join(_key(part) for part in sub_path)
        header_pad = header_indent if path else ""
        entries = item if isinstance(item, list) else [item]
        brackets = ("[[", "]]") if isinstance(item, list) else ("[", "]")
        for entry in entries:
            if lines:
                lines.append("")
            lines.append(f"{header_pad}{brackets[0]}{name}{brackets[1]}")
            _write_table(entry, sub_path, indent, lines)


def _encode(document: Any, indent: str) -> str:
    if not isinstance(document, dict):
        return f"{_format_value(document)}\n"
    lines: list[str] = []
    _write_table(document, [], indent, lines)
    return "".join(line + "\n" for line in lines)


class TOMLParser(ReadParser, WriteParser):
    """Parser for TOML data."""

    def from_bytes(self, byte_data: bytes | None) -> Any:
        try:
            data = tomllib.loads((byte_data or b"").decode("utf-8"))
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
            raise ValueError(f"could not unmarshal data: {exc}") from exc
        return BasicSingleDocument(data)

    def to_bytes(self, value: Any, *args) -> bytes:
        indent = "  "
        use_colour = False
        for option in args:
            match option.key:
                case OptionKey.INDENT if isinstance(option.value, str):
                    indent = option.value
                case OptionKey.COLOURISE if isinstance(option.value, bool):
                    use_colour = option.value

        if isinstance(value, SingleDocument):
            output = _encode(value.document(), indent)
        elif isinstance(value, MultiDocument):
            output = "".join(_encode(doc, indent) for doc in value.documents())
        elif isinstance(value, datetime.datetime):
            output = f"{_rfc3339(value)}\n"
        else:
            output = _encode(value, indent)

        if use_colour:
            output = colourise(output, "toml")
        return output.encode("utf-8")