"""Reading and writing of XML as nested maps.

Attributes are stored under keys prefixed with ``-``, mixed text under
``#text`` and repeated elements as lists. Character entities are kept as
they appear in the source and written back unchanged.
"""

import codecs
import re
import xml.etree.ElementTree as ET
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

_DECLARATION = re.compile(rb"^\s*<\?xml.*?\?>", re.DOTALL)
_ENCODING = re.compile(rb"""encoding\s*=\s*["']([^"']+)["']""")
_LATIN1_ALIASES = {"latin1", "latin-1", "l1", "iso-8859-1", "iso8859-1"}


def _decode(data: bytes) -> str:
    encoding = None
    match = _DECLARATION.match(data)
    if match:
        found = _ENCODING.search(match.group(0))
        if found:
            encoding = found.group(1).decode("ascii").strip().lower()
        data = data[match.end():]
    if encoding is None or encoding in ("utf-16", "utf16"):
        if data.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
            encoding = "utf-16"
        else:
            encoding = encoding or "utf-8"
    if encoding in _LATIN1_ALIASES:
        encoding = "cp1252"
    try:
        text = data.decode(encoding)
    except (LookupError, UnicodeDecodeError) as exc:
        raise ValueError(f"could not unmarshal data: {exc}") from exc
    return text.lstrip("\ufeff")


def _element_value(element: ET.Element) -> Any:
    text_parts = [(element.text or "").strip()]
    text_parts += [(child.tail or "").strip() for child in element]
    text = "".join(text_parts)
    children = list(element)
    if not element.attrib and not children:
        return text

    result: dict[str, Any] = {f"-{k}": v for k, v in element.attrib.items()}
    for child in children:
        value = _element_value(child)
        if child.tag in result:
            existing = result[child.tag]
            if isinstance(existing, list):
                existing.append(value)
            else:
                result[child.tag] = [existing, value]
        else:
            result[child.tag] = value
    if text:
        result["#text"] = text
    return result


def _write_element(tag: str, value: Any, depth: int, lines: list[str]) -> None:
    pad = "  " * depth
    if isinstance(value, list):
        for item in value:
            _write_element(tag, item, depth, lines)
        return
    if isinstance(value, dict):
        attrs = "".join(
            f' {key[1:]}="{_format_value(item)}"'
            for key, item in sorted(value.items())
            if key.startswith("-")
        )
        text = value.get("#text")
        children = sorted(
            key for key in value if not key.startswith("-") and key != "#text"
        )
        if not children:
            if text is None or text == "":
                lines.append(f"{pad}<{tag}{attrs}/>")
            else:
                lines.append(f"{pad}<{tag}{attrs}>{_format_value(text)}</{tag}>")
            return
        lines.append(f"{pad}<{tag}{attrs}>")
        if text not in (None, ""):
            lines.append(f"{pad}  {_format_value(text)}")
        for key in children:
            _write_element(key, value[key], depth + 1, lines)
        lines.append(f"{pad}</{tag}>")
        return
    if value is None or value == "":
        lines.append(f"{pad}<{tag}/>")
    else:
        lines.append(f"{pad}<{tag}>{_format_value(value)}</{tag}>")


def _encode(value: Any) -> str:
    if not isinstance(value, dict):
        return f"{_format_value(value)}\n"
    lines: list[str] = []
    for key in sorted(value):
        _write_element(key, value[key], 0, lines)
    return "\n".join(lines) + "\n"


class XMLParser(ReadParser, WriteParser):
    """Parser for XML data."""

    def from_bytes(self, byte_data: bytes | None) -> Any:
        if byte_data is None:
            raise ValueError("cannot parse nil xml data")
        if not byte_data.strip():
            return None
        text = _decode(byte_data).replace("&", "&amp;")
        try:
            root = ET.fromstring(text)
        except ET.ParseError as exc:
            raise ValueError(f"could not unmarshal data: {exc}") from exc
        return BasicSingleDocument({root.tag: _element_value(root)})

    def to_bytes(self, value: Any, *args) -> bytes:
        use_colour = False
        for option in args:
            if option.key == OptionKey.COLOURISE and isinstance(option.value, bool):
                use_colour = option.value

        if isinstance(value, SingleDocument):
            output = _encode(value.document())
        elif isinstance(value, MultiDocument):
            output = "".join(_encode(doc) for doc in value.documents())
        else:
            output = _encode(value)

        if use_colour:
            output = colourise(output, "xml")
        return output.encode("utf-8")