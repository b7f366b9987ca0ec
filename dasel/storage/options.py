"""Options that change how parsers read and write data."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class OptionKey(StrEnum):
    """Keys identifying a read/write option."""

    INDENT = "indent"
    PRETTY_PRINT = "prettyPrint"
    COLOURISE = "colourise"
    ESCAPE_HTML = "escapeHtml"


@dataclass(frozen=True)
class ReadWriteOption:
    """A single option passed to a parser."""

    key: OptionKey
    value: Any


def indent_option(indent: str) -> ReadWriteOption:
    """Option that sets the indent used when writing."""
    return ReadWriteOption(OptionKey.INDENT, indent)


def pretty_print_option(enabled: bool) -> ReadWriteOption:
    """Option that enables or disables pretty printing."""
    return ReadWriteOption(OptionKey.PRETTY_PRINT, enabled)


def colourise_option(enabled: bool) -> ReadWriteOption:
    """Option that enables or disables colourised output."""
    return ReadWriteOption(OptionKey.COLOURISE, enabled)


def escape_html_option(enabled: bool) -> ReadWriteOption:
    """Option that enables or disables HTML escaping."""
    return ReadWriteOption(OptionKey.ESCAPE_HTML, enabled)