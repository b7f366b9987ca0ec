"""Syntax highlighting of output for terminals."""

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import TextLexer, get_lexer_by_name, guess_lexer
from pygments.util import ClassNotFound

COLOURISE_STYLE = "solarized-dark"


def _lexer_for(content: str, name: str):
    try:
        return get_lexer_by_name(name, stripnl=False)
    except ClassNotFound:
        pass
    try:
        return guess_lexer(content, stripnl=False)
    except ClassNotFound:
        return TextLexer(stripnl=False)


def colourise(content: str, lexer: str) -> str:
    """Return ``content`` highlighted as ``lexer`` with terminal escape codes."""
    formatter = Terminal256Formatter(style=COLOURISE_STYLE)
    return highlight(content, _lexer_for(content, lexer), formatter)