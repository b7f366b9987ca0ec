"""Splitting of selector strings into their individual parts."""

from dataclasses import dataclass

_OPENING = "(["
_CLOSING = ")]"
_COMPARISON_CHARS = "<>=!"


class DynamicSelectorBracketMismatchError(ValueError):
    """Raised when a dynamic selector has unbalanced brackets."""

    def __init__(self) -> None:
        super().__init__("dynamic selector bracket mismatch")


@dataclass
class DynamicSelectorParts:
    """The key, comparison operator and value of one dynamic selector group."""

    key: str = ""
    comparison: str = ""
    value: str = ""


def extract_next_selector(text: str) -> tuple[str, int]:
    """Return the next selector in ``text`` and how many UTF-8 bytes it spans.

    A backslash escapes the following character. Dots inside brackets do not
    end the selector.
    """
    depth = 0
    escaped = False
    chars: list[str] = []
    read = 0
    for position, char in enumerate(text):
        size = len(char.encode("utf-8", "surrogatepass"))
        if escaped:
            escaped = False
            chars.append(char)
            read += size
            continue

        if char in _OPENING:
            depth += 1
        elif char in _CLOSING:
            depth -= 1

        if char == "\\":
            escaped = True
            read += size
            continue

        if depth == 0 and char == "." and position != 0:
            break
        chars.append(char)
        read += size
    return "".join(chars), read


def dynamic_selector_to_groups(selector: str) -> list[str]:
    """Split a dynamic selector such as ``(a=1)(b=2)`` into its groups."""
    depth = 0
    current: list[str] = []
    groups: list[str] = []
    for position, char in enumerate(selector):
        if char == "(":
            if depth > 0:
                current.append(char)
            else:
                current = []
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                groups.append("".join(current))
                current = []
            else:
                current.append(char)
        elif char == "." and depth == 0 and position != 0:
            return groups
        else:
            current.append(char)
    if depth != 0:
        raise DynamicSelectorBracketMismatchError()
    return groups


def find_dynamic_selector_parts(selector: str) -> DynamicSelectorParts:
    """Split one dynamic selector group into key, comparison and value."""
    depth = 0
    key: list[str] = []
    comparison: list[str] = []
    value: list[str] = []

    for char in selector:
        target = value if comparison else key
        if char == "(":
            target.append(char)
            depth += 1
        elif char == ")":
            depth -= 1
            target.append(char)
        elif depth == 0 and char in _COMPARISON_CHARS:
            comparison.append(char)
        else:
            target.append(char)

    return DynamicSelectorParts(
        key="".join(key),
        comparison="".join(comparison),
        value="".join(value),
    )