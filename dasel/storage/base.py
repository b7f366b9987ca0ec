"""Parser interfaces and the document containers parsers produce."""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any


class UnknownParserError(ValueError):
    """Raised when a parser name or file extension is not recognised."""

    def __init__(self, parser: str) -> None:
        super().__init__(f"unknown parser: {parser}")
        self.parser = parser


class ReadParser(ABC):
    """Converts bytes to data."""

    @abstractmethod
    def from_bytes(self, byte_data: bytes | None) -> Any:
        """Return the data represented by ``byte_data``."""


class WriteParser(ABC):
    """Converts data to bytes."""

    @abstractmethod
    def to_bytes(self, value: Any, *args) -> bytes:
        """Return bytes representing ``value``; ``args`` are write options."""


class SingleDocument(ABC):
    """A parser result holding exactly one document."""

    @abstractmethod
    def document(self) -> Any:
        """Return the document to write to output."""


class MultiDocument(ABC):
    """A parser result holding several documents."""

    @abstractmethod
    def documents(self) -> list[Any]:
        """Return the documents to write to output."""


@dataclass
class BasicSingleDocument(SingleDocument):
    """A file that holds a single document."""

    value: Any = None

    def real_value(self) -> Any:
        return self.value

    def document(self) -> Any:
        return self.value

    def original_required(self) -> bool:
        return True


@dataclass
class BasicMultiDocument(MultiDocument):
    """A file that holds several documents."""

    values: list[Any] = field(default_factory=list)

    def real_value(self) -> list[Any]:
        return self.values

    def documents(self) -> list[Any]:
        return self.values

    def original_required(self) -> bool:
        return True


def _format_float(number: float) -> str:
    """Shortest representation, switching to exponent form outside 1e-4..1e6."""
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"
    if number == 0:
        return "-0" if math.copysign(1.0, number) < 0 else "0"

    sign, digit_tuple, exponent = Decimal(repr(number)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    point = len(digits) + exponent
    prefix = "-" if sign else ""
    exp10 = point - 1

    if exp10 < -4 or exp10 >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "-" if exp10 < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exp10):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return f"{prefix}{digits}{'0' * (point - len(digits))}"
    return f"{prefix}{digits[:point]}.{digits[point:]}"


def _sorted_items(mapping: dict) -> list[tuple[Any, Any]]:
    try:
        return sorted(mapping.items())
    except TypeError:
        return sorted(mapping.items(), key=lambda item: str(item[0]))


def _format_value(value: Any) -> str:
    """Render a value the way plain-text output shows it."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (bytes, bytearray)):
        return _format_value(list(value))
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_format_value(item) for item in value) + "]"
    if isinstance(value, dict):
        inner = " ".join(
            f"{_format_value(key)}:{_format_value(item)}"
            for key, item in _sorted_items(value)
        )
        return f"map[{inner}]"
    return str(value)