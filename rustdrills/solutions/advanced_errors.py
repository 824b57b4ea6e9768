"""Error types that wrap lower-level parse errors: positive integers and climates."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from .error_handling import (
    PositiveNonzeroInteger,
    _parse_int,
    parse_pos_nonzero,
)

_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def _parse_float(text: str) -> float:
    """Parse a floating-point literal; raise ValueError on failure."""
    if not text:
        raise ValueError("cannot parse float from empty string")
    if not _FLOAT_RE.fullmatch(text):
        raise ValueError("invalid float literal")
    return float(text)


def positive_from_str(text: str) -> PositiveNonzeroInteger:
    """Parse text into a positive non-zero integer; raise ParsePosNonzeroError."""
    return parse_pos_nonzero(text)


@dataclass(frozen=True)
class Climate:
    """A city's temperature in a given year."""

    city: str
    year: int
    temp: float


class ClimateErrorKind(enum.Enum):
    """Why a climate record could not be parsed."""

    EMPTY = enum.auto()
    BAD_LEN = enum.auto()
    NO_CITY = enum.auto()
    PARSE_INT = enum.auto()
    PARSE_FLOAT = enum.auto()


class ParseClimateError(ValueError):
    """Text that does not describe a climate record.

    For PARSE_INT and PARSE_FLOAT the underlying error is ``inner`` and
    also the exception's ``__cause__``.
    """

    def __init__(self, kind: ClimateErrorKind, inner: ValueError | None = None):
        if kind is ClimateErrorKind.EMPTY:
            message = "empty input"
        elif kind is ClimateErrorKind.BAD_LEN:
            message = "incorrect number of fields"
        elif kind is ClimateErrorKind.NO_CITY:
            message = "no city name"
        elif kind is ClimateErrorKind.PARSE_INT:
            message = f"error parsing year: {inner}"
        else:
            message = f"error parsing temperature: {inner}"
        super().__init__(message)
        self.kind = kind
        self.inner = inner


def parse_climate(text: str) -> Climate:
    """Parse "city,year,temp"; raise ParseClimateError on any problem."""
    if text == "":
        raise ParseClimateError(ClimateErrorKind.EMPTY)
    fields = text.split(",")
    if len(fields) != 3:
        raise ParseClimateError(ClimateErrorKind.BAD_LEN)
    city, year_text, temp_text = fields
    if city == "":
        raise ParseClimateError(ClimateErrorKind.NO_CITY)
    try:
        year = _parse_int(year_text, bits=32, signed=False)
    except ValueError as err:
        raise ParseClimateError(ClimateErrorKind.PARSE_INT, err) from err
    try:
        temp = _parse_float(temp_text)
    except ValueError as err:
        raise ParseClimateError(ClimateErrorKind.PARSE_FLOAT, err) from err
    return Climate(city=city, year=year, temp=temp)