"""Nametags, token costs and parsing positive non-zero integers."""

from __future__ import annotations

from dataclasses import dataclass

_DIGITS = frozenset("0123456789")
_EMPTY = "cannot parse integer from empty string"
_INVALID_DIGIT = "invalid digit found in string"
_TOO_LARGE = "number too large to fit in target type"
_TOO_SMALL = "number too small to fit in target type"

_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, *, bits: int = 64, signed: bool = True) -> int:
    """Parse a decimal integer of the given width; raise ValueError on failure."""
    if not text:
        raise ValueError(_EMPTY)
    negative = text[0] == "-"
    if negative and not signed:
        raise ValueError(_INVALID_DIGIT)
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError(_INVALID_DIGIT)
    value = -int(digits) if negative else int(digits)
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    if value > high:
        raise ValueError(_TOO_LARGE)
    if value < low:
        raise ValueError(_TOO_SMALL)
    return value


def generate_nametag_text(name: str) -> str:
    """Return the nametag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost in tokens of the typed quantity: 5 per item plus a fee of 1."""
    quantity = _parse_int(item_quantity, bits=32, signed=True)
    return quantity * _COST_PER_ITEM + _PROCESSING_FEE


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Return the tokens left after buying; raise ValueError if unaffordable."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        raise ValueError("You can't afford that many!")
    return tokens - cost


class CreationError(ValueError):
    """A value that cannot be a positive non-zero integer."""

    NEGATIVE = "negative"
    ZERO = "zero"
    _MESSAGES = {NEGATIVE: "number is negative", ZERO: "number is zero"}

    def __init__(self, kind: str):
        if kind not in self._MESSAGES:
            raise ValueError(f"unknown creation error kind: {kind!r}")
        super().__init__(self._MESSAGES[kind])
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


class ParsePosNonzeroError(ValueError):
    """Text that does not hold a positive non-zero integer.

    ``error`` is a CreationError when the number parsed but was out of
    range, and the parsing ValueError otherwise.
    """

    def __init__(self, error: ValueError):
        super().__init__(str(error))
        self.error = error


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse a 64-bit integer and require it to be positive and non-zero."""
    try:
        value = _parse_int(text)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err