"""Fallible conversion of integer triples and sequences into colours."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in 0..=255."""

    red: int
    green: int
    blue: int


class IntoColorError(ValueError):
    """Values that do not make a colour."""


class BadLenError(IntoColorError):
    """The sequence does not hold exactly three values."""


class IntConversionError(IntoColorError):
    """A component lies outside 0..=255."""


def color_from_tuple(rgb: Sequence[int]) -> Color:
    """Convert a red, green, blue triple; raise IntConversionError if out of range."""
    try:
        red, green, blue = rgb
    except ValueError as exc:
        raise TypeError("expected exactly three colour components") from exc
    if not all(0 <= value <= 255 for value in (red, green, blue)):
        raise IntConversionError(f"component out of range in {tuple(rgb)}")
    return Color(red=red, green=green, blue=blue)


def color_from_slice(values: Sequence[int]) -> Color:
    """Convert a sequence; raise BadLenError unless it holds exactly three values."""
    if len(values) != 3:
        raise BadLenError(f"expected 3 values, got {len(values)}")
    return color_from_tuple(tuple(values))