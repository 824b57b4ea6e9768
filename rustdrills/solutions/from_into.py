"""Converting text into a person, falling back to a default person."""

from __future__ import annotations

from dataclasses import dataclass

_USIZE_MAX = 2**64 - 1
_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class Person:
    """A person with a name and an age; the default is 30-year-old John."""

    name: str = "John"
    age: int = 30


def _parse_age(text: str) -> int | None:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not set(digits) <= _DIGITS:
        return None
    value = int(digits)
    return value if value <= _USIZE_MAX else None


def person_from(text: str) -> Person:
    """Parse "name,age"; return the default person whenever that fails."""
    if not text:
        return Person()
    name, comma, age_text = text.partition(",")
    if not comma or not name:
        return Person()
    age = _parse_age(age_text)
    if age is None:
        return Person()
    return Person(name=name, age=age)