"""Parsing a person from text, reporting what went wrong."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_USIZE_MAX = 2**64 - 1
_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class Person:
    """A person with a name and an age."""

    name: str
    age: int


class PersonErrorKind(enum.Enum):
    """Why a person could not be parsed."""

    EMPTY = enum.auto()
    BAD_LEN = enum.auto()
    NO_NAME = enum.auto()
    PARSE_INT = enum.auto()


_MESSAGES = {
    PersonErrorKind.EMPTY: "empty input",
    PersonErrorKind.BAD_LEN: "incorrect number of fields",
    PersonErrorKind.NO_NAME: "no name",
}


class ParsePersonError(ValueError):
    """Text that does not describe a person."""

    def __init__(self, kind: PersonErrorKind, message: str | None = None):
        super().__init__(message if message is not None else _MESSAGES.get(kind, ""))
        self.kind = kind


def _parse_usize(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text.startswith("+") else text
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


def parse_person(text: str) -> Person:
    """Parse exactly "name,age"; raise ParsePersonError otherwise."""
    if not text:
        raise ParsePersonError(PersonErrorKind.EMPTY)
    fields = text.split(",")
    if len(fields) != 2:
        raise ParsePersonError(PersonErrorKind.BAD_LEN)
    name, age_text = fields
    if not name:
        raise ParsePersonError(PersonErrorKind.NO_NAME)
    try:
        age = _parse_usize(age_text)
    except ValueError as err:
        raise ParsePersonError(PersonErrorKind.PARSE_INT, str(err)) from err
    return Person(name=name, age=age)