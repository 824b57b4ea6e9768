"""Appending "Bar" to strings and to lists of strings."""

from __future__ import annotations

from functools import singledispatch

_BAR = "Bar"


@singledispatch
def append_bar(value):
    """Append "Bar" to a string or a list of strings."""
    raise TypeError(f"cannot append {_BAR!r} to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + _BAR


@append_bar.register
def _(value: list) -> list:
    # The list itself grows; a copy of it is returned.
    value.append(_BAR)
    return list(value)