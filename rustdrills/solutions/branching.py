"""Simple branching."""

from __future__ import annotations

_FIZZ_TABLE = {"fizz": "foo", "fuzz": "bar"}


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return a if a > b else b


def fizz_if_foo(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    return _FIZZ_TABLE.get(fizzish, "baz")