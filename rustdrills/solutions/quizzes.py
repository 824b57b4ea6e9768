"""Apple prices, doubling and greetings."""

from __future__ import annotations

_BULK_THRESHOLD = 40


def calculate_apple_price(count: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought at once."""
    return count if count > _BULK_THRESHOLD else count * 2


def times_two(num: int) -> int:
    """Return the number doubled."""
    return num * 2


def greet(value: object) -> str:
    """Return "Hello " followed by the value."""
    return f"Hello {value}"