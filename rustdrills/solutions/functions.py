"""Small functions: calling, pricing, parity and squaring."""

from __future__ import annotations


def call_me(num: int) -> None:
    """Print one ring line per call, numbered from 1."""
    for i in range(1, num + 1):
        print(f"Ring! Call number {i}")


def is_even(num: int) -> bool:
    """Whether the number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off an even price and 3 off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return the number squared."""
    return num * num