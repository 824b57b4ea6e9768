"""Fruit baskets in dictionaries, and list basics."""

from __future__ import annotations

import enum
from collections.abc import Iterable, MutableMapping


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds and at least five fruits."""
    return {"banana": 2, "apple": 5, "orange": 10}


class Fruit(enum.Enum):
    """Kinds of fruit."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add one of every kind of fruit not yet present, leaving the rest alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed tuple and a list holding the same elements."""
    return (10, 20, 30, 40), [10, 20, 30, 40]


def vec_loop(values: Iterable[int]) -> list[int]:
    """Return every value multiplied by two."""
    return [value * 2 for value in values]