"""Producing a filled list without touching the caller's list."""

from __future__ import annotations

from collections.abc import Iterable

_FILL = (22, 44, 66)


def fill_vec(values: Iterable[int] | None = None) -> list[int]:
    """Return a new list: the given values (if any) followed by 22, 44 and 66."""
    result = list(values) if values is not None else []
    result.extend(_FILL)
    return result