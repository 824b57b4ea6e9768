"""Sharing data between threads, and a recursive cons list."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass


def _offset_sum(numbers: Sequence[int], offset: int, step: int) -> int:
    return sum(numbers[i] for i in range(offset, len(numbers), step))


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum every workers-th value from each offset, one thread per offset.

    The sequence is shared by the threads, not copied. Element i of the
    result is the sum for offset i.
    """
    if workers < 1:
        raise ValueError("workers must be at least 1")
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [
            pool.submit(_offset_sum, numbers, offset, workers)
            for offset in range(workers)
        ]
        return [future.result() for future in futures]


@dataclass(frozen=True)
class Cons:
    """A cons cell: a value and the rest of the list (None is the empty list)."""

    head: int
    tail: "Cons | None" = None


def create_empty_list() -> Cons | None:
    """Return the empty list."""
    return None


def create_non_empty_list() -> Cons:
    """Return a one-element list."""
    return Cons(1, None)