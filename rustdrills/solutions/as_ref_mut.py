"""Counting the bytes and the characters of a string."""

from __future__ import annotations


def byte_counter(arg: str) -> int:
    """Return the number of UTF-8 bytes in the text."""
    return len(str(arg).encode("utf-8"))


def char_counter(arg: str) -> int:
    """Return the number of characters (code points) in the text."""
    return len(str(arg))