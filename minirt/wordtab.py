"""Substring search and word splitting for whitespace-separated text."""

from __future__ import annotations

import re
from typing import List

_SEPARATORS = re.compile(r"[ \t]+")


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("needle must not be empty")


def find_substring(text: str, needle: str, length: int) -> int:
    """Return the first index of ``needle`` in ``text``, or -1.

    The search fails at once when ``needle`` is longer than ``length``.
    """
    _check_needle(needle)
    if len(needle) > length:
        return -1
    return text.find(needle)


def find_unquoted(text: str, needle: str, length: int) -> int:
    """Return the first index of ``needle`` outside double quotes, or -1.

    Each double quote toggles the quoted state; the search fails at once
    when ``needle`` is longer than ``length``.
    """
    _check_needle(needle)
    if len(needle) > length:
        return -1
    inside = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            inside = not inside
        if not inside and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> List[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _SEPARATORS.split(text) if word]