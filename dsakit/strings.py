"""String algorithms: prefixes, brackets, searching, versions and anagrams."""

from __future__ import annotations

from collections import Counter
from itertools import groupby, zip_longest
from typing import Sequence

_CLOSERS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_CLOSERS.values())


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string (empty for no strings)."""
    if not strs:
        return ""
    first, last = min(strs), max(strs)
    length = 0
    for a, b in zip(first, last):
        if a != b:
            break
        length += 1
    return first[:length]


def is_valid_parentheses(s: str) -> bool:
    """Return True if every bracket in ``s`` is closed in the right order.

    Other characters are skipped while a bracket is open, and make the
    string invalid otherwise.
    """
    if len(s) == 1:
        return False
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
            continue
        if not stack:
            return False
        opener = _CLOSERS.get(ch)
        if opener is not None and stack.pop() != opener:
            return False
    return not stack


def find_first(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1.

    An empty ``needle`` is never found.
    """
    if not needle:
        return -1
    return haystack.find(needle)


def count_and_say(n: int) -> str:
    """Return the n-th term of the count-and-say sequence, starting at "1".

    Raises ValueError if ``n`` is less than 1.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    say = "1"
    for _ in range(n - 1):
        say = "".join(f"{sum(1 for _ in run)}{digit}" for digit, run in groupby(say))
    return say


def _revision_numbers(version: str) -> list[int]:
    tokens = version.split(".")
    if tokens[-1] == "":
        tokens.pop()
    try:
        return [int(token) for token in tokens]
    except ValueError:
        raise ValueError(f"invalid version string: {version!r}") from None


def compare_version(version1: str, version2: str) -> int:
    """Compare dotted version strings; return -1, 0 or 1.

    Revisions compare as integers and missing revisions count as 0.
    Raises ValueError for a revision that is not a number.
    """
    for a, b in zip_longest(
        _revision_numbers(version1), _revision_numbers(version2), fillvalue=0
    ):
        if a < b:
            return -1
        if a > b:
            return 1
    return 0


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` uses exactly the characters of ``s``."""
    return Counter(s) == Counter(t)