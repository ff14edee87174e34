"""String puzzles: parsing, rewriting and generating strings."""

from __future__ import annotations

import re
from collections.abc import Iterator
from itertools import groupby, product

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_NUMBER_PREFIX = re.compile(r" *([+-]?)([0-9]*)")

KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def atoi(s: str) -> int:
    """Parse a leading signed integer from ``s``, clamped to the 32-bit range.

    Only spaces are skipped before the number; parsing stops at the first
    character that is not an ASCII digit.  Without digits the result is 0.
    """
    match = _NUMBER_PREFIX.match(s)
    sign, digits = match.groups()
    digits = digits.lstrip("0")
    if len(digits) > 10:
        value = INT_MAX + 1
    else:
        value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return max(INT_MIN, min(INT_MAX, value))


def count_and_say(n: int) -> str:
    """Return the ``n``-th term of the count-and-say sequence, starting at "1"."""
    term = "1"
    for _ in range(n - 1):
        term = "".join(f"{len(list(run))}{digit}" for digit, run in groupby(term))
    return term


def reverse_words(s: str) -> str:
    """Reverse the order of space-separated words, collapsing runs of spaces."""
    return " ".join(reversed([word for word in s.split(" ") if word]))


def is_isomorphic(s: str, t: str) -> bool:
    """Tell whether ``s`` and ``t`` map onto each other character by character."""
    if len(s) != len(t):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for a, b in zip(s, t):
        if forward.setdefault(a, b) != b or backward.setdefault(b, a) != a:
            return False
    return True


def max_nesting_depth(s: str) -> int:
    """Return the deepest parenthesis nesting reached while scanning ``s``."""
    depth = deepest = 0
    for ch in s:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        deepest = max(deepest, depth)
    return deepest


def max_substrings(word: str) -> int:
    """Count greedy non-overlapping substrings of length at least 4 whose ends match."""
    first_seen: dict[str, int] = {}
    count = 0
    for index, ch in enumerate(word):
        if index - first_seen.setdefault(ch, index) >= 3:
            count += 1
            first_seen.clear()
    return count


def letter_combinations(digits: str) -> list[str]:
    """Return every letter string the phone-keypad ``digits`` can spell."""
    if not digits:
        return []
    letters = (KEYPAD.get(digit, "") for digit in digits)
    return ["".join(combo) for combo in product(*letters)]


def generate_parentheses(n: int) -> list[str]:
    """Return all balanced strings of ``n`` parenthesis pairs in lexicographic order."""

    def build(prefix: str, opened: int, closed: int) -> Iterator[str]:
        if opened == n and closed == n:
            yield prefix
            return
        if opened < n:
            yield from build(prefix + "(", opened + 1, closed)
        if closed < opened:
            yield from build(prefix + ")", opened, closed + 1)

    return list(build("", 0, 0))