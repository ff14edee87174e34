"""Building palindromes from substrings and letter rearrangements."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def _palindrome_extents(text: str) -> tuple[list[int], list[int]]:
    """Return the longest palindrome starting at, and ending at, each index."""
    size = len(text)
    starting = [0] * size
    ending = [0] * size
    for center in range(2 * size - 1):
        lo = center // 2
        hi = lo + center % 2
        while lo >= 0 and hi < size and text[lo] == text[hi]:
            length = hi - lo + 1
            starting[lo] = max(starting[lo], length)
            ending[hi] = max(ending[hi], length)
            lo -= 1
            hi += 1
    return starting, ending


def longest_palindrome_concatenation(s: str, t: str) -> int:
    """Return the longest palindrome formed by a substring of ``s`` followed by one of ``t``.

    Either substring may be empty.
    """
    s_starting, _ = _palindrome_extents(s)
    _, t_ending = _palindrome_extents(t)
    best = max([*s_starting, *t_ending], default=0)
    after_s = s_starting[1:] + [0]
    before_t = [0] + t_ending[:-1]
    previous = [0] * (len(t) + 1)
    for i, a in enumerate(s):
        current = [0] * (len(t) + 1)
        for j, b in enumerate(t):
            if a == b:
                length = previous[j + 1] + 1
                current[j] = length
                best = max(best, 2 * length + max(after_s[i], before_t[j]))
        previous = current
    return best


def _capped_comb(n: int, r: int, cap: int) -> int:
    r = min(r, n - r)
    value = 1
    for step in range(1, r + 1):
        value = value * (n - r + step) // step
        if value > cap:
            return cap + 1
    return value


def _capped_arrangements(counts: Iterable[int], cap: int) -> int:
    """Return the multinomial of ``counts``, or ``cap + 1`` if it exceeds ``cap``."""
    values = [c for c in counts if c]
    remaining = sum(values)
    result = 1
    for count in values:
        result *= _capped_comb(remaining, count, cap)
        remaining -= count
        if result > cap:
            return cap + 1
    return result


def smallest_palindrome(s: str, k: int) -> str:
    """Return the ``k``-th smallest palindromic rearrangement of palindrome ``s``,
    or an empty string if there are fewer than ``k``."""
    if k < 1:
        raise ValueError("k must be at least 1")
    counts = sorted(Counter(s).items())
    half = {letter: count // 2 for letter, count in counts}
    middle = "".join(letter for letter, count in counts if count % 2)
    rank = k - 1
    prefix: list[str] = []
    while rank:
        for letter in half:
            if not half[letter]:
                continue
            half[letter] -= 1
            ways = _capped_arrangements(half.values(), rank)
            if ways > rank:
                prefix.append(letter)
                break
            rank -= ways
            half[letter] += 1
        else:
            return ""
    first = "".join(prefix) + "".join(letter * count for letter, count in half.items())
    return first + middle + first[::-1]