"""Counting integers by their decimal digits."""

from __future__ import annotations

from collections import Counter
from functools import cache
from math import factorial, prod


def _powerful_up_to(bound: int, limit: int, suffix: str) -> int:
    if bound < 0:
        return 0
    text = str(bound)
    if len(suffix) > len(text):
        return 0
    free = len(text) - len(suffix)
    count = 0
    for position, char in enumerate(text[:free]):
        digit = int(char)
        count += min(digit, limit + 1) * (limit + 1) ** (free - position - 1)
        if digit > limit:
            return count
    if text[free:] >= suffix:
        count += 1
    return count


def number_of_powerful_int(start: int, finish: int, limit: int, s: str) -> int:
    """Count integers in [start, finish] that end with ``s`` and have no digit above ``limit``."""
    return _powerful_up_to(finish, limit, s) - _powerful_up_to(start - 1, limit, s)


def _arrangements(counts: Counter[str]) -> int:
    return factorial(sum(counts.values())) // prod(factorial(c) for c in counts.values())


def _arrangements_without_leading_zero(counts: Counter[str]) -> int:
    total = _arrangements(counts)
    if counts["0"]:
        rest = counts.copy()
        rest["0"] -= 1
        total -= _arrangements(rest)
    return total


def count_good_integers(n: int, k: int) -> int:
    """Count ``n``-digit integers whose digits rearrange into a palindrome divisible by ``k``."""
    if n < 1 or k < 1:
        raise ValueError("n and k must be positive")
    half_length = (n + 1) // 2
    seen: set[str] = set()
    total = 0
    for half in range(10 ** (half_length - 1), 10**half_length):
        text = str(half)
        mirror = text[-2::-1] if n % 2 else text[::-1]
        palindrome = text + mirror
        if int(palindrome) % k:
            continue
        key = "".join(sorted(palindrome))
        if key in seen:
            continue
        seen.add(key)
        total += _arrangements_without_leading_zero(Counter(palindrome))
    return total


def _beautiful_up_to(bound: int) -> int:
    if bound <= 0:
        return 0
    digits = tuple(map(int, str(bound)))

    @cache
    def count(position: int, tight: bool, leading: bool, product: int, total: int) -> int:
        if position == len(digits):
            return int(total > 0 and product % total == 0)
        top = digits[position] if tight else 9
        result = 0
        for digit in range(top + 1):
            next_tight = tight and digit == top
            if leading and digit == 0:
                result += count(position + 1, next_tight, True, product, total)
            elif leading:
                result += count(position + 1, next_tight, False, digit, total + digit)
            else:
                result += count(position + 1, next_tight, False, product * digit, total + digit)
        return result

    return count(0, True, True, 0, 0)


def beautiful_numbers(low: int, high: int) -> int:
    """Count integers in [low, high] whose digit product is divisible by their digit sum."""
    return _beautiful_up_to(high) - _beautiful_up_to(low - 1)