"""Search puzzles solved by enumerating choices."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from functools import reduce
from operator import or_


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct sorted triple of values from ``nums`` that sums to zero."""
    values = sorted(nums)
    size = len(values)
    triples: list[list[int]] = []
    for first_index, first in enumerate(values):
        if first_index > 0 and first == values[first_index - 1]:
            continue
        lo, hi = first_index + 1, size - 1
        while lo < hi:
            total = first + values[lo] + values[hi]
            if total < 0:
                lo += 1
            elif total > 0:
                hi -= 1
            else:
                low_value, high_value = values[lo], values[hi]
                while lo < hi and values[lo] == low_value:
                    lo += 1
                while lo < hi and values[hi] == high_value:
                    hi -= 1
                triples.append([first, low_value, high_value])
    return triples


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return every multiset of ``candidates`` (each usable repeatedly) summing to ``target``.

    Each combination lists its values in the order the candidates are given.
    """
    if any(value <= 0 for value in candidates):
        raise ValueError("candidates must be positive")

    def search(start: int, remaining: int, chosen: tuple[int, ...]) -> Iterator[list[int]]:
        if remaining == 0:
            yield list(chosen)
            return
        if start == len(candidates):
            return
        yield from search(start + 1, remaining, chosen)
        value = candidates[start]
        if remaining >= value:
            yield from search(start, remaining - value, chosen + (value,))

    return list(search(0, target, ()))


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens on an n-by-n board."""
    boards: list[list[str]] = []
    columns: set[int] = set()
    sums: set[int] = set()
    differences: set[int] = set()
    rows: list[str] = []

    def place(row: int) -> None:
        if row == n:
            boards.append(list(rows))
            return
        for col in range(n):
            if col in columns or row + col in sums or col - row in differences:
                continue
            columns.add(col)
            sums.add(row + col)
            differences.add(col - row)
            rows.append("." * col + "Q" + "." * (n - col - 1))
            place(row + 1)
            rows.pop()
            columns.discard(col)
            sums.discard(row + col)
            differences.discard(col - row)

    place(0)
    return boards


def combination_sum3(k: int, n: int) -> list[list[int]]:
    """Return every set of ``k`` distinct digits 1-9 summing to ``n``, each ascending."""

    def search(count: int, remaining: int, digit: int, chosen: tuple[int, ...]) -> Iterator[list[int]]:
        if count == 0 and remaining == 0:
            yield list(chosen)
            return
        if digit >= 10 or count < 0:
            return
        yield from search(count, remaining, digit + 1, chosen)
        yield from search(count - 1, remaining - digit, digit + 1, chosen + (digit,))

    return list(search(k, n, 1, ()))


def subset_xor_sum(nums: Sequence[int]) -> int:
    """Return the sum of the XOR totals of every subset of ``nums``."""
    if not nums:
        return 0
    return reduce(or_, nums, 0) << (len(nums) - 1)