"""Integer arithmetic puzzles."""

from __future__ import annotations

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
MOD = 10**9 + 7


def divide(dividend: int, divisor: int) -> int:
    """Divide, truncating toward zero; the one 32-bit overflow case gives INT_MAX."""
    if divisor == 0:
        raise ZeroDivisionError("integer division by zero")
    if dividend == INT_MIN and divisor == -1:
        return INT_MAX
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


def count_good_numbers(n: int) -> int:
    """Count digit strings of length ``n`` with even digits at even indices and
    prime digits at odd indices, modulo 10**9 + 7."""
    even_positions = (n + 1) // 2
    odd_positions = n // 2
    return pow(5, even_positions, MOD) * pow(4, odd_positions, MOD) % MOD


def _is_symmetric(number: int) -> bool:
    text = str(number)
    half, odd = divmod(len(text), 2)
    if odd:
        return False
    return sum(map(ord, text[:half])) == sum(map(ord, text[half:]))


def count_symmetric_integers(low: int, high: int) -> int:
    """Count integers in [low, high] with an even digit count whose two halves
    have equal digit sums."""
    return sum(1 for number in range(low, high + 1) if _is_symmetric(number))