import string

import pytest

from algosolve.strings import (
    atoi,
    count_and_say,
    generate_parentheses,
    is_isomorphic,
    letter_combinations,
    max_nesting_depth,
    max_substrings,
    reverse_words,
)

INT_MAX = 2147483647
INT_MIN = -INT_MAX - 1


@pytest.mark.parametrize("number", [7, -42, 4193, 2147483647, -2147483648])
def test_atoi_reads_plain_numbers(number):
    assert atoi(f"   {number}") == number


def test_atoi_stops_at_first_non_digit():
    assert atoi("4193 with words") == 4193
    assert atoi("+1") == 1


def test_atoi_ignores_leading_zeros():
    assert atoi("-0000123") == -123


def test_atoi_clamps_to_32_bits():
    assert atoi("91283472332") == INT_MAX
    assert atoi("-91283472332") == INT_MIN
    assert atoi("1" + "0" * 5000) == INT_MAX
    assert atoi("-2147483649") == INT_MIN


@pytest.mark.parametrize("text", ["words and 987", "+-12", "   ", "", "\t5", "-"])
def test_atoi_without_leading_digits_is_zero(text):
    assert atoi(text) == 0


def test_count_and_say_first_term():
    assert count_and_say(1) == "1"


def _decode(term):
    pairs = zip(term[::2], term[1::2])
    return "".join(digit * int(count) for count, digit in pairs)


@pytest.mark.parametrize("n", range(1, 12))
def test_count_and_say_describes_previous_term(n):
    assert _decode(count_and_say(n + 1)) == count_and_say(n)


def test_reverse_words_example():
    assert reverse_words("  the sky  is blue ") == "blue is sky the"


@pytest.mark.parametrize("text", ["a good   example", "  hello world  ", "single", "   "])
def test_reverse_words_twice_normalises_spacing(text):
    once = reverse_words(text)
    assert reverse_words(once) == " ".join(text.split())
    assert once.split() == text.split()[::-1]


def test_is_isomorphic_under_bijection():
    source = "paperclips"
    table = str.maketrans(string.ascii_lowercase, string.ascii_lowercase[::-1])
    assert is_isomorphic(source, source.translate(table)) is True
    assert is_isomorphic(source, source) is True


def test_is_isomorphic_rejects_non_injective_maps():
    assert is_isomorphic("ab", "aa") is False
    assert is_isomorphic("aa", "ab") is False
    assert is_isomorphic("badc", "baba") is False


def test_is_isomorphic_rejects_length_mismatch():
    assert is_isomorphic("abc", "ab") is False


@pytest.mark.parametrize("k", [0, 1, 3, 8])
def test_max_nesting_depth_of_nested_pairs(k):
    assert max_nesting_depth("(" * k + "x" + ")" * k) == k


def test_max_nesting_depth_of_sibling_pairs_matches_single_pair():
    assert max_nesting_depth("()" * 5) == max_nesting_depth("()")


@pytest.mark.parametrize("m", [1, 2, 5])
def test_max_substrings_counts_repeated_blocks(m):
    assert max_substrings("axya" * m) == m


def test_max_substrings_without_repeats():
    assert max_substrings(string.ascii_lowercase) == 0


def test_max_substrings_needs_length_four():
    assert max_substrings("aba") == max_substrings("")


def test_letter_combinations_empty():
    assert letter_combinations("") == []


def test_letter_combinations_single_digit():
    assert letter_combinations("2") == list("abc")


def test_letter_combinations_shape():
    result = letter_combinations("79")
    assert len(result) == len("pqrs") * len("wxyz")
    assert len(set(result)) == len(result)
    assert result == sorted(result)
    assert all(a in "pqrs" and b in "wxyz" for a, b in result)


def test_generate_parentheses_zero_pairs():
    assert generate_parentheses(0) == [""]


def _balanced(text):
    depth = 0
    for ch in text:
        depth += 1 if ch == "(" else -1
        if depth < 0:
            return False
    return depth == 0


@pytest.mark.parametrize("n", range(1, 7))
def test_generate_parentheses_invariants(n):
    from math import comb

    result = generate_parentheses(n)
    assert len(result) == comb(2 * n, n) // (n + 1)
    assert len(set(result)) == len(result)
    assert result == sorted(result)
    assert all(len(item) == 2 * n and _balanced(item) for item in result)