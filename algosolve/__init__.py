"""Algorithm puzzle solutions grouped by topic: strings, arithmetic, linked lists,
trees, searching, backtracking, arrays, dynamic programming, subarrays, digits,
palindromes and thread pairing."""

__version__ = "0.1.0"