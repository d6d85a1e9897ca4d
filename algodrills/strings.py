"""String exercises: spreadsheet columns, search, substrings, numerals and palindromes."""

from __future__ import annotations

_ROMAN = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


def excel_column(n):
    """Return the spreadsheet column title for the 1-based column number ``n``."""
    letters = []
    while n > 0:
        n, remainder = divmod(n - 1, 26)
        letters.append(chr(ord("A") + remainder))
    return "".join(reversed(letters))


def _prefix_table(pattern):
    table = [0] * len(pattern)
    length = 0
    for i, char in enumerate(pattern[1:], start=1):
        while length and char != pattern[length]:
            length = table[length - 1]
        if char == pattern[length]:
            length += 1
        table[i] = length
    return table


def find_substring(text, pattern):
    """Return the index of the first occurrence of ``pattern`` in ``text``, or -1."""
    if not pattern:
        return 0
    table = _prefix_table(pattern)
    matched = 0
    for i, char in enumerate(text):
        while matched and char != pattern[matched]:
            matched = table[matched - 1]
        if char == pattern[matched]:
            matched += 1
            if matched == len(pattern):
                return i - matched + 1
    return -1


def longest_unique_substring(s):
    """Return the length of the longest substring without repeated characters."""
    last_seen = {}
    start = -1
    best = 0
    for i, char in enumerate(s):
        start = max(start, last_seen.get(char, -1))
        last_seen[char] = i
        best = max(best, i - start)
    return best


def to_roman(n):
    """Return ``n`` written in Roman numerals; zero or less gives an empty string."""
    parts = []
    for value, symbol in _ROMAN:
        count, n = divmod(n, value) if n > 0 else (0, n)
        parts.append(symbol * count)
    return "".join(parts)


def is_alnum_palindrome(s):
    """Tell whether the ASCII letters and digits of ``s`` read the same both ways, ignoring case."""
    kept = [char.lower() for char in s if char.isascii() and char.isalnum()]
    return kept == kept[::-1]


def string_ignorance(s):
    """Keep a character when its case-folded form has been seen an even number of times so far."""
    seen = set()
    kept = []
    for char in s:
        key = char.lower()
        if key in seen:
            seen.discard(key)
        else:
            seen.add(key)
            kept.append(char)
    return "".join(kept)


def is_rotation(s1, s2):
    """Tell whether ``s2`` is a rotation of ``s1``."""
    return len(s1) == len(s2) and s2 in s1 + s1