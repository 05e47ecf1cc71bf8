"""String algorithms: palindrome-anagram queries, Rabin-Karp search, integer parsing."""

from __future__ import annotations

import re

BASE = 21
MODULUS = 100000007

_LEADING_INT = re.compile(r"[+-]?\d+")


class PalindromeQuery:
    """Answers whether a substring's letters can be rearranged into a palindrome.

    Only the lowercase letters ``a``-``z`` are counted.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        mask = 0
        prefix = [0]
        for ch in text:
            if "a" <= ch <= "z":
                mask ^= 1 << (ord(ch) - ord("a"))
            prefix.append(mask)
        self._prefix = prefix

    def __len__(self) -> int:
        return len(self._text)

    def can_form_palindrome(self, left: int, right: int) -> bool:
        """Check the inclusive 0-based range ``left..right``."""
        if left > right:
            raise ValueError(f"left ({left}) must not exceed right ({right})")
        if left < 0 or right >= len(self._text):
            raise IndexError(f"range {left}..{right} outside text of length {len(self._text)}")
        odd_letters = self._prefix[right + 1] ^ self._prefix[left]
        return odd_letters.bit_count() <= 1


def _hash(chunk: str) -> int:
    value = 0
    for ch in chunk:
        value = (value * BASE + ord(ch)) % MODULUS
    return value


def rabin_karp(text: str, pattern: str) -> int:
    """Return the first index of ``pattern`` in ``text``, or -1 if absent or empty."""
    n, m = len(text), len(pattern)
    if m == 0 or n < m:
        return -1

    target = _hash(pattern)
    current = _hash(text[:m])
    high = pow(BASE, m - 1, MODULUS)
    for start in range(n - m + 1):
        if current == target and text[start : start + m] == pattern:
            return start
        if start + m < n:
            current = (
                (current - ord(text[start]) * high) * BASE + ord(text[start + m])
            ) % MODULUS
    return -1


def parse_ints(text: str) -> list[int]:
    """Read whitespace-separated integers, stopping at the first malformed token."""
    numbers = []
    for token in text.split():
        match = _LEADING_INT.match(token)
        if match is None:
            break
        numbers.append(int(match.group()))
        if match.end() != len(token):
            break
    return numbers