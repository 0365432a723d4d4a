"""String puzzles: digit sums, lucky digits, substrings, alphabets and brackets."""

from __future__ import annotations

import string
from collections import Counter

__all__ = [
    "digit_sum_steps",
    "lucky_conversion_ops",
    "bear_substring_count",
    "suffix_structures",
    "palindrome_of",
    "complete_alphabet",
    "decode_median_word",
    "bracket_sequences",
]

_ALPHABET = string.ascii_uppercase
_WINDOW = len(_ALPHABET)


def digit_sum_steps(s: str) -> int:
    """Count how many times the digits must be summed until one digit is left."""
    if not s or not s.isdigit():
        raise ValueError(f"not a decimal number: {s!r}")
    steps = 0
    while len(s) > 1:
        s = str(sum(int(ch) for ch in s))
        steps += 1
    return steps


def lucky_conversion_ops(a: str, b: str) -> int:
    """Minimum swaps and flips turning lucky string ``a`` into ``b``."""
    if len(a) != len(b):
        raise ValueError("strings must have the same length")
    sevens = fours = 0
    for x, y in zip(a, b):
        if x != y:
            if x == "7":
                sevens += 1
            else:
                fours += 1
    return max(sevens, fours)


def bear_substring_count(s: str) -> int:
    """Count the substrings of ``s`` that contain ``"bear"``."""
    n = len(s)
    total = 0
    previous = -1
    pos = s.find("bear")
    while pos != -1:
        total += (pos - previous) * (n - (pos + 3))
        previous = pos
        pos = s.find("bear", pos + 3)
    return total


def _is_subsequence(small: str, big: str) -> bool:
    it = iter(big)
    return all(ch in it for ch in small)


def suffix_structures(s: str, t: str) -> str:
    """Tell which operations turn ``s`` into ``t``.

    Returns ``"array"`` (swaps only), ``"automaton"`` (deletions only),
    ``"both"`` or ``"need tree"`` (impossible).
    """
    balance = Counter(s)
    balance.subtract(t)
    if not any(balance.values()):
        return "array"
    if any(v < 0 for v in balance.values()):
        return "need tree"
    if _is_subsequence(t, s):
        return "automaton"
    return "both"


def palindrome_of(s: str) -> str:
    """Return a palindrome having ``s`` as a prefix: ``s`` followed by its reverse."""
    return s + s[::-1]


def complete_alphabet(s: str) -> str | None:
    """Fill the ``?`` marks so that some 26-long window holds every letter once.

    Returns the completed string, or ``None`` when no window can be completed.
    Question marks outside the chosen window become ``A``.
    """
    invalid = set(s) - set(_ALPHABET) - {"?"}
    if invalid:
        raise ValueError(f"unexpected characters: {''.join(sorted(invalid))!r}")
    chars = list(s)
    for start in range(len(chars) - _WINDOW + 1):
        window = chars[start:start + _WINDOW]
        letters = [ch for ch in window if ch != "?"]
        if len(set(letters)) != len(letters):
            continue
        missing = sorted(set(_ALPHABET) - set(letters))
        holes = [start + k for k, ch in enumerate(window) if ch == "?"]
        if start > 0:
            holes.reverse()
        for pos, letter in zip(holes, missing):
            chars[pos] = letter
        return "".join("A" if ch == "?" else ch for ch in chars)
    return None


def decode_median_word(s: str) -> str:
    """Recover a word from the sequence of its successively removed median letters."""
    n = len(s)
    out = [""] * n
    index = (n - 1) // 2
    rest = s
    if n % 2:
        out[index] = s[0]
        index -= 1
        rest = s[1:]
    for left, right in zip(rest[::2], rest[1::2]):
        out[index] = left
        out[n - 1 - index] = right
        index -= 1
    return "".join(out)


def bracket_sequences(n: int) -> list[str]:
    """Return ``n`` distinct balanced bracket sequences of length ``2n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return ["()" * j + "(" * (n - j) + ")" * (n - j) for j in range(n)]