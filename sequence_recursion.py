"""
Sequence and String Recursion

Recursion here walks an index (or a pair of indices) across the input rather
than slicing it, so no call copies the sequence. Strings are only built where
the result itself is a new string.
"""

from typing import Sequence

from validation import (
    InvalidInputError,
    as_int_view,
    validate_depth,
    validate_index,
    validate_integer,
    validate_text,
)

VOWELS = frozenset("aeiou")


def is_palindrome(text: str, alphanumeric_only: bool = False) -> bool:
    """
    Check whether text reads the same in both directions.

    Comparison is case-insensitive. Spaces and punctuation count as
    characters unless alphanumeric_only is set, in which case everything that
    is not a letter or digit is dropped first.
    """
    validate_text(text, "text")
    normalized = text.lower()
    if alphanumeric_only:
        normalized = ''.join(c for c in normalized if c.isalnum())
    validate_depth(len(normalized) // 2 + 1, "is_palindrome")
    return _is_palindrome(normalized, 0, len(normalized) - 1)

def _is_palindrome(text: str, lo: int, hi: int) -> bool:
    # Empty or single character
    if hi - lo < 1:
        return True
    if text[lo] != text[hi]:
        return False
    return _is_palindrome(text, lo + 1, hi - 1)


def reverse_string(text: str) -> str:
    """Reverse a string: last character followed by the reverse of the rest."""
    validate_text(text, "text")
    validate_depth(len(text), "reverse_string")
    return _reverse_string(text, len(text))

def _reverse_string(text: str, end: int) -> str:
    if end <= 1:
        return text[:end]
    return text[end - 1] + _reverse_string(text, end - 1)


def is_sorted(seq: Sequence[int], index: int = 0) -> bool:
    """Check that seq[index:] is in non-decreasing order."""
    view = as_int_view(seq)
    index = validate_index(index, 0, len(view))
    validate_depth(len(view) - index, "is_sorted")
    return _is_sorted(view, index)

def _is_sorted(view, index: int) -> bool:
    if index >= len(view) - 1:
        return True
    if view[index] > view[index + 1]:
        return False
    return _is_sorted(view, index + 1)


def count_occurrences(seq: Sequence[int], target: int, index: int = 0) -> int:
    """Count how many elements of seq[index:] equal target."""
    view = as_int_view(seq)
    target = validate_integer(target, "target")
    index = validate_index(index, 0, len(view))
    validate_depth(len(view) - index, "count_occurrences")
    return _count_occurrences(view, target, index)

def _count_occurrences(view, target: int, index: int) -> int:
    if index >= len(view):
        return 0
    count = 1 if view[index] == target else 0
    return count + _count_occurrences(view, target, index + 1)


def count_vowels(text: str, index: int = 0) -> int:
    """Count the vowels a, e, i, o, u in text[index:], ignoring case."""
    validate_text(text, "text")
    index = validate_index(index, 0, len(text))
    validate_depth(len(text) - index, "count_vowels")
    return _count_vowels(text, index)

def _count_vowels(text: str, index: int) -> int:
    if index >= len(text):
        return 0
    count = 1 if text[index].lower() in VOWELS else 0
    return count + _count_vowels(text, index + 1)


def remove_char(text: str, ch: str) -> str:
    """Return text with every occurrence of the single character ch removed."""
    validate_text(text, "text")
    validate_text(ch, "ch")
    if len(ch) != 1:
        raise InvalidInputError(f"ch must be a single character, got {ch!r}")
    validate_depth(len(text), "remove_char")
    return _remove_char(text, ch, 0)

def _remove_char(text: str, ch: str, index: int) -> str:
    if index >= len(text):
        return ""
    head = "" if text[index] == ch else text[index]
    return head + _remove_char(text, ch, index + 1)
