import pytest

from config import override_settings
from sequence_recursion import (
    count_occurrences,
    count_vowels,
    is_palindrome,
    is_sorted,
    remove_char,
    reverse_string,
)
from validation import InvalidInputError, RecursionDepthError


def test_is_palindrome_cases():
    assert is_palindrome("") is True
    assert is_palindrome("a") is True
    assert is_palindrome("racecar") is True
    assert is_palindrome("hello") is False
    assert is_palindrome("RaceCar") is True

def test_is_palindrome_keeps_spaces_and_punctuation_by_default():
    assert is_palindrome("nurses run") is False
    assert is_palindrome("A man, a plan, a canal: Panama") is False

def test_is_palindrome_alphanumeric_only():
    assert is_palindrome("nurses run", alphanumeric_only=True) is True
    assert is_palindrome("A man, a plan, a canal: Panama", alphanumeric_only=True) is True
    assert is_palindrome("?!", alphanumeric_only=True) is True

def test_is_palindrome_rejects_non_strings():
    with pytest.raises(InvalidInputError):
        is_palindrome(12321)

def test_is_palindrome_depth_counts_every_frame():
    # "abcba" recurses (0, 4), (1, 3), (2, 2); "abccba" needs a fourth frame
    with override_settings(max_depth=3):
        assert is_palindrome("abcba") is True
        with pytest.raises(RecursionDepthError) as excinfo:
            is_palindrome("abccba")
    assert excinfo.value.required == 4

@pytest.mark.parametrize("text, expected", [("", ""), ("a", "a"), ("Hello", "olleH"), ("ab cd", "dc ba")])
def test_reverse_string(text, expected):
    assert reverse_string(text) == expected

def test_reverse_string_depth_ceiling():
    with override_settings(max_depth=4):
        assert reverse_string("abcd") == "dcba"
        with pytest.raises(RecursionDepthError):
            reverse_string("abcde")

def test_is_sorted():
    assert is_sorted([1, 3, 5, 7, 9]) is True
    assert is_sorted([1, 5, 3, 7, 9]) is False
    assert is_sorted([]) is True
    assert is_sorted([4]) is True
    assert is_sorted([2, 2, 2]) is True
    assert is_sorted([5, 1, 2, 3], 1) is True

def test_count_occurrences():
    assert count_occurrences([5, 3, 5, 7, 5, 9, 5], 5) == 4
    assert count_occurrences([5, 3, 5, 7, 5, 9, 5], 4) == 0
    assert count_occurrences([5, 3, 5, 7, 5, 9, 5], 5, 3) == 2
    assert count_occurrences([], 1) == 0

def test_count_vowels():
    assert count_vowels("Hello World") == 3
    assert count_vowels("rhythm") == 0
    assert count_vowels("AEIOU") == 5
    assert count_vowels("banana", 2) == 2

def test_count_vowels_index_out_of_range():
    with pytest.raises(InvalidInputError):
        count_vowels("abc", 4)

def test_remove_char():
    assert remove_char("banana", "a") == "bnn"
    assert remove_char("banana", "z") == "banana"
    assert remove_char("", "a") == ""
    assert remove_char("aaaa", "a") == ""

def test_remove_char_is_case_sensitive():
    assert remove_char("Banana", "b") == "Banana"

def test_remove_char_needs_single_character():
    with pytest.raises(InvalidInputError):
        remove_char("banana", "an")
    with pytest.raises(InvalidInputError):
        remove_char("banana", "")
