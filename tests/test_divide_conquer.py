import numpy as np
import pytest

from divide_conquer import NOT_FOUND, binary_search, fast_power, gcd
from validation import InvalidInputError, PreconditionViolationError

SORTED_VALUES = [2, 5, 8, 12, 16, 23, 38, 45, 56, 67, 78]


@pytest.mark.parametrize("a, b, expected", [(48, 18, 6), (100, 35, 5), (17, 5, 1), (0, 9, 9), (9, 0, 9)])
def test_gcd(a, b, expected):
    assert gcd(a, b) == expected

def test_gcd_zero_divisor_returns_first_argument():
    assert gcd(0, 0) == 0
    assert gcd(-4, 0) == -4

def test_gcd_negative_inputs_follow_floored_modulo():
    # 18 % -48 == -30, -48 % -30 == -18, -30 % -18 == -12, ...
    assert gcd(18, -48) == -6
    assert abs(gcd(-48, 18)) == 6

def test_binary_search_found():
    assert binary_search(SORTED_VALUES, 23) == 5
    assert binary_search(SORTED_VALUES, 2) == 0
    assert binary_search(SORTED_VALUES, 78) == 10

def test_binary_search_not_found():
    assert binary_search(SORTED_VALUES, 99) == NOT_FOUND
    assert binary_search(SORTED_VALUES, 1) == NOT_FOUND
    assert binary_search(SORTED_VALUES, 24) == NOT_FOUND
    assert binary_search([], 3) == NOT_FOUND

def test_binary_search_within_bounds():
    assert binary_search(SORTED_VALUES, 23, 6, 10) == NOT_FOUND
    assert binary_search(SORTED_VALUES, 45, 6, 10) == 7

def test_binary_search_rejects_bad_bounds():
    with pytest.raises(InvalidInputError):
        binary_search(SORTED_VALUES, 23, 0, 11)
    with pytest.raises(InvalidInputError):
        binary_search(SORTED_VALUES, 23, -1)

def test_binary_search_duplicates_are_deterministic():
    values = [1, 3, 3, 3, 3, 3, 9]
    first = binary_search(values, 3)
    assert values[first] == 3
    assert binary_search(values, 3) == first
    # Midpoint of [0, 6] is 3, which already holds the target
    assert first == 3

def test_binary_search_accepts_numpy_arrays():
    assert binary_search(np.array(SORTED_VALUES), 56) == 8

def test_binary_search_unsorted_input_is_undefined_but_safe():
    result = binary_search([9, 1, 7, 3], 3)
    assert result == NOT_FOUND or result in range(4)

def test_binary_search_sortedness_check():
    with pytest.raises(PreconditionViolationError):
        binary_search([9, 1, 7, 3], 3, check_sorted=True)
    assert binary_search(SORTED_VALUES, 16, check_sorted=True) == 4

@pytest.mark.parametrize("base, exp, expected", [(2, 10, 1024), (3, 0, 1), (0, 0, 1), (0, 5, 0), (5, 3, 125), (-2, 5, -32), (2, 62, 2 ** 62)])
def test_fast_power(base, exp, expected):
    assert fast_power(base, exp) == expected

def test_fast_power_reaches_minimum_int64():
    assert fast_power(-2, 63) == -(2 ** 63)

def test_fast_power_rejects_negative_exponent():
    with pytest.raises(InvalidInputError):
        fast_power(2, -1)
