"""
Linear Recursion

Functions in this module make exactly one recursive call per invocation and
combine their own term with its result. Time and stack depth are both linear
in the size of the reduced parameter, so each public entry point checks the
required depth against the configured ceiling before descending.
"""

from typing import List, Sequence

import arithmetic
from validation import (
    EmptyInputError,
    as_int_view,
    validate_depth,
    validate_index,
    validate_integer,
    validate_non_negative,
)


def factorial(n: int) -> int:
    """
    Calculate n! recursively.

    Time complexity O(n), stack depth O(n).

    Args:
        n: Non-negative integer

    Returns:
        n! under the library overflow policy

    Raises:
        InvalidInputError: If n is negative
        RecursionDepthError: If n exceeds the depth ceiling
    """
    n = validate_non_negative(n, "n")
    validate_depth(n, "factorial")
    return _factorial(n)

def _factorial(n: int) -> int:
    # Base case
    if n <= 1:
        return 1
    # n! = n * (n-1)!
    return arithmetic.mul(n, _factorial(n - 1), "factorial")


def array_sum(seq: Sequence[int], index: int = 0) -> int:
    """Sum seq[index:] recursively, one element per call."""
    view = as_int_view(seq)
    index = validate_index(index, 0, len(view))
    validate_depth(len(view) - index, "array_sum")
    return _array_sum(view, index)

def _array_sum(view, index: int) -> int:
    if index == len(view):
        return 0
    return arithmetic.add(int(view[index]), _array_sum(view, index + 1), "array_sum")


def countdown(n: int) -> List[int]:
    """Return [n, n-1, ..., 1]; empty for n <= 0."""
    n = validate_integer(n, "n")
    validate_depth(n, "countdown")
    return _countdown(n)

def _countdown(n: int) -> List[int]:
    if n <= 0:
        return []
    return [n] + _countdown(n - 1)


def count_digits(n: int) -> int:
    """Count the decimal digits of a non-negative integer. Depth O(log n)."""
    n = validate_non_negative(n, "n")
    return _count_digits(n)

def _count_digits(n: int) -> int:
    if n < 10:
        return 1
    return 1 + _count_digits(n // 10)


def find_max(seq: Sequence[int], index: int = 0) -> int:
    """
    Find the largest element of seq[index:] recursively.

    Raises:
        EmptyInputError: If seq has no elements
    """
    view = as_int_view(seq)
    if len(view) == 0:
        raise EmptyInputError("find_max needs at least one element")
    index = validate_index(index, 0, len(view) - 1)
    validate_depth(len(view) - index, "find_max")
    return _find_max(view, index)

def _find_max(view, index: int) -> int:
    # Base case: last element
    if index == len(view) - 1:
        return int(view[index])
    max_of_rest = _find_max(view, index + 1)
    return max(int(view[index]), max_of_rest)


def sum_to(n: int) -> int:
    """Sum the integers 1..n recursively; 0 for n <= 0."""
    n = validate_integer(n, "n")
    validate_depth(n, "sum_to")
    return _sum_to(n)

def _sum_to(n: int) -> int:
    if n <= 0:
        return 0
    return arithmetic.add(n, _sum_to(n - 1), "sum_to")


def power(base: int, exp: int) -> int:
    """
    Raise base to exp with one multiplication per call.

    Time and depth are O(exp); see divide_conquer.fast_power for O(log exp).
    """
    base = validate_integer(base, "base")
    exp = validate_non_negative(exp, "exp")
    validate_depth(exp, "power")
    return _power(base, exp)

def _power(base: int, exp: int) -> int:
    if exp == 0:
        return 1
    return arithmetic.mul(base, _power(base, exp - 1), "power")


def digit_sum(n: int) -> int:
    """Sum the decimal digits of a non-negative integer."""
    n = validate_non_negative(n, "n")
    return _digit_sum(n)

def _digit_sum(n: int) -> int:
    if n == 0:
        return 0
    return n % 10 + _digit_sum(n // 10)


def decimal_to_binary(n: int) -> str:
    """Convert a non-negative integer to its binary digits, e.g. 13 -> '1101'."""
    n = validate_non_negative(n, "n")
    return _decimal_to_binary(n)

def _decimal_to_binary(n: int) -> str:
    if n == 0:
        return "0"
    if n == 1:
        return "1"
    return _decimal_to_binary(n // 2) + str(n % 2)
