"""
Divide-and-Conquer Recursion

Each call shrinks the problem by a constant factor, so recursion depth is
logarithmic in the input and these functions are not subject to the depth
ceiling.
"""

from typing import Optional, Sequence

import numpy as np

import arithmetic
from validation import (
    PreconditionViolationError,
    as_int_view,
    validate_index,
    validate_integer,
    validate_non_negative,
)

NOT_FOUND = -1


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor by the Euclidean algorithm.

    Time O(log min(a, b)). Uses Python's floored modulo; the sign of the
    result for negative inputs is whatever the reduction produces and is not
    normalized, so gcd(a, 0) == a for every a.
    """
    a = validate_integer(a, "a")
    b = validate_integer(b, "b")
    return _gcd(a, b)

def _gcd(a: int, b: int) -> int:
    if b == 0:
        return a
    return _gcd(b, a % b)


def binary_search(seq: Sequence[int], target: int, left: int = 0,
                  right: Optional[int] = None, check_sorted: bool = False) -> int:
    """
    Search a sorted sequence for target by halving the active range.

    When target occurs more than once, the index returned is the first one the
    midpoint sequence lands on; it is deterministic but neither the leftmost
    nor the rightmost occurrence in general.

    Args:
        seq: Integers sorted ascending
        target: Value to look for
        left: First index of the active range
        right: Last index of the active range, defaults to len(seq) - 1
        check_sorted: Verify the ordering first instead of trusting the caller

    Returns:
        An index i with seq[i] == target, or NOT_FOUND

    Raises:
        PreconditionViolationError: If check_sorted is set and seq is unsorted
    """
    view = as_int_view(seq)
    target = validate_integer(target, "target")
    left = validate_index(left, 0, len(view), "left")
    if right is None:
        right = len(view) - 1
    right = validate_index(right, -1, len(view) - 1, "right")

    if check_sorted and len(view) > 1 and not bool(np.all(view[:-1] <= view[1:])):
        raise PreconditionViolationError("binary_search needs seq sorted in ascending order")

    # Unsorted input yields an arbitrary index or NOT_FOUND
    return _binary_search(view, target, left, right)

def _binary_search(view, target: int, left: int, right: int) -> int:
    if left > right:
        return NOT_FOUND

    mid = left + (right - left) // 2
    value = int(view[mid])

    if value == target:
        return mid
    elif value > target:
        return _binary_search(view, target, left, mid - 1)
    else:
        return _binary_search(view, target, mid + 1, right)


def fast_power(base: int, exp: int) -> int:
    """
    Raise base to exp by repeated squaring.

    O(log exp) multiplications instead of the O(exp) of linear_recursion.power.
    """
    base = validate_integer(base, "base")
    exp = validate_non_negative(exp, "exp")
    return _fast_power(base, exp)

def _fast_power(base: int, exp: int) -> int:
    if exp == 0:
        return 1

    half = _fast_power(base, exp // 2)

    if exp % 2 == 0:
        return arithmetic.mul(half, half, "fast_power")
    return arithmetic.mul(arithmetic.mul(base, half, "fast_power"), half, "fast_power")
