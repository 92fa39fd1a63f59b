"""
Iterative Counterparts

Loop versions of the recursive algorithms. They use constant stack space,
are not subject to the depth ceiling and are the forms to use in production.
The factorial and sum loops are the tail-recursive helpers with the self-call
replaced by reassignment of (n, acc).
"""

from typing import Optional, Sequence

import arithmetic
from divide_conquer import NOT_FOUND
from validation import (
    EmptyInputError,
    as_int_view,
    validate_index,
    validate_integer,
    validate_non_negative,
)


def factorial_iterative(n: int) -> int:
    """Calculate n! with a loop. Time O(n), space O(1)."""
    n = validate_non_negative(n, "n")
    acc = 1
    while n > 1:
        acc = arithmetic.mul(n, acc, "factorial_iterative")
        n -= 1
    return acc

def sum_iterative(n: int) -> int:
    """Sum 1..n with a loop; 0 for n <= 0."""
    n = validate_integer(n, "n")
    acc = 0
    while n > 0:
        acc = arithmetic.add(acc, n, "sum_iterative")
        n -= 1
    return acc

def fibonacci_iterative(n: int) -> int:
    """
    Calculate the nth Fibonacci number by walking the sequence once.

    Time O(n), extra space O(1).
    """
    n = validate_non_negative(n, "n")
    if n <= 1:
        return n

    prev, curr = 0, 1
    for _ in range(2, n + 1):
        prev, curr = curr, arithmetic.add(prev, curr, "fibonacci_iterative")
    return curr

def power_iterative(base: int, exp: int) -> int:
    """Raise base to exp by squaring in a loop over the bits of exp."""
    base = validate_integer(base, "base")
    exp = validate_non_negative(exp, "exp")
    result = 1
    while exp > 0:
        if exp & 1:
            result = arithmetic.mul(result, base, "power_iterative")
        exp >>= 1
        if exp:
            base = arithmetic.mul(base, base, "power_iterative")
    return result

def find_max_iterative(seq: Sequence[int]) -> int:
    """Largest element of a non-empty sequence."""
    view = as_int_view(seq)
    if len(view) == 0:
        raise EmptyInputError("find_max_iterative needs at least one element")
    return int(view.max())

def binary_search_iterative(seq: Sequence[int], target: int, left: int = 0,
                            right: Optional[int] = None) -> int:
    """Loop form of divide_conquer.binary_search; probes the same midpoints."""
    view = as_int_view(seq)
    target = validate_integer(target, "target")
    left = validate_index(left, 0, len(view), "left")
    if right is None:
        right = len(view) - 1
    right = validate_index(right, -1, len(view) - 1, "right")

    while left <= right:
        mid = left + (right - left) // 2
        value = int(view[mid])
        if value == target:
            return mid
        elif value > target:
            right = mid - 1
        else:
            left = mid + 1
    return NOT_FOUND
