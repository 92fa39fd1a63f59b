"""
Tail Recursion

The recursive call is the last thing each helper does; the partial result
travels forward in an accumulator instead of waiting on the stack. Python does
not eliminate tail calls, so depth is still linear and still gated, but the
shape converts mechanically into the loops in iterative.py: replace the call
with reassignment of (n, acc) and loop until the base case.

Callers only see the single-argument entry points; the accumulator starts at
the identity of the operation (1 for products, 0 for sums).
"""

import arithmetic
from validation import validate_depth, validate_integer, validate_non_negative


def factorial_tail(n: int) -> int:
    """Calculate n! through an accumulator-passing helper."""
    n = validate_non_negative(n, "n")
    validate_depth(n, "factorial_tail")
    return _factorial_tail(n, 1)

def _factorial_tail(n: int, acc: int) -> int:
    if n <= 1:
        return acc
    return _factorial_tail(n - 1, arithmetic.mul(n, acc, "factorial_tail"))


def sum_tail(n: int) -> int:
    """Sum 1..n through an accumulator-passing helper; 0 for n <= 0."""
    n = validate_integer(n, "n")
    validate_depth(n, "sum_tail")
    return _sum_tail(n, 0)

def _sum_tail(n: int, acc: int) -> int:
    if n <= 0:
        return acc
    return _sum_tail(n - 1, arithmetic.add(acc, n, "sum_tail"))
