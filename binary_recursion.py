"""
Binary Recursion

Each call issues two recursive calls and adds their results. Nothing is
memoized, so the number of calls grows exponentially; these functions exist
to show that cost. Use iterative.fibonacci_iterative for real workloads.

Besides the depth ceiling, both functions check their exact call count
against the max_naive_calls budget before the first call. With the default
budget of 3,000,000 calls, fibonacci accepts n <= 30 and binomial accepts
every n <= 23 (larger n only for k near 0 or n).
"""

import math

import arithmetic
from validation import InvalidInputError, validate_call_budget, validate_depth, validate_non_negative


def fibonacci(n: int) -> int:
    """
    Calculate the nth Fibonacci number with naive binary recursion.

    Time complexity O(2^n): computing F(n) makes 2*F(n+1) - 1 calls.
    Stack depth O(n).

    Raises:
        InvalidInputError: If n is negative
        RecursionDepthError: If n exceeds the depth ceiling
        CallBudgetError: If the call count exceeds max_naive_calls
    """
    n = validate_non_negative(n, "n")
    validate_depth(n, "fibonacci")

    # a ends as F(n+1)
    a, b = 0, 1
    for _ in range(n + 1):
        a, b = b, a + b
    validate_call_budget(2 * a - 1, "fibonacci", "fibonacci_iterative")
    return _fibonacci(n)

def _fibonacci(n: int) -> int:
    if n <= 1:
        return n
    return arithmetic.add(_fibonacci(n - 1), _fibonacci(n - 2), "fibonacci")


def binomial(n: int, k: int) -> int:
    """
    Calculate C(n, k) from Pascal's rule C(n, k) = C(n-1, k-1) + C(n-1, k).

    The recursion makes 2*C(n, k) - 1 calls.

    Args:
        n: Row of Pascal's triangle, n >= 0
        k: Position in the row, 0 <= k <= n

    Returns:
        Binomial coefficient under the library overflow policy
    """
    n = validate_non_negative(n, "n")
    k = validate_non_negative(k, "k")
    if k > n:
        raise InvalidInputError(f"k must not exceed n, got n={n}, k={k}")
    validate_depth(n, "binomial")
    validate_call_budget(2 * math.comb(n, k) - 1, "binomial", "math.comb")
    return _binomial(n, k)

def _binomial(n: int, k: int) -> int:
    # Edges of the triangle
    if k == 0 or k == n:
        return 1
    return arithmetic.add(_binomial(n - 1, k - 1), _binomial(n - 1, k), "binomial")
