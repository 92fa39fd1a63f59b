"""
Recursion Walkthroughs

Narrated runs of the library that log each step: recursion basics, the
common recursion patterns, and recursion compared with iteration.
"""

import logging
from typing import Callable, Dict

import arithmetic
import binary_recursion
import divide_conquer
import iterative
import linear_recursion
import profiling
import sequence_recursion
import tail_recursion
from config import get_settings
from validation import CallBudgetError, RecursionDepthError, validate_depth, validate_non_negative

logger = logging.getLogger(__name__)


def factorial_with_trace(n: int, depth: int = 0) -> int:
    """Calculate n! and log every call and return, indented by stack depth."""
    if depth == 0:
        n = validate_non_negative(n, "n")
        validate_depth(n, "factorial_with_trace")

    indent = "  " * depth
    logger.info("%s-> factorial(%d) called", indent, n)

    if n <= 1:
        logger.info("%s<- factorial(%d) = 1 (base case)", indent, n)
        return 1

    result = arithmetic.mul(n, factorial_with_trace(n - 1, depth + 1), "factorial")
    logger.info("%s<- factorial(%d) = %d", indent, n, result)
    return result


def demonstrate_basics() -> None:
    """Countdown, base and recursive cases, and the call stack."""
    logger.info("--- Recursion Basics ---")

    logger.info("Counting down from 5: %s, liftoff!", linear_recursion.countdown(5))

    logger.info("Base case stops the recursion: factorial(n) returns 1 when n <= 1")
    logger.info("factorial(5) = %d", linear_recursion.factorial(5))

    logger.info("Recursive case moves toward the base case: sum(n) = n + sum(n-1)")
    logger.info("sum_to(5) = %d", linear_recursion.sum_to(5))

    logger.info("Tracing factorial(4):")
    logger.info("Final result: %d", factorial_with_trace(4))

    logger.info("Depth ceiling: calls needing more than %d frames are rejected up front",
                get_settings().max_depth)

    logger.info("power(2, 3) = %d", linear_recursion.power(2, 3))
    logger.info("sum_to(10) = %d", linear_recursion.sum_to(10))
    logger.info("fibonacci(6) = %d (naive, exponential time)", binary_recursion.fibonacci(6))
    logger.info("reverse_string('Hello') = '%s'", sequence_recursion.reverse_string("Hello"))
    logger.info("count_digits(12345) = %d", linear_recursion.count_digits(12345))


def demonstrate_patterns() -> None:
    """Linear, binary, tail, array, string and divide-and-conquer recursion."""
    logger.info("--- Linear Recursion ---")
    logger.info("factorial(6) = %d", linear_recursion.factorial(6))
    numbers = [5, 10, 15, 20, 25]
    logger.info("array_sum(%s) = %d", numbers, linear_recursion.array_sum(numbers))

    logger.info("--- Binary Recursion ---")
    logger.info("fibonacci(0..6) = %s", [binary_recursion.fibonacci(i) for i in range(7)])
    logger.info("binomial(6, 2) = %d", binary_recursion.binomial(6, 2))

    logger.info("--- Tail Recursion ---")
    logger.info("factorial_tail(6) = %d", tail_recursion.factorial_tail(6))
    logger.info("sum_tail(10) = %d", tail_recursion.sum_tail(10))

    logger.info("--- Array Recursion ---")
    numbers = [45, 12, 78, 23, 89, 34, 56]
    logger.info("find_max(%s) = %d", numbers, linear_recursion.find_max(numbers))
    for values in ([1, 3, 5, 7, 9], [1, 5, 3, 7, 9]):
        logger.info("is_sorted(%s) = %s", values, sequence_recursion.is_sorted(values))
    values = [5, 3, 5, 7, 5, 9, 5]
    logger.info("count_occurrences(%s, 5) = %d", values, sequence_recursion.count_occurrences(values, 5))

    logger.info("--- String Recursion ---")
    for word in ("racecar", "hello"):
        logger.info("is_palindrome('%s') = %s", word, sequence_recursion.is_palindrome(word))
    logger.info("count_vowels('Hello World') = %d", sequence_recursion.count_vowels("Hello World"))
    logger.info("remove_char('banana', 'a') = '%s'", sequence_recursion.remove_char("banana", "a"))

    logger.info("--- Divide and Conquer ---")
    logger.info("gcd(48, 18) = %d", divide_conquer.gcd(48, 18))
    logger.info("gcd(100, 35) = %d", divide_conquer.gcd(100, 35))
    sorted_values = [2, 5, 8, 12, 16, 23, 38, 45, 56, 67, 78]
    for target in (23, 99):
        logger.info("binary_search(%s, %d) = %d", sorted_values, target,
                    divide_conquer.binary_search(sorted_values, target))
    logger.info("digit_sum(12345) = %d", linear_recursion.digit_sum(12345))
    logger.info("fast_power(2, 10) = %d", divide_conquer.fast_power(2, 10))
    logger.info("decimal_to_binary(13) = '%s'", linear_recursion.decimal_to_binary(13))


def demonstrate_iteration() -> None:
    """Recursive and iterative forms side by side."""
    logger.info("--- Recursion vs Iteration ---")
    comparisons = [
        (linear_recursion.factorial, iterative.factorial_iterative, 8),
        (binary_recursion.fibonacci, iterative.fibonacci_iterative, 10),
        (binary_recursion.fibonacci, iterative.fibonacci_iterative, 20),
        (linear_recursion.sum_to, iterative.sum_iterative, 100),
    ]
    for recursive, loop, n in comparisons:
        logger.info(profiling.compare(recursive, loop, n).summary())

    numbers = [45, 12, 78, 23, 89, 34, 56, 91, 67]
    logger.info(profiling.compare(linear_recursion.find_max, iterative.find_max_iterative, numbers).summary())

    logger.info("Recursion: O(n) stack frames, limited by the depth ceiling")
    logger.info("Iteration: O(1) stack frames, no depth limit")

    logger.info("--- When to use which ---")
    logger.info("Recursion: naturally recursive structure, divide and conquer, "
                "depth known to stay small (log n)")
    logger.info("Iteration: sequential work such as sums, counts and scans, "
                "deep or unbounded input, performance-critical code")
    logger.info("Default to iteration for simple problems; profile before trusting recursion on large inputs")


def demonstrate_limits() -> None:
    """Inputs the library refuses up front, and the iterative form that handles them."""
    settings = get_settings()
    logger.info("--- Stack Limits ---")
    logger.info("Each recursive call takes a stack frame; the depth ceiling is %d", settings.max_depth)
    logger.info("Dangers: a missing base case, a base case never reached, or an input that is simply too deep")

    n = settings.max_depth + 1
    try:
        linear_recursion.sum_to(n)
    except RecursionDepthError as e:
        logger.warning("sum_to(%d) rejected: %s", n, e)
    logger.info("sum_iterative(%d) = %d", n, iterative.sum_iterative(n))

    logger.info("--- Exponential Time ---")
    logger.info("Naive calls are capped at %d per run", settings.max_naive_calls)
    try:
        binary_recursion.fibonacci(40)
    except CallBudgetError as e:
        logger.warning("fibonacci(40) rejected: %s", e)
    logger.info("fibonacci_iterative(40) = %d", iterative.fibonacci_iterative(40))

    logger.info("Prevention: validate inputs, keep depth logarithmic where possible, "
                "and switch to the loop form for deep inputs")


DEMOS: Dict[str, Callable[[], None]] = {
    "basics": demonstrate_basics,
    "patterns": demonstrate_patterns,
    "iteration": demonstrate_iteration,
    "limits": demonstrate_limits,
}
