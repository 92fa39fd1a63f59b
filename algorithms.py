"""
Algorithm Catalog

Maps command names to library functions, their argument kinds and, where one
exists, the iterative counterpart used by the compare command.

Argument kinds:
    int   - a single integer
    ints  - a comma-separated list of integers, e.g. 3,9,2
    text  - free text, may contain spaces
    char  - exactly one character
"""

from typing import Callable, Dict, NamedTuple, Optional, Tuple

import binary_recursion
import divide_conquer
import iterative
import linear_recursion
import sequence_recursion
import tail_recursion


class Algorithm(NamedTuple):
    name: str
    func: Callable
    params: Tuple[str, ...]
    family: str
    summary: str
    iterative: Optional[Callable] = None


_CATALOG = [
    Algorithm("factorial", linear_recursion.factorial, ("int",), "linear",
              "n! for n >= 0", iterative.factorial_iterative),
    Algorithm("array_sum", linear_recursion.array_sum, ("ints",), "linear",
              "sum of a list"),
    Algorithm("countdown", linear_recursion.countdown, ("int",), "linear",
              "n, n-1, ..., 1"),
    Algorithm("count_digits", linear_recursion.count_digits, ("int",), "linear",
              "number of decimal digits"),
    Algorithm("find_max", linear_recursion.find_max, ("ints",), "linear",
              "largest element of a list", iterative.find_max_iterative),
    Algorithm("sum_to", linear_recursion.sum_to, ("int",), "linear",
              "1 + 2 + ... + n", iterative.sum_iterative),
    Algorithm("power", linear_recursion.power, ("int", "int"), "linear",
              "base^exp, one multiplication per call", iterative.power_iterative),
    Algorithm("digit_sum", linear_recursion.digit_sum, ("int",), "linear",
              "sum of decimal digits"),
    Algorithm("decimal_to_binary", linear_recursion.decimal_to_binary, ("int",), "linear",
              "binary digits of n"),
    Algorithm("fibonacci", binary_recursion.fibonacci, ("int",), "binary",
              "nth Fibonacci number, naive", iterative.fibonacci_iterative),
    Algorithm("binomial", binary_recursion.binomial, ("int", "int"), "binary",
              "C(n, k) by Pascal's rule"),
    Algorithm("factorial_tail", tail_recursion.factorial_tail, ("int",), "tail",
              "n! with an accumulator", iterative.factorial_iterative),
    Algorithm("sum_tail", tail_recursion.sum_tail, ("int",), "tail",
              "1 + ... + n with an accumulator", iterative.sum_iterative),
    Algorithm("gcd", divide_conquer.gcd, ("int", "int"), "divide-and-conquer",
              "greatest common divisor"),
    Algorithm("binary_search", divide_conquer.binary_search, ("ints", "int"), "divide-and-conquer",
              "index of target in a sorted list, -1 if absent", iterative.binary_search_iterative),
    Algorithm("fast_power", divide_conquer.fast_power, ("int", "int"), "divide-and-conquer",
              "base^exp by squaring", iterative.power_iterative),
    Algorithm("is_palindrome", sequence_recursion.is_palindrome, ("text",), "sequence",
              "reads the same both ways, ignoring case"),
    Algorithm("reverse_string", sequence_recursion.reverse_string, ("text",), "sequence",
              "text reversed"),
    Algorithm("is_sorted", sequence_recursion.is_sorted, ("ints",), "sequence",
              "list is in ascending order"),
    Algorithm("count_occurrences", sequence_recursion.count_occurrences, ("ints", "int"), "sequence",
              "how often a value appears in a list"),
    Algorithm("count_vowels", sequence_recursion.count_vowels, ("text",), "sequence",
              "number of vowels"),
    Algorithm("remove_char", sequence_recursion.remove_char, ("text", "char"), "sequence",
              "text without a character"),
]

ALGORITHMS: Dict[str, Algorithm] = {algorithm.name: algorithm for algorithm in _CATALOG}

ALIASES = {
    "fact": "factorial",
    "fib": "fibonacci",
    "sum": "sum_to",
    "max": "find_max",
    "binary": "decimal_to_binary",
    "choose": "binomial",
    "palindrome": "is_palindrome",
    "reverse": "reverse_string",
    "sorted": "is_sorted",
    "count": "count_occurrences",
    "vowels": "count_vowels",
    "remove": "remove_char",
}


def lookup(name: str) -> Optional[Algorithm]:
    """Find an algorithm by name or alias."""
    name = name.lower()
    return ALGORITHMS.get(ALIASES.get(name, name))
