"""
Input Validation and Error Types

This module defines the exception hierarchy raised by the recursion library
and the validators every public function runs before its first recursive call.
"""

import sys
from typing import Any, Sequence, Union

import numpy as np

from config import STACK_HEADROOM, get_settings


class RecursionLabError(Exception):
    """Base class for all errors raised by the recursion library."""
    pass

class ValidationError(RecursionLabError):
    """Custom exception for input validation errors."""
    pass

class InvalidInputError(ValidationError):
    """Argument outside the documented domain of a function."""
    pass

class EmptyInputError(ValidationError):
    """Operation needs at least one element but got an empty sequence."""
    pass

class PreconditionViolationError(RecursionLabError):
    """A checked precondition (such as sortedness) does not hold."""
    pass

class IntegerOverflowError(RecursionLabError):
    """Result does not fit the configured integer width."""

    def __init__(self, operation: str, value: int, bits: int):
        self.operation = operation
        self.value = value
        self.bits = bits
        super().__init__(f"{operation} overflows a signed {bits}-bit integer")

class RecursionDepthError(RecursionLabError):
    """Required recursion depth exceeds the configured ceiling."""

    def __init__(self, operation: str, required: int, limit: int):
        self.operation = operation
        self.required = required
        self.limit = limit
        super().__init__(
            f"{operation} needs recursion depth {required}, limit is {limit}; "
            f"use the iterative form instead"
        )

class CallBudgetError(InvalidInputError):
    """Exponential-time call would make more calls than the configured budget."""

    def __init__(self, operation: str, required: int, limit: int, alternative: str):
        self.operation = operation
        self.required = required
        self.limit = limit
        self.alternative = alternative
        super().__init__(
            f"{operation} needs {required} calls, limit is {limit}; "
            f"use {alternative} instead"
        )


def validate_integer(value: Any, name: str) -> int:
    """Validate that a value is an integer inside the configured width and return it as int."""
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise InvalidInputError(f"{name} must be an integer, got {type(value).__name__}")
    value = int(value)
    settings = get_settings()
    info = np.iinfo(settings.int_dtype)
    if not info.min <= value <= info.max:
        raise InvalidInputError(
            f"{name} must fit a signed {settings.int_bits}-bit integer, got {value}"
        )
    return value

def validate_non_negative(value: Any, name: str) -> int:
    """Validate that a value is a non-negative integer and return it as int."""
    value = validate_integer(value, name)
    if value < 0:
        raise InvalidInputError(f"{name} must be non-negative, got {value}")
    return value

def validate_text(value: Any, name: str) -> None:
    """Validate that a value is a string."""
    if not isinstance(value, str):
        raise InvalidInputError(f"{name} must be a string, got {type(value).__name__}")

def validate_index(index: Any, low: int, high: int, name: str = "index") -> int:
    """Validate that an index lies in the closed range [low, high]."""
    index = validate_integer(index, name)
    if not low <= index <= high:
        raise InvalidInputError(f"{name} must be between {low} and {high}, got {index}")
    return index

def validate_depth(required: int, operation: str) -> None:
    """Reject a call whose recursion depth would exceed the configured ceiling."""
    # The interpreter limit may have been lowered since settings were loaded
    limit = min(get_settings().max_depth, sys.getrecursionlimit() - STACK_HEADROOM)
    if required > limit:
        raise RecursionDepthError(operation, required, limit)

def validate_call_budget(required: int, operation: str, alternative: str) -> None:
    """Reject a naive exponential-time call that would exceed the call budget."""
    limit = get_settings().max_naive_calls
    if required > limit:
        raise CallBudgetError(operation, required, limit, alternative)

def as_int_view(seq: Union[Sequence[int], np.ndarray], name: str = "seq") -> np.ndarray:
    """
    Return a read-only 1-D integer view of a sequence.

    Numpy integer arrays are viewed without copying; the caller's array and
    its flags are left untouched.

    Args:
        seq: List, tuple or numpy array of integers
        name: Argument name used in error messages

    Returns:
        Read-only numpy array with an integer dtype
    """
    if isinstance(seq, (str, bytes)):
        raise InvalidInputError(f"{name} must be a sequence of integers, got {type(seq).__name__}")
    try:
        array = np.asarray(seq)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{name} must be a sequence of integers: {e}") from e

    if array.ndim != 1:
        raise InvalidInputError(f"{name} must be one-dimensional, got {array.ndim} dimensions")
    if array.size == 0:
        array = np.empty(0, dtype=np.int64)
    elif array.dtype.kind not in "iu":
        raise InvalidInputError(f"{name} must contain only integers, got dtype {array.dtype}")
    else:
        settings = get_settings()
        info = np.iinfo(settings.int_dtype)
        if int(array.min()) < info.min or int(array.max()) > info.max:
            raise InvalidInputError(
                f"{name} elements must fit a signed {settings.int_bits}-bit integer"
            )

    view = array.view()
    view.flags.writeable = False
    return view
