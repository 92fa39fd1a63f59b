"""
Fixed-Width Integer Arithmetic

Every integer the library produces is held to a signed width taken from the
settings (64 bits by default). Results that leave the range are handled by a
single policy for the whole process:

- ``checked``: raise IntegerOverflowError at the first out-of-range step.
- ``wrap``: reduce modulo 2**bits into the signed range, the way Java's
  ``int`` and ``long`` behave.
"""

import numpy as np

from config import get_settings
from validation import IntegerOverflowError


def bounds() -> tuple:
    """Return (min, max) of the configured integer width."""
    info = np.iinfo(get_settings().int_dtype)
    return int(info.min), int(info.max)

def wrap(value: int, bits: int) -> int:
    """Reduce a Python integer into the signed two's complement range of `bits`."""
    modulus = 1 << bits
    half = 1 << (bits - 1)
    return (value + half) % modulus - half

def fit(value: int, operation: str) -> int:
    """Apply the overflow policy to an exact intermediate result."""
    settings = get_settings()
    low, high = bounds()
    if low <= value <= high:
        return value
    if settings.overflow_policy == "wrap":
        return wrap(value, settings.int_bits)
    raise IntegerOverflowError(operation, value, settings.int_bits)

def add(a: int, b: int, operation: str = "addition") -> int:
    return fit(a + b, operation)

def mul(a: int, b: int, operation: str = "multiplication") -> int:
    return fit(a * b, operation)
