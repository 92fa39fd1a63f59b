"""
Recursion Profiling

Measures what the complexity notes in the algorithm modules claim: how many
Python-level calls a function makes, how deep its stack gets, and how long it
runs next to its iterative counterpart.
"""

import sys
import time
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Tuple

logger = logging.getLogger(__name__)


@dataclass
class CallProfile:
    """Calls made inside one module while a function ran."""

    counts: Dict[str, int] = field(default_factory=dict)
    max_depth: int = 0

    @property
    def calls(self) -> int:
        return sum(self.counts.values())


def count_calls(func: Callable, *args: Any) -> Tuple[Any, CallProfile]:
    """
    Run func(*args) and count calls to code defined in func's module.

    Calls into other modules (validation, arithmetic, builtins) are not
    counted, so for a recursive algorithm the profile shows the public entry
    point once plus every call of its private worker.

    Args:
        func: Function to run
        *args: Positional arguments for func

    Returns:
        Tuple of (func's return value, CallProfile)
    """
    filename = func.__code__.co_filename
    counts = Counter()
    depth = 0
    max_depth = 0

    def profiler(frame, event, arg):
        nonlocal depth, max_depth
        if frame.f_code.co_filename != filename:
            return
        if event == "call":
            counts[frame.f_code.co_name] += 1
            depth += 1
            max_depth = max(max_depth, depth)
        elif event == "return":
            depth -= 1

    previous = sys.getprofile()
    sys.setprofile(profiler)
    try:
        result = func(*args)
    finally:
        sys.setprofile(previous)

    return result, CallProfile(counts=dict(counts), max_depth=max_depth)


def time_call(func: Callable, *args: Any) -> Tuple[Any, float]:
    """Run func(*args) and return (result, elapsed seconds)."""
    start = time.perf_counter()
    result = func(*args)
    return result, time.perf_counter() - start


@dataclass
class Comparison:
    """Side-by-side run of a recursive function and its iterative twin."""

    name: str
    args: Tuple[Any, ...]
    recursive_result: Any
    iterative_result: Any
    recursive_profile: CallProfile
    iterative_profile: CallProfile
    recursive_seconds: float
    iterative_seconds: float

    @property
    def agree(self) -> bool:
        return self.recursive_result == self.iterative_result

    def summary(self) -> str:
        """Return a multi-line report of the comparison."""
        args_text = ", ".join(str(a) for a in self.args)
        lines = [
            f"{self.name}({args_text})",
            f"  recursive: {self.recursive_result} "
            f"({self.recursive_profile.calls} calls, depth {self.recursive_profile.max_depth}, "
            f"{self.recursive_seconds * 1000:.3f} ms)",
            f"  iterative: {self.iterative_result} "
            f"({self.iterative_profile.calls} calls, depth {self.iterative_profile.max_depth}, "
            f"{self.iterative_seconds * 1000:.3f} ms)",
            f"  results {'match' if self.agree else 'DIFFER'}",
        ]
        return "\n".join(lines)


def compare(recursive: Callable, iterative: Callable, *args: Any) -> Comparison:
    """
    Profile and time a recursive function against its iterative counterpart.

    Timing runs happen without the profiler attached so call counting does not
    distort them.
    """
    recursive_result, recursive_profile = count_calls(recursive, *args)
    iterative_result, iterative_profile = count_calls(iterative, *args)
    _, recursive_seconds = time_call(recursive, *args)
    _, iterative_seconds = time_call(iterative, *args)

    comparison = Comparison(
        name=recursive.__name__,
        args=args,
        recursive_result=recursive_result,
        iterative_result=iterative_result,
        recursive_profile=recursive_profile,
        iterative_profile=iterative_profile,
        recursive_seconds=recursive_seconds,
        iterative_seconds=iterative_seconds,
    )
    logger.debug("Compared %s%s: %d vs %d calls", comparison.name, args,
                 recursive_profile.calls, iterative_profile.calls)
    return comparison
