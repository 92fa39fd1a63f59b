"""
Library Settings

Settings are read from the environment, with a .env file loaded first.
"""

import os
import sys
import logging
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator, Optional

import numpy as np
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

OVERFLOW_POLICIES = ("checked", "wrap")
INT_DTYPES = {32: np.int32, 64: np.int64}

# Frames kept free for the caller and the test runner
STACK_HEADROOM = 100


@dataclass(frozen=True)
class Settings:
    """Process-wide knobs for depth limits and integer overflow."""

    max_depth: int = 800
    max_naive_calls: int = 3_000_000
    overflow_policy: str = "checked"
    int_bits: int = 64
    log_level: str = "INFO"

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        depth_cap = sys.getrecursionlimit() - STACK_HEADROOM
        if self.max_depth > depth_cap:
            raise ValueError(
                f"max_depth must not exceed {depth_cap} (interpreter recursion limit "
                f"{sys.getrecursionlimit()} minus {STACK_HEADROOM} frames), got {self.max_depth}"
            )
        if self.max_naive_calls < 1:
            raise ValueError(f"max_naive_calls must be positive, got {self.max_naive_calls}")
        if self.overflow_policy not in OVERFLOW_POLICIES:
            raise ValueError(
                f"overflow_policy must be one of {', '.join(OVERFLOW_POLICIES)}, "
                f"got {self.overflow_policy!r}"
            )
        if self.int_bits not in INT_DTYPES:
            raise ValueError(f"int_bits must be 32 or 64, got {self.int_bits}")

    @property
    def int_dtype(self) -> type:
        return INT_DTYPES[self.int_bits]

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from RECURSION_* environment variables."""
        try:
            settings = cls(
                max_depth=int(os.getenv("RECURSION_MAX_DEPTH", cls.max_depth)),
                max_naive_calls=int(os.getenv("RECURSION_MAX_NAIVE_CALLS", cls.max_naive_calls)),
                overflow_policy=os.getenv("RECURSION_OVERFLOW_POLICY", cls.overflow_policy).strip().lower(),
                int_bits=int(os.getenv("RECURSION_INT_BITS", cls.int_bits)),
                log_level=os.getenv("RECURSION_LOG_LEVEL", cls.log_level).strip().upper(),
            )
        except ValueError as e:
            logger.error("Invalid recursion settings in environment: %s", e)
            raise

        logger.debug("Loaded settings: %s", settings)
        return settings


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the active settings, loading them from the environment once."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings

def reset_settings() -> None:
    """Forget cached settings so the next access re-reads the environment."""
    global _settings
    _settings = None

@contextmanager
def override_settings(**changes) -> Iterator[Settings]:
    """Temporarily replace individual settings fields."""
    global _settings
    previous = get_settings()
    _settings = replace(previous, **changes)
    logger.debug("Settings overridden: %s", changes)
    try:
        yield _settings
    finally:
        _settings = previous
