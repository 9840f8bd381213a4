"""
Retry policy and strategy definitions.
"""

import math
from dataclasses import dataclass
from enum import Enum


class RetryStrategy(str, Enum):
    """Available backoff strategies."""

    EXPONENTIAL = "exponential"  # delay = base * (2 ** attempt)
    LINEAR = "linear"  # delay = base * (attempt + 1)
    CONSTANT = "constant"  # delay = base


@dataclass(frozen=True)
class RetryConfig:
    """
    Policy for one retry sequence.

    Attributes:
        max_retries: Retries after the first attempt (default: 3, so 4 attempts)
        base_delay: Base delay in seconds (default: 1.0)
        strategy: Backoff strategy to use (default: exponential)
        max_delay: Optional cap in seconds, applied before jitter (default: none)
        jitter: Upper bound of the added jitter as a fraction of the delay
            (default: 0.1, i.e. up to +10%)
    """

    max_retries: int = 3
    base_delay: float = 1.0
    strategy: RetryStrategy = RetryStrategy.EXPONENTIAL
    max_delay: float | None = None
    jitter: float = 0.1

    def __post_init__(self) -> None:
        if not isinstance(self.max_retries, int) or isinstance(self.max_retries, bool):
            raise ValueError(f"max_retries must be an integer, got {self.max_retries!r}")
        for name in ("base_delay", "max_delay", "jitter"):
            value = getattr(self, name)
            if value is not None and math.isnan(value):
                raise ValueError(f"{name} must be a number, got NaN")
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")
        if self.base_delay < 0:
            raise ValueError(f"base_delay must be >= 0, got {self.base_delay}")
        if self.max_delay is not None and self.max_delay < 0:
            raise ValueError(f"max_delay must be >= 0, got {self.max_delay}")
        if self.jitter < 0:
            raise ValueError(f"jitter must be >= 0, got {self.jitter}")

    @property
    def total_attempts(self) -> int:
        return self.max_retries + 1

    @classmethod
    def aggressive(cls) -> "RetryConfig":
        """Preset for aggressive retry (more attempts, longer delays)."""
        return cls(
            max_retries=6,
            base_delay=2.0,
            max_delay=60.0,
        )

    @classmethod
    def conservative(cls) -> "RetryConfig":
        """Preset for conservative retry (fewer attempts, shorter delays)."""
        return cls(
            max_retries=2,
            base_delay=0.5,
            max_delay=5.0,
        )

    @classmethod
    def no_retry(cls) -> "RetryConfig":
        """Preset for no retry (single attempt only)."""
        return cls(max_retries=0)
