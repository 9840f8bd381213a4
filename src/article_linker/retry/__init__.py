"""
Article Linker - Retry Logic.

Async retry executor with exponential backoff and jitter.
"""

from .config import RetryConfig, RetryStrategy
from .backoff import (
    calculate_backoff,
    execute_with_retry,
    with_exponential_backoff,
    async_with_retry,
)

__all__ = [
    "RetryConfig",
    "RetryStrategy",
    "calculate_backoff",
    "execute_with_retry",
    "with_exponential_backoff",
    "async_with_retry",
]
