"""
Backoff calculation and the retry executor.
"""

import asyncio
import functools
import logging
import random
from typing import Awaitable, Callable, ParamSpec, TypeVar

from .config import RetryConfig, RetryStrategy

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")

Operation = Callable[[], Awaitable[T]]
OnRetry = Callable[[int, Exception, float], None]


def calculate_backoff(
    attempt: int,
    config: RetryConfig,
    rand: Callable[[], float] = random.random,
) -> float:
    """
    Calculate backoff delay for a given attempt.

    Args:
        attempt: Zero-based attempt number
        config: Retry configuration
        rand: Source of uniform floats in [0, 1)

    Returns:
        Delay in seconds with jitter applied
    """
    if config.strategy == RetryStrategy.EXPONENTIAL:
        delay = config.base_delay * (2**attempt)
    elif config.strategy == RetryStrategy.LINEAR:
        delay = config.base_delay * (attempt + 1)
    else:  # CONSTANT
        delay = config.base_delay

    if config.max_delay is not None:
        delay = min(delay, config.max_delay)

    # Jitter only ever lengthens the wait: [0, jitter * delay)
    if config.jitter > 0:
        delay = delay + delay * config.jitter * rand()

    return delay


async def execute_with_retry(
    operation: Operation[T],
    config: RetryConfig | None = None,
    *,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    rand: Callable[[], float] = random.random,
    on_retry: OnRetry | None = None,
) -> T:
    """
    Run an async operation, retrying failures with backoff.

    The operation is called again on every attempt, so it must produce a fresh
    awaitable each time. The last failure is re-raised unchanged once
    ``config.max_retries`` retries have been spent.

    Args:
        operation: Zero-argument callable returning an awaitable
        config: Retry configuration (default: RetryConfig())
        sleep: Coroutine function used to wait between attempts
        rand: Source of uniform floats in [0, 1) for jitter
        on_retry: Optional callback(attempt, exception, delay) called before each retry

    Returns:
        The operation's result
    """
    if config is None:
        config = RetryConfig()

    total = config.total_attempts

    for attempt in range(total):
        try:
            return await operation()
        except Exception as e:
            logger.warning(f"Attempt {attempt + 1}/{total} failed: {e}")
            if attempt >= config.max_retries:
                if config.max_retries:
                    logger.error(f"All {config.max_retries} retries exhausted")
                raise
            delay = calculate_backoff(attempt, config, rand)
            if on_retry:
                on_retry(attempt, e, delay)
            logger.info(f"Retrying in {delay:.3f}s...")
            await sleep(delay)

    raise RuntimeError("Retry loop exited unexpectedly")


async def with_exponential_backoff(
    operation: Operation[T],
    max_retries: int = 3,
    base_delay: float = 1.0,
    **kwargs,
) -> T:
    """
    Run ``operation`` with exponential backoff and up to 10% jitter.

    Args:
        operation: Zero-argument callable returning an awaitable
        max_retries: Retries after the first attempt
        base_delay: Delay before the first retry, in seconds
        **kwargs: Passed through to execute_with_retry (sleep, rand, on_retry)

    Returns:
        The operation's result
    """
    config = RetryConfig(max_retries=max_retries, base_delay=base_delay)
    return await execute_with_retry(operation, config, **kwargs)


def async_with_retry(
    config: RetryConfig | None = None,
    on_retry: OnRetry | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Decorator for async functions with retry logic.

    Args:
        config: Retry configuration (default: RetryConfig())
        on_retry: Optional callback(attempt, exception, delay) called before each retry

    Returns:
        Decorated async function with retry behavior
    """

    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            return await execute_with_retry(
                lambda: func(*args, **kwargs),
                config,
                on_retry=on_retry,
            )

        return wrapper

    return decorator
