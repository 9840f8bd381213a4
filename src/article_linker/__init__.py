"""
Article Linker - links a keyword in an article draft and publishes it.

A small serverless function built around an async retry executor with
exponential backoff and jitter.
"""

from .clients import ArticlesApiClient
from .config import ServiceConfig
from .exceptions import (
    ArticleServiceError,
    ArticlesApiError,
    ConnectionError,
    TimeoutError,
    MissingParameterError,
)
from .processing import ArticleProcessor
from .retry import (
    RetryConfig,
    RetryStrategy,
    calculate_backoff,
    execute_with_retry,
    with_exponential_backoff,
    async_with_retry,
)
from .service import ArticleLinkService

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Clients
    "ArticlesApiClient",
    # Service
    "ArticleLinkService",
    "ArticleProcessor",
    "ServiceConfig",
    # Exceptions
    "ArticleServiceError",
    "ArticlesApiError",
    "ConnectionError",
    "TimeoutError",
    "MissingParameterError",
    # Retry
    "RetryConfig",
    "RetryStrategy",
    "calculate_backoff",
    "execute_with_retry",
    "with_exponential_backoff",
    "async_with_retry",
]
