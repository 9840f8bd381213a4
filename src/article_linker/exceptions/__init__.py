"""
Article Linker - Exception Hierarchy.
"""

from .base import (
    ArticleServiceError,
    ArticlesApiError,
    ConnectionError,
    TimeoutError,
    MissingParameterError,
)

__all__ = [
    "ArticleServiceError",
    "ArticlesApiError",
    "ConnectionError",
    "TimeoutError",
    "MissingParameterError",
]
