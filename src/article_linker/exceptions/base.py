"""
Base exception classes for article service operations.

Errors raised by the content API client are retried by the retry executor;
``MissingParameterError`` is raised at the request boundary and never retried.
"""


class ArticleServiceError(Exception):
    """Base exception for all article service errors."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message


class ArticlesApiError(ArticleServiceError):
    """Raised when the content API answers with a non-success status."""


class ConnectionError(ArticleServiceError):
    """Raised when the content API cannot be reached."""

    def __init__(self, message: str = "Connection failed", **kwargs):
        super().__init__(message, **kwargs)


class TimeoutError(ArticleServiceError):
    """Raised when a content API request times out."""

    def __init__(self, message: str = "Request timed out", **kwargs):
        super().__init__(message, **kwargs)


class MissingParameterError(ArticleServiceError):
    """Raised when a required request parameter is absent."""

    def __init__(self, parameter: str):
        super().__init__(f"Missing required parameter: {parameter}", status_code=400)
        self.parameter = parameter
