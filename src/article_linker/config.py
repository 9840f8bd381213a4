"""Configuration loaded from environment variables.

Centralizes all environment variable access so the handler can be tested
with an explicit ``ServiceConfig``.
"""

import os
from dataclasses import dataclass, field
from typing import Mapping

from .retry import RetryConfig

REQUIRED_VARIABLES = ("ARTICLES_API_BASE_URL", "ARTICLES_API_TOKEN")


@dataclass
class ServiceConfig:
    """
    Settings for one function container.

    Attributes:
        api_base_url: Content API base URL
        api_token: Bearer token for the content API
        api_timeout: Per-request timeout in seconds
        retry: Retry policy applied to each content API call
        keyword: Text to turn into a link
        link_url: Link target for the keyword
        log_level: Level name for the package logger
    """

    api_base_url: str
    api_token: str
    api_timeout: float = 30.0
    retry: RetryConfig = field(default_factory=RetryConfig)
    keyword: str = "Google"
    link_url: str = "https://www.google.com/"
    log_level: str = "INFO"

    @staticmethod
    def get_missing_config(environ: Mapping[str, str] | None = None) -> list[str]:
        """Get the names of required variables that are unset or empty."""
        environ = os.environ if environ is None else environ
        return [name for name in REQUIRED_VARIABLES if not environ.get(name)]

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ServiceConfig":
        """Build a config from ``environ`` (default: os.environ)."""
        environ = os.environ if environ is None else environ

        missing = cls.get_missing_config(environ)
        if missing:
            raise ValueError(f"Missing required configuration: {', '.join(missing)}")

        retry = RetryConfig(
            max_retries=int(environ.get("RETRY_MAX_RETRIES", "3")),
            base_delay=float(environ.get("RETRY_BASE_DELAY", "1.0")),
        )
        return cls(
            api_base_url=environ["ARTICLES_API_BASE_URL"],
            api_token=environ["ARTICLES_API_TOKEN"],
            api_timeout=float(environ.get("ARTICLES_API_TIMEOUT", "30.0")),
            retry=retry,
            keyword=environ.get("LINK_KEYWORD", "Google"),
            link_url=environ.get("LINK_URL", "https://www.google.com/"),
            log_level=environ.get("LOG_LEVEL", "INFO").upper(),
        )
