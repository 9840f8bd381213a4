"""
Article Linker - API Clients.
"""

from .articles import ArticlesApiClient

__all__ = [
    "ArticlesApiClient",
]
