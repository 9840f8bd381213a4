"""
Content API client for article draft revisions.
"""

import logging
from urllib.parse import quote

import httpx

from ..exceptions import ArticlesApiError, ConnectionError, TimeoutError

logger = logging.getLogger(__name__)


class ArticlesApiClient:
    """
    Client for the articles content API.

    Each call opens its own connection, so a retried call is a fresh request.
    Non-200 responses raise ArticlesApiError; transport failures raise
    ConnectionError or TimeoutError.
    """

    def __init__(self, base_url: str, token: str, timeout: float = 30.0):
        """
        Initialize the client.

        Args:
            base_url: Content API base URL (without the /v1/article suffix)
            token: Bearer token for the Authorization header
            timeout: Request timeout in seconds
        """
        self.base_url = f"{base_url.rstrip('/')}/v1/article"
        self.token = token
        self.timeout = timeout

    def _get_headers(self) -> dict:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.token}",
        }

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self._get_headers(),
            timeout=self.timeout,
        )

    def _path(self, article_id: str, suffix: str) -> str:
        # The ID is a single path segment
        return f"/{quote(article_id, safe='')}/{suffix}"

    def _check_status(self, response: httpx.Response, action: str) -> None:
        if response.status_code != 200:
            raise ArticlesApiError(
                f"Failed to {action}. Status code: {response.status_code}",
                status_code=response.status_code,
            )

    async def _request(self, method: str, path: str, json: dict | None = None) -> httpx.Response:
        logger.debug(f"{method} {self.base_url}{path}")
        try:
            async with self._client() as client:
                if method == "GET":
                    return await client.get(path)
                if method == "PUT":
                    return await client.put(path, json=json)
                return await client.post(path, json=json)
        except httpx.TimeoutException as e:
            raise TimeoutError(f"Request to {path} timed out after {self.timeout}s") from e
        except httpx.TransportError as e:
            raise ConnectionError(f"Failed to connect to {self.base_url}: {e}") from e

    async def get_draft_revision(self, article_id: str) -> dict:
        """
        Get the draft revision of an article.

        Args:
            article_id: The article ID

        Returns:
            The draft revision document
        """
        response = await self._request("GET", self._path(article_id, "revision/draft"))
        self._check_status(response, "get draft revision")
        return response.json()

    async def update_draft_revision(self, article_id: str, draft_revision: dict) -> None:
        """Replace the draft revision of an article."""
        response = await self._request(
            "PUT",
            self._path(article_id, "revision/draft"),
            json={"document_id": article_id, "draftRevision": draft_revision},
        )
        self._check_status(response, "update draft revision")

    async def publish_document(self, article_id: str) -> None:
        """Publish the current draft revision of an article."""
        response = await self._request(
            "POST",
            self._path(article_id, "revision/published"),
            json={"type": "story", "id": article_id},
        )
        self._check_status(response, "publish document")
