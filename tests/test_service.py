"""Tests for the article pipeline."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from article_linker.clients import ArticlesApiClient
from article_linker.config import ServiceConfig
from article_linker.exceptions import ArticlesApiError
from article_linker.processing import ArticleProcessor
from article_linker.retry import RetryConfig
from article_linker.service import ArticleLinkService

ARTICLE_ID = "article-1"
DRAFT = {
    "id": ARTICLE_ID,
    "content_elements": [{"_id": "1", "type": "text", "content": "Search with Google"}],
}


@pytest.fixture
def api_client():
    client = MagicMock(spec=ArticlesApiClient)
    client.get_draft_revision = AsyncMock(return_value=DRAFT)
    client.update_draft_revision = AsyncMock(return_value=None)
    client.publish_document = AsyncMock(return_value=None)
    return client


@pytest.fixture
def service(api_client):
    # Zero base delay keeps retries instant
    return ArticleLinkService(
        api_client, ArticleProcessor(), RetryConfig(max_retries=2, base_delay=0.0)
    )


class TestProcess:
    """Test the fetch, transform, update, publish sequence."""

    @pytest.mark.asyncio
    async def test_runs_all_steps_in_order(self, service, api_client):
        calls = []
        api_client.get_draft_revision.side_effect = lambda *a: calls.append("get") or DRAFT
        api_client.update_draft_revision.side_effect = lambda *a: calls.append("update")
        api_client.publish_document.side_effect = lambda *a: calls.append("publish")

        await service.process(ARTICLE_ID)

        assert calls == ["get", "update", "publish"]

    @pytest.mark.asyncio
    async def test_writes_back_transformed_draft(self, service, api_client):
        result = await service.process(ARTICLE_ID)

        api_client.update_draft_revision.assert_awaited_once_with(ARTICLE_ID, result)
        assert "<a href=" in result["content_elements"][0]["content"]
        assert DRAFT["content_elements"][0]["content"] == "Search with Google"
        api_client.publish_document.assert_awaited_once_with(ARTICLE_ID)

    @pytest.mark.asyncio
    async def test_each_step_retries_independently(self, service, api_client):
        """A transient failure in one step does not repeat earlier steps."""
        api_client.update_draft_revision.side_effect = [
            ArticlesApiError("Failed to update draft revision. Status code: 503"),
            None,
        ]
        api_client.publish_document.side_effect = [
            ArticlesApiError("Failed to publish document. Status code: 502"),
            ArticlesApiError("Failed to publish document. Status code: 502"),
            None,
        ]

        await service.process(ARTICLE_ID)

        assert api_client.get_draft_revision.await_count == 1
        assert api_client.update_draft_revision.await_count == 2
        assert api_client.publish_document.await_count == 3

    @pytest.mark.asyncio
    async def test_exhausted_fetch_aborts_pipeline(self, service, api_client):
        api_client.get_draft_revision.side_effect = ArticlesApiError(
            "Failed to get draft revision. Status code: 500"
        )

        with pytest.raises(ArticlesApiError, match="Failed to get draft revision"):
            await service.process(ARTICLE_ID)

        assert api_client.get_draft_revision.await_count == 3
        api_client.update_draft_revision.assert_not_awaited()
        api_client.publish_document.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_exhausted_update_skips_publish(self, service, api_client):
        api_client.update_draft_revision.side_effect = ArticlesApiError(
            "Failed to update draft revision. Status code: 400"
        )

        with pytest.raises(ArticlesApiError):
            await service.process(ARTICLE_ID)

        assert api_client.update_draft_revision.await_count == 3
        api_client.publish_document.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_transform_failure_is_not_retried(self, service, api_client):
        service.processor = MagicMock(spec=ArticleProcessor)
        service.processor.process_article.side_effect = ValueError("bad document")

        with pytest.raises(ValueError, match="bad document"):
            await service.process(ARTICLE_ID)

        service.processor.process_article.assert_called_once()
        api_client.update_draft_revision.assert_not_awaited()


class TestFromConfig:
    """Test building the service from configuration."""

    def test_wires_collaborators(self):
        config = ServiceConfig(
            api_base_url="https://api.example.com",
            api_token="secret",
            api_timeout=5.0,
            retry=RetryConfig(max_retries=1),
            keyword="Python",
            link_url="https://www.python.org/",
        )

        service = ArticleLinkService.from_config(config)

        assert service.api_client.base_url == "https://api.example.com/v1/article"
        assert service.api_client.timeout == 5.0
        assert service.processor.keyword == "Python"
        assert service.retry_config.max_retries == 1
