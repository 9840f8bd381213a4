"""
Fetch, link, update and publish one article.
"""

import logging

from .clients import ArticlesApiClient
from .config import ServiceConfig
from .processing import ArticleProcessor
from .retry import RetryConfig, execute_with_retry

logger = logging.getLogger(__name__)


class ArticleLinkService:
    """
    Runs the article pipeline against the content API.

    Every network step gets its own retry sequence; the transform is not
    retried. The first failure that leaves a step aborts the remaining steps.
    Update and publish must be idempotent on the API side for retries to be safe.
    """

    def __init__(
        self,
        api_client: ArticlesApiClient,
        processor: ArticleProcessor | None = None,
        retry_config: RetryConfig | None = None,
    ):
        self.api_client = api_client
        self.processor = processor or ArticleProcessor()
        self.retry_config = retry_config or RetryConfig()

    @classmethod
    def from_config(cls, config: ServiceConfig) -> "ArticleLinkService":
        return cls(
            ArticlesApiClient(config.api_base_url, config.api_token, config.api_timeout),
            ArticleProcessor(config.keyword, config.link_url),
            config.retry,
        )

    async def process(self, article_id: str) -> dict:
        """
        Link the keyword in an article's draft and publish it.

        Args:
            article_id: The article ID

        Returns:
            The draft revision that was written back
        """
        logger.info(f"Fetching draft revision for article {article_id}")
        draft = await execute_with_retry(
            lambda: self.api_client.get_draft_revision(article_id),
            self.retry_config,
        )

        processed = self.processor.process_article(draft)

        logger.info(f"Updating draft revision for article {article_id}")
        await execute_with_retry(
            lambda: self.api_client.update_draft_revision(article_id, processed),
            self.retry_config,
        )

        logger.info(f"Publishing article {article_id}")
        await execute_with_retry(
            lambda: self.api_client.publish_document(article_id),
            self.retry_config,
        )

        return processed
