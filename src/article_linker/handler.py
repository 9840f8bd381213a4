"""
Lambda entry point for API Gateway proxy events.
"""

import asyncio
import json
import logging
from datetime import datetime, timezone
from typing import Any

from .config import ServiceConfig
from .exceptions import MissingParameterError
from .service import ArticleLinkService

logger = logging.getLogger(__name__)

# Built once per container, on the first invocation.
_service: ArticleLinkService | None = None


def _response(status_code: int, body: dict) -> dict:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def _timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_article_id(event: dict) -> str:
    """
    Extract ``articleId`` from the event body.

    Raises:
        MissingParameterError: If the body is absent, not a JSON object,
            or has no non-empty ``articleId``
    """
    body: Any = event.get("body")
    if isinstance(body, str):
        try:
            body = json.loads(body)
        except json.JSONDecodeError:
            logger.warning("Request body is not valid JSON")
            body = None

    article_id = body.get("articleId") if isinstance(body, dict) else None
    if not article_id or not isinstance(article_id, str):
        raise MissingParameterError("articleId")
    return article_id


async def process_event(event: dict, service: ArticleLinkService | None = None) -> dict:
    """
    Run the article pipeline for one event and map the outcome to a response.

    The request is validated before ``service`` is resolved; when it is not
    given, the container-wide service is built from the environment and a
    configuration failure becomes a 500 response.
    """
    try:
        article_id = parse_article_id(event)
    except MissingParameterError as e:
        return _response(400, {"message": e.message})

    try:
        if service is None:
            service = get_service()
        await service.process(article_id)
    except Exception as e:
        logger.exception(f"Error processing article {article_id}")
        return _response(500, {"message": "Error processing article", "error": str(e)})

    return _response(
        200,
        {
            "message": "Article processed and published successfully",
            "articleId": article_id,
            "timestamp": _timestamp(),
        },
    )


def get_service() -> ArticleLinkService:
    """Return the container-wide service, building it from the environment once."""
    global _service
    if _service is None:
        config = ServiceConfig.from_env()
        logging.getLogger("article_linker").setLevel(config.log_level)
        _service = ArticleLinkService.from_config(config)
    return _service


def handler(event: dict, context: Any = None) -> dict:
    """AWS Lambda handler."""
    logger.info(f"Received event: {json.dumps(event, default=str)}")
    return asyncio.run(process_event(event))
