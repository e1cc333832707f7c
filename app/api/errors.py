"""Translate AI pipeline exceptions into HTTP errors."""

import logging

from fastapi import HTTPException

from app.services.ai_service import ConfigError, ParseError, RateLimitError, UpstreamError

logger = logging.getLogger(__name__)

RETRY_MESSAGE = "We couldn't reach the recipe assistant. Please try again."


def ai_http_error(exc: Exception) -> HTTPException:
    """
    HTTP error for an exception raised by ClaudeService or RecipeService.

    Upstream bodies and parser details are logged, never returned.
    """
    if isinstance(exc, ConfigError):
        return HTTPException(status_code=400, detail=str(exc))
    if isinstance(exc, RateLimitError):
        return HTTPException(status_code=429, detail=str(exc))
    if isinstance(exc, (UpstreamError, ParseError)):
        logger.warning("AI request failed: %s: %s", type(exc).__name__, exc)
        return HTTPException(status_code=502, detail=RETRY_MESSAGE)
    raise TypeError(f"Not an AI pipeline error: {exc!r}")
