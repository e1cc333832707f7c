"""
Claude AI integration service for ingredient scanning, recipe generation and
ingredient suggestions.

This service provides three AI capabilities:
1. Ingredient scanning from a photo (vision)
2. Recipe candidate generation from a scanned ingredient pool
3. Complementary ingredient suggestions

Recipe generation makes exactly one call: no conversational retry and no
connection retry. A failure aborts the whole batch and the caller decides
whether to try again.
"""

import json
import re
import base64
import asyncio
import random
import logging
from pathlib import Path
from typing import Optional
from functools import wraps

from anthropic import Anthropic
import anthropic
import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from app.config import settings
from app.services.ai_schemas import (
    IngredientScanSchema,
    RecipeGenerationSchema,
    IngredientSuggestionsSchema,
)
from app.services.prompts import (
    INGREDIENT_SCAN_SYSTEM_PROMPT,
    RECIPE_GENERATION_SYSTEM_PROMPT,
    build_recipe_generation_prompt,
    build_suggestion_system_prompt,
)


logger = logging.getLogger(__name__)


def _strip_markdown_json(text: str) -> str:
    """Strip markdown code block wrappers from JSON text."""
    if "```json" in text:
        text = text.split("```json")[1].split("```")[0].strip()
    elif "```" in text:
        text = text.split("```")[1].split("```")[0].strip()
    return text


def _fix_trailing_commas(text: str) -> str:
    """Fix trailing commas in JSON (common LLM error)."""
    text = re.sub(r",\s*}", "}", text)
    text = re.sub(r",\s*]", "]", text)
    return text


def _usage_stats(response) -> dict:
    usage = getattr(response, "usage", None)
    return {
        "input_tokens": getattr(usage, "input_tokens", 0) or 0,
        "output_tokens": getattr(usage, "output_tokens", 0) or 0,
    }


def retry_on_connection_error(max_attempts=3, base_delay=1.0):
    """
    Retry decorator for API calls that may fail due to transient network issues.

    Args:
        max_attempts: Maximum retry attempts (default 3)
        base_delay: Base delay in seconds for exponential backoff (default 1.0)
    """

    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            last_exception = None

            for attempt in range(max_attempts):
                try:
                    return await func(*args, **kwargs)
                except anthropic.APIConnectionError as e:
                    last_exception = e

                    if attempt < max_attempts - 1:
                        # Exponential backoff with jitter
                        delay = base_delay * (2**attempt)
                        jitter = (
                            delay * 0.1 * (2 * random.random() - 1)
                        )  # ±10% random variance
                        sleep_time = delay + jitter

                        logger.warning(
                            "Connection error on attempt %d/%d, retrying in %.1fs...",
                            attempt + 1,
                            max_attempts,
                            sleep_time,
                        )
                        await asyncio.sleep(sleep_time)
                    else:
                        logger.error("All %d attempts failed", max_attempts)

            raise UpstreamError(
                "AI service temporarily unavailable after retries"
            ) from last_exception

        return wrapper

    return decorator


class ClaudeService:
    """Centralized Claude API integration for all AI features."""

    def __init__(self, api_key: Optional[str] = None):
        timeout = httpx.Timeout(
            timeout=settings.anthropic_timeout,
            connect=settings.anthropic_connect_timeout,
        )
        self.api_key = settings.anthropic_api_key if api_key is None else api_key
        self.client = Anthropic(api_key=self.api_key, timeout=timeout)
        self.vision_model = settings.vision_model
        self.recipe_model = settings.recipe_model

    def _require_api_key(self):
        if not self.api_key:
            raise ConfigError("AI API key not configured")

    # =========================================================================
    # SCHEMA VALIDATION + CONVERSATIONAL RETRY
    # =========================================================================

    def _call_with_schema_retry(
        self,
        messages: list[dict],
        schema_class: type[BaseModel],
        request_params: dict,
        max_retries: int = 2,
        prefill: str | None = "{",
    ) -> tuple[dict, str, object]:
        """
        Call Claude API with JSON schema validation and conversational retry.

        On schema failure: appends the bad response + error feedback to messages,
        re-calls with full conversation context so the LLM can self-correct.

        Args:
            messages: The messages list (will be mutated on retry)
            schema_class: Pydantic model class to validate against
            request_params: Dict of params for client.messages.create
                            (model, max_tokens, system, etc.)
                            NOTE: do NOT include 'messages' - they're passed separately
            max_retries: Number of retry attempts after initial call (0 = single call)
            prefill: Assistant prefill string, or None for no prefill

        Returns:
            (validated_dict, raw_response_text, response_object) tuple

        Raises:
            ParseError: If all attempts fail schema validation
        """
        response = None

        for attempt in range(1 + max_retries):
            call_messages = list(messages)  # copy
            if prefill:
                call_messages.append({"role": "assistant", "content": prefill})

            response = self.client.messages.create(
                messages=call_messages,
                **request_params,
            )

            response_text = ""
            for block in response.content:
                if hasattr(block, "text"):
                    response_text += block.text

            if not response_text:
                if attempt < max_retries:
                    messages.append(
                        {"role": "assistant", "content": "(empty response)"}
                    )
                    messages.append(
                        {
                            "role": "user",
                            "content": "Your response contained no text. Please respond with valid JSON.",
                        }
                    )
                    continue
                raise ParseError("No text content in AI response")

            # Reconstruct JSON (handle prefill). A model that repeats the
            # prefill brace itself is tolerated.
            raw_text = response_text.strip()
            if prefill and not raw_text.startswith(prefill):
                json_str = prefill + raw_text
            else:
                json_str = raw_text

            json_str = _strip_markdown_json(json_str)
            json_str = _fix_trailing_commas(json_str)

            try:
                parsed = json.loads(json_str)
                adapter = TypeAdapter(schema_class)
                validated = adapter.validate_python(parsed)
                return validated.model_dump(), raw_text, response
            except (json.JSONDecodeError, ValidationError) as e:
                error_msg = str(e)
                logger.warning(
                    "AI response schema validation failed (attempt %d/%d) for %s: %s",
                    attempt + 1,
                    1 + max_retries,
                    schema_class.__name__,
                    error_msg,
                )

                if attempt < max_retries:
                    messages.append(
                        {
                            "role": "assistant",
                            "content": (prefill or "") + raw_text,
                        }
                    )
                    messages.append(
                        {
                            "role": "user",
                            "content": (
                                f"Your response had a schema error:\n{error_msg}\n\n"
                                f"Please fix and return valid JSON matching the required schema."
                            ),
                        }
                    )
                    continue

                raise ParseError(
                    f"AI response failed schema validation after {1 + max_retries} attempts: {error_msg}"
                ) from e

        raise ParseError("AI response failed schema validation")

    # =========================================================================
    # INGREDIENT SCANNING
    # =========================================================================

    @retry_on_connection_error(max_attempts=3, base_delay=2.0)
    async def analyze_ingredient_image(self, image_path: str) -> dict:
        """
        Identify food products in a photo with quantities and macros per 100g.

        Args:
            image_path: Path to uploaded scan image

        Returns:
            {
                "ingredients": [
                    {
                        "name": "Oatly Oat Drink",
                        "quantity": 1000.0,
                        "unit": "ml",
                        "macros_per_100g": {"calories": 46, "protein": 1.0,
                                            "carbs": 6.6, "fat": 1.5, "fiber": 0.8}
                    }
                ],
                "raw_response": "...",
                "model": "claude-sonnet-4-5-20250929",
                "usage_stats": {"input_tokens": 1500, "output_tokens": 300}
            }

        Raises:
            ConfigError: API key missing
            UpstreamError: AI service down, timed out or rejected the request
            RateLimitError: Too many requests
            ParseError: Response was not valid ingredient JSON
        """
        self._require_api_key()

        try:
            image_data = self._load_image_base64(image_path)
            media_type = self._get_media_type(image_path)

            messages = [
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image",
                            "source": {
                                "type": "base64",
                                "media_type": media_type,
                                "data": image_data,
                            },
                        },
                        {
                            "type": "text",
                            "text": "Identify every food product in this photo.",
                        },
                    ],
                }
            ]

            validated, raw_text, response = self._call_with_schema_retry(
                messages=messages,
                schema_class=IngredientScanSchema,
                request_params={
                    "model": self.vision_model,
                    "max_tokens": 1500,
                    "system": INGREDIENT_SCAN_SYSTEM_PROMPT,
                },
                max_retries=1,
            )

            return {
                "ingredients": validated["ingredients"],
                "raw_response": raw_text,
                "model": self.vision_model,
                "usage_stats": _usage_stats(response),
            }

        except anthropic.RateLimitError as e:
            raise RateLimitError(
                "Too many requests, please try again in 1 minute"
            ) from e
        except anthropic.APIStatusError as e:
            logger.warning("Ingredient scan rejected upstream: status=%s", e.status_code)
            raise UpstreamError(f"AI service error ({e.status_code})") from e

    # =========================================================================
    # RECIPE GENERATION
    # =========================================================================

    async def generate_recipe_candidates(self, ingredient_list: str) -> dict:
        """
        Ask Claude for recipe candidates using the rendered ingredient list.

        Args:
            ingredient_list: Comma-joined "{quantity}{unit} {name}" entries

        Returns:
            {
                "recipes": [CandidateRecipeSchema.model_dump(), ...],
                "raw_response": "...",
                "model": "claude-sonnet-4-5-20250929",
                "usage_stats": {"input_tokens": 400, "output_tokens": 1200}
            }

        Raises:
            ConfigError: API key missing
            UpstreamError: AI service unreachable, timed out, or non-2xx
            RateLimitError: Too many requests
            ParseError: Body is not JSON or has no recipes array
        """
        self._require_api_key()

        messages = [
            {"role": "user", "content": build_recipe_generation_prompt(ingredient_list)}
        ]

        try:
            validated, raw_text, response = self._call_with_schema_retry(
                messages=messages,
                schema_class=RecipeGenerationSchema,
                request_params={
                    "model": self.recipe_model,
                    "max_tokens": 2048,
                    "temperature": 0.4,
                    "system": RECIPE_GENERATION_SYSTEM_PROMPT,
                },
                max_retries=0,
            )
        except anthropic.APITimeoutError as e:
            raise UpstreamError("AI service timed out") from e
        except anthropic.APIConnectionError as e:
            raise UpstreamError("AI service temporarily unavailable") from e
        except anthropic.RateLimitError as e:
            raise RateLimitError(
                "Too many requests, please try again in 1 minute"
            ) from e
        except anthropic.APIStatusError as e:
            logger.warning("Recipe generation rejected upstream: status=%s", e.status_code)
            raise UpstreamError(f"AI service error ({e.status_code})") from e

        return {
            "recipes": validated["recipes"],
            "raw_response": raw_text,
            "model": self.recipe_model,
            "usage_stats": _usage_stats(response),
        }

    # =========================================================================
    # INGREDIENT SUGGESTIONS
    # =========================================================================

    @retry_on_connection_error(max_attempts=3, base_delay=2.0)
    async def suggest_extra_ingredients(
        self,
        ingredient_names: list[str],
        cuisine_preferences: Optional[list[str]] = None,
        taste_preferences: Optional[list[str]] = None,
        fitness_goal: Optional[str] = None,
    ) -> dict:
        """
        Suggest 3-5 ingredients that complement what the user already has.

        Unreadable model output degrades to an empty suggestion list rather
        than an error; these are optional extras.

        Returns:
            {
                "suggestions": [{"id": "suggestion-0", "name": "Garlic",
                                 "quantity": 3.0, "unit": "pcs"}],
                "model": "claude-sonnet-4-5-20250929",
                "usage_stats": {...}
            }
        """
        self._require_api_key()

        messages = [
            {
                "role": "user",
                "content": (
                    f"Current ingredients: {', '.join(ingredient_names)}. "
                    "Suggest 3-5 extra ingredients that complement these well."
                ),
            }
        ]

        try:
            validated, _raw_text, response = self._call_with_schema_retry(
                messages=messages,
                schema_class=IngredientSuggestionsSchema,
                request_params={
                    "model": self.recipe_model,
                    "max_tokens": 500,
                    "temperature": 0.7,
                    "system": build_suggestion_system_prompt(
                        cuisine_preferences, taste_preferences, fitness_goal
                    ),
                },
                max_retries=0,
            )
            usage_stats = _usage_stats(response)
        except ParseError as e:
            logger.warning("Discarding unreadable ingredient suggestions: %s", e)
            validated, usage_stats = {"suggestions": []}, _usage_stats(None)
        except anthropic.RateLimitError as e:
            raise RateLimitError(
                "Too many requests, please try again in 1 minute"
            ) from e
        except anthropic.APIStatusError as e:
            raise UpstreamError(f"AI service error ({e.status_code})") from e

        named = [s for s in validated["suggestions"] if s["name"]]
        suggestions = [
            {"id": f"suggestion-{i}", **suggestion}
            for i, suggestion in enumerate(named)
        ]
        return {
            "suggestions": suggestions,
            "model": self.recipe_model,
            "usage_stats": usage_stats,
        }

    # =========================================================================
    # HELPER METHODS
    # =========================================================================

    def _load_image_base64(self, image_path: str) -> str:
        """Load image file and encode as base64."""
        with open(image_path, "rb") as f:
            return base64.standard_b64encode(f.read()).decode("utf-8")

    def _get_media_type(self, image_path: str) -> str:
        """Determine media type from file extension."""
        suffix = Path(image_path).suffix.lower()
        media_types = {
            ".jpg": "image/jpeg",
            ".jpeg": "image/jpeg",
            ".png": "image/png",
            ".gif": "image/gif",
            ".webp": "image/webp",
        }
        return media_types.get(suffix, "image/jpeg")


# =============================================================================
# CUSTOM EXCEPTIONS
# =============================================================================


class ConfigError(Exception):
    """Request cannot be served as configured (no ingredients, no API key)."""

    pass


class UpstreamError(Exception):
    """AI service unreachable, timed out, or returned an error status."""

    pass


class RateLimitError(UpstreamError):
    """Rate limit exceeded."""

    pass


class ParseError(ValueError):
    """AI service answered, but not with the JSON we asked for."""

    pass
