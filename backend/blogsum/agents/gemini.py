"""Gemini generative backend shared by the summarizer and the translator."""

import asyncio
import logging
from typing import Any

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from blogsum.config import Settings, get_settings
from blogsum.exceptions import (
    ConfigurationError,
    MalformedResponseError,
    UpstreamError,
    UpstreamTimeoutError,
)

logger = logging.getLogger(__name__)


class GeminiClient:
    """Sends single-turn prompts to Gemini and returns the best completion."""

    def __init__(self, settings: Settings | None = None, client: Any = None) -> None:
        self.settings = settings or get_settings()
        self.model = self.settings.gemini_model
        self._client = client

    @property
    def client(self) -> Any:
        """The SDK client; a missing API key is a configuration fault."""
        if self._client is None:
            if not self.settings.gemini_api_key:
                raise ConfigurationError("Gemini API key is not configured.")
            self._client = genai.Client(
                api_key=self.settings.gemini_api_key,
                http_options=types.HttpOptions(
                    timeout=int(self.settings.request_timeout_seconds * 1000)
                ),
            )
        return self._client

    async def generate(self, prompt: str) -> str:
        """Generate a completion for ``prompt``."""
        client = self.client
        contents = [types.Content(role="user", parts=[types.Part(text=prompt)])]
        config = None
        if self.settings.gemini_temperature is not None:
            config = types.GenerateContentConfig(temperature=self.settings.gemini_temperature)

        try:
            response = await asyncio.wait_for(
                client.aio.models.generate_content(
                    model=self.model,
                    contents=contents,
                    config=config,
                ),
                timeout=self.settings.request_timeout_seconds,
            )
        except (TimeoutError, httpx.TimeoutException) as e:
            raise UpstreamTimeoutError("Gemini API call timed out.") from e
        except genai_errors.APIError as e:
            logger.warning("Gemini API error %s: %s", e.code, e.message)
            raise UpstreamError(e.message or str(e), upstream_status=e.code) from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"Could not reach Gemini API: {e}") from e

        return self._first_candidate_text(response)

    @staticmethod
    def _first_candidate_text(response: Any) -> str:
        candidates = getattr(response, "candidates", None) or []
        content = candidates[0].content if candidates else None
        parts = (content.parts if content else None) or []
        text = parts[0].text if parts else None
        if not text or not text.strip():
            logger.warning("Unexpected Gemini response structure: %r", response)
            raise MalformedResponseError(
                "Gemini API returned an unexpected response structure."
            )
        return text
