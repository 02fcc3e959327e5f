"""Summarizer - asks the generative backend for a summary of article text."""

import logging

from blogsum.agents.gemini import GeminiClient
from blogsum.exceptions import ValidationError

logger = logging.getLogger(__name__)


class Summarizer:
    """Summarizes text with Gemini."""

    PROMPT = "Summarize the following text:\n\n{text}"

    def __init__(self, backend: GeminiClient | None = None) -> None:
        self.backend = backend or GeminiClient()

    async def summarize(self, text: str) -> str:
        if not text or not text.strip():
            raise ValidationError("Text to summarize is required")

        logger.info("Requesting summary for %d characters", len(text))
        return await self.backend.generate(self.PROMPT.format(text=text))
