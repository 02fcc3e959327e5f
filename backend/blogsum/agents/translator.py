"""Urdu translators.

Two interchangeable implementations of the same capability:

- ``GeminiTranslator`` asks the generative backend for a translation.
- ``DictionaryTranslator`` substitutes known English phrases from a fixed
  table. Useful offline and for the canned demo content.

``get_translator`` picks one based on ``Settings.translator_backend``.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping

from blogsum.agents.gemini import GeminiClient
from blogsum.config import Settings, get_settings
from blogsum.constants.urdu import URDU_PHRASES
from blogsum.exceptions import ValidationError

logger = logging.getLogger(__name__)


def translate_with_dictionary(text: str, dictionary: Mapping[str, str]) -> str:
    """Replace every known phrase in ``text``, longest phrases first."""
    for english in sorted(dictionary, key=len, reverse=True):
        if english in text:
            text = text.replace(english, dictionary[english])
    return text


class Translator(ABC):
    """Translates English text to Urdu."""

    name: str = ""

    async def translate(self, text: str) -> str:
        if not text or not text.strip():
            raise ValidationError("Text to translate is required")
        return await self._translate(text)

    @abstractmethod
    async def _translate(self, text: str) -> str:
        pass


class GeminiTranslator(Translator):
    name = "gemini"

    PROMPT = "Translate the following English text to Urdu:\n\n{text}"

    def __init__(self, backend: GeminiClient | None = None) -> None:
        self.backend = backend or GeminiClient()

    async def _translate(self, text: str) -> str:
        logger.info("Requesting Urdu translation for %d characters", len(text))
        return await self.backend.generate(self.PROMPT.format(text=text))


class DictionaryTranslator(Translator):
    name = "dictionary"

    def __init__(self, dictionary: Mapping[str, str] | None = None) -> None:
        self.dictionary = URDU_PHRASES if dictionary is None else dictionary

    async def _translate(self, text: str) -> str:
        return translate_with_dictionary(text, self.dictionary)


def get_translator(
    settings: Settings | None = None,
    backend: GeminiClient | None = None,
) -> Translator:
    """Get translator based on configured backend."""
    settings = settings or get_settings()

    if settings.translator_backend == "dictionary":
        return DictionaryTranslator()
    return GeminiTranslator(backend or GeminiClient(settings))
