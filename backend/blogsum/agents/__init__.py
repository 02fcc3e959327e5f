"""Agents package - page extraction and Gemini-backed text generation."""

from blogsum.agents.content_extractor import ContentExtractor
from blogsum.agents.gemini import GeminiClient
from blogsum.agents.summarizer import Summarizer
from blogsum.agents.translator import (
    DictionaryTranslator,
    GeminiTranslator,
    Translator,
    get_translator,
    translate_with_dictionary,
)

__all__ = [
    "ContentExtractor",
    "GeminiClient",
    "Summarizer",
    # Translators
    "Translator",
    "GeminiTranslator",
    "DictionaryTranslator",
    "get_translator",
    "translate_with_dictionary",
]
