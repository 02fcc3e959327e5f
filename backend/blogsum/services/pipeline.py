"""Summarization pipeline - scrape, summarize, translate, then persist.

Steps run strictly in order and the first failure ends the run. There are
no retries and nothing is rolled back: if saving the full text fails, the
summary and translation computed so far are discarded, and if saving the
summary fails the full text written just before it stays in DynamoDB.
"""

import logging
from collections.abc import Awaitable
from time import perf_counter
from typing import TypeVar

from blogsum.agents import ContentExtractor, Summarizer, Translator
from blogsum.exceptions import (
    BlogSummarizerError,
    ExtractionError,
    FullTextPersistenceError,
    MalformedResponseError,
    ParseError,
    PipelineError,
    SummarizationError,
    SummaryPersistenceError,
    TranslationError,
    ValidationError,
)
from blogsum.models import (
    ExtractedContent,
    FullTextRecord,
    PipelineResult,
    SummaryRecord,
    SummaryResult,
)
from blogsum.services.full_text_store import FullTextStore
from blogsum.services.summary_store import SummaryStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _require_output(error_cls: type[PipelineError], text: str, cause: BlogSummarizerError) -> None:
    if not text or not text.strip():
        logger.warning("Step %s produced no text", error_cls.step)
        raise error_cls(cause)


class SummarizationPipeline:
    """Runs the summarization steps against the configured collaborators.

    Each step is also usable on its own, which is how the single-purpose
    API endpoints call them.
    """

    def __init__(
        self,
        extractor: ContentExtractor,
        summarizer: Summarizer,
        translator: Translator,
        full_text_store: FullTextStore,
        summary_store: SummaryStore,
    ):
        self.extractor = extractor
        self.summarizer = summarizer
        self.translator = translator
        self.full_text_store = full_text_store
        self.summary_store = summary_store

    async def run(self, url: str) -> PipelineResult:
        """Process one submitted URL end to end."""
        url = (url or "").strip()
        if not url:
            raise ValidationError("URL is required")

        started = perf_counter()
        logger.info("Pipeline run started for %s", url)

        content = await self.extract(url)
        summary = await self.summarize(content.text)
        result = SummaryResult(
            source_url=url,
            summary_text=summary,
            urdu_text=await self.translate(summary),
        )
        await self.save_full_text(url, content.text)
        await self.save_summary(url, result.summary_text, result.urdu_text)

        logger.info("Pipeline run finished for %s in %.2fs", url, perf_counter() - started)
        return PipelineResult(
            url=url,
            original_text=content.text,
            summary=result.summary_text,
            urdu_summary=result.urdu_text,
        )

    async def extract(self, url: str) -> ExtractedContent:
        if not url or not url.strip():
            raise ValidationError("URL is required")
        content = await self._step(ExtractionError, self.extractor.extract(url))
        _require_output(ExtractionError, content.text, ParseError("No text content found"))
        return content

    async def summarize(self, text: str) -> str:
        if not text or not text.strip():
            raise ValidationError("Text to summarize is required")
        summary = await self._step(SummarizationError, self.summarizer.summarize(text))
        _require_output(SummarizationError, summary, MalformedResponseError("Summarizer returned no text"))
        return summary

    async def translate(self, text: str) -> str:
        if not text or not text.strip():
            raise ValidationError("Text to translate is required")
        translated = await self._step(TranslationError, self.translator.translate(text))
        _require_output(TranslationError, translated, MalformedResponseError("Translator returned no text"))
        return translated

    async def save_full_text(self, url: str, content: str) -> FullTextRecord:
        if not url or not content:
            raise ValidationError("URL and content are required")
        return await self._step(
            FullTextPersistenceError, self.full_text_store.save(url, content)
        )

    async def save_summary(self, url: str, summary: str, urdu_summary: str) -> SummaryRecord:
        if not url or not summary or not urdu_summary:
            raise ValidationError("URL, summary, and Urdu summary are required")
        return await self._step(
            SummaryPersistenceError,
            self.summary_store.save(url, summary, urdu_summary),
        )

    async def _step(self, error_cls: type[PipelineError], awaitable: Awaitable[T]) -> T:
        started = perf_counter()
        try:
            result = await awaitable
        except ValidationError:
            raise
        except BlogSummarizerError as e:
            logger.warning("Step %s failed: %s", error_cls.step, e.message)
            raise error_cls(e) from e
        logger.debug("Step %s took %.2fs", error_cls.step, perf_counter() - started)
        return result
