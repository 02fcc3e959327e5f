"""FastAPI dependencies providing the shared pipeline and its collaborators."""

from functools import lru_cache

from fastapi import Depends

from blogsum.agents import ContentExtractor, GeminiClient, Summarizer, get_translator
from blogsum.config import get_settings
from blogsum.db.dynamodb import dynamodb
from blogsum.services.full_text_store import FullTextStore
from blogsum.services.pipeline import SummarizationPipeline
from blogsum.services.summary_store import SummaryStore


@lru_cache
def get_pipeline() -> SummarizationPipeline:
    """Get the process-wide pipeline instance."""
    settings = get_settings()
    gemini = GeminiClient(settings)
    return SummarizationPipeline(
        extractor=ContentExtractor(settings),
        summarizer=Summarizer(gemini),
        translator=get_translator(settings, backend=gemini),
        full_text_store=FullTextStore(dynamodb, timeout=settings.request_timeout_seconds),
        summary_store=SummaryStore(timeout=settings.request_timeout_seconds),
    )


def get_full_text_store(
    pipeline: SummarizationPipeline = Depends(get_pipeline),
) -> FullTextStore:
    return pipeline.full_text_store


def get_summary_store(
    pipeline: SummarizationPipeline = Depends(get_pipeline),
) -> SummaryStore:
    return pipeline.summary_store
