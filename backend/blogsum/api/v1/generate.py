"""Summary and translation endpoints backed by the generative model."""

from fastapi import APIRouter, Depends

from blogsum.api.deps import get_pipeline
from blogsum.schemas.summary import (
    SummarizeTextRequest,
    SummaryTextResponse,
    TranslateRequest,
    TranslateResponse,
)
from blogsum.services.pipeline import SummarizationPipeline

router = APIRouter()


@router.post("/summarize-ai", response_model=SummaryTextResponse)
async def summarize_text(
    body: SummarizeTextRequest,
    pipeline: SummarizationPipeline = Depends(get_pipeline),
) -> SummaryTextResponse:
    summary = await pipeline.summarize(body.text_to_summarize or "")
    return SummaryTextResponse(summary=summary)


@router.post("/translate-urdu", response_model=TranslateResponse)
async def translate_text(
    body: TranslateRequest,
    pipeline: SummarizationPipeline = Depends(get_pipeline),
) -> TranslateResponse:
    """Translate English text to Urdu with the configured translator."""
    translated = await pipeline.translate(body.text_to_translate or "")
    return TranslateResponse(translated_text=translated)
