"""Full pipeline endpoint: one URL in, original text, summary and Urdu summary out."""

from fastapi import APIRouter, Depends

from blogsum.api.deps import get_pipeline
from blogsum.schemas.summary import SummarizeRequest, SummarizeResponse
from blogsum.services.pipeline import SummarizationPipeline

router = APIRouter()


@router.post("/summarize", response_model=SummarizeResponse)
async def summarize_blog(
    body: SummarizeRequest,
    pipeline: SummarizationPipeline = Depends(get_pipeline),
) -> SummarizeResponse:
    """
    Scrape, summarize, translate and store a blog post.

    Nothing is returned unless every step, including both writes, succeeded.
    """
    result = await pipeline.run(body.url or "")
    return SummarizeResponse(
        url=result.url,
        original_text=result.original_text,
        summary=result.summary,
        urdu_summary=result.urdu_summary,
    )
