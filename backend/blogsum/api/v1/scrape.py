"""Scraping endpoint."""

from fastapi import APIRouter, Depends

from blogsum.api.deps import get_pipeline
from blogsum.schemas.summary import ScrapeRequest, ScrapeResponse
from blogsum.services.pipeline import SummarizationPipeline

router = APIRouter()


@router.post("/scrape", response_model=ScrapeResponse)
async def scrape_blog(
    body: ScrapeRequest,
    pipeline: SummarizationPipeline = Depends(get_pipeline),
) -> ScrapeResponse:
    """Fetch a blog post and return its cleaned text."""
    content = await pipeline.extract(body.url or "")
    return ScrapeResponse(original_content=content.text)
