"""Persistence endpoints for full texts (DynamoDB) and summaries (PostgreSQL)."""

from fastapi import APIRouter, Depends, Query, status

from blogsum.api.deps import get_full_text_store, get_pipeline, get_summary_store
from blogsum.models import FullTextRecord, SummaryRecord
from blogsum.schemas.summary import (
    FullTextListResponse,
    FullTextRecordResponse,
    SaveFullTextRequest,
    SaveFullTextResponse,
    SaveSummaryRequest,
    SaveSummaryResponse,
    SummaryListResponse,
    SummaryRecordResponse,
)
from blogsum.services.full_text_store import FullTextStore
from blogsum.services.pipeline import SummarizationPipeline
from blogsum.services.summary_store import SummaryStore

router = APIRouter()


def _full_text_response(record: FullTextRecord) -> FullTextRecordResponse:
    return FullTextRecordResponse(
        record_id=record.record_id,
        url=record.url,
        content=record.content,
        timestamp=record.timestamp,
    )


def _summary_response(record: SummaryRecord) -> SummaryRecordResponse:
    return SummaryRecordResponse(
        id=record.id,
        url=record.url,
        summary_text=record.summary_text,
        urdu_summary=record.urdu_summary,
        created_at=record.created_at,
    )


@router.post(
    "/save-full-text",
    response_model=SaveFullTextResponse,
    status_code=status.HTTP_201_CREATED,
)
async def save_full_text(
    body: SaveFullTextRequest,
    pipeline: SummarizationPipeline = Depends(get_pipeline),
) -> SaveFullTextResponse:
    record = await pipeline.save_full_text(body.url or "", body.content or "")
    return SaveFullTextResponse(
        message="Full text saved successfully",
        data=_full_text_response(record),
    )


@router.post(
    "/save-summary",
    response_model=SaveSummaryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def save_summary(
    body: SaveSummaryRequest,
    pipeline: SummarizationPipeline = Depends(get_pipeline),
) -> SaveSummaryResponse:
    record = await pipeline.save_summary(
        body.url or "", body.summary or "", body.urdu_summary or ""
    )
    return SaveSummaryResponse(
        message="Summary saved successfully",
        data=_summary_response(record),
    )


@router.get("/full-texts", response_model=FullTextListResponse)
async def list_full_texts(
    url: str,
    limit: int = Query(default=20, ge=1, le=100),
    store: FullTextStore = Depends(get_full_text_store),
) -> FullTextListResponse:
    """List stored full texts for a URL, newest first."""
    records = await store.list_by_url(url, limit=limit)
    return FullTextListResponse(records=[_full_text_response(r) for r in records])


@router.get("/summaries", response_model=SummaryListResponse)
async def list_summaries(
    url: str,
    limit: int = Query(default=20, ge=1, le=100),
    store: SummaryStore = Depends(get_summary_store),
) -> SummaryListResponse:
    """List stored summaries for a URL, newest first."""
    records = await store.list_by_url(url, limit=limit)
    return SummaryListResponse(records=[_summary_response(r) for r in records])
