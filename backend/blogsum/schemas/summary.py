"""Request/response schemas for the summarization API.

JSON payloads use camelCase keys. Request fields are optional at the schema
level so that missing input is reported as a 400 by the handlers instead of
a schema validation failure.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Requests


class SummarizeRequest(CamelModel):
    url: str | None = None


class ScrapeRequest(CamelModel):
    url: str | None = None


class SummarizeTextRequest(CamelModel):
    text_to_summarize: str | None = None


class TranslateRequest(CamelModel):
    text_to_translate: str | None = None


class SaveFullTextRequest(CamelModel):
    url: str | None = None
    content: str | None = None


class SaveSummaryRequest(CamelModel):
    url: str | None = None
    summary: str | None = None
    urdu_summary: str | None = None


# Responses


class SummarizeResponse(CamelModel):
    """Aggregate result of a full pipeline run."""

    url: str
    original_text: str
    summary: str
    urdu_summary: str


class ScrapeResponse(CamelModel):
    original_content: str


class SummaryTextResponse(CamelModel):
    summary: str


class TranslateResponse(CamelModel):
    translated_text: str


class FullTextRecordResponse(CamelModel):
    record_id: str | None = None
    url: str
    content: str
    timestamp: datetime


class SummaryRecordResponse(CamelModel):
    id: UUID
    url: str
    summary_text: str
    urdu_summary: str
    created_at: datetime


class SaveFullTextResponse(CamelModel):
    message: str
    data: FullTextRecordResponse


class SaveSummaryResponse(CamelModel):
    message: str
    data: SummaryRecordResponse


class FullTextListResponse(CamelModel):
    records: list[FullTextRecordResponse]


class SummaryListResponse(CamelModel):
    records: list[SummaryRecordResponse]


class ErrorResponse(CamelModel):
    message: str
    error: str | None = None
    upstream_status: int | None = None
