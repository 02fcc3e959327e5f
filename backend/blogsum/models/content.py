"""In-memory records passed between pipeline steps."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ExtractedContent:
    """Cleaned article text extracted from a page."""

    source_url: str
    text: str


@dataclass(frozen=True)
class SummaryResult:
    """A summary and its Urdu translation."""

    source_url: str
    summary_text: str
    urdu_text: str


@dataclass(frozen=True)
class FullTextRecord:
    """Full article text as stored in DynamoDB."""

    url: str
    content: str
    timestamp: datetime
    record_id: str | None = None


@dataclass(frozen=True)
class PipelineResult:
    """Aggregate returned by a successful pipeline run."""

    url: str
    original_text: str
    summary: str
    urdu_summary: str
