"""Models package - SQLModel tables and pipeline records."""

from blogsum.models.content import (
    ExtractedContent,
    FullTextRecord,
    PipelineResult,
    SummaryResult,
)
from blogsum.models.summary import SummaryRecord

__all__ = [
    "ExtractedContent",
    "FullTextRecord",
    "PipelineResult",
    "SummaryRecord",
    "SummaryResult",
]
