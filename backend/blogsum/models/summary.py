"""Summary model for PostgreSQL."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlalchemy import Column, DateTime, Text
from sqlmodel import Field, SQLModel


class SummaryRecord(SQLModel, table=True):
    """
    Summary of a blog post and its Urdu translation.
    Append-only: every run inserts a new row, so ``url`` is not unique.
    """

    __tablename__ = "summaries"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    url: str = Field(max_length=2048, index=True)

    summary_text: str = Field(sa_column=Column(Text, nullable=False))
    urdu_summary: str = Field(sa_column=Column(Text, nullable=False))

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
    )
