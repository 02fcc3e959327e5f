"""Summary store - append-only summaries table in PostgreSQL."""

import asyncio
import logging
from typing import Any

from sqlalchemy.exc import DBAPIError, DisconnectionError, InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel import select

from blogsum.config import get_settings
from blogsum.db.postgres import get_session_factory
from blogsum.exceptions import (
    StoreConnectionError,
    UpstreamTimeoutError,
    ValidationError,
    WriteError,
)
from blogsum.models import SummaryRecord

logger = logging.getLogger(__name__)


class SummaryStore:
    """Writes and reads ``SummaryRecord`` rows."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession] | None = None,
        timeout: float | None = None,
    ):
        self._session_factory = session_factory
        self.timeout = timeout or get_settings().request_timeout_seconds

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        if self._session_factory is None:
            self._session_factory = get_session_factory()
        return self._session_factory

    async def save(self, url: str, summary: str, urdu_summary: str) -> SummaryRecord:
        """Insert a new summary row."""
        if not url or not summary or not urdu_summary:
            raise ValidationError("URL, summary, and Urdu summary are required")

        record = SummaryRecord(url=url, summary_text=summary, urdu_summary=urdu_summary)
        await self._call(self._insert(record), action="save summary")
        logger.info("Saved summary %s for %s", record.id, url)
        return record

    async def list_by_url(self, url: str, limit: int = 20) -> list[SummaryRecord]:
        """Get stored summaries for ``url``, newest first."""
        if not url:
            raise ValidationError("URL is required")
        return await self._call(self._select(url, limit), action="read summaries")

    async def _insert(self, record: SummaryRecord) -> None:
        async with self.session_factory() as session:
            session.add(record)
            await session.commit()

    async def _select(self, url: str, limit: int) -> list[SummaryRecord]:
        query = (
            select(SummaryRecord)
            .where(SummaryRecord.url == url)
            .order_by(SummaryRecord.created_at.desc())
            .limit(limit)
        )
        async with self.session_factory() as session:
            result = await session.execute(query)
            return list(result.scalars().all())

    async def _call(self, awaitable: Any, action: str) -> Any:
        try:
            return await asyncio.wait_for(awaitable, timeout=self.timeout)
        except TimeoutError as e:
            raise UpstreamTimeoutError(f"Database timed out trying to {action}") from e
        except (OperationalError, InterfaceError, DisconnectionError, OSError) as e:
            raise StoreConnectionError(f"Database is unreachable: {e}") from e
        except DBAPIError as e:
            if e.connection_invalidated:
                raise StoreConnectionError(f"Database connection lost: {e}") from e
            raise WriteError(f"Failed to {action}: {e.orig or e}") from e
        except SQLAlchemyError as e:
            raise WriteError(f"Failed to {action}: {e}") from e
