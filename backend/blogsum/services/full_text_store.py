"""Full-text store - append-only log of scraped article texts in DynamoDB."""

import asyncio
import logging
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from botocore.exceptions import BotoCoreError, ClientError, ReadTimeoutError

from blogsum.config import get_settings
from blogsum.db.dynamodb import CONNECTION_ERRORS, DynamoDBClient, dynamodb
from blogsum.exceptions import (
    StoreConnectionError,
    UpstreamTimeoutError,
    ValidationError,
    WriteError,
)
from blogsum.models import FullTextRecord

logger = logging.getLogger(__name__)


def _partition_key(url: str) -> str:
    return f"URL#{url}"


class FullTextStore:
    """Writes and reads ``FullTextRecord`` items.

    Every save creates a new item keyed by timestamp and a random id, so
    resubmitting the same URL never overwrites an earlier record.
    """

    def __init__(self, client: DynamoDBClient | None = None, timeout: float | None = None):
        self.client = client or dynamodb
        self.timeout = timeout or get_settings().request_timeout_seconds

    async def save(self, url: str, content: str) -> FullTextRecord:
        """Store the full text scraped from ``url``."""
        if not url or not content:
            raise ValidationError("URL and content are required")

        record = FullTextRecord(
            url=url,
            content=content,
            timestamp=datetime.now(UTC),
            record_id=str(uuid4()),
        )
        item = {
            "pk": {"S": _partition_key(url)},
            "sk": {"S": f"RECORD#{record.timestamp.isoformat()}#{record.record_id}"},
            "record_id": {"S": record.record_id},
            "url": {"S": url},
            "content": {"S": content},
            "timestamp": {"S": record.timestamp.isoformat()},
        }

        await self._call(self.client.put_item(item), action="save full text")
        logger.info("Saved full text for %s (%d characters)", url, len(content))
        return record

    async def list_by_url(self, url: str, limit: int = 20) -> list[FullTextRecord]:
        """Get stored full texts for ``url``, newest first."""
        if not url:
            raise ValidationError("URL is required")

        items = await self._call(
            self.client.query_partition(_partition_key(url), limit=limit),
            action="read full texts",
        )
        return [self._to_record(item) for item in items]

    @staticmethod
    def _to_record(item: dict[str, Any]) -> FullTextRecord:
        return FullTextRecord(
            url=item["url"]["S"],
            content=item["content"]["S"],
            timestamp=datetime.fromisoformat(item["timestamp"]["S"]),
            record_id=item.get("record_id", {}).get("S"),
        )

    async def _call(self, awaitable: Any, action: str) -> Any:
        try:
            return await asyncio.wait_for(awaitable, timeout=self.timeout)
        except (TimeoutError, ReadTimeoutError) as e:
            raise UpstreamTimeoutError(f"DynamoDB timed out trying to {action}") from e
        except CONNECTION_ERRORS as e:
            raise StoreConnectionError(f"DynamoDB is unreachable: {e}") from e
        except ClientError as e:
            error = e.response.get("Error", {})
            message = error.get("Message") or str(e)
            raise WriteError(f"Failed to {action}: {message}") from e
        except BotoCoreError as e:
            raise WriteError(f"Failed to {action}: {e}") from e
