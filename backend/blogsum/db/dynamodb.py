"""DynamoDB connection and table management for full article texts."""

import asyncio
import logging
from contextlib import AsyncExitStack
from typing import Any

import aioboto3
from botocore.config import Config
from botocore.exceptions import (
    ConnectionClosedError,
    ConnectTimeoutError,
    EndpointConnectionError,
    NoCredentialsError,
)

from blogsum.config import Settings, get_settings

logger = logging.getLogger(__name__)

CONNECTION_ERRORS = (
    EndpointConnectionError,
    ConnectTimeoutError,
    ConnectionClosedError,
    NoCredentialsError,
)


class DynamoDBClient:
    """Async DynamoDB client for full-text storage.

    The underlying aiobotocore client is opened once, on first use, and
    shared by every request until ``reset`` or ``close`` is called.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.table_name = self.settings.dynamodb_table
        self.session = aioboto3.Session(
            aws_access_key_id=self.settings.aws_access_key_id or None,
            aws_secret_access_key=self.settings.aws_secret_access_key or None,
            region_name=self.settings.aws_region,
        )
        # Failures surface to the caller instead of being retried by botocore
        self.config = Config(
            retries={"max_attempts": 1, "mode": "standard"},
            connect_timeout=self.settings.request_timeout_seconds,
            read_timeout=self.settings.request_timeout_seconds,
        )
        self._client: Any = None
        self._exit_stack: AsyncExitStack | None = None
        self._lock = asyncio.Lock()

    async def get_client(self) -> Any:
        """Get the shared DynamoDB client, opening it if needed."""
        if self._client is not None:
            return self._client

        async with self._lock:
            if self._client is None:
                kwargs: dict[str, Any] = {"config": self.config}
                if self.settings.dynamodb_endpoint_url:
                    kwargs["endpoint_url"] = self.settings.dynamodb_endpoint_url
                stack = AsyncExitStack()
                self._client = await stack.enter_async_context(
                    self.session.client("dynamodb", **kwargs)
                )
                self._exit_stack = stack
                logger.info("DynamoDB client opened for table %s", self.table_name)
        return self._client

    async def reset(self, stale: Any = None) -> None:
        """Drop the shared client so the next call reconnects.

        With ``stale``, the client is only dropped while it is still current.
        """
        async with self._lock:
            if stale is not None and self._client is not stale:
                return
            await self._close_unlocked()

    async def close(self) -> None:
        """Close the shared client."""
        async with self._lock:
            await self._close_unlocked()

    async def _close_unlocked(self) -> None:
        stack, self._exit_stack, self._client = self._exit_stack, None, None
        if stack is not None:
            await stack.aclose()

    async def create_table_if_not_exists(self) -> None:
        """Create the full-text table if it doesn't exist."""
        client = await self.get_client()
        try:
            await client.describe_table(TableName=self.table_name)
        except client.exceptions.ResourceNotFoundException:
            await client.create_table(
                TableName=self.table_name,
                KeySchema=[
                    {"AttributeName": "pk", "KeyType": "HASH"},  # Partition key
                    {"AttributeName": "sk", "KeyType": "RANGE"},  # Sort key
                ],
                AttributeDefinitions=[
                    {"AttributeName": "pk", "AttributeType": "S"},
                    {"AttributeName": "sk", "AttributeType": "S"},
                ],
                BillingMode="PAY_PER_REQUEST",
            )
            waiter = client.get_waiter("table_exists")
            await waiter.wait(TableName=self.table_name)
            logger.info("Created DynamoDB table %s", self.table_name)

    async def put_item(self, item: dict[str, Any]) -> None:
        """Store one item in the full-text table."""
        await self._call("put_item", Item=item)

    async def query_partition(self, pk: str, limit: int = 20) -> list[dict[str, Any]]:
        """Get items of a partition, most recent sort key first."""
        response = await self._call(
            "query",
            KeyConditionExpression="pk = :pk",
            ExpressionAttributeValues={":pk": {"S": pk}},
            ScanIndexForward=False,  # Descending order (newest first)
            Limit=limit,
        )
        return response.get("Items", [])

    async def _call(self, operation: str, **kwargs: Any) -> Any:
        client = await self.get_client()
        try:
            return await getattr(client, operation)(TableName=self.table_name, **kwargs)
        except CONNECTION_ERRORS as e:
            logger.warning("DynamoDB unreachable, dropping client: %s", e)
            await self.reset(stale=client)
            raise


# Singleton instance
dynamodb = DynamoDBClient()
