"""DynamoDB table store (implements ITableStore).

Uses boto3 (sync) via asyncio.to_thread for the async API. Items are
serialized with boto3's TypeSerializer so plain dicts (str, None, numbers)
can be written without the low-level attribute-value syntax at call sites.
"""

from __future__ import annotations

import asyncio
from typing import Any

from boto3.dynamodb.types import TypeSerializer
from botocore.exceptions import BotoCoreError, ClientError, WaiterError

from app.infrastructure.exceptions import TableNotReadyError, TableStoreError
from app.infrastructure.external.aws.errors import error_code, error_reason


class DynamoDBTableStore:
    """Table store over a DynamoDB client.

    create_collection uses provisioned throughput; wait_until_ready polls
    with the table_exists waiter, bounded by poll_delay * max_attempts.
    """

    def __init__(
        self,
        client: Any,
        *,
        poll_delay: int = 2,
        max_attempts: int = 25,
    ) -> None:
        self._client = client
        self._serializer = TypeSerializer()
        self.poll_delay = poll_delay
        self.max_attempts = max_attempts

    async def list_collections(self) -> set[str]:
        """Return all table names (follows pagination)."""

        def _list() -> set[str]:
            names: set[str] = set()
            paginator = self._client.get_paginator("list_tables")
            for page in paginator.paginate():
                names.update(page.get("TableNames", []))
            return names

        try:
            return await asyncio.to_thread(_list)
        except (ClientError, BotoCoreError) as e:
            raise TableStoreError("list_tables", "*", error_reason(e)) from e

    async def create_collection(
        self,
        name: str,
        key_field: str,
        *,
        read_capacity: int = 5,
        write_capacity: int = 5,
    ) -> bool:
        """Create table with a single string HASH key and provisioned throughput.

        Returns:
            True if created, False if another process created it first.
        """

        def _create() -> bool:
            try:
                self._client.create_table(
                    TableName=name,
                    AttributeDefinitions=[
                        {"AttributeName": key_field, "AttributeType": "S"}
                    ],
                    KeySchema=[{"AttributeName": key_field, "KeyType": "HASH"}],
                    ProvisionedThroughput={
                        "ReadCapacityUnits": read_capacity,
                        "WriteCapacityUnits": write_capacity,
                    },
                )
            except ClientError as e:
                if error_code(e) == "ResourceInUseException":
                    return False
                raise
            return True

        try:
            return await asyncio.to_thread(_create)
        except (ClientError, BotoCoreError) as e:
            raise TableStoreError("create_table", name, error_reason(e)) from e

    async def wait_until_ready(self, name: str) -> None:
        """Poll until the table exists and is ACTIVE.

        Raises:
            TableNotReadyError: If the bounded wait is exhausted.
        """

        def _wait() -> None:
            waiter = self._client.get_waiter("table_exists")
            waiter.wait(
                TableName=name,
                WaiterConfig={
                    "Delay": self.poll_delay,
                    "MaxAttempts": self.max_attempts,
                },
            )

        try:
            await asyncio.to_thread(_wait)
        except WaiterError as e:
            raise TableNotReadyError(name, self.max_attempts) from e
        except (ClientError, BotoCoreError) as e:
            raise TableStoreError("wait_until_ready", name, error_reason(e)) from e

    async def put(self, collection: str, item: dict[str, Any]) -> None:
        """Write item (overwrites any existing item with the same key)."""
        serialized = {k: self._serializer.serialize(v) for k, v in item.items()}

        def _put() -> None:
            self._client.put_item(TableName=collection, Item=serialized)

        try:
            await asyncio.to_thread(_put)
        except (ClientError, BotoCoreError) as e:
            raise TableStoreError("put_item", collection, error_reason(e)) from e
