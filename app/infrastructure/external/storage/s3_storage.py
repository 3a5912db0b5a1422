"""S3-compatible blob storage (AWS S3, LocalStack, MinIO) for uploaded images."""

from __future__ import annotations

import asyncio
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from app.infrastructure.exceptions import BlobStoreError
from app.infrastructure.external.aws.errors import error_code, error_reason

_MISSING_BUCKET_CODES = frozenset({"404", "NoSuchBucket", "NotFound"})


class S3BlobStore:
    """S3 blob store (implements IBlobStore).

    Uses boto3 (sync) via asyncio.to_thread for async API. Bucket creation
    treats BucketAlreadyOwnedByYou as success so concurrent bootstraps
    converge on the same bucket.
    """

    def __init__(self, client: Any, region: str = "us-east-1") -> None:
        """Initialize with an S3 client.

        Args:
            client: boto3 S3 client (path-style addressing for LocalStack).
            region: Region used for the bucket location constraint.
        """
        self._client = client
        self.region = region

    async def exists(self, container: str) -> bool:
        """Return True if the bucket exists (HEAD bucket); False on 404."""

        def _head() -> bool:
            try:
                self._client.head_bucket(Bucket=container)
            except ClientError as e:
                if error_code(e) in _MISSING_BUCKET_CODES:
                    return False
                raise
            return True

        try:
            return await asyncio.to_thread(_head)
        except (ClientError, BotoCoreError) as e:
            raise BlobStoreError("head_bucket", container, error_reason(e)) from e

    async def create_container(self, container: str) -> bool:
        """Create bucket. Returns False if it already existed and is ours."""

        def _create() -> bool:
            kwargs: dict[str, Any] = {"Bucket": container}
            # us-east-1 rejects an explicit location constraint.
            if self.region != "us-east-1":
                kwargs["CreateBucketConfiguration"] = {
                    "LocationConstraint": self.region
                }
            try:
                self._client.create_bucket(**kwargs)
            except ClientError as e:
                if error_code(e) == "BucketAlreadyOwnedByYou":
                    return False
                raise
            return True

        try:
            return await asyncio.to_thread(_create)
        except (ClientError, BotoCoreError) as e:
            raise BlobStoreError("create_bucket", container, error_reason(e)) from e

    async def put(
        self, container: str, key: str, data: bytes, content_type: str
    ) -> None:
        """Store bytes under key."""

        def _put() -> None:
            self._client.put_object(
                Bucket=container,
                Key=key,
                Body=data,
                ContentType=content_type,
            )

        try:
            await asyncio.to_thread(_put)
        except (ClientError, BotoCoreError) as e:
            raise BlobStoreError("put_object", f"{container}/{key}", error_reason(e)) from e
