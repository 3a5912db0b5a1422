"""Storage: S3-compatible blob store for uploaded images."""

from app.infrastructure.external.storage.s3_storage import S3BlobStore

__all__ = ["S3BlobStore"]
