"""Image upload use case: normalize payload to bytes, store under a generated key."""

from __future__ import annotations

import base64
import binascii
import re
from collections.abc import Callable

from app.application.dtos.infrastructure import InfrastructureContext
from app.application.dtos.upload import BlobReference, UploadImageCommand
from app.application.interfaces.backends import IBlobStore
from app.domain.exceptions import PersistenceException, ValidationException
from app.shared.telemetry.logging import get_logger
from app.shared.telemetry.tracing import traced
from app.shared.utils.generators import generate_id

logger = get_logger(__name__)

# data:<mime>[;param...];base64,
_DATA_URI_PREFIX = re.compile(r"^data:(?P<media>[^,]*?);base64,", re.IGNORECASE)


def split_data_uri(value: str) -> tuple[str | None, str]:
    """Strip a data-URI prefix. Returns (mime type or None, base64 text)."""
    match = _DATA_URI_PREFIX.match(value)
    if not match:
        return None, value
    mime = match.group("media").split(";", 1)[0].strip() or None
    return mime, value[match.end():]


def decode_base64_payload(value: str) -> tuple[str | None, bytes]:
    """Decode a base64 string, with or without a data-URI prefix.

    Whitespace is ignored and missing padding is tolerated.

    Raises:
        ValidationException: If the text is not valid base64.
    """
    mime, encoded = split_data_uri(value.strip())
    encoded = "".join(encoded.split())
    encoded += "=" * (-len(encoded) % 4)
    try:
        return mime, base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValidationException("Invalid base64 image payload", field="base64") from e


class ImageUploadService:
    """Stores uploaded images in the images bucket under <prefix><id><extension>.

    No content validation, size limit, or content-type whitelist here.
    """

    def __init__(
        self,
        blob_store: IBlobStore,
        context: InfrastructureContext,
        *,
        key_prefix: str = "images/",
        key_extension: str = ".jpg",
        default_content_type: str = "image/jpeg",
        id_generator: Callable[[], str] = generate_id,
    ) -> None:
        self.blob_store = blob_store
        self.context = context
        self.key_prefix = key_prefix
        self.key_extension = key_extension
        self.default_content_type = default_content_type
        self._generate_id = id_generator

    def _object_key(self, image_id: str) -> str:
        return f"{self.key_prefix}{image_id}{self.key_extension}"

    @traced("uploads.upload_image")
    async def upload_image(self, data: UploadImageCommand) -> BlobReference:
        """Store the image and return its bucket, key and URL.

        Raises:
            ValidationException: No payload, or malformed base64.
            PersistenceException: The blob store rejected the write.
        """
        if data.data is not None:
            body = data.data
            content_type = data.content_type or self.default_content_type
        elif data.base64_data:
            mime, body = decode_base64_payload(data.base64_data)
            content_type = data.content_type or mime or self.default_content_type
        else:
            raise ValidationException("No image provided", field="image")

        key = self._object_key(self._generate_id())
        bucket = self.context.bucket_name
        try:
            await self.blob_store.put(bucket, key, body, content_type)
        except Exception as e:
            logger.error("Upload of %s/%s failed: %s", bucket, key, e)
            raise PersistenceException(f"bucket:{bucket}", str(e)) from e

        logger.info("Stored image %s/%s (%d bytes)", bucket, key, len(body))
        return BlobReference(
            bucket=bucket,
            key=key,
            url=self.context.blob_url(key),
            content_type=content_type,
        )
