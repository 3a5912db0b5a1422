"""Upload use cases."""

from app.application.use_cases.uploads.upload_image import (
    ImageUploadService,
    decode_base64_payload,
    split_data_uri,
)

__all__ = [
    "ImageUploadService",
    "decode_base64_payload",
    "split_data_uri",
]
