"""DTOs for the image upload use case."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UploadImageCommand:
    """Input for uploading an image: raw bytes (multipart) or a base64 string (JSON).

    When both are present the raw bytes win, as a multipart file takes
    precedence over a JSON body.
    """

    data: bytes | None = None
    base64_data: str | None = None
    content_type: str | None = None


@dataclass(frozen=True)
class BlobReference:
    """Locator of a stored image: bucket, object key, and a URL for clients."""

    bucket: str
    key: str
    url: str
    content_type: str
