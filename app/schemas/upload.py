"""Upload API schemas."""

from pydantic import BaseModel, Field


class UploadBase64Request(BaseModel):
    """JSON form of POST /upload."""

    base64: str | None = Field(
        default=None,
        description="Base64 image, optionally prefixed with data:<mime>;base64,",
    )


class UploadResponse(BaseModel):
    """Locator of the stored image."""

    bucket: str
    key: str
    url: str
