"""Upload API: multipart `image` file or JSON `{"base64": ...}`, delegating to ImageUploadService."""

import json
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request
from starlette.datastructures import UploadFile

from app.api.v1.dependencies import get_image_upload_service
from app.application.dtos.upload import UploadImageCommand
from app.application.use_cases.uploads import ImageUploadService
from app.core.config import get_settings
from app.schemas.upload import UploadBase64Request, UploadResponse

router = APIRouter()


def _too_large() -> HTTPException:
    return HTTPException(status_code=413, detail="Payload too large")


async def _read_body(request: Request, max_bytes: int) -> bytes:
    """Read the request body, stopping with 413 once it passes max_bytes.

    Chunked bodies carry no Content-Length, so the cap is enforced while
    streaming.
    """
    raw = bytearray()
    async for chunk in request.stream():
        raw.extend(chunk)
        if len(raw) > max_bytes:
            raise _too_large()
    return bytes(raw)


async def _read_upload_command(request: Request, max_bytes: int) -> UploadImageCommand:
    """Build the upload command from a multipart form or a JSON body.

    Anything else (or an unparsable body) yields an empty command, which the
    use case rejects with "No image provided". Payloads over max_bytes raise 413.
    """
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith("multipart/form-data"):
        form = await request.form()
        image = form.get("image")
        if isinstance(image, UploadFile):
            data = await image.read()
            if len(data) > max_bytes:
                raise _too_large()
            return UploadImageCommand(data=data, content_type=image.content_type or None)
        encoded = form.get("base64")
        if not isinstance(encoded, str):
            return UploadImageCommand()
        if len(encoded) > max_bytes:
            raise _too_large()
        return UploadImageCommand(base64_data=encoded)

    raw = await _read_body(request, max_bytes)
    if not raw:
        return UploadImageCommand()
    try:
        body = UploadBase64Request.model_validate(json.loads(raw))
    except ValueError:
        return UploadImageCommand()
    return UploadImageCommand(base64_data=body.base64)


@router.post(
    "",
    response_model=UploadResponse,
    responses={
        400: {"description": "No image provided or invalid base64"},
        413: {"description": "Payload exceeds max_upload_size"},
    },
)
async def upload_image(
    request: Request,
    service: Annotated[ImageUploadService, Depends(get_image_upload_service)],
) -> UploadResponse:
    """Store an image in the images bucket and return its bucket, key and URL."""
    max_bytes = get_settings().max_upload_size
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > max_bytes:
        raise _too_large()

    command = await _read_upload_command(request, max_bytes)
    ref = await service.upload_image(command)
    return UploadResponse(bucket=ref.bucket, key=ref.key, url=ref.url)
