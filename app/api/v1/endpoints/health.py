"""Health check endpoints. Liveness has no dependencies; readiness reports the startup bootstrap."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.v1.dependencies import get_bootstrap_report
from app.infrastructure.bootstrap import BootstrapReport
from app.schemas.health import HealthResponse, ReadinessResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return ok for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "A bootstrap step failed", "model": ReadinessResponse}},
)
def readiness_check(
    report: Annotated[BootstrapReport | None, Depends(get_bootstrap_report)],
) -> ReadinessResponse | JSONResponse:
    """Return 200 with the bootstrap report when every step succeeded; 503 otherwise.

    The service keeps accepting requests while not ready; writes to a
    resource whose step failed then fail with a 500.
    """
    if report is None:
        return JSONResponse(
            status_code=503,
            content=ReadinessResponse(ok=False).model_dump(),
        )
    body = ReadinessResponse.model_validate(report.to_dict())
    if report.ok:
        return body
    return JSONResponse(status_code=503, content=body.model_dump())
