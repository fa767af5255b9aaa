"""
Service status endpoint.
"""

from fastapi import APIRouter

from sales_api.api.responses import StatusResponse, Tags

router = APIRouter()


@router.get(
    "/",
    response_model=StatusResponse,
    summary="Service status",
    tags=[Tags.ROOT],
)
async def root() -> StatusResponse:
    """Liveness check returning a static status payload."""
    return StatusResponse(status="ok", message="Sales API with Prometheus & PostgreSQL")
