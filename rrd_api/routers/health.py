"""Health-check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from rrd_api import __version__
from rrd_api.auth import require_api_key
from rrd_api.errors import ExecutionError, ParseError
from rrd_api.models.rrd import HealthResponse, VersionResponse
from rrd_api.services.rrdtool import rrdtool

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def service_health() -> HealthResponse:
    """Basic liveness probe (no auth required)."""
    return HealthResponse(status="ok", version=__version__)


@router.get(
    "/rrd/version",
    response_model=VersionResponse,
    dependencies=[Depends(require_api_key)],
)
async def rrdtool_version() -> VersionResponse:
    """Check that rrdtool runs and report its banner."""
    try:
        return VersionResponse(version=await rrdtool.version())
    except ExecutionError as exc:
        raise HTTPException(status_code=502, detail=str(exc))
    except ParseError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
