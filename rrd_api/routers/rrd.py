"""Database endpoints: info, fetch, create, update."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from rrd_api.auth import require_api_key
from rrd_api.errors import ExecutionError, ParseError
from rrd_api.models.rrd import (
    CommandResponse,
    CreateRequest,
    FetchRequest,
    FetchResponse,
    InfoResponse,
    UpdateRequest,
)
from rrd_api.services.path_filter import check_rrd_arguments, check_rrd_path
from rrd_api.services.rrdtool import rrdtool
from rrd_api.utils.logging import get_logger

log = get_logger(__name__)

router = APIRouter(prefix="/rrd", tags=["rrd"], dependencies=[Depends(require_api_key)])


def _checked_path(file_path: str) -> str:
    filt = check_rrd_path(file_path)
    if not filt.allowed:
        raise HTTPException(status_code=403, detail=filt.reason)
    return filt.path


def _checked_arguments(tokens: list[str]) -> None:
    filt = check_rrd_arguments(tokens)
    if not filt.allowed:
        raise HTTPException(status_code=403, detail=filt.reason)


def _engine_error(exc: Exception) -> HTTPException:
    if isinstance(exc, ParseError):
        return HTTPException(status_code=500, detail=f"unexpected rrdtool output: {exc}")
    return HTTPException(status_code=502, detail=str(exc))


@router.get("/info", response_model=InfoResponse)
async def rrd_info(file: str = Query(..., description="Path to the .rrd file")) -> InfoResponse:
    path = _checked_path(file)
    try:
        data = await rrdtool.info(path)
    except (ExecutionError, ParseError) as exc:
        raise _engine_error(exc)
    return InfoResponse(file=file, data_sources=data)


@router.post("/fetch", response_model=FetchResponse)
async def rrd_fetch(req: FetchRequest) -> FetchResponse:
    if req.end < req.start:
        raise HTTPException(status_code=422, detail="end must not be before start")
    path = _checked_path(req.file)
    try:
        result = await rrdtool.fetch(path, req.cf, req.start, req.end, req.resolution)
    except (ExecutionError, ParseError) as exc:
        raise _engine_error(exc)
    return FetchResponse.from_result(req.file, result)


@router.post("/create", response_model=CommandResponse)
async def rrd_create(req: CreateRequest) -> CommandResponse:
    path = _checked_path(req.file)
    _checked_arguments([*req.data_sources, *req.archives])
    try:
        await rrdtool.create(path, req.data_sources, req.archives)
    except ExecutionError as exc:
        log.warning("rrd.create_failed", file=req.file, error=str(exc))
        raise _engine_error(exc)
    return CommandResponse(file=req.file, success=True)


@router.post("/update", response_model=CommandResponse)
async def rrd_update(req: UpdateRequest) -> CommandResponse:
    path = _checked_path(req.file)
    _checked_arguments(req.values)
    try:
        await rrdtool.update(path, req.values)
    except ExecutionError as exc:
        log.warning("rrd.update_failed", file=req.file, error=str(exc))
        raise _engine_error(exc)
    return CommandResponse(file=req.file, success=True)
