"""FastAPI application entry-point."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from rrd_api import __version__
from rrd_api.routers import health, rrd
from rrd_api.utils.logging import get_logger, setup_logging

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown hooks."""
    setup_logging()
    log.info("app.started", version=__version__)
    yield


app = FastAPI(
    title="RRD Tools API",
    description="Typed HTTP access to rrdtool databases",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(rrd.router)
