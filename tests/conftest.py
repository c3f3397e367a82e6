"""Shared pytest fixtures."""

from __future__ import annotations

import os

# Force settings to use test-safe defaults before any import
os.environ.setdefault("RRDTOOL_PATH", "rrdtool")
os.environ.setdefault("RRD_DATA_DIR", "")
os.environ.setdefault("RRD_API_KEY", "")

import pytest
from httpx import ASGITransport, AsyncClient

from rrd_api.services.rrdtool import RRDTool
from tests.mock_rrdtool import MockRunner


@pytest.fixture
def mock_runner():
    """Provide a fresh MockRunner."""
    return MockRunner()


@pytest.fixture
def rrd(mock_runner):
    """RRDTool facade wired to the mock runner."""
    return RRDTool(runner=mock_runner)


@pytest.fixture
async def client(rrd):
    """Async test client with the mock-backed facade injected."""
    import rrd_api.routers.health as rh
    import rrd_api.routers.rrd as rr

    original_health = rh.rrdtool
    original_rrd = rr.rrdtool
    rh.rrdtool = rrd
    rr.rrdtool = rrd

    from rrd_api.main import app as fastapi_app

    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    # Restore
    rh.rrdtool = original_health
    rr.rrdtool = original_rrd
