"""X-API-Key guard for the /rrd routes."""

from __future__ import annotations

import secrets

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

from rrd_api.config import settings

_api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def require_api_key(
    api_key: str | None = Security(_api_key_header),
) -> str:
    """Reject requests whose X-API-Key does not match RRD_API_KEY.

    A blank RRD_API_KEY turns the check off.
    """
    expected = settings.rrd_api_key
    if not expected:
        return "no-key-configured"
    if api_key is None or not secrets.compare_digest(api_key, expected):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing API key",
        )
    return api_key
