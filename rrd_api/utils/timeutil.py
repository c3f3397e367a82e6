"""Unix timestamp conversion."""

from __future__ import annotations

import math
from datetime import datetime


def to_timestamp(value: datetime | float) -> int:
    """Whole seconds since the epoch, floored (never rounded).

    Naive datetimes are interpreted in local time, as ``datetime.timestamp``
    does.
    """
    seconds = value.timestamp() if isinstance(value, datetime) else value
    return math.floor(seconds)
