"""Utilities for parsing rrdtool CLI output."""

from __future__ import annotations

import math
import re

from rrd_api.errors import ParseError
from rrd_api.models.rrd import FetchResult, InfoRecord, NumberValue, TextValue


# ---------------------------------------------------------------------------
# --help / version banner
# ---------------------------------------------------------------------------

_VERSION_RE = re.compile(r"^RRDtool\s+[0-9.]+")


def parse_version(output: str) -> str:
    """Return the banner (e.g. ``"RRDtool 1.7.2"``) that opens the help text."""
    m = _VERSION_RE.match(output)
    if not m:
        raise ParseError("version string not found")
    return m.group(0)


# ---------------------------------------------------------------------------
# info
# ---------------------------------------------------------------------------

# ds[shortterm].type = "GAUGE"
_INFO_DS_RE = re.compile(r"^ds\[([a-zA-Z]+)\]\.([a-zA-Z]+) = (.*)$")
_QUOTES_RE = re.compile(r"['\"]")


def _coerce_info_value(raw: str) -> NumberValue | TextValue:
    """Number when ``float()`` accepts *raw*, de-quoted text otherwise.

    A blank value counts as 0. ``NaN`` stays text. ``float()`` spellings
    such as ``inf`` or ``1_000`` are numbers and hex literals are text;
    rrdtool prints neither.
    """
    if not raw.strip():
        return NumberValue(value=0)
    try:
        number = float(raw)
    except ValueError:
        number = math.nan
    if math.isnan(number):
        return TextValue(value=_QUOTES_RE.sub("", raw))
    return NumberValue(value=number)


def parse_info(output: str) -> InfoRecord:
    """Collect the per-data-source ``ds[name].attr = value`` lines.

    Global header lines (filename, step, rra[...] ...) are skipped.
    """
    info: InfoRecord = {}
    for line in output.splitlines():
        m = _INFO_DS_RE.match(line)
        if not m:
            continue
        ds, attr, raw = m.groups()
        info.setdefault(ds, {})[attr] = _coerce_info_value(raw)
    return info


# ---------------------------------------------------------------------------
# fetch
# ---------------------------------------------------------------------------

_FETCH_SPLIT_RE = re.compile(r"[:\s]+")


def _to_number(token: str) -> float:
    try:
        return float(token)
    except ValueError:
        return math.nan


def parse_fetch(output: str) -> FetchResult:
    """Parse the column header line and ``timestamp: v1 v2 ...`` data lines."""
    lines = output.split("\n")
    header_line = lines[0]
    headers = ["timestamp", *header_line.split()]

    rows: list[list[float]] = []
    for line in lines[1:]:
        if not line.strip():
            continue
        tokens = [t for t in _FETCH_SPLIT_RE.split(line) if t]
        rows.append([_to_number(t) for t in tokens])

    return FetchResult(headers=headers, rows=rows)


# ---------------------------------------------------------------------------
# create / update
# ---------------------------------------------------------------------------

def parse_create(output: str) -> None:
    """rrdtool create prints nothing useful on success."""
    return None


def parse_update(output: str) -> None:
    return None
