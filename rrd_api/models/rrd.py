"""Typed results decoded from rrdtool output, plus request/response bodies."""

from __future__ import annotations

import math
from enum import Enum
from typing import Annotated, Any, Iterator, Literal, Optional, Union

from pydantic import BaseModel, Field


class ConsolidationFunction(str, Enum):
    AVERAGE = "AVERAGE"
    MIN = "MIN"
    MAX = "MAX"
    LAST = "LAST"


# ---------------------------------------------------------------------------
# info
# ---------------------------------------------------------------------------

class NumberValue(BaseModel):
    kind: Literal["number"] = "number"
    value: float


class TextValue(BaseModel):
    """A non-numeric attribute, quotes already stripped."""

    kind: Literal["text"] = "text"
    value: str


InfoValue = Annotated[Union[NumberValue, TextValue], Field(discriminator="kind")]

# data source name -> attribute name -> value
InfoRecord = dict[str, dict[str, InfoValue]]


# ---------------------------------------------------------------------------
# fetch
# ---------------------------------------------------------------------------

class FetchResult(BaseModel):
    """Tabular fetch output.

    ``headers[0]`` is always ``"timestamp"``; every row lines up with
    ``headers`` positionally. Missing samples are NaN, never zero.
    """

    headers: list[str]
    rows: list[list[float]] = Field(default_factory=list)

    def column(self, name: str) -> list[float]:
        idx = self.headers.index(name)
        return [row[idx] for row in self.rows]

    def records(self) -> Iterator[dict[str, float]]:
        for row in self.rows:
            yield dict(zip(self.headers, row))

    @property
    def has_gaps(self) -> bool:
        return any(math.isnan(v) for row in self.rows for v in row[1:])


# ---------------------------------------------------------------------------
# HTTP bodies
# ---------------------------------------------------------------------------

class HealthResponse(BaseModel):
    status: str
    version: str


class VersionResponse(BaseModel):
    version: str


class InfoResponse(BaseModel):
    file: str
    data_sources: InfoRecord


class FetchRequest(BaseModel):
    """Request body for POST /rrd/fetch."""

    file: str
    cf: ConsolidationFunction = ConsolidationFunction.AVERAGE
    start: int = Field(description="Start of the window, unix seconds")
    end: int = Field(description="End of the window, unix seconds")
    resolution: Optional[int] = Field(
        default=None,
        description="Seconds per value; omitted lets rrdtool pick its step",
    )


class CreateRequest(BaseModel):
    """Request body for POST /rrd/create."""

    file: str
    data_sources: list[str] = Field(
        default_factory=list,
        description='E.g. ["DS:temp:GAUGE:600:U:U"]',
    )
    archives: list[str] = Field(
        default_factory=list,
        description='E.g. ["RRA:AVERAGE:0.5:1:1200"]',
    )


class UpdateRequest(BaseModel):
    """Request body for POST /rrd/update."""

    file: str
    values: list[str] = Field(description='E.g. ["N:42", "1364374210:0.5"]')


class FetchResponse(BaseModel):
    """FetchResult for JSON clients: missing samples become null."""

    file: str
    headers: list[str]
    rows: list[list[Optional[float]]]

    @classmethod
    def from_result(cls, file: str, result: FetchResult) -> FetchResponse:
        rows = [
            [None if math.isnan(v) else v for v in row]
            for row in result.rows
        ]
        return cls(file=file, headers=result.headers, rows=rows)


class CommandResponse(BaseModel):
    file: str
    success: bool


def info_to_plain(info: InfoRecord) -> dict[str, dict[str, Any]]:
    """Drop the variant tags, e.g. for printing or JSON dumps."""
    return {
        ds: {attr: val.value for attr, val in attrs.items()}
        for ds, attrs in info.items()
    }
