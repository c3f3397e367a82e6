"""Async facade over rrdtool: one method per engine action.

Each call builds the argument list, runs rrdtool once and parses what it
printed. Execution failures propagate before any parsing happens. Calls on
the same file are not serialized here; callers that issue concurrent
updates to one file must order them themselves.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence, Union

from rrd_api.config import Settings, settings
from rrd_api.models.rrd import ConsolidationFunction, FetchResult, InfoRecord
from rrd_api.services import command_builder
from rrd_api.services.runner import CommandRunner, RRDToolRunner
from rrd_api.utils import rrd_parser
from rrd_api.utils.logging import get_logger
from rrd_api.utils.timeutil import to_timestamp

log = get_logger(__name__)


class RRDTool:
    """Typed access to the rrdtool CLI."""

    def __init__(
        self,
        cfg: Settings | None = None,
        *,
        runner: CommandRunner | None = None,
    ) -> None:
        self._cfg = cfg or settings
        self._runner = runner or RRDToolRunner(self._cfg.rrdtool_path)

    @property
    def path(self) -> str:
        return self._cfg.rrdtool_path

    @staticmethod
    def unix_time(value: datetime | float) -> int:
        return to_timestamp(value)

    # ── read actions ──────────────────────────────────────────────────

    async def version(self) -> str:
        result = await self._runner.run(command_builder.build_version_command())
        return rrd_parser.parse_version(result.output)

    async def info(self, file_path: str) -> InfoRecord:
        result = await self._runner.run(command_builder.build_info_command(file_path))
        return rrd_parser.parse_info(result.output)

    async def fetch(
        self,
        file_path: str,
        cf: Union[ConsolidationFunction, str],
        start: int,
        end: int,
        resolution: Optional[int] = None,
    ) -> FetchResult:
        """Fetch ``[start, end]`` consolidated with *cf*.

        Timestamps are unix seconds; see :meth:`unix_time` for datetimes.
        """
        args = command_builder.build_fetch_command(
            file_path, cf, start, end, resolution,
        )
        result = await self._runner.run(args)
        return rrd_parser.parse_fetch(result.output)

    # ── write actions ─────────────────────────────────────────────────

    async def create(
        self,
        file_path: str,
        data_sources: Sequence[str],
        archives: Sequence[str],
    ) -> None:
        args = command_builder.build_create_command(file_path, data_sources, archives)
        result = await self._runner.run(args)
        log.info(
            "rrd.created",
            file=file_path,
            data_sources=len(data_sources),
            archives=len(archives),
        )
        return rrd_parser.parse_create(result.output)

    async def update(self, file_path: str, values: Sequence[str]) -> None:
        result = await self._runner.run(
            command_builder.build_update_command(file_path, values),
        )
        log.debug("rrd.updated", file=file_path, values=len(values))
        return rrd_parser.parse_update(result.output)


# ── Singleton instance ────────────────────────────────────────────────────

rrdtool = RRDTool()
