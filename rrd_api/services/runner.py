"""Runs the rrdtool executable as a subprocess.

Arguments go straight to ``exec`` (no shell), so DS/RRA definitions and
update values reach rrdtool exactly as built.
"""

from __future__ import annotations

import asyncio
import time
from typing import Protocol, Sequence

from rrd_api.errors import ExecutionError
from rrd_api.models.commands import CommandResult
from rrd_api.utils.logging import get_logger

log = get_logger(__name__)


class CommandRunner(Protocol):
    """Anything able to run one rrdtool invocation."""

    async def run(self, args: Sequence[str]) -> CommandResult: ...


class RRDToolRunner:
    """Spawns ``path`` once per call and waits for it to exit."""

    def __init__(self, path: str = "rrdtool") -> None:
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    async def run(self, args: Sequence[str]) -> CommandResult:
        argv = [str(a) for a in args]
        started = time.monotonic()
        try:
            proc = await asyncio.create_subprocess_exec(
                self._path, *argv,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            log.warning("rrdtool.spawn_failed", path=self._path, error=str(exc))
            raise ExecutionError(f"{self._path}: {exc}") from exc

        try:
            stdout, stderr = await proc.communicate()
        except BaseException:
            # cancelled (e.g. wait_for timeout): the child must not outlive us
            if proc.returncode is None:
                try:
                    proc.kill()
                except ProcessLookupError:
                    pass
                await proc.wait()
            log.warning("rrdtool.cancelled", args=argv, pid=proc.pid)
            raise

        result = CommandResult(
            command=argv,
            output=stdout.decode(errors="replace"),
            error_output=stderr.decode(errors="replace"),
            returncode=proc.returncode,
            elapsed_time=time.monotonic() - started,
        )
        log.debug(
            "rrdtool.exec",
            args=argv,
            rc=result.returncode,
            elapsed=round(result.elapsed_time, 3),
        )
        if result.failed:
            detail = (result.error_output or result.output).strip()
            verb = argv[0] if argv else ""
            raise ExecutionError(
                f"rrdtool {verb} failed (rc={result.returncode}): {detail}",
                result,
            )
        return result
