"""Exceptions raised by the rrdtool layer.

``ExecutionError`` and ``ParseError`` never overlap: the first means rrdtool
could not run or exited non-zero, the second means it ran but printed
something this package does not understand.
"""

from __future__ import annotations

from typing import Optional

from rrd_api.models.commands import CommandResult


class RRDToolError(RuntimeError):
    pass


class ExecutionError(RRDToolError):
    def __init__(self, message: str, result: Optional[CommandResult] = None) -> None:
        super().__init__(message)
        self.result = result


class ParseError(RRDToolError):
    pass
