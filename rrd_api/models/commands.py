"""Command-related data structures."""

from __future__ import annotations

from pydantic import BaseModel


class CommandResult(BaseModel):
    """Internal result from one rrdtool process run."""

    command: list[str]
    output: str
    error_output: str = ""
    returncode: int = 0
    elapsed_time: float = 0.0

    @property
    def failed(self) -> bool:
        return self.returncode != 0
