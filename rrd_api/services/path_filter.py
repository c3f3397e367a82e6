"""Database path checks for requests arriving over HTTP.

A path or argument that starts with ``-`` would be read by rrdtool as an
option, so it is always refused. When ``RRD_DATA_DIR`` is set, paths must
resolve inside it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from rrd_api.config import Settings, settings
from rrd_api.utils.logging import get_logger

log = get_logger(__name__)


class PathFilterResult:
    __slots__ = ("allowed", "reason", "path")

    def __init__(self, allowed: bool, reason: str, path: str = ""):
        self.allowed = allowed
        self.reason = reason
        self.path = path

    def __bool__(self) -> bool:
        return self.allowed


def check_rrd_path(file_path: str, cfg: Settings | None = None) -> PathFilterResult:
    """Check whether *file_path* may be handed to rrdtool.

    On success ``path`` holds the value to pass on: unchanged when no data
    directory is configured, otherwise resolved against it.
    """
    _cfg = cfg or settings
    path = file_path.strip()
    if not path:
        return PathFilterResult(False, "empty path")
    if path.startswith("-"):
        return PathFilterResult(False, "path must not start with '-'")

    if not _cfg.rrd_data_dir:
        return PathFilterResult(True, "no data directory configured", path)

    root = Path(_cfg.rrd_data_dir).resolve()
    target = (root / path).resolve()
    if not target.is_relative_to(root):
        log.warning("path_filter.denied", path=path, root=str(root))
        return PathFilterResult(False, f"path outside {root}")
    return PathFilterResult(True, "inside data directory", str(target))


def check_rrd_arguments(tokens: Sequence[str]) -> PathFilterResult:
    """Refuse DS/RRA definitions or update values that look like options.

    rrdtool permutes its arguments, so ``--daemon`` or ``--source`` anywhere
    in the list would be honoured.
    """
    for token in tokens:
        if token.strip().startswith("-"):
            log.warning("path_filter.option_denied", token=token)
            return PathFilterResult(False, f"argument must not start with '-': {token}")
    return PathFilterResult(True, "no option-like arguments")
