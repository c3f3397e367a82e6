"""Argument lists for each rrdtool action.

Builders never validate their input: DS/RRA definitions and update values
are passed through as opaque tokens, in the caller's order.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

from rrd_api.models.rrd import ConsolidationFunction


def _cf_token(cf: Union[ConsolidationFunction, str]) -> str:
    return cf.value if isinstance(cf, ConsolidationFunction) else str(cf)


def build_version_command() -> list[str]:
    # Without a subcommand rrdtool prints usage, which opens with its banner.
    return ["--help"]


def build_info_command(file_path: str) -> list[str]:
    return ["info", file_path]


def build_fetch_command(
    file_path: str,
    cf: Union[ConsolidationFunction, str],
    start: int,
    end: int,
    resolution: Optional[int] = None,
) -> list[str]:
    """``rrdtool fetch`` arguments.

    ``--resolution`` is only emitted when given, so rrdtool falls back to the
    archive's native step otherwise.
    """
    args = [
        "fetch", file_path, _cf_token(cf),
        "--start", str(start),
        "--end", str(end),
    ]
    if resolution is not None:
        args += ["--resolution", str(resolution)]
    return args


def build_create_command(
    file_path: str,
    data_sources: Sequence[str],
    archives: Sequence[str],
) -> list[str]:
    return ["create", file_path, *data_sources, *archives]


def build_update_command(file_path: str, values: Sequence[str]) -> list[str]:
    return ["update", file_path, *values]
