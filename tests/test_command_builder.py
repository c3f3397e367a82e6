"""Tests for rrdtool argument building."""

from __future__ import annotations

from rrd_api.models.rrd import ConsolidationFunction
from rrd_api.services.command_builder import (
    build_create_command,
    build_fetch_command,
    build_info_command,
    build_update_command,
    build_version_command,
)

RRD = "./data/load.rrd"


def test_version():
    assert build_version_command() == ["--help"]


def test_info():
    assert build_info_command(RRD) == ["info", RRD]


class TestFetch:
    def test_without_resolution(self):
        args = build_fetch_command(RRD, ConsolidationFunction.AVERAGE, 1364374210, 1364407660)
        assert args == [
            "fetch", RRD, "AVERAGE",
            "--start", "1364374210",
            "--end", "1364407660",
        ]
        assert "--resolution" not in args

    def test_with_resolution(self):
        args = build_fetch_command(RRD, "MIN", 1364374210, 1364407660, 3600)
        assert args[-2:] == ["--resolution", "3600"]
        assert args.count("--resolution") == 1

    def test_enum_rendered_by_value(self):
        args = build_fetch_command(RRD, ConsolidationFunction.LAST, 0, 10)
        assert args[2] == "LAST"

    def test_cf_not_validated(self):
        args = build_fetch_command(RRD, "MEDIAN", 0, 10)
        assert args[2] == "MEDIAN"

    def test_all_tokens_are_strings(self):
        args = build_fetch_command(RRD, "MAX", 0, 10, 60)
        assert all(isinstance(a, str) for a in args)


class TestCreate:
    def test_order_preserved(self):
        ds = "DS:temp:GAUGE:600:U:U"
        rras = ["RRA:AVERAGE:0.5:1:1200", "RRA:MIN:0.5:1:1200", "RRA:MAX:0.5:1:1200"]
        assert build_create_command(RRD, [ds], rras) == ["create", RRD, ds, *rras]

    def test_no_specs(self):
        assert build_create_command(RRD, [], []) == ["create", RRD]


class TestUpdate:
    def test_values_in_order(self):
        assert build_update_command(RRD, ["N:1", "1364374210:2"]) == [
            "update", RRD, "N:1", "1364374210:2",
        ]

    def test_inputs_not_mutated(self):
        values = ["N:1"]
        build_update_command(RRD, values)
        assert values == ["N:1"]
