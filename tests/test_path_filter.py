"""Tests for database path checks."""

from __future__ import annotations

import pytest

from rrd_api.config import Settings
from rrd_api.services.path_filter import check_rrd_arguments, check_rrd_path


@pytest.fixture
def open_cfg():
    return Settings(rrd_data_dir="")


@pytest.fixture
def jailed_cfg(tmp_path):
    return Settings(rrd_data_dir=str(tmp_path))


class TestAlwaysRefused:
    def test_empty(self, open_cfg):
        assert not check_rrd_path("   ", open_cfg)

    def test_option_like(self, open_cfg):
        result = check_rrd_path("--daemon=evil", open_cfg)
        assert not result.allowed
        assert "-" in result.reason


class TestNoDataDir:
    def test_any_path_passes_unchanged(self, open_cfg):
        result = check_rrd_path("./data/load.rrd", open_cfg)
        assert result
        assert result.path == "./data/load.rrd"

    def test_absolute_path(self, open_cfg):
        assert check_rrd_path("/var/lib/collectd/rrd/load.rrd", open_cfg)


class TestDataDir:
    def test_relative_path_resolved(self, jailed_cfg, tmp_path):
        result = check_rrd_path("host/load.rrd", jailed_cfg)
        assert result.allowed
        assert result.path == str((tmp_path / "host" / "load.rrd").resolve())

    def test_absolute_inside(self, jailed_cfg, tmp_path):
        inside = str(tmp_path / "load.rrd")
        assert check_rrd_path(inside, jailed_cfg)

    def test_parent_escape(self, jailed_cfg):
        result = check_rrd_path("../../etc/passwd", jailed_cfg)
        assert not result.allowed
        assert "outside" in result.reason

    def test_absolute_outside(self, jailed_cfg):
        assert not check_rrd_path("/etc/passwd", jailed_cfg)


class TestArguments:
    def test_definitions_pass(self):
        assert check_rrd_arguments(["DS:temp:GAUGE:600:U:U", "RRA:MIN:0.5:1:1200"])

    def test_update_values_pass(self):
        assert check_rrd_arguments(["N:42", "1364374210:-0.5"])

    def test_empty_list_passes(self):
        assert check_rrd_arguments([])

    def test_long_option_refused(self):
        result = check_rrd_arguments(["N:1", "--daemon", "unix:/tmp/x.sock"])
        assert not result.allowed
        assert "--daemon" in result.reason

    def test_short_option_refused(self):
        assert not check_rrd_arguments(["-s", "/elsewhere.rrd"])
