"""Tests for the info CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.conftest import OOO, write_stamp
from textstamp.cli import cli


@pytest.mark.usefixtures("_isolated_dir")
class TestInfoCommand:
    def test_json(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        src = write_stamp(tmp_path, "art.txt", "abc\na")
        result = cli_runner.invoke(cli, ["--json", "info", src])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["height"] == 2
        assert data["width"] == 3
        assert data["padded"] == 1
        assert data["rows"] == ["abc", "a  "]

    def test_quiet_dimensions(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        src = write_stamp(tmp_path, "art.txt", OOO)
        result = cli_runner.invoke(cli, ["-q", "info", src])
        assert result.stdout == "10x4\n"

    def test_human(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        src = write_stamp(tmp_path, "art.txt", OOO)
        result = cli_runner.invoke(cli, ["info", "--strict", src])
        assert result.exit_code == 0
        assert "cells: 40" in result.stdout
        assert "strict: True" in result.stdout
