"""Tests for the check CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.conftest import OOO, write_stamp
from textstamp.cli import cli


@pytest.mark.usefixtures("_isolated_dir")
class TestCheckCommand:
    def test_valid(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        src = write_stamp(tmp_path, "art.txt", OOO)
        result = cli_runner.invoke(cli, ["check", src])
        assert result.exit_code == 0
        assert "Valid 10x4 rectangle." in result.stdout

    def test_ragged_fails_even_without_strict_config(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        src = write_stamp(tmp_path, "art.txt", "abc\nd")
        result = cli_runner.invoke(cli, ["--json", "check", src])
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["op"] == "check"
        assert payload["error"]["code"] == "ROW_WIDTH_MISMATCH"
        assert payload["error"]["detail"] == {"row": 1, "expected": 3, "actual": 1}

    def test_zero_width(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "-"], input="\nab")
        assert json.loads(result.stderr)["error"]["code"] == "ZERO_WIDTH"

    def test_quiet_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "check", "-"], input="a\nbc")
        assert result.exit_code == 1
        assert result.stderr.startswith("ERROR: check")
