"""Tests for the layer CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.conftest import OOO, XXX, write_stamp
from textstamp.cli import cli


@pytest.fixture
def sources(tmp_path: Path) -> tuple[str, str]:
    return write_stamp(tmp_path, "base.txt", OOO), write_stamp(tmp_path, "over.txt", XXX)


@pytest.mark.usefixtures("_isolated_dir")
class TestLayerCommand:
    def test_default_anchor(self, cli_runner: CliRunner, sources: tuple[str, str]) -> None:
        result = cli_runner.invoke(cli, ["-q", "layer", *sources])
        assert result.exit_code == 0
        assert result.stdout == "xxxooooooo\nxxxooooooo\noooooooooo\noooooooooo\n"

    def test_offset(self, cli_runner: CliRunner, sources: tuple[str, str]) -> None:
        result = cli_runner.invoke(cli, ["-q", "layer", *sources, "--col", "3", "--row", "1"])
        assert result.stdout == "oooooooooo\noooxxxoooo\noooxxxoooo\noooooooooo\n"

    def test_clipped_warns_on_stderr(
        self, cli_runner: CliRunner, sources: tuple[str, str]
    ) -> None:
        result = cli_runner.invoke(cli, ["-q", "layer", *sources, "--col", "8", "--row", "2"])
        assert result.exit_code == 0
        assert result.stdout == "oooooooooo\noooooooooo\nooooooooxx\nooooooooxx\n"
        assert "WARNING" in result.stderr
        assert "clipped" in result.stderr

    def test_json(self, cli_runner: CliRunner, sources: tuple[str, str]) -> None:
        result = cli_runner.invoke(cli, ["--json", "layer", *sources, "--col", "8", "--row", "2"])
        data = json.loads(result.stdout)
        assert data["data"]["clipped"] is True
        assert data["data"]["col"] == 8
        assert len(data["warnings"]) == 1
        assert result.stderr == ""

    @pytest.mark.parametrize("args", [["--col", "10"], ["--row", "4"]])
    def test_anchor_out_of_bounds(
        self, cli_runner: CliRunner, sources: tuple[str, str], args: list[str]
    ) -> None:
        result = cli_runner.invoke(cli, ["--json", "layer", *sources, *args])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "ANCHOR_OUT_OF_BOUNDS"

    def test_negative_offset_rejected_by_cli(
        self, cli_runner: CliRunner, sources: tuple[str, str]
    ) -> None:
        result = cli_runner.invoke(cli, ["layer", *sources, "--col", "-1"])
        assert result.exit_code == 2

    def test_anchor_from_config(
        self, cli_runner: CliRunner, sources: tuple[str, str], tmp_path: Path
    ) -> None:
        (tmp_path / "textstamp.toml").write_text("[layer]\ncol = 3\nrow = 1\n")
        result = cli_runner.invoke(cli, ["-q", "layer", *sources])
        assert result.stdout == "oooooooooo\noooxxxoooo\noooxxxoooo\noooooooooo\n"

    def test_overlay_from_stdin(self, cli_runner: CliRunner, sources: tuple[str, str]) -> None:
        base, _ = sources
        result = cli_runner.invoke(cli, ["-q", "layer", base, "-", "--col", "9"], input="#\n")
        assert result.stdout.splitlines()[0] == "ooooooooo#"

    def test_bad_overlay_names_source(
        self, cli_runner: CliRunner, sources: tuple[str, str]
    ) -> None:
        base, _ = sources
        result = cli_runner.invoke(cli, ["--json", "layer", base, "-"], input="")
        payload = json.loads(result.stderr)
        assert payload["error"]["detail"]["source"] == "overlay"

    def test_undecodable_overlay_names_file(
        self, cli_runner: CliRunner, sources: tuple[str, str], tmp_path: Path
    ) -> None:
        base, _ = sources
        overlay = tmp_path / "latin1.txt"
        overlay.write_bytes("caf\N{LATIN SMALL LETTER E WITH ACUTE}".encode("latin-1"))
        result = cli_runner.invoke(cli, ["layer", base, str(overlay)])
        assert result.exit_code == 1
        assert "latin1.txt is not valid UTF-8" in result.stderr
