"""Shared pytest fixtures and test helpers for textstamp tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from textstamp.services.telemetry import _current_span, disable_telemetry

OOO = "oooooooooo\noooooooooo\noooooooooo\noooooooooo"
XXX = "xxx\nxxx"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no config discovery overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_dir")`` on command test
    classes. Tests that need the path can request ``tmp_path`` directly
    (pytest deduplicates, it is the same directory).
    """
    monkeypatch.delenv("TEXTSTAMP_CONFIG", raising=False)
    monkeypatch.delenv("TEXTSTAMP_STAMP__STRICT", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo what AppContext does to logging and telemetry on each CLI run."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("textstamp")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
    disable_telemetry()
    _current_span.set(None)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def write_stamp(directory: Path, name: str, text: str) -> str:
    """Write *text* (plus the conventional final newline) and return its path."""
    path = directory / name
    path.write_text(text + "\n", encoding="utf-8")
    return str(path)
