"""Shared pytest fixtures for utf8ctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from utf8ctl.config.settings import Utf8Settings
from utf8ctl.services.codec import CodecService
from utf8ctl.services.telemetry import _current_span, disable_telemetry


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's UTF8CTL_* environment out of every test."""
    for name in (
        "UTF8CTL_CONFIG",
        "UTF8CTL_JSON_OUTPUT",
        "UTF8CTL_QUIET",
        "UTF8CTL_VERBOSE",
        "UTF8CTL_LOG_JSON",
        "UTF8CTL_CODEC__POLICY",
        "UTF8CTL_CODEC__NORMALIZATION",
        "UTF8CTL_OUTPUT__HEX_PREFIX",
        "UTF8CTL_OUTPUT__MAX_ROWS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_global_state() -> Generator[None]:
    """Undo telemetry and logging changes made by CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    utf8_level = logging.getLogger("utf8ctl").level
    yield
    disable_telemetry()
    _current_span.set(None)
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("utf8ctl").setLevel(utf8_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory so no utf8ctl.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path) -> Utf8Settings:
    """Default settings, isolated from any config file."""
    return Utf8Settings.from_cli(start=tmp_path)


@pytest.fixture
def codec(settings: Utf8Settings) -> CodecService:
    """CodecService with default settings."""
    return CodecService(settings)
