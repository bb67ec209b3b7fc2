"""Shared pytest fixtures for numfield tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from numfield.domain.types import SanitizationConfig
from numfield.services.telemetry import _current_span, disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no NUMFIELD_* env vars.

    Keeps a stray numfield.toml above the checkout (or a developer's
    environment) from changing the field policy under test.
    """
    for name in [n for n in os.environ if n.startswith("NUMFIELD_")]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_global_state() -> Generator[None]:
    """Undo logging, structlog context, and telemetry changes made by the CLI."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    nf_level = logging.getLogger("numfield").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("numfield").setLevel(nf_level)
    structlog.contextvars.clear_contextvars()
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def config() -> SanitizationConfig:
    """Default policy: '.' separator, no negatives, two decimals."""
    return SanitizationConfig()


@pytest.fixture
def negative_config() -> SanitizationConfig:
    return SanitizationConfig(allow_negative=True)


@pytest.fixture
def comma_config() -> SanitizationConfig:
    return SanitizationConfig(decimal_separator=",")
