"""Shared pytest fixtures for twozhakes tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from twozhakes.algebra.context import get_zone
from twozhakes.algebra.zone import ZoneContext
from twozhakes.config.logging import PACKAGE_LOGGER
from twozhakes.domain.instant import Instant

# 2020-03-07T13:00:00Z: the Saturday before US clocks spring forward.
TEST_DATE_MS = 1583586000000


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep stray ``twozhakes.toml`` files and ``TWOZHAKES_*`` env vars out."""
    for key in list(os.environ):
        if key.startswith("TWOZHAKES_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """CLI invocations reconfigure logging against the runner's streams."""
    root = logging.getLogger()
    package = logging.getLogger(PACKAGE_LOGGER)
    handlers = root.handlers[:]
    levels = (root.level, package.level)
    yield
    root.handlers = handlers
    root.setLevel(levels[0])
    package.setLevel(levels[1])


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def test_date() -> Instant:
    return Instant(TEST_DATE_MS)


@pytest.fixture
def la() -> ZoneContext:
    return get_zone("America/Los_Angeles")


@pytest.fixture
def ny() -> ZoneContext:
    return get_zone("America/New_York")


@pytest.fixture
def utc() -> ZoneContext:
    return get_zone("UTC")
