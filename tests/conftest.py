"""Shared pytest fixtures for civiltime tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest
from click.testing import CliRunner
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from civiltime.config.settings import CivilSettings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's CIVILTIME_* variables out of the tests."""
    for name in ("CIVILTIME_CONFIG", "CIVILTIME_ZONE__DEFAULT", "CIVILTIME_QUIET"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def _isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so no stray civiltime.toml is found.

    Use via ``@pytest.mark.usefixtures("_isolated_dir")``.
    """
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path) -> CivilSettings:
    """Settings with code defaults only."""
    return CivilSettings.from_cli(start=tmp_path)


@pytest.fixture
def new_york() -> ZoneInfo:
    return ZoneInfo("America/New_York")


@pytest.fixture
def vincennes() -> ZoneInfo:
    return ZoneInfo("America/Indiana/Vincennes")


@pytest.fixture
def db_engine() -> Iterator[Engine]:
    """In-memory SQLite engine."""
    engine = create_engine("sqlite:///:memory:")
    try:
        yield engine
    finally:
        engine.dispose()
