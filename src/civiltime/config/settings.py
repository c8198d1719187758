"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs:   CLI flags passed by Click
  2. Env vars:      ``CIVILTIME_*`` prefix, ``__`` between nested keys
  3. TOML file:     ``civiltime.toml`` discovered via walk-up
  4. Code defaults: baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from civiltime.config.discovery import find_config
from civiltime.config.models import OutputConfig, ZoneConfig

# pydantic-settings builds sources inside the model constructor, so the
# chosen TOML path is handed over per thread.
_active = threading.local()


@contextmanager
def _toml_path(path: Path | None) -> Iterator[None]:
    _active.toml_path = path
    try:
        yield
    finally:
        _active.toml_path = None


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by one TOML file (or nothing)."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is not None and toml_path.is_file():
            self._data = _read_toml(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


class CivilSettings(BaseSettings):
    """Everything the CLI needs to know, frozen after construction.

    Attributes:
        config_path: The TOML file in effect, or None when none was found.
        zone: ``[zone]`` section; ``zone.default`` backs every ``--zone``.
        output: ``[output]`` section.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CIVILTIME_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    zone: ZoneConfig = Field(default_factory=ZoneConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml = TomlSettingsSource(settings_cls, getattr(_active, "toml_path", None))
        return init_settings, env_settings, toml

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> CivilSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* that does not exist is ignored rather than
        falling back to discovery; otherwise ``civiltime.toml`` is looked up
        from *start* (default: cwd).
        """
        if config_path:
            candidate = Path(config_path)
            toml_path = candidate if candidate.is_file() else None
        else:
            toml_path = find_config(start)

        with _toml_path(toml_path):
            return cls(config_path=toml_path, **cli_flags)
