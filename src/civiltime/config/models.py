"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, civiltime.toml only contains
overrides. An empty file (or none at all) is a working configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from civiltime.domain.zones import UnknownZoneError, resolve_zone


class ZoneConfig(BaseModel):
    """[zone] section."""

    model_config = {"frozen": True}

    default: str = "UTC"

    @field_validator("default")
    @classmethod
    def _known_zone(cls, value: str) -> str:
        try:
            resolve_zone(value)
        except UnknownZoneError as exc:
            msg = f"unknown time zone {value!r}"
            raise ValueError(msg) from exc
        return value


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = 120


class CivilConfig(BaseModel):
    """Root of civiltime.toml."""

    model_config = {"frozen": True}

    zone: ZoneConfig = Field(default_factory=ZoneConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
