"""Tests for the format_result dispatcher and OutputSettings."""

import json

import pytest
from pydantic import ValidationError

from civiltime.output.formatters import OutputSettings, format_result
from civiltime.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="PARSE_ERROR", message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False
        assert s.width is None

    def test_frozen(self) -> None:
        s = OutputSettings(json_output=True)
        with pytest.raises(ValidationError):
            s.quiet = True  # type: ignore[misc]


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_ok("between", days=1), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "between"
        assert data["data"]["days"] == 1

    def test_json_mode_error(self) -> None:
        output = format_result(_err("parse", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["code"] == "PARSE_ERROR"
        assert data["error"]["message"] == "Bad"

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        data = json.loads(format_result(_ok("between", days=3), settings=settings))
        assert data["data"] == {"days": 3}


class TestFormatResultHuman:
    def test_default_settings(self) -> None:
        output = format_result(_ok("between", start="a", end="b", days=3))
        assert output.startswith("OK")
        assert "between" in output
        assert "days" in output

    def test_quiet_prints_headline(self) -> None:
        output = format_result(_ok("between", days=3), settings=OutputSettings(quiet=True))
        assert output == "3"

    def test_quiet_error(self) -> None:
        output = format_result(_err("parse", "Bad"), settings=OutputSettings(quiet=True))
        assert output.startswith("ERROR: parse")
        assert "Bad" in output
