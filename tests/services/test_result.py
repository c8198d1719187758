"""Tests for ServiceResult and ServiceError."""

import pytest
from pydantic import ValidationError

from civiltime.services.result import ErrorCode, ServiceError, ServiceResult


class TestServiceError:
    def test_detail_defaults_empty(self) -> None:
        err = ServiceError(code="PARSE_ERROR", message="cannot parse")
        assert err.detail == {}

    def test_frozen(self) -> None:
        err = ServiceError(code="PARSE_ERROR", message="cannot parse")
        with pytest.raises(ValidationError):
            err.code = "OTHER"  # type: ignore[misc]


class TestServiceResult:
    def test_success(self) -> None:
        result = ServiceResult(ok=True, op="between", data={"days": 1})
        assert result.ok
        assert result.data["days"] == 1
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_failure(self) -> None:
        result = ServiceResult(
            ok=False,
            op="parse",
            error=ServiceError(code="PARSE_ERROR", message="bad", detail={"input": "x"}),
        )
        assert not result.ok
        assert result.error is not None
        assert result.error.detail == {"input": "x"}

    def test_json_dump(self) -> None:
        result = ServiceResult(ok=True, op="shift", data={"result": "2014-03-03"}, warnings=["w"])
        dumped = result.model_dump(mode="json")
        assert dumped == {
            "ok": True,
            "op": "shift",
            "data": {"result": "2014-03-03"},
            "warnings": ["w"],
            "error": None,
            "meta": None,
        }


class TestConstructors:
    def test_success(self) -> None:
        result = ServiceResult.success("convert", {"zone": "UTC"}, warnings=["skipped"])
        assert result.ok
        assert result.data == {"zone": "UTC"}
        assert result.warnings == ["skipped"]

    def test_success_without_warnings(self) -> None:
        assert ServiceResult.success("now", {}).warnings == []

    def test_failure(self) -> None:
        result = ServiceResult.failure("now", ErrorCode.UNKNOWN_ZONE, "nope", zone="X/Y")
        assert not result.ok
        assert result.error == ServiceError(
            code="UNKNOWN_ZONE", message="nope", detail={"zone": "X/Y"}
        )
        assert result.model_dump(mode="json")["error"]["code"] == "UNKNOWN_ZONE"
