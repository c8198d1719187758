"""Tests for CivilService operations."""

from __future__ import annotations

from pathlib import Path

import pytest

from civiltime.config.settings import CivilSettings
from civiltime.domain import CalendarDate, CalendarDateTime
from civiltime.services.civil import CivilService


@pytest.fixture
def service(settings: CivilSettings) -> CivilService:
    return CivilService(settings)


class TestParse:
    def test_valid_date(self, service: CivilService) -> None:
        result = service.parse("date", "2024-02-29")
        assert result.ok
        assert result.op == "parse"
        assert result.data == {
            "kind": "date",
            "input": "2024-02-29",
            "value": "2024-02-29",
            "valid": True,
            "zero": False,
        }

    def test_zero_date(self, service: CivilService) -> None:
        result = service.parse("date", "0000-00-00")
        assert result.ok
        assert result.data["zero"] is True
        assert result.data["valid"] is False

    def test_datetime_is_canonicalized(self, service: CivilService) -> None:
        result = service.parse("datetime", "2014-03-21t09:05:00.5")
        assert result.data["value"] == "2014-03-21T09:05:00.500000000"

    def test_time(self, service: CivilService) -> None:
        assert service.parse("time", "23:59:59").data["value"] == "23:59:59"

    def test_parse_error(self, service: CivilService) -> None:
        result = service.parse("date", "2023-02-29")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "PARSE_ERROR"
        assert "day out of range" in result.error.message
        assert result.error.detail == {"kind": "date", "input": "2023-02-29"}

    def test_no_meta(self, service: CivilService) -> None:
        assert service.parse("date", "2024-02-29").meta is None


class TestConvert:
    def test_defaults_to_configured_zone(self, service: CivilService) -> None:
        result = service.convert("2014-03-21")
        assert result.ok
        assert result.data["zone"] == "UTC"
        assert result.data["instant"] == "2014-03-21T00:00:00+00:00"
        assert result.data["unix"] == 1_395_360_000

    def test_datetime_in_zone(self, service: CivilService) -> None:
        result = service.convert("2014-03-21T09:05:00", zone="America/New_York")
        assert result.data["instant"] == "2014-03-21T09:05:00-04:00"
        assert result.data["utc"] == "2014-03-21T13:05:00+00:00"
        assert result.warnings == []

    def test_skipped_midnight_warns(self, service: CivilService) -> None:
        result = service.convert("1955-05-01", zone="America/Indiana/Vincennes")
        assert result.ok
        assert result.data["instant"] == "1955-04-30T23:00:00-06:00"
        assert result.data["utc"] == "1955-05-01T05:00:00+00:00"
        assert result.warnings == [
            "1955-05-01 does not occur as written in America/Indiana/Vincennes"
        ]

    def test_unknown_zone(self, service: CivilService) -> None:
        result = service.convert("2014-03-21", zone="Mars/Olympus_Mons")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_ZONE"

    def test_zone_directory_is_unknown(self, service: CivilService) -> None:
        result = service.convert("2014-03-21", zone="America")
        assert result.error is not None
        assert result.error.code == "UNKNOWN_ZONE"
        assert result.error.detail == {"input": "2014-03-21"}

    def test_meta_records_zone_source(self, service: CivilService) -> None:
        assert service.convert("2014-03-21").meta == {"zone_source": "config"}
        explicit = service.convert("2014-03-21", zone="Europe/Paris")
        assert explicit.meta == {"zone_source": "option"}

    def test_unparseable(self, service: CivilService) -> None:
        result = service.convert("next tuesday")
        assert result.error is not None
        assert result.error.code == "PARSE_ERROR"
        assert result.error.detail == {"input": "next tuesday"}

    def test_zone_from_settings(self, tmp_path: Path) -> None:
        settings = CivilSettings.from_cli(start=tmp_path, zone={"default": "Asia/Kathmandu"})
        result = CivilService(settings).convert("2014-03-21T05:45:00")
        assert result.data["zone"] == "Asia/Kathmandu"
        assert result.data["utc"] == "2014-03-21T00:00:00+00:00"


class TestShift:
    def test_month_overflow(self, service: CivilService) -> None:
        result = service.shift("2014-01-31", months=1)
        assert result.ok
        assert result.data["result"] == "2014-03-03"

    def test_order_is_years_months_days(self, service: CivilService) -> None:
        result = service.shift("2024-02-29", years=1, months=-1, days=1)
        # 2025-02-29 -> 2025-03-01, then -1 month -> 2025-02-01, then +1 day
        assert result.data["result"] == "2025-02-02"
        assert result.data["years"] == 1
        assert result.data["months"] == -1
        assert result.data["days"] == 1

    def test_no_shift(self, service: CivilService) -> None:
        assert service.shift("2014-03-21").data["result"] == "2014-03-21"

    def test_bad_date(self, service: CivilService) -> None:
        result = service.shift("2014-13-01", days=1)
        assert result.error is not None
        assert result.error.code == "PARSE_ERROR"


class TestBetween:
    def test_adjacent_days(self, service: CivilService) -> None:
        assert service.between("1969-12-30", "1969-12-31").data["days"] == 1

    def test_negative(self, service: CivilService) -> None:
        assert service.between("2024-03-01", "2024-02-01").data["days"] == -29

    def test_bad_end(self, service: CivilService) -> None:
        result = service.between("2024-03-01", "soon")
        assert result.error is not None
        assert result.error.code == "PARSE_ERROR"
        assert result.error.detail == {"start": "2024-03-01", "end": "soon"}


class TestNow:
    def test_fields_agree(self, service: CivilService) -> None:
        result = service.now(zone="Asia/Kathmandu")
        assert result.ok
        assert result.data["zone"] == "Asia/Kathmandu"
        current = CalendarDateTime.parse(result.data["datetime"])
        assert str(current.date) == result.data["date"]
        assert str(current.time) == result.data["time"]
        assert current.is_valid()

    def test_default_zone(self, service: CivilService) -> None:
        result = service.now()
        assert result.data["zone"] == "UTC"
        assert CalendarDate.parse(result.data["date"]).is_valid()

    def test_unknown_zone(self, service: CivilService) -> None:
        result = service.now(zone="Nowhere/Special")
        assert result.error is not None
        assert result.error.code == "UNKNOWN_ZONE"
        assert result.error.detail == {"zone": "Nowhere/Special"}

    def test_meta_records_zone_source(self, service: CivilService) -> None:
        assert service.now().meta == {"zone_source": "config"}
        assert service.now(zone="Z").meta == {"zone_source": "option"}
