"""Tests for the SQLAlchemy civil column types."""

from __future__ import annotations

import datetime

import pytest
from sqlalchemy import Column, Integer, MetaData, Table, insert, select, text
from sqlalchemy.dialects import sqlite
from sqlalchemy.engine import Engine
from sqlalchemy.exc import StatementError

from civiltime.domain import (
    CalendarDate,
    CalendarDateTime,
    ClockTime,
    ParseError,
    TypeMismatchError,
)
from civiltime.infrastructure.database import (
    CalendarDateTimeType,
    CalendarDateType,
    ClockTimeType,
)

metadata = MetaData()

shifts = Table(
    "shifts",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("day", CalendarDateType()),
    Column("opens", ClockTimeType()),
    Column("starts", CalendarDateTimeType()),
)


@pytest.fixture
def engine(db_engine: Engine) -> Engine:
    metadata.create_all(db_engine)
    return db_engine


class TestRoundTrip:
    def test_values_survive_storage(self, engine: Engine) -> None:
        row = {
            "id": 1,
            "day": CalendarDate(2014, 3, 21),
            "opens": ClockTime(9, 5, 0, 7),
            "starts": CalendarDateTime.parse("2014-03-21T09:30:00"),
        }
        with engine.begin() as conn:
            conn.execute(insert(shifts).values(**row))
            stored = conn.execute(select(shifts)).one()
        assert stored.day == row["day"]
        assert stored.opens == row["opens"]
        assert stored.starts == row["starts"]

    def test_null_stays_none(self, engine: Engine) -> None:
        with engine.begin() as conn:
            conn.execute(insert(shifts).values(id=1, day=None, opens=None, starts=None))
            stored = conn.execute(select(shifts)).one()
        assert stored.day is None
        assert stored.opens is None
        assert stored.starts is None

    def test_stored_as_text(self, engine: Engine) -> None:
        with engine.begin() as conn:
            conn.execute(
                insert(shifts).values(
                    id=1,
                    day=CalendarDate(2014, 3, 21),
                    opens=ClockTime(9, 5, 0, 500_000_000),
                    starts=CalendarDateTime.parse("2014-03-21t09:30:00"),
                )
            )
            raw = conn.execute(text("SELECT day, opens, starts FROM shifts")).one()
        assert tuple(raw) == ("2014-03-21", "09:05:00.500000000", "2014-03-21T09:30:00")

    def test_zero_date_round_trips(self, engine: Engine) -> None:
        with engine.begin() as conn:
            conn.execute(insert(shifts).values(id=1, day=CalendarDate()))
            stored = conn.execute(select(shifts.c.day)).scalar_one()
        assert stored == CalendarDate()
        assert stored.is_zero()

    def test_binds_text(self, engine: Engine) -> None:
        with engine.begin() as conn:
            conn.execute(insert(shifts).values(id=1, day="2014-03-21", opens="09:05:00"))
            stored = conn.execute(select(shifts)).one()
        assert stored.day == CalendarDate(2014, 3, 21)
        assert stored.opens == ClockTime(9, 5, 0)

    def test_filter_by_value(self, engine: Engine) -> None:
        with engine.begin() as conn:
            conn.execute(
                insert(shifts),
                [
                    {"id": 1, "day": CalendarDate(2014, 3, 21)},
                    {"id": 2, "day": CalendarDate(2014, 3, 22)},
                ],
            )
            found = conn.execute(
                select(shifts.c.id).where(shifts.c.day == CalendarDate(2014, 3, 22))
            ).scalar_one()
        assert found == 2


class TestBindErrors:
    def test_wrong_type(self, engine: Engine) -> None:
        with engine.begin() as conn, pytest.raises(StatementError) as exc_info:
            conn.execute(insert(shifts).values(id=1, day=datetime.date(2014, 3, 21)))
        assert isinstance(exc_info.value.orig, TypeMismatchError)
        assert exc_info.value.orig.received == "date"

    def test_bad_text(self, engine: Engine) -> None:
        with engine.begin() as conn, pytest.raises(StatementError) as exc_info:
            conn.execute(insert(shifts).values(id=1, day="2014-02-30"))
        assert isinstance(exc_info.value.orig, ParseError)


class TestResultProcessing:
    def test_malformed_stored_text(self) -> None:
        with pytest.raises(ParseError):
            CalendarDateType().process_result_value("21/03/2014", sqlite.dialect())

    def test_native_driver_values_are_projected(self) -> None:
        column = ClockTimeType()
        value = column.process_result_value(datetime.time(9, 5), sqlite.dialect())
        assert value == ClockTime(9, 5, 0)

    def test_python_type(self) -> None:
        assert CalendarDateType().python_type is CalendarDate
        assert ClockTimeType().python_type is ClockTime
        assert CalendarDateTimeType().python_type is CalendarDateTime
