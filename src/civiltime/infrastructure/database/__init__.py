"""SQLAlchemy column types that store civil values as canonical text."""

from civiltime.infrastructure.database.types import (
    CalendarDateTimeType,
    CalendarDateType,
    ClockTimeType,
)

__all__ = [
    "CalendarDateTimeType",
    "CalendarDateType",
    "ClockTimeType",
]
