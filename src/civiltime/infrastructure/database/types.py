"""SQLAlchemy ``TypeDecorator`` columns for civil values.

Values are bound with ``to_driver_value()`` and read back with ``scan()``,
so a column round-trips through the same text form as JSON and plain
text. The underlying column is ``TEXT`` on every dialect; drivers that hand
back native ``date``/``time``/``datetime`` objects are projected instead
of parsed.
"""

from __future__ import annotations

from typing import Any, ClassVar, TypeVar

from sqlalchemy import Dialect, Text
from sqlalchemy.types import TypeDecorator

from civiltime.domain import CalendarDate, CalendarDateTime, ClockTime, TypeMismatchError

C = TypeVar("C", CalendarDate, ClockTime, CalendarDateTime)


class _CivilType(TypeDecorator[C]):
    impl = Text
    cache_ok = True

    civil_type: ClassVar[type[Any]]

    @property
    def python_type(self) -> type[Any]:
        return self.civil_type

    def process_bind_param(self, value: Any, dialect: Dialect) -> str | None:
        if value is None:
            return None
        if isinstance(value, str):
            value = self.civil_type.parse(value)
        if not isinstance(value, self.civil_type):
            received = type(value).__name__
            msg = f"{type(self).__name__} cannot bind a value of type {received}"
            raise TypeMismatchError(msg, received=received)
        return value.to_driver_value()

    def process_result_value(self, value: Any, dialect: Dialect) -> C | None:
        if value is None:
            return None
        return self.civil_type().scan(value)


class CalendarDateType(_CivilType[CalendarDate]):
    """``YYYY-MM-DD`` text column holding a CalendarDate."""

    civil_type = CalendarDate


class ClockTimeType(_CivilType[ClockTime]):
    """``HH:MM:SS[.FFFFFFFFF]`` text column holding a ClockTime."""

    civil_type = ClockTime


class CalendarDateTimeType(_CivilType[CalendarDateTime]):
    """``YYYY-MM-DDTHH:MM:SS[.FFFFFFFFF]`` text column holding a CalendarDateTime."""

    civil_type = CalendarDateTime
