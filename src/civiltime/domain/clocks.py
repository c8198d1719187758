"""ClockTime: a time of day with nanosecond precision and no zone.

Mainly useful for TIME columns in storage APIs; most arithmetic on bare
times of day is not meaningful, so none is offered. Prefer
CalendarDateTime when the date is known.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema

from civiltime.domain import _codec
from civiltime.domain.errors import ParseError
from civiltime.domain.grammar import match_clock
from civiltime.domain.instant import Instant, make_instant


@dataclass(frozen=True, order=True)
class ClockTime:
    """A time of day.

    Attributes:
        hour: Hour in 24-hour format, 0..23 when valid.
        minute: 0..59 when valid.
        second: 0..59 when valid.
        nanosecond: 0..999_999_999 when valid.
    """

    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0

    @classmethod
    def project(cls, instant: Instant | datetime.datetime | datetime.time) -> ClockTime:
        """The wall-clock time of *instant* in its own zone; the date is dropped."""
        if isinstance(instant, Instant):
            return cls(*instant.wall_clock()[3:])
        return cls(instant.hour, instant.minute, instant.second, instant.microsecond * 1000)

    @classmethod
    def parse(cls, text: str) -> ClockTime:
        """Parse ``HH:MM:SS`` with an optional fraction of 1 to 9 digits.

        Raises:
            ParseError: If *text* is malformed or a field is out of range.
        """
        return cls(*match_clock(text))

    def isoformat(self) -> str:
        """``HH:MM:SS``, plus ``.`` and nine digits when nanosecond is non-zero."""
        text = f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        if self.nanosecond == 0:
            return text
        return f"{text}.{self.nanosecond:09d}"

    def __str__(self) -> str:
        return self.isoformat()

    def is_zero(self) -> bool:
        return self == ClockTime()

    def is_valid(self) -> bool:
        # 0002-02-02 UTC: no transitions, not near a month or year edge.
        moment = make_instant(
            2, 2, 2, self.hour, self.minute, self.second, self.nanosecond, datetime.timezone.utc
        )
        return ClockTime.project(moment) == self

    def before(self, other: ClockTime) -> bool:
        return self < other

    def after(self, other: ClockTime) -> bool:
        return other < self

    # --- Adapters ---

    def marshal_text(self) -> bytes:
        return self.isoformat().encode("ascii")

    @classmethod
    def unmarshal_text(cls, data: bytes | str) -> ClockTime:
        return cls.parse(_codec.as_text(data))

    def _json_text(self) -> str:
        return self.isoformat()

    def marshal_json(self) -> bytes:
        return _codec.quote_json(self.isoformat())

    @classmethod
    def unmarshal_json(cls, data: bytes | str) -> ClockTime:
        text = _codec.decode_json_string(data, "time")
        try:
            return cls.parse(text)
        except ParseError as exc:
            msg = f"invalid time: {exc}"
            raise ParseError(msg, text=text, layout=exc.layout) from exc

    def to_driver_value(self) -> str:
        return self.isoformat()

    def scan(self, value: Any) -> ClockTime:
        """Convert a database value; ``None`` returns this time unchanged."""
        return _codec.scan_value(
            self,
            value,
            parse=ClockTime.parse,
            project=ClockTime.project,
            timestamp_types=(Instant, datetime.datetime, datetime.time),
        )

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return _codec.civil_core_schema(cls, cls.parse, cls._json_text)
