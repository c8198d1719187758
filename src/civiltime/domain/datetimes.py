"""CalendarDateTime: a CalendarDate and a ClockTime together.

The pair is held by composition. Date arithmetic such as ``add_days`` or
``days_since`` is deliberately absent here: on a date-time those names
would suggest instant arithmetic they do not perform.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema

from civiltime.domain import _codec
from civiltime.domain.clocks import ClockTime
from civiltime.domain.dates import CalendarDate
from civiltime.domain.errors import CivilTimeError, ParseError, TypeMismatchError
from civiltime.domain.grammar import match_datetime
from civiltime.domain.instant import Instant, make_instant


def _wrap(exc: CivilTimeError, context: str, data: str) -> CivilTimeError:
    msg = f"{context}: {exc}"
    if isinstance(exc, TypeMismatchError):
        return TypeMismatchError(msg, received=exc.received)
    return ParseError(msg, text=data, layout=getattr(exc, "layout", ""))


@dataclass(frozen=True)
class CalendarDateTime:
    """A date and a time of day, without a zone.

    Ordering compares the instants both sides denote in UTC, so
    ``2014-01-32T00:00:00`` sorts after ``2014-02-01T12:00:00`` even though
    its month field is smaller.
    """

    date: CalendarDate = field(default_factory=CalendarDate)
    time: ClockTime = field(default_factory=ClockTime)

    @classmethod
    def project(cls, instant: Instant | datetime.datetime) -> CalendarDateTime:
        """The wall-clock date and time of *instant* in its own zone."""
        return cls(CalendarDate.project(instant), ClockTime.project(instant))

    @classmethod
    def parse(cls, text: str) -> CalendarDateTime:
        """Parse ``YYYY-MM-DDTHH:MM:SS[.FFFFFFFFF]``; the ``T`` may be lowercase.

        Raises:
            ParseError: If *text* matches neither separator variant.
        """
        date_fields, clock_fields = match_datetime(text)
        return cls(CalendarDate(*date_fields), ClockTime(*clock_fields))

    def isoformat(self) -> str:
        return f"{self.date.isoformat()}T{self.time.isoformat()}"

    def __str__(self) -> str:
        return self.isoformat()

    def is_zero(self) -> bool:
        return self.date.is_zero() and self.time.is_zero()

    def is_valid(self) -> bool:
        return self.date.is_valid() and self.time.is_valid()

    def to_instant(self, zone: datetime.tzinfo) -> Instant:
        """The instant this wall-clock reading denotes in *zone*.

        Missing or repeated wall times resolve exactly as
        :func:`make_instant` resolves them.

        Raises:
            TypeError: If *zone* is None.
        """
        d, t = self.date, self.time
        return make_instant(
            d.year, d.month, d.day, t.hour, t.minute, t.second, t.nanosecond, zone
        )

    def before(self, other: CalendarDateTime) -> bool:
        utc = datetime.timezone.utc
        return self.to_instant(utc).before(other.to_instant(utc))

    def after(self, other: CalendarDateTime) -> bool:
        return other.before(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDateTime):
            return NotImplemented
        return self.before(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDateTime):
            return NotImplemented
        return self.after(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CalendarDateTime):
            return NotImplemented
        return not self.after(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CalendarDateTime):
            return NotImplemented
        return not self.before(other)

    # --- Adapters ---

    def marshal_text(self) -> bytes:
        return self.isoformat().encode("ascii")

    @classmethod
    def unmarshal_text(cls, data: bytes | str) -> CalendarDateTime:
        return cls.parse(_codec.as_text(data))

    def _json_text(self) -> str:
        return self.isoformat()

    def marshal_json(self) -> bytes:
        return _codec.quote_json(self.isoformat())

    @classmethod
    def unmarshal_json(cls, data: bytes | str) -> CalendarDateTime:
        """Decode a JSON string holding a date-time.

        When the payload contains a ``T`` or ``t`` separator, the halves are
        decoded separately by the date and time decoders so neither is
        parsed twice. Otherwise the payload is decoded as a whole.

        Raises:
            TypeMismatchError: If the payload is not a JSON string.
            ParseError: If the string is not a date-time.
        """
        raw = _codec.as_text(data)
        hits = [i for i in (raw.find("T"), raw.find("t")) if i >= 0]
        split = min(hits, default=-1)
        if split > 0:
            date_json = raw[:split] + '"'
            time_json = '"' + raw[split + 1 :]
            try:
                date = CalendarDate.unmarshal_json(date_json)
            except CivilTimeError as exc:
                context = f"date prefix ({date_json}) in '{raw}' could not be converted"
                raise _wrap(exc, context, raw) from exc
            try:
                time = ClockTime.unmarshal_json(time_json)
            except CivilTimeError as exc:
                context = f"time suffix ({time_json}) in '{raw}' could not be converted"
                raise _wrap(exc, context, raw) from exc
            return cls(date, time)

        text = _codec.decode_json_string(raw, "datetime")
        try:
            return cls.parse(text)
        except ParseError as exc:
            msg = f"invalid datetime: {exc}"
            raise ParseError(msg, text=text, layout=exc.layout) from exc

    def to_driver_value(self) -> str:
        return self.isoformat()

    def scan(self, value: Any) -> CalendarDateTime:
        """Convert a database value; ``None`` returns this value unchanged."""
        return _codec.scan_value(
            self,
            value,
            parse=CalendarDateTime.parse,
            project=CalendarDateTime.project,
            timestamp_types=(Instant, datetime.datetime),
        )

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return _codec.civil_core_schema(cls, cls.parse, cls._json_text)
