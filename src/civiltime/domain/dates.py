"""CalendarDate: a year/month/day without a zone.

A CalendarDate does not describe a unique 24-hour span; bind it to a zone
with :meth:`CalendarDate.to_instant` for that.

Fields are not range-checked at construction. ``CalendarDate(2014, 13, 1)``
is a perfectly good value that reports ``is_valid() is False``.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema

from civiltime.domain import _codec
from civiltime.domain.errors import ParseError, RangeError
from civiltime.domain.grammar import match_date
from civiltime.domain.instant import SECONDS_PER_DAY, Instant, make_instant

# Some source systems store an absent date as all zeros.
ZERO_DATE_TEXT = "0000-00-00"


@dataclass(frozen=True, order=True)
class CalendarDate:
    """A date (year, month, day).

    Ordering is lexicographic on (year, month, day) and does not require
    either side to be valid.

    Attributes:
        year: Year, e.g. 2014.
        month: Month of the year, January = 1.
        day: Day of the month, starting at 1.
    """

    year: int = 0
    month: int = 0
    day: int = 0

    @classmethod
    def project(cls, instant: Instant | datetime.date) -> CalendarDate:
        """The date on which *instant* falls, in the instant's own zone."""
        if isinstance(instant, Instant):
            year, month, day = instant.wall_clock()[:3]
            return cls(year, month, day)
        return cls(instant.year, instant.month, instant.day)

    @classmethod
    def parse(cls, text: str) -> CalendarDate:
        """Parse ``YYYY-MM-DD``; ``0000-00-00`` yields the zero date.

        Raises:
            ParseError: If *text* does not name an existing date.
        """
        if text == ZERO_DATE_TEXT:
            return cls()
        return cls(*match_date(text))

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()

    def is_zero(self) -> bool:
        return self == CalendarDate()

    def is_valid(self) -> bool:
        """Whether the fields name an existing date."""
        return CalendarDate.project(self.to_instant(datetime.timezone.utc)) == self

    def to_instant(self, zone: datetime.tzinfo) -> Instant:
        """The instant of 00:00:00 on this date in *zone*.

        Overflowing fields normalize forward, and a midnight that the zone
        skips resolves as :func:`make_instant` does, so the result may fall
        on another day: 1955-05-01 in America/Indiana/Vincennes is 23:00 on
        April 30.

        Raises:
            TypeError: If *zone* is None.
        """
        return make_instant(self.year, self.month, self.day, 0, 0, 0, 0, zone)

    def to_date(self) -> datetime.date:
        """The equivalent ``datetime.date``.

        Raises:
            ValueError: If the date is invalid or outside years 1..9999.
        """
        return datetime.date(self.year, self.month, self.day)

    def add_days(self, n: int) -> CalendarDate:
        """The date *n* days later (earlier if negative)."""
        return CalendarDate.project(self.to_instant(datetime.timezone.utc).add_date(days=n))

    def add_months(self, n: int) -> CalendarDate:
        """The date *n* months later; a missing day overflows into the next month."""
        return CalendarDate.project(self.to_instant(datetime.timezone.utc).add_date(months=n))

    def add_years(self, n: int) -> CalendarDate:
        return CalendarDate.project(self.to_instant(datetime.timezone.utc).add_date(years=n))

    def days_since(self, other: CalendarDate) -> int:
        """Signed number of days from *other* to this date, excluding the end day.

        Inverse of :meth:`add_days`: ``other.add_days(d.days_since(other)) == d``.
        """
        # Unix time has exactly 86400 seconds per day, so no leap-second math.
        utc = datetime.timezone.utc
        delta = self.to_instant(utc).unix - other.to_instant(utc).unix
        return delta // SECONDS_PER_DAY

    def before(self, other: CalendarDate) -> bool:
        return self < other

    def after(self, other: CalendarDate) -> bool:
        return other < self

    # --- Adapters ---

    def marshal_text(self) -> bytes:
        return self.isoformat().encode("ascii")

    @classmethod
    def unmarshal_text(cls, data: bytes | str) -> CalendarDate:
        return cls.parse(_codec.as_text(data))

    def _json_text(self) -> str:
        if not 0 <= self.year <= 9999:
            # RFC 3339 years are exactly four digits.
            msg = f"CalendarDate.marshal_json: year '{self.year}' outside of range [0,9999]"
            raise RangeError(msg, year=self.year)
        return self.isoformat()

    def marshal_json(self) -> bytes:
        """The JSON string form.

        Raises:
            RangeError: If the year is outside [0, 9999].
        """
        return _codec.quote_json(self._json_text())

    @classmethod
    def unmarshal_json(cls, data: bytes | str) -> CalendarDate:
        """Decode a JSON string holding a date.

        Raises:
            TypeMismatchError: If the payload is not a JSON string.
            ParseError: If the string is not a date.
        """
        text = _codec.decode_json_string(data, "date")
        try:
            return cls.parse(text)
        except ParseError as exc:
            msg = f"invalid date, data: {text}, err: {exc}"
            raise ParseError(msg, text=text, layout=exc.layout) from exc

    def to_driver_value(self) -> str:
        return self.isoformat()

    def scan(self, value: Any) -> CalendarDate:
        """Convert a database value; ``None`` returns this date unchanged.

        Raises:
            ParseError: If a text value is malformed.
            TypeMismatchError: If *value* is not text, a date, or a timestamp.
        """
        return _codec.scan_value(
            self,
            value,
            parse=CalendarDate.parse,
            project=CalendarDate.project,
            timestamp_types=(Instant, datetime.date),
        )

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return _codec.civil_core_schema(cls, cls.parse, cls._json_text)
