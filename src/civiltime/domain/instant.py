"""The instant model: exact points in time bound to a zone.

Civil values never do calendar math themselves. They build an Instant from
their fields (:func:`make_instant`) and read fields back
(:meth:`Instant.wall_clock`), so leap years, month lengths, and DST gaps
are all decided here, in one place.

Out-of-range fields are normalized, not rejected:

- month overflow carries into the year first,
- then nanosecond -> second -> minute -> hour -> day,
- then the day count rolls through months and years.

Any integer year is accepted (proleptic Gregorian, year 0 exists). Zone
offsets come from the stdlib ``tzinfo`` attached to the instant; lookups
outside the ``datetime`` range use the nearest representable moment.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone, tzinfo

NANOS_PER_SECOND = 1_000_000_000
SECONDS_PER_DAY = 86_400

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_SECOND = timedelta(seconds=1)


def days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a proleptic Gregorian date.

    *month* must be in 1..12; *day* may be any integer and shifts the
    result linearly, which is what makes day overflow roll forward.
    """
    y = year - 1 if month <= 2 else year
    era = y // 400
    yoe = y - era * 400
    doy = (153 * ((month + 9) % 12) + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146_097 + doe - 719_468


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Inverse of :func:`days_from_civil`: ``(year, month, day)``."""
    z = days + 719_468
    era = z // 146_097
    doe = z - era * 146_097
    yoe = (doe - doe // 1460 + doe // 36_524 - doe // 146_096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


# Offset lookups are clamped to instants every tzinfo can convert.
_MIN_LOOKUP = days_from_civil(1, 1, 2) * SECONDS_PER_DAY
_MAX_LOOKUP = days_from_civil(9999, 12, 30) * SECONDS_PER_DAY


def _utc_offset(unix: int, zone: tzinfo) -> int:
    """Offset in whole seconds that *zone* applies at Unix time *unix*."""
    clamped = min(max(unix, _MIN_LOOKUP), _MAX_LOOKUP)
    moment = (_UNIX_EPOCH + timedelta(seconds=clamped)).astimezone(zone)
    offset = moment.utcoffset()
    if offset is None:
        return 0
    return offset // _ONE_SECOND


@dataclass(frozen=True, order=True)
class Instant:
    """A point on the time line observed from *zone*.

    Equality and ordering use the point in time only, so the same moment
    seen from two zones compares equal.

    Attributes:
        unix: Whole seconds since 1970-01-01T00:00:00Z.
        nanosecond: Sub-second part, 0..999_999_999.
        zone: The location the wall clock is read in.
    """

    unix: int
    nanosecond: int = 0
    zone: tzinfo = field(default=timezone.utc, compare=False)

    @classmethod
    def now(cls, zone: tzinfo = timezone.utc) -> Instant:
        seconds, nanos = divmod(time.time_ns(), NANOS_PER_SECOND)
        return cls(seconds, nanos, zone)

    @classmethod
    def from_datetime(cls, moment: datetime) -> Instant:
        """Build an Instant from an aware ``datetime``, keeping its zone."""
        offset = moment.utcoffset()
        if moment.tzinfo is None or offset is None:
            msg = f"Instant.from_datetime requires an aware datetime, got {moment!r}"
            raise ValueError(msg)
        local = (
            days_from_civil(moment.year, moment.month, moment.day) * SECONDS_PER_DAY
            + moment.hour * 3600
            + moment.minute * 60
            + moment.second
        )
        return cls(local - offset // _ONE_SECOND, moment.microsecond * 1000, moment.tzinfo)

    def utc_offset(self) -> int:
        """Seconds east of UTC in effect at this instant."""
        return _utc_offset(self.unix, self.zone)

    def wall_clock(self) -> tuple[int, int, int, int, int, int, int]:
        """``(year, month, day, hour, minute, second, nanosecond)`` in the zone."""
        local = self.unix + self.utc_offset()
        days, seconds = divmod(local, SECONDS_PER_DAY)
        year, month, day = civil_from_days(days)
        hour, rest = divmod(seconds, 3600)
        minute, second = divmod(rest, 60)
        return year, month, day, hour, minute, second, self.nanosecond

    def in_zone(self, zone: tzinfo) -> Instant:
        """The same instant observed from another zone."""
        return Instant(self.unix, self.nanosecond, zone)

    def add_date(self, years: int = 0, months: int = 0, days: int = 0) -> Instant:
        """Add calendar units to the wall clock and renormalize.

        October 31 plus one month is December 1, because November 31
        normalizes forward.
        """
        year, month, day, hour, minute, second, nanos = self.wall_clock()
        return make_instant(
            year + years, month + months, day + days, hour, minute, second, nanos, self.zone
        )

    def before(self, other: Instant) -> bool:
        return (self.unix, self.nanosecond) < (other.unix, other.nanosecond)

    def after(self, other: Instant) -> bool:
        return other.before(self)

    def to_datetime(self) -> datetime:
        """Aware ``datetime`` in the zone (nanoseconds truncated to microseconds).

        Raises:
            OverflowError: If the instant is outside the ``datetime`` range.
        """
        delta = timedelta(seconds=self.unix, microseconds=self.nanosecond // 1000)
        return (_UNIX_EPOCH + delta).astimezone(self.zone)

    def isoformat(self) -> str:
        """RFC 3339 text with a numeric offset and nanosecond precision."""
        year, month, day, hour, minute, second, nanos = self.wall_clock()
        text = f"{year:04d}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}:{second:02d}"
        if nanos:
            text += f".{nanos:09d}"
        offset = self.utc_offset()
        sign = "-" if offset < 0 else "+"
        minutes, seconds = divmod(abs(offset), 60)
        text += f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"
        if seconds:
            text += f":{seconds:02d}"
        return text

    def __str__(self) -> str:
        return self.isoformat()


def make_instant(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    nanosecond: int,
    zone: tzinfo,
) -> Instant:
    """Construct the Instant for a wall-clock reading in *zone*.

    Out-of-range fields are normalized (see module docstring). For a wall
    time that does not exist or occurs twice, the offset in effect at the
    wall time read as UTC is tried first; if the resulting instant falls
    under a different offset, that offset is used instead. A wall time
    inside a spring-forward gap therefore lands before the transition,
    e.g. 1955-05-01 00:00 in America/Indiana/Vincennes is 23:00 CST on
    April 30.

    Raises:
        TypeError: If *zone* is None.
    """
    if zone is None:
        msg = "make_instant: missing zone"
        raise TypeError(msg)

    carry, month0 = divmod(month - 1, 12)
    year += carry
    month = month0 + 1

    carry, nanosecond = divmod(nanosecond, NANOS_PER_SECOND)
    second += carry
    carry, second = divmod(second, 60)
    minute += carry
    carry, minute = divmod(minute, 60)
    hour += carry
    carry, hour = divmod(hour, 24)
    day += carry

    local = (
        days_from_civil(year, month, day) * SECONDS_PER_DAY + hour * 3600 + minute * 60 + second
    )

    offset = _utc_offset(local, zone)
    unix = local - offset
    corrected = _utc_offset(unix, zone)
    if corrected != offset:
        unix = local - corrected
    return Instant(unix, nanosecond, zone)
