"""civiltime: time-zone-independent dates, times of day, and date-times.

Civil values follow the proleptic Gregorian calendar with 24-hour days and
no leap seconds. They describe wall-clock readings, not instants; bind one
to a zone with ``to_instant`` to get an :class:`Instant`.
"""

from civiltime.domain import (
    CalendarDate,
    CalendarDateTime,
    CivilTimeError,
    ClockTime,
    Instant,
    ParseError,
    RangeError,
    TypeMismatchError,
    make_instant,
)

__version__ = "0.1.0"

__all__ = [
    "CalendarDate",
    "CalendarDateTime",
    "CivilTimeError",
    "ClockTime",
    "Instant",
    "ParseError",
    "RangeError",
    "TypeMismatchError",
    "__version__",
    "make_instant",
]
