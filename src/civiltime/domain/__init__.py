"""Domain layer: civil values, the instant model, and their errors.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""

from civiltime.domain.clocks import ClockTime
from civiltime.domain.dates import CalendarDate
from civiltime.domain.datetimes import CalendarDateTime
from civiltime.domain.errors import CivilTimeError, ParseError, RangeError, TypeMismatchError
from civiltime.domain.instant import Instant, make_instant
from civiltime.domain.zones import UnknownZoneError, resolve_zone

__all__ = [
    "CalendarDate",
    "CalendarDateTime",
    "CivilTimeError",
    "ClockTime",
    "Instant",
    "ParseError",
    "RangeError",
    "TypeMismatchError",
    "UnknownZoneError",
    "make_instant",
    "resolve_zone",
]
