"""CivilService: the operations behind the ``civiltime`` commands.

Each method parses its textual inputs, runs one domain operation, and
packs the outcome into a ServiceResult. Library errors become
:class:`~civiltime.services.result.ErrorCode` values:

- ``PARSE_ERROR``: text rejected by a grammar
- ``UNKNOWN_ZONE``: zone name not in the tz database
- ``INVALID_VALUE``: any other CivilTimeError
"""

from __future__ import annotations

import logging
from datetime import timezone, tzinfo
from typing import TYPE_CHECKING, Any

from civiltime.domain import (
    CalendarDate,
    CalendarDateTime,
    CivilTimeError,
    ClockTime,
    Instant,
    ParseError,
    UnknownZoneError,
    resolve_zone,
)
from civiltime.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from civiltime.config.settings import CivilSettings

logger = logging.getLogger(__name__)

CIVIL_KINDS: dict[str, type[CalendarDate] | type[ClockTime] | type[CalendarDateTime]] = {
    "date": CalendarDate,
    "time": ClockTime,
    "datetime": CalendarDateTime,
}


def _failure(op: str, exc: Exception, **detail: Any) -> ServiceResult:
    if isinstance(exc, ParseError):
        code = ErrorCode.PARSE_ERROR
    elif isinstance(exc, UnknownZoneError):
        code = ErrorCode.UNKNOWN_ZONE
    else:
        code = ErrorCode.INVALID_VALUE
    logger.debug("%s failed (%s): %s", op, code, exc)
    return ServiceResult.failure(op, code, str(exc), **detail)


class CivilService:
    """Parse, convert, and do arithmetic on civil values.

    Zone arguments default to ``settings.zone.default``.
    """

    def __init__(self, settings: CivilSettings) -> None:
        self._settings = settings

    def _zone(self, name: str | None) -> tuple[str, tzinfo, dict[str, Any]]:
        """Resolve *name* or the configured default; the dict records which."""
        source = "option" if name else "config"
        zone_name = name or self._settings.zone.default
        return zone_name, resolve_zone(zone_name), {"zone_source": source}

    def parse(self, kind: str, text: str) -> ServiceResult:
        """Parse *text* as a ``date``, ``time`` or ``datetime``."""
        op = "parse"
        civil_cls = CIVIL_KINDS[kind]
        try:
            value = civil_cls.parse(text)
        except CivilTimeError as exc:
            return _failure(op, exc, kind=kind, input=text)

        logger.debug("parsed %s %r -> %s", kind, text, value)
        return ServiceResult.success(
            op,
            {
                "kind": kind,
                "input": text,
                "value": str(value),
                "valid": value.is_valid(),
                "zero": value.is_zero(),
            },
        )

    def convert(self, text: str, zone: str | None = None) -> ServiceResult:
        """Bind a date or date-time to a zone and report the instant.

        A bare date is bound at midnight.
        """
        op = "convert"
        try:
            zone_name, tz, meta = self._zone(zone)
            value: CalendarDate | CalendarDateTime
            try:
                value = CalendarDateTime.parse(text)
            except ParseError:
                value = CalendarDate.parse(text)
        except (CivilTimeError, UnknownZoneError) as exc:
            return _failure(op, exc, input=text)

        instant = value.to_instant(tz)
        warnings: list[str] = []
        if CalendarDateTime.project(instant) != _as_datetime(value):
            # The zone skipped this wall time; the instant is the shifted one.
            warnings.append(f"{value} does not occur as written in {zone_name}")
        return ServiceResult.success(
            op,
            {
                "input": text,
                "zone": zone_name,
                "instant": instant.isoformat(),
                "unix": instant.unix,
                "utc": instant.in_zone(timezone.utc).isoformat(),
            },
            warnings=warnings,
            meta=meta,
        )

    def shift(
        self, text: str, *, years: int = 0, months: int = 0, days: int = 0
    ) -> ServiceResult:
        """Move a date by years, then months, then days."""
        op = "shift"
        try:
            start = CalendarDate.parse(text)
        except CivilTimeError as exc:
            return _failure(op, exc, input=text)

        result = start.add_years(years).add_months(months).add_days(days)
        return ServiceResult.success(
            op,
            {
                "input": str(start),
                "years": years,
                "months": months,
                "days": days,
                "result": str(result),
            },
        )

    def between(self, start: str, end: str) -> ServiceResult:
        """Signed day count from *start* to *end*, excluding the end day."""
        op = "between"
        try:
            first = CalendarDate.parse(start)
            last = CalendarDate.parse(end)
        except CivilTimeError as exc:
            return _failure(op, exc, start=start, end=end)

        return ServiceResult.success(
            op, {"start": str(first), "end": str(last), "days": last.days_since(first)}
        )

    def now(self, zone: str | None = None) -> ServiceResult:
        """The current civil date and time as seen in *zone*."""
        op = "now"
        try:
            zone_name, tz, meta = self._zone(zone)
        except UnknownZoneError as exc:
            return _failure(op, exc, zone=zone)

        current = CalendarDateTime.project(Instant.now(tz))
        return ServiceResult.success(
            op,
            {
                "zone": zone_name,
                "date": str(current.date),
                "time": str(current.time),
                "datetime": str(current),
            },
            meta=meta,
        )


def _as_datetime(value: CalendarDate | CalendarDateTime) -> CalendarDateTime:
    if isinstance(value, CalendarDate):
        return CalendarDateTime(value, ClockTime())
    return value
