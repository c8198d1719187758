"""Zone lookup by IANA name.

``UTC`` and ``Z`` (any case) resolve without the tz database. Every other
name goes through :class:`zoneinfo.ZoneInfo`.
"""

from __future__ import annotations

from datetime import timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

UTC_ALIASES = frozenset({"UTC", "Z"})


class UnknownZoneError(LookupError):
    """A zone name that the tz database does not know."""


def resolve_zone(name: str) -> tzinfo:
    """Look up *name*, raising UnknownZoneError for anything unusable.

    Names that hit a directory of the tz database (``America``) surface as
    ``OSError`` from zoneinfo and are reported the same way.
    """
    if name.upper() in UTC_ALIASES:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        msg = f"Unknown time zone: {name!r}"
        raise UnknownZoneError(msg) from exc
