"""Textual grammar shared by the civil types.

Layouts are fixed width and ASCII only:

- date:  ``YYYY-MM-DD``
- clock: ``HH:MM:SS`` with an optional ``.`` and 1-9 fractional digits
  (RFC 3339 allows a single digit; more are accepted here)

Field ranges are checked after the shape matches. Whether a day exists in
its month is answered by the instant model, not by a month-length table.
"""

from __future__ import annotations

import re

from civiltime.domain.errors import ParseError
from civiltime.domain.instant import civil_from_days, days_from_civil

DATE_LAYOUT = "YYYY-MM-DD"
CLOCK_LAYOUT = "HH:MM:SS[.FFFFFFFFF]"
DATETIME_SEPARATORS = ("T", "t")

_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_CLOCK_RE = re.compile(r"([0-9]{2}):([0-9]{2}):([0-9]{2})(?:\.([0-9]{1,9}))?")


def match_date(text: str) -> tuple[int, int, int]:
    """Parse ``YYYY-MM-DD`` into ``(year, month, day)``.

    Raises:
        ParseError: On a shape mismatch, a month outside 1..12, or a day
            that does not exist in that month.
    """
    m = _DATE_RE.fullmatch(text)
    if m is None:
        msg = f"cannot parse {text!r} as {DATE_LAYOUT}"
        raise ParseError(msg, text=text, layout=DATE_LAYOUT)
    year, month, day = (int(g) for g in m.groups())
    if not 1 <= month <= 12:
        msg = f"parsing {text!r}: month out of range"
        raise ParseError(msg, text=text, layout=DATE_LAYOUT)
    if day < 1 or civil_from_days(days_from_civil(year, month, day)) != (year, month, day):
        msg = f"parsing {text!r}: day out of range"
        raise ParseError(msg, text=text, layout=DATE_LAYOUT)
    return year, month, day


def match_clock(text: str) -> tuple[int, int, int, int]:
    """Parse ``HH:MM:SS[.F]`` into ``(hour, minute, second, nanosecond)``.

    Raises:
        ParseError: On a shape mismatch or a field out of range.
    """
    m = _CLOCK_RE.fullmatch(text)
    if m is None:
        msg = f"cannot parse {text!r} as {CLOCK_LAYOUT}"
        raise ParseError(msg, text=text, layout=CLOCK_LAYOUT)
    hour, minute, second = (int(g) for g in m.groups()[:3])
    limits = (("hour", hour, 23), ("minute", minute, 59), ("second", second, 59))
    for name, value, limit in limits:
        if value > limit:
            msg = f"parsing {text!r}: {name} out of range"
            raise ParseError(msg, text=text, layout=CLOCK_LAYOUT)
    fraction = m.group(4) or ""
    nanosecond = int(fraction.ljust(9, "0")) if fraction else 0
    return hour, minute, second, nanosecond


def match_datetime(text: str) -> tuple[tuple[int, int, int], tuple[int, int, int, int]]:
    """Parse ``<date>T<clock>``, trying ``T`` before ``t``.

    The zero-date sentinel is not part of this grammar.

    Raises:
        ParseError: The failure from the last separator tried.
    """
    *earlier, last = DATETIME_SEPARATORS
    for separator in earlier:
        try:
            return _split_datetime(text, separator)
        except ParseError:
            continue
    return _split_datetime(text, last)


def _split_datetime(
    text: str, separator: str
) -> tuple[tuple[int, int, int], tuple[int, int, int, int]]:
    layout = f"{DATE_LAYOUT}{separator}{CLOCK_LAYOUT}"
    date_text, found, clock_text = text.partition(separator)
    if not found:
        msg = f"cannot parse {text!r} as {layout}"
        raise ParseError(msg, text=text, layout=layout)
    try:
        return match_date(date_text), match_clock(clock_text)
    except ParseError as exc:
        msg = f"cannot parse {text!r} as {layout}: {exc}"
        raise ParseError(msg, text=text, layout=layout) from exc
