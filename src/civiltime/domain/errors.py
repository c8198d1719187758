"""Exception hierarchy for civil values.

All library errors inherit from CivilTimeError and also from the builtin
exception a caller would reach for (ValueError or TypeError), so plain
``except ValueError`` handlers keep working.
"""

from __future__ import annotations


class CivilTimeError(Exception):
    """Base exception for all civiltime errors."""


class ParseError(CivilTimeError, ValueError):
    """Text does not match the grammar of the target type.

    Attributes:
        text: The rejected input.
        layout: The grammar it was checked against (e.g. ``YYYY-MM-DD``).
    """

    def __init__(self, message: str, *, text: str = "", layout: str = "") -> None:
        super().__init__(message)
        self.text = text
        self.layout = layout


class TypeMismatchError(CivilTimeError, TypeError):
    """Input of the wrong kind: non-string JSON or an unsupported scan value."""

    def __init__(self, message: str, *, received: str = "") -> None:
        super().__init__(message)
        self.received = received


class RangeError(CivilTimeError, ValueError):
    """A CalendarDate year cannot be represented with four digits."""

    def __init__(self, message: str, *, year: int) -> None:
        super().__init__(message)
        self.year = year
