"""
Age calculator - Calendar-correct age in whole years.

The error precedence of ``calculate_age`` is part of its contract:
callers surface the exact messages as the birth date field error.

1. no argument                      -> "missing param p"
2. argument is not a record         -> "param p must be an object"
3. record has no birth date         -> "missing param p.birth"
4. birth is not date-typed          -> "p.birth must be a Date object"
5. birth is an unparsable date      -> "p.birth is an invalid Date"

Any mapping or object with attributes is a record, dates included, so
``calculate_age(date(2000, 1, 1))`` reports a missing ``p.birth``.
"""

import re
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

from .exceptions import InvalidDate, MissingParameter, Underage, WrongType

_MISSING = object()

# Extended ISO 8601 only: no basic "19950110" or week "1995-W02-2" forms
_DATE_TEXT = re.compile(r"\d{4}-\d{2}-\d{2}")
_DATETIME_TEXT = re.compile(r"\d{4}-\d{2}-\d{2}[T ].+")


class UnparsableDate:
    """
    Date-typed value that does not name a calendar day.

    Produced by ``parse_birth_date`` when the raw input cannot be read
    as a date, so that validation can report it as an invalid date
    rather than a wrong type.
    """

    __slots__ = ("raw",)

    def __init__(self, raw: str = "") -> None:
        self.raw = raw

    def __repr__(self) -> str:
        return f"UnparsableDate({self.raw!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnparsableDate) and other.raw == self.raw

    def __hash__(self) -> int:
        return hash((UnparsableDate, self.raw))


def parse_birth_date(value: Any) -> date | UnparsableDate:
    """
    Parse raw form input into a date.

    Accepts ``date``/``datetime`` values as-is and extended ISO 8601
    ``YYYY-MM-DD`` date or datetime text. Anything else yields an
    ``UnparsableDate``.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if value is None:
        return UnparsableDate("")

    text = str(value).strip()
    try:
        if _DATE_TEXT.fullmatch(text):
            return date.fromisoformat(text)
        if _DATETIME_TEXT.fullmatch(text):
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    return UnparsableDate(text)


def _is_record(value: Any) -> bool:
    if isinstance(value, (Mapping, date)):
        return True
    if isinstance(value, (str, bytes, bytearray, int, float, complex, list, tuple, set, frozenset)):
        return False
    return hasattr(value, "__dict__") or hasattr(value, "__slots__")


def _read_birth(p: Any) -> Any:
    if isinstance(p, Mapping):
        return p.get("birth")
    return getattr(p, "birth", None)


def calculate_age(p: Any = _MISSING, /, *, today: date | None = None) -> int:
    """
    Return the age in whole years of the person described by ``p``.

    Args:
        p: Record exposing a ``birth`` date (mapping key or attribute)
        today: Reference date; read once from the system clock when omitted

    Returns:
        Age in whole years, decremented when this year's birthday
        has not been reached yet

    Raises:
        MissingParameter: If ``p`` or ``p.birth`` is missing
        WrongType: If ``p`` is not a record or ``p.birth`` is not a date
        InvalidDate: If ``p.birth`` is an unparsable date
    """
    if p is _MISSING:
        raise MissingParameter("missing param p")
    if not _is_record(p):
        raise WrongType("param p must be an object")

    birth = _read_birth(p)
    if birth is None:
        raise MissingParameter("missing param p.birth")
    if isinstance(birth, UnparsableDate):
        raise InvalidDate("p.birth is an invalid Date")
    if not isinstance(birth, date):
        raise WrongType("p.birth must be a Date object")

    if isinstance(birth, datetime):
        birth = birth.date()
    if today is None:
        today = date.today()
    elif isinstance(today, datetime):
        today = today.date()

    age = today.year - birth.year
    # Feb 29 birthdays are reached on Mar 1 in non-leap years
    if (today.month, today.day) < (birth.month, birth.day):
        age -= 1
    return age


def check_minimum_age(age: int, minimum_age: int | None) -> None:
    """
    Enforce an eligibility threshold on a computed age.

    Separate from ``calculate_age``; a ``None`` threshold disables the check.

    Raises:
        Underage: If ``age`` is below ``minimum_age``
    """
    if minimum_age is not None and age < minimum_age:
        raise Underage(f"You must be at least {minimum_age} years old")
