"""Calendar-date helpers: strict ISO parsing, validation and display formatting.

Every string-to-date conversion goes through ``parse_iso_date``, which splits
``YYYY-MM-DD`` into integers and builds a plain ``date``. Nothing here consults
a time zone or the process locale.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union

from dateutil.relativedelta import relativedelta
from pandas import Timestamp

from subtrack.conventions.types import DateFormat

logger = logging.getLogger(__name__)

DATE_FMT = "%Y-%m-%d"
_ISO_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")

# Fixed English names; strftime("%b") follows the process locale.
MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

DateLike = Union[str, date, datetime, Timestamp]


class InvalidDateError(ValueError):
    """Raised when a string is not a real ``YYYY-MM-DD`` calendar date."""


@dataclass(frozen=True)
class DateValidation:
    is_valid: bool
    error: Optional[str] = None
    parsed_date: Optional[date] = None


def parse_iso_date(value: str) -> date:
    """Parse ``YYYY-MM-DD`` as a local calendar date."""
    match = _ISO_DATE_RE.fullmatch(value)
    if match is None:
        raise InvalidDateError(f"Date must be in YYYY-MM-DD format: {value!r}")
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidDateError(f"Invalid date: {value!r}") from exc


def to_date(date_like: DateLike) -> date:
    """
    Convert a string, Timestamp or datetime to a plain date.
    Time-of-day components are dropped, never shifted.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        return parse_iso_date(date_like.strip())
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def today() -> date:
    """Current local calendar date."""
    return date.today()


def format_date_for_input(value: DateLike) -> str:
    """Format a date-like as ``YYYY-MM-DD`` for form inputs."""
    return to_date(value).strftime(DATE_FMT)


def format_date_for_display(
    value: DateLike, date_format: Union[DateFormat, str, None] = DateFormat.US
) -> str:
    """
    Render a date with a spelled-out month so MM/DD vs DD/MM can't be confused.

    US  -> "Jan 5, 2024"
    EU  -> "5 Jan 2024"
    ISO -> "2024-01-05"
    """
    d = to_date(value)
    fmt = DateFormat.parse(date_format)
    if fmt is DateFormat.ISO:
        return d.strftime(DATE_FMT)
    month = MONTH_ABBR[d.month - 1]
    if fmt is DateFormat.EU:
        return f"{d.day} {month} {d.year}"
    return f"{month} {d.day}, {d.year}"


def default_start_date(reference: Optional[DateLike] = None) -> str:
    """Default value for a start-date input: today."""
    return format_date_for_input(reference if reference is not None else today())


def validate_date_format(value: str) -> DateValidation:
    """Check that ``value`` is a real calendar date in strict ISO form."""
    if not isinstance(value, str) or _ISO_DATE_RE.fullmatch(value) is None:
        return DateValidation(False, error="Date must be in YYYY-MM-DD format")
    try:
        parsed = parse_iso_date(value)
    except InvalidDateError:
        return DateValidation(False, error="Invalid date")
    return DateValidation(True, parsed_date=parsed)


def validate_start_date(
    value: str, reference: Optional[DateLike] = None
) -> DateValidation:
    """
    Accept start dates within one calendar year either side of ``reference``.

    Past dates cover subscriptions that already exist; future ones cover
    planned purchases.
    """
    checked = validate_date_format(value)
    if not checked.is_valid:
        return DateValidation(False, error="Invalid date format")

    start = checked.parsed_date
    ref = to_date(reference) if reference is not None else today()
    if start < ref - relativedelta(years=1):
        return DateValidation(
            False, error="Start date cannot be more than one year ago"
        )
    if start > ref + relativedelta(years=1):
        return DateValidation(
            False, error="Start date cannot be more than one year in the future"
        )
    logger.debug("Start date %s accepted against reference %s", start, ref)
    return DateValidation(True, parsed_date=start)
