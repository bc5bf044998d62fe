from .date import (
    DateLike,
    DateValidation,
    InvalidDateError,
    default_start_date,
    format_date_for_display,
    format_date_for_input,
    parse_iso_date,
    to_date,
    today,
    validate_date_format,
    validate_start_date,
)

__all__ = [
    "DateLike",
    "DateValidation",
    "InvalidDateError",
    "default_start_date",
    "format_date_for_display",
    "format_date_for_input",
    "parse_iso_date",
    "to_date",
    "today",
    "validate_date_format",
    "validate_start_date",
]
