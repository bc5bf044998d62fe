"""
Report settings.

Every report function takes a ``ReportSettings`` explicitly; nothing reads
a module-level default currency or tax rate.
"""

import os
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from subtrack.utils.date import parse_iso_date


@dataclass(frozen=True)
class ReportSettings:
    """
    Per-workspace reporting preferences.

    Attributes:
        currency: ISO currency code used for labelling totals
        tax_rate: Default tax rate in percent, used when a record has none
        financial_year_end: Fiscal year end as ``MM-DD`` or ``YYYY-MM-DD``
            (only month and day are used)
        renewal_window_days: Look-ahead for upcoming renewals
    """

    currency: str = "USD"
    tax_rate: float = 30.0
    financial_year_end: str = "12-31"
    renewal_window_days: int = 30

    @classmethod
    def from_env(cls, prefix: str = "SUBTRACK_") -> "ReportSettings":
        """
        Build settings from environment variables.

        Reads ``<prefix>CURRENCY``, ``<prefix>TAX_RATE``,
        ``<prefix>FINANCIAL_YEAR_END`` and ``<prefix>RENEWAL_WINDOW_DAYS``.
        """
        defaults = cls()
        return cls(
            currency=os.getenv(f"{prefix}CURRENCY", defaults.currency),
            tax_rate=float(os.getenv(f"{prefix}TAX_RATE", defaults.tax_rate)),
            financial_year_end=os.getenv(
                f"{prefix}FINANCIAL_YEAR_END", defaults.financial_year_end
            ),
            renewal_window_days=int(
                os.getenv(
                    f"{prefix}RENEWAL_WINDOW_DAYS", defaults.renewal_window_days
                )
            ),
        )

    def rate_for(self, item_rate: Optional[float]) -> float:
        """A record's own rate wins, including an explicit 0."""
        return self.tax_rate if item_rate is None else item_rate

    def year_end_month_day(self) -> Tuple[int, int]:
        return parse_month_day(self.financial_year_end)


def parse_month_day(value: str) -> Tuple[int, int]:
    """Return (month, day) from ``MM-DD`` or ``YYYY-MM-DD``."""
    text = value.strip()
    if len(text) == 5:
        # Leap year so that 02-29 is accepted.
        text = f"2000-{text}"
    parsed: date = parse_iso_date(text)
    return parsed.month, parsed.day

