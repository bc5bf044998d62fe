from subtrack.conventions.periods import (
    AVERAGE_MONTH_DAYS,
    annual_factor,
    cycle_step,
    monthly_factor,
    period_days,
)
from subtrack.conventions.types import BillingCycle, CycleLike, DateFormat

__all__ = [
    "AVERAGE_MONTH_DAYS",
    "BillingCycle",
    "CycleLike",
    "DateFormat",
    "annual_factor",
    "cycle_step",
    "monthly_factor",
    "period_days",
]
