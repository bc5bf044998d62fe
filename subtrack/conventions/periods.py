"""Period lengths and conversion factors per billing cycle.

Two representations of a cycle live here and must stay separate:

- ``cycle_step`` is the calendar increment used when walking a billing
  schedule (a quarter is three calendar months).
- ``period_days`` is the nominal average length used by accrual math
  (a quarter is 91.31 days).
"""

from __future__ import annotations

from typing import Dict

from dateutil.relativedelta import relativedelta

from subtrack.conventions.types import BillingCycle, CycleLike

AVERAGE_MONTH_DAYS = 30.44  # 365.25 / 12, rounded

_PERIOD_DAYS: Dict[BillingCycle, float] = {
    BillingCycle.WEEKLY: 7.0,
    BillingCycle.MONTHLY: AVERAGE_MONTH_DAYS,
    BillingCycle.QUARTERLY: 91.31,
    BillingCycle.ANNUAL: 365.25,
}

_CYCLE_STEPS: Dict[BillingCycle, relativedelta] = {
    BillingCycle.WEEKLY: relativedelta(weeks=1),
    BillingCycle.MONTHLY: relativedelta(months=1),
    BillingCycle.QUARTERLY: relativedelta(months=3),
    BillingCycle.ANNUAL: relativedelta(years=1),
}

_MONTHLY_FACTORS: Dict[BillingCycle, float] = {
    BillingCycle.WEEKLY: AVERAGE_MONTH_DAYS / 7,
    BillingCycle.MONTHLY: 1.0,
    BillingCycle.QUARTERLY: 1 / 3,
    BillingCycle.ANNUAL: 1 / 12,
}

_ANNUAL_FACTORS: Dict[BillingCycle, int] = {
    BillingCycle.WEEKLY: 52,
    BillingCycle.MONTHLY: 12,
    BillingCycle.QUARTERLY: 4,
    BillingCycle.ANNUAL: 1,
}


def period_days(cycle: CycleLike) -> float:
    """Return the nominal period length in days used for pro-ration."""
    return _PERIOD_DAYS[BillingCycle.parse(cycle)]


def cycle_step(cycle: CycleLike) -> relativedelta:
    """Return the calendar increment for one billing period."""
    return _CYCLE_STEPS[BillingCycle.parse(cycle)]


def monthly_factor(cycle: CycleLike) -> float:
    """Multiplier turning a per-period amount into a monthly rate."""
    return _MONTHLY_FACTORS[BillingCycle.parse(cycle)]


def annual_factor(cycle: CycleLike) -> int:
    """Number of billing periods per year."""
    return _ANNUAL_FACTORS[BillingCycle.parse(cycle)]
