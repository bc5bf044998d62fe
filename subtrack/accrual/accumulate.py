"""Accumulated spend, modelled as a continuous monthly rate."""

from __future__ import annotations

import logging
from typing import Optional

from subtrack.conventions.periods import (
    AVERAGE_MONTH_DAYS,
    annual_factor,
    monthly_factor,
)
from subtrack.conventions.types import CycleLike
from subtrack.utils.date import DateLike, to_date, today

logger = logging.getLogger(__name__)


def monthly_equivalent(amount: float, cycle: CycleLike) -> float:
    """Convert a per-period amount to a monthly rate."""
    return amount * monthly_factor(cycle)


def annualized_amount(amount: float, cycle: CycleLike) -> float:
    """Convert a per-period amount to a yearly total (52 weeks, 12 months...)."""
    return amount * annual_factor(cycle)


def accumulated_cost(
    amount: float,
    start: DateLike,
    cycle: CycleLike,
    end: Optional[DateLike] = None,
) -> float:
    """Total spend from ``start`` through ``end``.

    Billing is discrete, but spend is reported as if it accrued daily:
        cost = floor(end - start) / 30.44 * monthly_equivalent
    """
    start_date = to_date(start)
    end_date = to_date(end) if end is not None else today()
    if start_date > end_date:
        return 0.0

    rate = monthly_equivalent(amount, cycle)
    total_days = (end_date - start_date).days
    months = total_days / AVERAGE_MONTH_DAYS
    logger.debug(
        "Accumulated %s days (%.4f months) at %s/month", total_days, months, rate
    )
    return max(0.0, months * rate)
