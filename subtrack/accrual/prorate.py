"""Partial-period charge: how much of the current period has accrued."""

from __future__ import annotations

import logging
from typing import Optional

from subtrack.conventions.periods import period_days
from subtrack.conventions.types import CycleLike
from subtrack.utils.date import DateLike, to_date, today

logger = logging.getLogger(__name__)


def pro_rated_amount(
    full_amount: float,
    start: DateLike,
    cycle: CycleLike,
    reference: Optional[DateLike] = None,
) -> float:
    """Return the share of ``full_amount`` accrued between start and reference.

    Uses the nominal period length for the cycle:
        prorated = full_amount * days_since_start / period_days
    and returns the full amount once a whole period has elapsed.
    """
    start_date = to_date(start)
    ref = to_date(reference) if reference is not None else today()
    if start_date > ref:
        return 0.0

    days = period_days(cycle)
    days_since_start = (ref - start_date).days
    if days_since_start >= days:
        return float(full_amount)

    amount = full_amount * (days_since_start / days)
    logger.debug(
        "Pro-rated %s over %s/%s days: %s", full_amount, days_since_start, days, amount
    )
    return max(0.0, amount)
