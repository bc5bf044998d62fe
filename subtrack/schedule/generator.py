"""
Billing schedule walks: next/previous billing dates and period listings.
"""

import logging
from datetime import date
from typing import List, Optional, Union

from subtrack.conventions.types import BillingCycle, CycleLike, DateFormat
from subtrack.utils.date import DateLike, format_date_for_display, to_date
from subtrack.utils.date import today as local_today

from .adjustments import add_cycles
from .core import BillingPeriod

logger = logging.getLogger(__name__)


def _resolve_today(today: Optional[DateLike]) -> date:
    return to_date(today) if today is not None else local_today()


def next_billing_date(
    start: DateLike, cycle: CycleLike, today: Optional[DateLike] = None
) -> date:
    """
    Earliest schedule point anchored at ``start`` that is strictly after today.

    A start date in the future is its own first bill. A start date equal to
    today resolves to the following period.

    Args:
        start: Anchor date (date, datetime or ``YYYY-MM-DD`` string)
        cycle: Billing cycle; unknown values are treated as monthly
        today: Evaluation date, defaults to the local calendar date

    Returns:
        The next billing date
    """
    anchor = to_date(start)
    ref = _resolve_today(today)
    cycle = BillingCycle.parse(cycle)

    if anchor > ref:
        return anchor

    # Month lengths vary, so step through the calendar instead of dividing.
    count = 0
    candidate = anchor
    while candidate <= ref:
        count += 1
        candidate = add_cycles(anchor, cycle, count)
    logger.debug(
        "Next %s billing for anchor %s as of %s: %s (%s steps)",
        cycle.value, anchor, ref, candidate, count,
    )
    return candidate


def previous_billing_date(
    start: DateLike, cycle: CycleLike, today: Optional[DateLike] = None
) -> Optional[date]:
    """Latest schedule point on or before today, None if billing hasn't begun."""
    anchor = to_date(start)
    ref = _resolve_today(today)
    if anchor > ref:
        return None

    cycle = BillingCycle.parse(cycle)
    count = 0
    while add_cycles(anchor, cycle, count + 1) <= ref:
        count += 1
    return add_cycles(anchor, cycle, count)


def billing_dates(
    start: DateLike,
    cycle: CycleLike,
    until: DateLike,
    since: Optional[DateLike] = None,
) -> List[date]:
    """All schedule points anchored at ``start`` that fall in ``[since, until]``."""
    anchor = to_date(start)
    end = to_date(until)
    lower = to_date(since) if since is not None else anchor
    cycle = BillingCycle.parse(cycle)

    dates: List[date] = []
    count = 0
    current = anchor
    while current <= end:
        if current >= lower:
            dates.append(current)
        count += 1
        current = add_cycles(anchor, cycle, count)
    return dates


def billing_periods(
    start: DateLike,
    cycle: CycleLike,
    until: DateLike,
    today: Optional[DateLike] = None,
) -> List[BillingPeriod]:
    """
    Consecutive billing periods from ``start`` whose charge date is on or
    before ``until``. Each period ends where the next one begins.
    """
    anchor = to_date(start)
    ref = _resolve_today(today)
    cycle = BillingCycle.parse(cycle)

    periods: List[BillingPeriod] = []
    for index, period_start in enumerate(billing_dates(anchor, cycle, until)):
        period_end = add_cycles(anchor, cycle, index + 1)
        periods.append(
            BillingPeriod(
                index=index,
                start_date=period_start,
                end_date=period_end,
                is_current=period_start <= ref < period_end,
            )
        )
    return periods


def days_until(target: DateLike, today: Optional[DateLike] = None) -> int:
    """Whole days from today to ``target``; negative once it has passed."""
    return (to_date(target) - _resolve_today(today)).days


def describe_due(
    target: DateLike,
    today: Optional[DateLike] = None,
    date_format: Union[DateFormat, str, None] = DateFormat.US,
) -> str:
    """Short label for a due date, e.g. "Today", "Tomorrow", "3 days"."""
    days = days_until(target, today)
    if days < 0:
        return "Overdue"
    if days == 0:
        return "Today"
    if days == 1:
        return "Tomorrow"
    if days <= 7:
        return f"{days} days"
    return format_date_for_display(target, date_format)
