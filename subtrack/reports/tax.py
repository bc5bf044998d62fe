"""Financial-year tax summary."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional, Sequence, Tuple

from dateutil.relativedelta import relativedelta

from subtrack.accrual.accumulate import accumulated_cost
from subtrack.utils.date import DateLike, to_date
from subtrack.utils.date import today as local_today

from .config import ReportSettings, parse_month_day
from .entities import LifetimeDeal, Subscription

logger = logging.getLogger(__name__)


@dataclass
class TaxYearSummary:
    financial_year_start: date
    financial_year_end: date
    total_business_expenses: float
    total_tax_deductible: float
    total_tax_savings: float
    average_tax_rate: float


def _year_end_in(year: int, month: int, day: int) -> date:
    # relativedelta clamps 02-29 to 02-28 in common years
    return date(year, 1, 1) + relativedelta(month=month, day=day)


def financial_year_bounds(
    financial_year_end: str, today: Optional[DateLike] = None
) -> Tuple[date, date]:
    """
    Return (start, end) of the financial year containing ``today``.

    Args:
        financial_year_end: Year end as ``MM-DD`` or ``YYYY-MM-DD``; the year
            part is ignored
        today: Evaluation date, defaults to the local calendar date
    """
    ref = to_date(today) if today is not None else local_today()
    month, day = parse_month_day(financial_year_end)

    this_year_end = _year_end_in(ref.year, month, day)
    if ref <= this_year_end:
        start = _year_end_in(ref.year - 1, month, day) + timedelta(days=1)
        return start, this_year_end
    return this_year_end + timedelta(days=1), _year_end_in(ref.year + 1, month, day)


def subscription_cost_in_window(
    sub: Subscription, window_start: date, window_end: date, today: date
) -> float:
    """Accrued cost of a subscription over its overlap with a window."""
    began = sub.start_date if sub.start_date is not None else sub.created_at
    if began is None:
        return 0.0
    active_from = to_date(began)
    active_to = to_date(sub.cancelled_date) if sub.cancelled_date else today

    overlap_start = max(active_from, window_start)
    overlap_end = min(active_to, window_end)
    if overlap_start > overlap_end:
        return 0.0
    return accumulated_cost(sub.cost, overlap_start, sub.cycle, overlap_end)


def tax_year_summary(
    subscriptions: Sequence[Subscription],
    lifetime_deals: Sequence[LifetimeDeal],
    settings: ReportSettings,
    today: Optional[DateLike] = None,
) -> TaxYearSummary:
    ref = to_date(today) if today is not None else local_today()
    fy_start, fy_end = financial_year_bounds(settings.financial_year_end, ref)
    logger.debug("Financial year %s to %s", fy_start, fy_end)

    business = deductible = savings = 0.0

    for sub in subscriptions:
        if not sub.business_expense:
            logger.debug("Personal expense excluded: %s", sub.service_name)
            continue
        amount = subscription_cost_in_window(sub, fy_start, fy_end, ref)
        business += amount
        if sub.tax_deductible:
            deductible += amount
            savings += amount * settings.rate_for(sub.tax_rate) / 100

    for deal in lifetime_deals:
        if not deal.business_expense:
            continue
        purchased = to_date(deal.purchase_date)
        if not fy_start <= purchased <= fy_end:
            logger.debug("Lifetime deal %s outside financial year", deal.service_name)
            continue
        business += deal.original_cost
        if deal.tax_deductible:
            deductible += deal.original_cost
            savings += deal.original_cost * settings.rate_for(deal.tax_rate) / 100

    average = savings / deductible * 100 if deductible > 0 else settings.tax_rate
    return TaxYearSummary(
        financial_year_start=fy_start,
        financial_year_end=fy_end,
        total_business_expenses=business,
        total_tax_deductible=deductible,
        total_tax_savings=savings,
        average_tax_rate=average,
    )
