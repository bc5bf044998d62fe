"""Headline dashboard figures and upcoming renewals."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, List, Optional, Sequence

from subtrack.accrual.accumulate import annualized_amount, monthly_equivalent
from subtrack.schedule.adjustments import get_month_end, get_month_start
from subtrack.schedule.generator import days_until
from subtrack.utils.date import DateLike, to_date
from subtrack.utils.date import today as local_today

from .config import ReportSettings
from .entities import Client, Subscription

logger = logging.getLogger(__name__)


@dataclass
class DashboardMetrics:
    total_monthly_recurring: float
    annual_business_spend: float
    tax_deductible_amount: float
    this_month_renewals: int
    currency: str


@dataclass
class Renewal:
    subscription: Subscription
    next_billing_date: date
    days_until: int
    client_name: Optional[str] = None
    client_color: Optional[str] = None


def dashboard_metrics(
    subscriptions: Sequence[Subscription],
    settings: ReportSettings,
    today: Optional[DateLike] = None,
) -> DashboardMetrics:
    """Aggregate figures over active subscriptions."""
    ref = to_date(today) if today is not None else local_today()
    month_start, month_end = get_month_start(ref), get_month_end(ref)

    monthly = annual_business = deductible = 0.0
    renewals = 0
    for sub in subscriptions:
        if not sub.is_active:
            continue
        monthly += monthly_equivalent(sub.cost, sub.cycle)
        annual = annualized_amount(sub.cost, sub.cycle)
        if sub.business_expense:
            annual_business += annual
        if sub.tax_deductible:
            deductible += annual * (sub.tax_rate or 0) / 100
        next_bill = sub.effective_next_billing_date(ref)
        if next_bill is not None and month_start <= next_bill <= month_end:
            renewals += 1

    return DashboardMetrics(
        total_monthly_recurring=monthly,
        annual_business_spend=annual_business,
        tax_deductible_amount=deductible,
        this_month_renewals=renewals,
        currency=settings.currency,
    )


def upcoming_renewals(
    subscriptions: Sequence[Subscription],
    settings: ReportSettings,
    clients: Iterable[Client] = (),
    days: Optional[int] = None,
    today: Optional[DateLike] = None,
) -> List[Renewal]:
    """Active subscriptions billing within the next ``days`` days, soonest first."""
    ref = to_date(today) if today is not None else local_today()
    window = settings.renewal_window_days if days is None else days
    horizon = ref + timedelta(days=window)
    by_id = {c.id: c for c in clients}

    renewals = []
    for sub in subscriptions:
        if not sub.is_active:
            continue
        next_bill = sub.effective_next_billing_date(ref)
        if next_bill is None or next_bill > horizon:
            continue
        client = by_id.get(sub.client_id) if sub.client_id else None
        renewals.append(
            Renewal(
                subscription=sub,
                next_billing_date=next_bill,
                days_until=days_until(next_bill, ref),
                client_name=client.name if client else None,
                client_color=client.color_hex if client else None,
            )
        )
    logger.debug("%s renewals within %s days of %s", len(renewals), window, ref)
    return sorted(renewals, key=lambda r: r.next_billing_date)
