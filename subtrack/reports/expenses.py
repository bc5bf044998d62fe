"""Monthly business-expense report."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import pandas as pd

from subtrack.accrual.accumulate import accumulated_cost, monthly_equivalent
from subtrack.schedule.adjustments import get_month_end
from subtrack.utils.date import DateLike, to_date

from .config import ReportSettings
from .entities import LifetimeDeal, Subscription
from .filters import ReportFilters, filter_lifetime_deals, filter_subscriptions

logger = logging.getLogger(__name__)


@dataclass
class ReportItem:
    service_name: str
    kind: str  # "subscription" or "lifetime_deal"
    amount: float
    tax_deductible: bool = False
    tax_rate: float = 0.0


@dataclass
class MonthTotal:
    month: str  # YYYY-MM
    total: float = 0.0
    tax_deductible: float = 0.0
    tax_savings: float = 0.0
    items: List[ReportItem] = field(default_factory=list)

    def add(self, item: ReportItem) -> None:
        self.total += item.amount
        if item.tax_deductible:
            self.tax_deductible += item.amount
            self.tax_savings += item.amount * (item.tax_rate / 100)
        self.items.append(item)


@dataclass
class ExpenseReport:
    subscriptions: List[Subscription]
    lifetime_deals: List[LifetimeDeal]
    monthly_totals: List[MonthTotal]

    @property
    def total_expenses(self) -> float:
        return sum(m.total for m in self.monthly_totals)

    @property
    def total_tax_deductible(self) -> float:
        return sum(m.tax_deductible for m in self.monthly_totals)

    @property
    def total_tax_savings(self) -> float:
        return sum(m.tax_savings for m in self.monthly_totals)

    def to_frame(self) -> pd.DataFrame:
        """One row per month."""
        return pd.DataFrame(
            [
                {
                    "month": m.month,
                    "total": m.total,
                    "tax_deductible": m.tax_deductible,
                    "tax_savings": m.tax_savings,
                    "items": len(m.items),
                }
                for m in self.monthly_totals
            ],
            columns=["month", "total", "tax_deductible", "tax_savings", "items"],
        )


def _month_key(value) -> str:
    return to_date(value).strftime("%Y-%m")


def subscription_month_amount(sub: Subscription) -> float:
    """
    Amount a subscription contributes to the month it is keyed under.

    With a start date the subscription accrues from that date to the end of
    its month; otherwise it counts as one month at its monthly rate.
    """
    if sub.start_date is None:
        return monthly_equivalent(sub.cost, sub.cycle)
    start = to_date(sub.start_date)
    return accumulated_cost(sub.cost, start, sub.cycle, get_month_end(start))


def monthly_totals(
    subscriptions: Sequence[Subscription],
    lifetime_deals: Sequence[LifetimeDeal],
    settings: ReportSettings,
    today: Optional[DateLike] = None,
) -> List[MonthTotal]:
    """Group business expenses by calendar month, oldest first."""
    months: Dict[str, MonthTotal] = {}

    for sub in subscriptions:
        if not sub.business_expense:
            continue
        keyed_on = sub.start_date or sub.effective_next_billing_date(today)
        if keyed_on is None:
            logger.debug("Skipping %s: no start or billing date", sub.service_name)
            continue
        key = _month_key(keyed_on)
        item = ReportItem(
            service_name=sub.service_name,
            kind="subscription",
            amount=subscription_month_amount(sub),
            tax_deductible=sub.tax_deductible,
            tax_rate=settings.rate_for(sub.tax_rate),
        )
        months.setdefault(key, MonthTotal(key)).add(item)

    for deal in lifetime_deals:
        if not deal.business_expense:
            continue
        key = _month_key(deal.purchase_date)
        item = ReportItem(
            service_name=deal.service_name,
            kind="lifetime_deal",
            amount=deal.original_cost,
            tax_deductible=deal.tax_deductible,
            tax_rate=settings.rate_for(deal.tax_rate),
        )
        months.setdefault(key, MonthTotal(key)).add(item)

    return [months[key] for key in sorted(months)]


def monthly_expense_report(
    subscriptions: Sequence[Subscription],
    lifetime_deals: Sequence[LifetimeDeal],
    filters: ReportFilters,
    settings: ReportSettings,
    today: Optional[DateLike] = None,
) -> ExpenseReport:
    subs = filter_subscriptions(subscriptions, filters, today)
    deals = filter_lifetime_deals(lifetime_deals, filters)
    logger.debug(
        "Expense report: %s/%s subscriptions, %s/%s lifetime deals in range",
        len(subs), len(subscriptions), len(deals), len(lifetime_deals),
    )
    return ExpenseReport(
        subscriptions=subs,
        lifetime_deals=deals,
        monthly_totals=monthly_totals(subs, deals, settings, today),
    )
