"""Annualised spend by category and by client."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import pandas as pd

from subtrack.accrual.accumulate import annualized_amount
from subtrack.utils.date import DateLike

from .entities import Client, LifetimeDeal, Subscription
from .filters import ReportFilters, filter_lifetime_deals, filter_subscriptions

UNCATEGORISED = "other"


@dataclass
class CategoryTotal:
    category: str
    total: float = 0.0
    count: int = 0
    services: List[str] = field(default_factory=list)


@dataclass
class ClientCost:
    client: Client
    subscription_cost: float = 0.0
    lifetime_deal_cost: float = 0.0
    subscription_count: int = 0
    lifetime_deal_count: int = 0

    @property
    def total_cost(self) -> float:
        return self.subscription_cost + self.lifetime_deal_cost


def category_breakdown(
    subscriptions: Sequence[Subscription],
    lifetime_deals: Sequence[LifetimeDeal],
    filters: ReportFilters,
    today: Optional[DateLike] = None,
) -> List[CategoryTotal]:
    """Business spend per category, largest first. The category filter is ignored."""
    subs = filter_subscriptions(subscriptions, filters, today, include_category=False)
    deals = filter_lifetime_deals(lifetime_deals, filters, include_category=False)

    categories: Dict[str, CategoryTotal] = {}

    def _add(category: Optional[str], name: str, amount: float) -> None:
        key = category or UNCATEGORISED
        entry = categories.setdefault(key, CategoryTotal(key))
        entry.total += amount
        entry.count += 1
        entry.services.append(name)

    for sub in subs:
        if sub.business_expense:
            _add(sub.category, sub.service_name, annualized_amount(sub.cost, sub.cycle))
    for deal in deals:
        if deal.business_expense:
            _add(deal.category, deal.service_name, deal.original_cost)

    return sorted(categories.values(), key=lambda c: c.total, reverse=True)


def client_cost_report(
    clients: Sequence[Client],
    subscriptions: Sequence[Subscription],
    lifetime_deals: Sequence[LifetimeDeal],
    filters: ReportFilters,
    today: Optional[DateLike] = None,
) -> List[ClientCost]:
    """Annualised business spend per active client, largest first."""
    in_range = ReportFilters(filters.start, filters.end)
    subs = [s for s in filter_subscriptions(subscriptions, in_range, today) if s.business_expense]
    deals = [d for d in filter_lifetime_deals(lifetime_deals, in_range) if d.business_expense]

    costs = []
    for client in clients:
        if client.status != "active":
            continue
        entry = ClientCost(client)
        for sub in subs:
            if sub.client_id == client.id:
                entry.subscription_cost += annualized_amount(sub.cost, sub.cycle)
                entry.subscription_count += 1
        for deal in deals:
            if deal.client_id == client.id:
                entry.lifetime_deal_cost += deal.original_cost
                entry.lifetime_deal_count += 1
        costs.append(entry)

    return sorted(costs, key=lambda c: c.total_cost, reverse=True)


def breakdown_frame(totals: Sequence[CategoryTotal]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"category": t.category, "total": t.total, "count": t.count} for t in totals],
        columns=["category", "total", "count"],
    )


def client_costs_frame(costs: Sequence[ClientCost]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "client_id": c.client.id,
                "client": c.client.name,
                "subscription_cost": c.subscription_cost,
                "lifetime_deal_cost": c.lifetime_deal_cost,
                "total_cost": c.total_cost,
            }
            for c in costs
        ],
        columns=[
            "client_id",
            "client",
            "subscription_cost",
            "lifetime_deal_cost",
            "total_cost",
        ],
    )
