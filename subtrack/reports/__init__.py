"""Spend reports over subscription and lifetime-deal records."""

from .breakdown import (
    CategoryTotal,
    ClientCost,
    breakdown_frame,
    category_breakdown,
    client_cost_report,
    client_costs_frame,
)
from .config import ReportSettings, parse_month_day
from .dashboard import DashboardMetrics, Renewal, dashboard_metrics, upcoming_renewals
from .entities import Client, LifetimeDeal, Subscription
from .expenses import (
    ExpenseReport,
    MonthTotal,
    ReportItem,
    monthly_expense_report,
    monthly_totals,
)
from .filters import ReportFilters, filter_lifetime_deals, filter_subscriptions
from .tax import TaxYearSummary, financial_year_bounds, tax_year_summary

__all__ = [
    "CategoryTotal",
    "Client",
    "ClientCost",
    "DashboardMetrics",
    "ExpenseReport",
    "LifetimeDeal",
    "MonthTotal",
    "Renewal",
    "ReportFilters",
    "ReportItem",
    "ReportSettings",
    "Subscription",
    "TaxYearSummary",
    "breakdown_frame",
    "category_breakdown",
    "client_cost_report",
    "client_costs_frame",
    "dashboard_metrics",
    "filter_lifetime_deals",
    "filter_subscriptions",
    "financial_year_bounds",
    "monthly_expense_report",
    "monthly_totals",
    "parse_month_day",
    "tax_year_summary",
    "upcoming_renewals",
]
