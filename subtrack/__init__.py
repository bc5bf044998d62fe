"""Subscription Billing & Cost Accrual Engine.

This package computes billing dates, pro-rated charges and accumulated
spend for recurring subscriptions and one-time lifetime deals, plus the
spend reports built on top of them.

Key modules:
- conventions: Billing cycles and period constants
- schedule: Next/previous billing dates and period listings
- accrual: Pro-ration and accumulated cost
- utils: Strict ISO date parsing, validation and display formatting
- reports: Monthly, tax-year, category, client and dashboard reports
"""

from subtrack.accrual import (
    accumulated_cost,
    annualized_amount,
    monthly_equivalent,
    pro_rated_amount,
)
from subtrack.conventions import BillingCycle, DateFormat
from subtrack.schedule import next_billing_date, previous_billing_date
from subtrack.utils import (
    format_date_for_display,
    format_date_for_input,
    parse_iso_date,
    validate_date_format,
    validate_start_date,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "BillingCycle",
    "DateFormat",
    "accumulated_cost",
    "annualized_amount",
    "format_date_for_display",
    "format_date_for_input",
    "monthly_equivalent",
    "next_billing_date",
    "parse_iso_date",
    "previous_billing_date",
    "pro_rated_amount",
    "validate_date_format",
    "validate_start_date",
]
