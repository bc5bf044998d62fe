"""Cost accrual: partial-period pro-ration and continuous accumulated spend."""

from .accumulate import accumulated_cost, annualized_amount, monthly_equivalent
from .prorate import pro_rated_amount

__all__ = [
    "accumulated_cost",
    "annualized_amount",
    "monthly_equivalent",
    "pro_rated_amount",
]
