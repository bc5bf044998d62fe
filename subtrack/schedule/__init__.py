# Re-export schedule components
from .adjustments import add_cycles, get_month_end, get_month_start
from .core import BillingPeriod
from .generator import (
    billing_dates,
    billing_periods,
    days_until,
    describe_due,
    next_billing_date,
    previous_billing_date,
)
