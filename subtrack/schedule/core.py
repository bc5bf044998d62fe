"""
Core data structures for billing schedules.
"""

from dataclasses import dataclass
from datetime import date


@dataclass
class BillingPeriod:
    """One billing period: charged on ``start_date``, covers up to ``end_date``."""

    index: int
    start_date: date
    end_date: date
    is_current: bool = False

    @property
    def days(self) -> int:
        """Number of calendar days in the period."""
        return (self.end_date - self.start_date).days
