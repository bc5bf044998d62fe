"""
Calendar arithmetic for billing schedules.
"""

from datetime import date

from dateutil.relativedelta import relativedelta

from subtrack.conventions.periods import cycle_step
from subtrack.conventions.types import CycleLike


def add_cycles(anchor: date, cycle: CycleLike, count: int) -> date:
    """Return the schedule point ``count`` cycles after ``anchor``.

    Always measured from the anchor, so a Jan 31 anchor gives Feb 29 then
    Mar 31 rather than drifting to the 29th.
    """
    return anchor + cycle_step(cycle) * count


def get_month_start(dt: date) -> date:
    return dt.replace(day=1)


def get_month_end(dt: date) -> date:
    """Last calendar day of the month containing ``dt``."""
    return dt + relativedelta(day=31)
