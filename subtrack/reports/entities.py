from dataclasses import dataclass
from datetime import date
from typing import Optional

from subtrack.conventions.types import BillingCycle, CycleLike
from subtrack.schedule.generator import next_billing_date
from subtrack.utils.date import DateLike, to_date


@dataclass
class Subscription:
    service_name: str
    cost: float
    billing_cycle: CycleLike = BillingCycle.MONTHLY
    start_date: Optional[DateLike] = None
    next_billing_date: Optional[DateLike] = None
    status: str = "active"
    category: Optional[str] = None
    client_id: Optional[str] = None
    project_id: Optional[str] = None
    business_expense: bool = True
    tax_deductible: bool = False
    tax_rate: Optional[float] = None
    cancelled_date: Optional[DateLike] = None
    created_at: Optional[DateLike] = None
    currency: str = "USD"
    id: str = ""

    @property
    def cycle(self) -> BillingCycle:
        return BillingCycle.parse(self.billing_cycle)

    @property
    def is_active(self) -> bool:
        return self.status == "active"

    def effective_next_billing_date(
        self, today: Optional[DateLike] = None
    ) -> Optional[date]:
        """
        Next bill from the start date when known, else the stored value.
        None when there is neither, or the subscription was cancelled first.
        """
        if self.start_date is not None:
            upcoming = next_billing_date(self.start_date, self.cycle, today)
        elif self.next_billing_date is not None:
            upcoming = to_date(self.next_billing_date)
        else:
            return None
        if self.cancelled_date is not None and upcoming > to_date(self.cancelled_date):
            return None
        return upcoming


@dataclass
class LifetimeDeal:
    service_name: str
    original_cost: float
    purchase_date: DateLike
    category: Optional[str] = None
    client_id: Optional[str] = None
    project_id: Optional[str] = None
    business_expense: bool = True
    tax_deductible: bool = False
    tax_rate: Optional[float] = None
    status: str = "active"
    currency: str = "USD"
    id: str = ""


@dataclass
class Client:
    id: str
    name: str
    status: str = "active"
    color_hex: Optional[str] = None
