"""
Record filtering strategies for reports.

Provides composable filters over subscriptions and lifetime deals.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, List, Optional, Sequence, TypeVar

from subtrack.utils.date import DateLike, to_date

from .entities import LifetimeDeal, Subscription

T = TypeVar("T")

ALL = "all"


class BaseFilter(ABC):
    """
    Abstract base class for record filters.
    """

    @abstractmethod
    def filter(self, records: Sequence[T]) -> List[T]:
        """
        Filter records based on specific criteria.

        Args:
            records: Records to filter

        Returns:
            Filtered records
        """


class DateRangeFilter(BaseFilter):
    """
    Keep records whose date falls inside an inclusive range.

    Records for which ``date_of`` returns None are dropped.
    """

    def __init__(
        self,
        date_of: Callable[[Any], Optional[date]],
        start: DateLike,
        end: DateLike,
    ):
        self.date_of = date_of
        self.start = to_date(start)
        self.end = to_date(end)

    def filter(self, records: Sequence[T]) -> List[T]:
        result = []
        for record in records:
            value = self.date_of(record)
            if value is not None and self.start <= value <= self.end:
                result.append(record)
        return result


class FieldFilter(BaseFilter):
    """
    Keep records whose attribute equals ``value``.

    ``None`` and ``"all"`` disable the filter.
    """

    def __init__(self, field: str, value: Optional[str]):
        self.field = field
        self.value = value

    @property
    def active(self) -> bool:
        return self.value is not None and self.value != ALL

    def filter(self, records: Sequence[T]) -> List[T]:
        if not self.active:
            return list(records)
        return [r for r in records if getattr(r, self.field, None) == self.value]


class CompositeFilter(BaseFilter):
    """
    Combine multiple filters using AND logic.
    """

    def __init__(self, filters: List[BaseFilter]):
        self.filters = filters

    def add_filter(self, filter_instance: BaseFilter) -> None:
        self.filters.append(filter_instance)

    def filter(self, records: Sequence[T]) -> List[T]:
        result = list(records)
        for f in self.filters:
            result = f.filter(result)
        return result


@dataclass
class ReportFilters:
    """Date range plus optional client, category and project selections."""

    start: DateLike
    end: DateLike
    client_id: Optional[str] = None
    category: Optional[str] = None
    project_id: Optional[str] = None

    def _field_filters(self, include_category: bool = True) -> List[BaseFilter]:
        filters: List[BaseFilter] = [FieldFilter("client_id", self.client_id)]
        if include_category:
            filters.append(FieldFilter("category", self.category))
        filters.append(FieldFilter("project_id", self.project_id))
        return filters

    def for_subscriptions(
        self, today: Optional[DateLike] = None, include_category: bool = True
    ) -> CompositeFilter:
        """Subscriptions are selected by their next billing date."""
        in_range = DateRangeFilter(
            lambda sub: sub.effective_next_billing_date(today), self.start, self.end
        )
        return CompositeFilter([in_range] + self._field_filters(include_category))

    def for_lifetime_deals(self, include_category: bool = True) -> CompositeFilter:
        """Lifetime deals are selected by their purchase date."""
        in_range = DateRangeFilter(
            lambda deal: to_date(deal.purchase_date), self.start, self.end
        )
        return CompositeFilter([in_range] + self._field_filters(include_category))


def filter_subscriptions(
    subscriptions: Sequence[Subscription],
    filters: ReportFilters,
    today: Optional[DateLike] = None,
    include_category: bool = True,
) -> List[Subscription]:
    return filters.for_subscriptions(today, include_category).filter(subscriptions)


def filter_lifetime_deals(
    deals: Sequence[LifetimeDeal],
    filters: ReportFilters,
    include_category: bool = True,
) -> List[LifetimeDeal]:
    return filters.for_lifetime_deals(include_category).filter(deals)
