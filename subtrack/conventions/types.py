"""
Basic types and enums used across the billing engine.
"""

import logging
from enum import Enum
from typing import Union

logger = logging.getLogger(__name__)


class BillingCycle(Enum):
    """Recurrence period of a subscription charge."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUAL = "annual"

    @classmethod
    def parse(cls, value: Union["BillingCycle", str, None]) -> "BillingCycle":
        """Return the cycle for ``value``, falling back to MONTHLY when unknown."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        logger.warning("Unknown billing cycle %r, treating as monthly", value)
        return cls.MONTHLY


class DateFormat(Enum):
    """Display format preferences. All of them spell the month out."""

    US = "US"
    EU = "EU"
    ISO = "ISO"

    @classmethod
    def parse(cls, value: Union["DateFormat", str, None]) -> "DateFormat":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        if value is not None:
            logger.warning("Unknown date format %r, using US", value)
        return cls.US


CycleLike = Union[BillingCycle, str]
