import logging

import pytest
from dateutil.relativedelta import relativedelta

from subtrack.conventions import (
    AVERAGE_MONTH_DAYS,
    BillingCycle,
    DateFormat,
    annual_factor,
    cycle_step,
    monthly_factor,
    period_days,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("weekly", BillingCycle.WEEKLY),
        ("Monthly", BillingCycle.MONTHLY),
        (" quarterly ", BillingCycle.QUARTERLY),
        ("ANNUAL", BillingCycle.ANNUAL),
        (BillingCycle.ANNUAL, BillingCycle.ANNUAL),
    ],
)
def test_parse_known_cycles(raw, expected):
    assert BillingCycle.parse(raw) is expected


@pytest.mark.parametrize("raw", ["fortnightly", "", None, 12])
def test_unknown_cycle_falls_back_to_monthly(raw, caplog):
    with caplog.at_level(logging.WARNING, logger="subtrack.conventions.types"):
        assert BillingCycle.parse(raw) is BillingCycle.MONTHLY
    assert "treating as monthly" in caplog.text


def test_period_days_constants():
    assert period_days("weekly") == 7
    assert period_days("monthly") == 30.44
    assert period_days("quarterly") == 91.31
    assert period_days("annual") == 365.25
    assert AVERAGE_MONTH_DAYS == 30.44


def test_quarter_walk_and_accrual_lengths_differ():
    """The schedule uses three calendar months, accrual uses 91.31 days."""
    assert cycle_step("quarterly") == relativedelta(months=3)
    assert period_days("quarterly") == 91.31


def test_cycle_steps():
    assert cycle_step(BillingCycle.WEEKLY) == relativedelta(days=7)
    assert cycle_step(BillingCycle.MONTHLY) == relativedelta(months=1)
    assert cycle_step(BillingCycle.ANNUAL) == relativedelta(years=1)


def test_factors():
    assert monthly_factor("weekly") == pytest.approx(30.44 / 7)
    assert monthly_factor("monthly") == 1.0
    assert monthly_factor("quarterly") == pytest.approx(1 / 3)
    assert monthly_factor("annual") == pytest.approx(1 / 12)
    assert [annual_factor(c) for c in BillingCycle] == [52, 12, 4, 1]


def test_date_format_parse():
    assert DateFormat.parse("eu") is DateFormat.EU
    assert DateFormat.parse(DateFormat.ISO) is DateFormat.ISO
    assert DateFormat.parse("nonsense") is DateFormat.US
    assert DateFormat.parse(None) is DateFormat.US
