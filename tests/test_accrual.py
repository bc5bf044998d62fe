from datetime import date, datetime, timedelta

import pytest

from subtrack.accrual import (
    accumulated_cost,
    annualized_amount,
    monthly_equivalent,
    pro_rated_amount,
)
from subtrack.conventions import BillingCycle


class TestProRatedAmount:
    def test_first_period_complete_returns_full_amount(self):
        # 47 days elapsed >= 30.44
        assert pro_rated_amount(100, "2024-08-04", "monthly", date(2024, 9, 20)) == 100

    def test_partial_month(self):
        result = pro_rated_amount(100, "2024-08-04", "monthly", "2024-08-19")
        assert result == pytest.approx(100 * 15 / 30.44)

    def test_partial_week(self):
        assert pro_rated_amount(70, "2024-01-01", "weekly", "2024-01-04") == pytest.approx(30.0)

    def test_reference_before_start_is_zero(self):
        assert pro_rated_amount(100, "2024-08-04", "monthly", "2024-08-03") == 0

    def test_same_day_is_zero(self):
        assert pro_rated_amount(100, "2024-08-04", "monthly", "2024-08-04") == 0

    @pytest.mark.parametrize(
        "cycle, amount, days_partial, days_full",
        [
            ("weekly", 70, 6, 7),
            ("monthly", 100, 30, 31),
            ("quarterly", 300, 91, 92),
            ("annual", 1200, 365, 366),
        ],
    )
    def test_full_amount_threshold(self, cycle, amount, days_partial, days_full):
        start = date(2023, 1, 1)
        partial = pro_rated_amount(amount, start, cycle, start + timedelta(days=days_partial))
        full = pro_rated_amount(amount, start, cycle, start + timedelta(days=days_full))
        assert 0 < partial < amount
        assert full == amount

    @pytest.mark.parametrize("cycle", list(BillingCycle))
    @pytest.mark.parametrize("elapsed", [0, 1, 5, 29, 45, 90, 200, 400])
    def test_bounds(self, cycle, elapsed):
        start = date(2024, 1, 1)
        result = pro_rated_amount(250, start, cycle, start + timedelta(days=elapsed))
        assert 0 <= result <= 250

    def test_datetime_reference_uses_calendar_days(self):
        late = pro_rated_amount(100, "2024-08-04", "monthly", datetime(2024, 8, 19, 23, 59))
        early = pro_rated_amount(100, "2024-08-04", "monthly", datetime(2024, 8, 19, 0, 1))
        assert late == early == pytest.approx(100 * 15 / 30.44)

    def test_unknown_cycle_uses_monthly_period(self):
        assert pro_rated_amount(100, "2024-08-04", "daily", "2024-08-19") == pytest.approx(
            pro_rated_amount(100, "2024-08-04", "monthly", "2024-08-19")
        )


class TestAccumulatedCost:
    def test_reporting_example(self):
        # Aug 4 to Sep 20 at $100/month is about $155.
        result = accumulated_cost(100, "2024-08-04", "monthly", date(2024, 9, 20))
        assert result == pytest.approx(100 * 47 / 30.44)
        assert result == pytest.approx(154.40, abs=0.01)

    def test_weekly_converts_through_monthly_rate(self):
        # 7/week is 30.44/month, i.e. exactly 1/day
        assert accumulated_cost(7, "2024-01-01", "weekly", "2024-01-31") == pytest.approx(30.0)

    def test_quarterly_and_annual(self):
        quarterly = accumulated_cost(300, "2024-01-01", "quarterly", "2024-03-02")
        annual = accumulated_cost(1200, "2024-01-01", "annual", "2024-03-02")
        assert quarterly == pytest.approx(100 * 61 / 30.44)
        assert annual == pytest.approx(quarterly)

    def test_start_after_end_is_zero(self):
        assert accumulated_cost(100, "2024-09-21", "monthly", "2024-09-20") == 0

    def test_not_capped_at_one_period(self):
        assert accumulated_cost(100, "2023-01-01", "monthly", "2024-01-01") == pytest.approx(
            100 * 365 / 30.44
        )

    @pytest.mark.parametrize("cycle", list(BillingCycle))
    def test_non_decreasing_in_end_date(self, cycle):
        start = date(2024, 1, 15)
        ends = [start + timedelta(days=n) for n in range(-3, 400, 17)]
        costs = [accumulated_cost(49.99, start, cycle, end) for end in ends]
        assert costs == sorted(costs)
        assert all(c >= 0 for c in costs)

    def test_default_end_is_today(self):
        start = date.today() - timedelta(days=10)
        assert accumulated_cost(30.44, start, "monthly") == pytest.approx(10.0)


def test_monthly_equivalent():
    assert monthly_equivalent(70, "weekly") == pytest.approx(304.4)
    assert monthly_equivalent(90, "quarterly") == pytest.approx(30)
    assert monthly_equivalent(120, "annual") == pytest.approx(10)
    assert monthly_equivalent(15, "monthly") == 15


def test_annualized_amount():
    assert annualized_amount(10, "weekly") == 520
    assert annualized_amount(10, "monthly") == 120
    assert annualized_amount(10, "quarterly") == 40
    assert annualized_amount(10, "annual") == 10
