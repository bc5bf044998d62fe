"""
Shared fixtures for subtrack tests.

All reports are evaluated on a fixed date so results don't depend on when
the suite runs.
"""

from datetime import date

import pytest

from subtrack.reports import Client, LifetimeDeal, ReportSettings, Subscription

TODAY = date(2024, 9, 20)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def settings():
    return ReportSettings(currency="EUR", tax_rate=25.0, financial_year_end="06-30")


@pytest.fixture
def subscriptions():
    return [
        Subscription(
            id="s-figma",
            service_name="Figma",
            cost=100.0,
            billing_cycle="monthly",
            start_date="2024-08-04",
            category="design",
            client_id="c1",
            tax_deductible=True,
        ),
        Subscription(
            id="s-notion",
            service_name="Notion",
            cost=1200.0,
            billing_cycle="annual",
            start_date="2024-02-10",
            category="productivity",
            client_id="c2",
        ),
        Subscription(
            id="s-netflix",
            service_name="Netflix",
            cost=15.0,
            billing_cycle="monthly",
            start_date="2024-09-01",
            business_expense=False,
        ),
        Subscription(
            id="s-zoom",
            service_name="Zoom",
            cost=20.0,
            billing_cycle="monthly",
            start_date="2024-01-01",
            cancelled_date="2024-06-15",
            status="cancelled",
        ),
    ]


@pytest.fixture
def lifetime_deals():
    return [
        LifetimeDeal(
            id="d-tool",
            service_name="AppSumo Tool",
            original_cost=300.0,
            purchase_date="2024-09-05",
            category="design",
            client_id="c1",
            tax_deductible=True,
            tax_rate=0.0,
        ),
        LifetimeDeal(
            id="d-old",
            service_name="Old Deal",
            original_cost=50.0,
            purchase_date="2023-01-01",
        ),
    ]


@pytest.fixture
def clients():
    return [
        Client(id="c1", name="Acme", color_hex="#ff0000"),
        Client(id="c2", name="Beta"),
        Client(id="c3", name="Gamma", status="archived"),
    ]
