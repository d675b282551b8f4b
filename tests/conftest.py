"""Canonical test fixtures used across engine and API tests.

Mortgage: $100K at 12% EA over 30 years starting 2025-01-01.
Short loan: $10K at 10% EA over 12 months starting 2025-01-01.
"""

import pytest
from datetime import date
from decimal import Decimal

from src.models.loan import ExtraPayment, LoanScenario


@pytest.fixture
def mortgage_scenario() -> LoanScenario:
    return LoanScenario(
        principal=Decimal("100000"),
        annual_rate=Decimal("12"),
        term_months=360,
        start_date=date(2025, 1, 1),
    )


@pytest.fixture
def short_scenario() -> LoanScenario:
    return LoanScenario(
        principal=Decimal("10000"),
        annual_rate=Decimal("10"),
        term_months=12,
        start_date=date(2025, 1, 1),
    )


@pytest.fixture
def lump_sum_extra() -> list[ExtraPayment]:
    """$2,000 extra on the first installment."""
    return [ExtraPayment(payment_number=1, amount=Decimal("2000"), description="Bonus")]


@pytest.fixture
def scenario_payload() -> dict:
    """JSON body for the API equivalent of short_scenario."""
    return {
        "principal": "10000",
        "interest_rate": "10",
        "term_months": 12,
        "start_date": "2025-01-01",
    }
