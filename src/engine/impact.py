"""Savings produced by extra principal payments.

Pure functions. No I/O.
"""

import logging
from collections.abc import Iterable
from decimal import Decimal

from src.engine.payment import loan_summary
from src.engine.schedule import generate_schedule
from src.models.loan import ExtraPayment, ExtraPaymentImpact, LoanScenario, LoanSummary

logger = logging.getLogger(__name__)


def extra_payment_impact(
    scenario: LoanScenario,
    extra_payments: Iterable[ExtraPayment],
) -> ExtraPaymentImpact:
    """Compare the no-extras baseline against the schedule with extra payments.

    Savings are floored at zero, so a configuration that somehow costs more
    reports zero savings rather than a negative number.
    """
    original = loan_summary(
        scenario.principal, scenario.annual_rate, scenario.term_months, scenario.start_date
    )
    schedule = generate_schedule(scenario, extra_payments)

    if not schedule:
        return ExtraPaymentImpact(
            original_summary=original,
            new_summary=original,
            months_saved=0,
            interest_saved=Decimal("0"),
        )

    total_payment = sum((p.payment_amount for p in schedule), Decimal("0"))
    total_interest = total_payment - scenario.principal

    new = LoanSummary(
        monthly_payment=original.monthly_payment,
        total_principal=scenario.principal,
        total_interest=total_interest,
        total_payment=total_payment,
        payoff_date=schedule[-1].date,
        term_months=len(schedule),
    )

    months_saved = original.term_months - new.term_months
    interest_saved = original.total_interest - new.total_interest
    if months_saved < 0 or interest_saved < 0:
        logger.debug(
            "Negative savings clamped to zero (months=%d, interest=%s)", months_saved, interest_saved
        )

    return ExtraPaymentImpact(
        original_summary=original,
        new_summary=new,
        months_saved=max(0, months_saved),
        interest_saved=max(Decimal("0"), interest_saved),
    )
