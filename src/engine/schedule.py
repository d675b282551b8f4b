"""Amortization schedule generation with optional extra principal payments.

Pure functions: dataclass in, dataclass out. No I/O.
"""

import logging
from collections.abc import Iterable
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum

from src.engine.dates import add_months, parse_date
from src.engine.payment import monthly_payment
from src.engine.rates import round_currency, to_monthly_rate
from src.models.loan import (
    AmortizationPayment,
    ExtraPayment,
    LoanScenario,
    PaymentRangeSummary,
    YearlyLoanSummary,
)

logger = logging.getLogger(__name__)

ONE_CENT = Decimal("0.01")
FOUR_PLACES = Decimal("0.0001")


class InstallmentState(str, Enum):
    NORMAL_PAYMENT = "normal_payment"
    FINAL_PAYMENT = "final_payment"


def extra_payments_by_installment(extra_payments: Iterable[ExtraPayment]) -> dict[int, Decimal]:
    """Sum extra amounts per installment number."""
    totals: dict[int, Decimal] = {}
    for ep in extra_payments:
        totals[ep.payment_number] = totals.get(ep.payment_number, Decimal("0")) + ep.amount
    return totals


def generate_schedule(
    scenario: LoanScenario,
    extra_payments: Iterable[ExtraPayment] = (),
) -> list[AmortizationPayment]:
    """Generate the dated month-by-month schedule.

    Installment n falls on start_date + (n - 1) months. The loop ends after
    the first FINAL_PAYMENT installment: either the clamp to the remaining
    balance binds (extra payments can make that happen early) or the nominal
    last installment is reached, which absorbs any rounding residue so the
    principal portions sum to the principal exactly.
    """
    pmt = monthly_payment(scenario.principal, scenario.annual_rate, scenario.term_months)
    r = to_monthly_rate(scenario.annual_rate)
    extras = extra_payments_by_installment(extra_payments)
    start = parse_date(scenario.start_date)

    payments: list[AmortizationPayment] = []
    balance = scenario.principal
    state = InstallmentState.NORMAL_PAYMENT

    for period in range(1, scenario.term_months + 1):
        interest = round_currency(balance * r)
        extra = extras.get(period, Decimal("0"))
        principal_paid = round_currency(pmt - interest + extra)

        if principal_paid >= balance or period == scenario.term_months:
            principal_paid = balance
            state = InstallmentState.FINAL_PAYMENT

        balance -= principal_paid
        if balance < ONE_CENT:
            balance = Decimal("0")
            state = InstallmentState.FINAL_PAYMENT

        payments.append(AmortizationPayment(
            payment_number=period,
            date=add_months(start, period - 1),
            payment_amount=round_currency(pmt + extra),
            principal_portion=principal_paid,
            interest_portion=interest,
            remaining_balance=balance,
            is_extra_payment=extra > 0,
            extra_amount=extra if extra > 0 else None,
        ))

        if state is InstallmentState.FINAL_PAYMENT:
            break

    if len(payments) < scenario.term_months:
        logger.debug(
            "Loan paid off early: %d of %d installments", len(payments), scenario.term_months
        )
    return payments


def principal_paid_percentage(scenario: LoanScenario, payment_number: int) -> Decimal:
    """Percentage (0-100) of principal repaid after the given installment."""
    schedule = generate_schedule(scenario)
    if payment_number >= len(schedule):
        return Decimal("100")
    if payment_number < 1:
        return Decimal("0")

    payment = schedule[payment_number - 1]
    paid = scenario.principal - payment.remaining_balance
    return (paid / scenario.principal * 100).quantize(FOUR_PLACES, ROUND_HALF_UP)


def payment_range_summary(
    scenario: LoanScenario,
    start_payment: int = 1,
    end_payment: int | None = None,
) -> PaymentRangeSummary:
    """Totals over installments start_payment..end_payment (inclusive)."""
    schedule = generate_schedule(scenario)
    end = end_payment or scenario.term_months

    start_index = max(0, start_payment - 1)
    end_index = min(len(schedule), end)
    in_range = schedule[start_index:end_index]

    total_principal = sum((p.principal_portion for p in in_range), Decimal("0"))
    total_interest = sum((p.interest_portion for p in in_range), Decimal("0"))

    return PaymentRangeSummary(
        payment_count=len(in_range),
        total_principal=round_currency(total_principal),
        total_interest=round_currency(total_interest),
        total_paid=round_currency(total_principal + total_interest),
    )


def yearly_summary(schedule: list[AmortizationPayment]) -> list[YearlyLoanSummary]:
    """Aggregate a schedule by calendar year of the installment date."""
    yearly: list[YearlyLoanSummary] = []
    year_principal = Decimal("0")
    year_interest = Decimal("0")
    year_paid = Decimal("0")

    for i, p in enumerate(schedule):
        year_principal += p.principal_portion
        year_interest += p.interest_portion
        year_paid += p.payment_amount

        is_last = i == len(schedule) - 1
        if is_last or schedule[i + 1].date.year != p.date.year:
            yearly.append(YearlyLoanSummary(
                year=p.date.year,
                principal=year_principal,
                interest=year_interest,
                total_paid=year_paid,
                ending_balance=p.remaining_balance,
            ))
            year_principal = Decimal("0")
            year_interest = Decimal("0")
            year_paid = Decimal("0")

    return yearly
