"""Fixed monthly payment and no-extras loan summary.

Pure functions: Decimal in, dataclass out. No I/O.
"""

from datetime import date, datetime
from decimal import Decimal

from src.engine.dates import payoff_date
from src.engine.errors import InvalidLoanParameters
from src.engine.rates import round_currency, to_monthly_rate
from src.models.loan import LoanSummary


def monthly_payment(principal: Decimal, annual_rate: Decimal, term_months: int) -> Decimal:
    """Calculate the level monthly payment for an EA rate in percent.

    M = P * [r(1+r)^n] / [(1+r)^n - 1], r being the monthly rate derived
    from the EA rate. Falls back to P / n when r is zero.
    """
    if principal <= 0 or annual_rate <= 0 or term_months <= 0:
        raise InvalidLoanParameters(
            "Principal, interest rate, and term must be positive numbers "
            f"(got principal={principal}, rate={annual_rate}, term={term_months})"
        )

    r = to_monthly_rate(annual_rate)
    if r == 0:
        return round_currency(principal / term_months)

    factor = (1 + r) ** term_months
    payment = principal * (r * factor) / (factor - 1)
    return round_currency(payment)


def loan_summary(
    principal: Decimal,
    annual_rate: Decimal,
    term_months: int,
    start_date: date | datetime | str,
) -> LoanSummary:
    """Summary of the loan assuming every installment is the level payment."""
    pmt = monthly_payment(principal, annual_rate, term_months)
    total_payment = pmt * term_months

    return LoanSummary(
        monthly_payment=pmt,
        total_principal=principal,
        total_interest=total_payment - principal,
        total_payment=total_payment,
        payoff_date=payoff_date(start_date, term_months),
        term_months=term_months,
    )
