"""Interest rate comparison for a fixed principal and term.

Pure functions. No I/O. Only level-payment totals are computed; no schedules.
"""

from collections.abc import Iterable
from decimal import Decimal

from src.engine.payment import monthly_payment
from src.models.loan import LoanComparison, LoanScenario


def compare_interest_rates(
    principal: Decimal,
    term_months: int,
    interest_rates: Iterable[Decimal],
) -> list[LoanComparison]:
    """Payment totals per EA rate, sorted by rate ascending."""
    comparisons = []
    for rate in interest_rates:
        pmt = monthly_payment(principal, rate, term_months)
        total_payment = pmt * term_months
        comparisons.append(LoanComparison(
            interest_rate=rate,
            monthly_payment=pmt,
            total_interest=total_payment - principal,
            total_payment=total_payment,
        ))

    return sorted(comparisons, key=lambda c: c.interest_rate)


def generate_loan_comparisons(
    scenario: LoanScenario,
    candidate_rates: Iterable[Decimal] = (),
) -> list[LoanComparison]:
    """Compare candidate rates against the scenario's own rate.

    The scenario rate is always included exactly once. Rates that are
    numerically equal (e.g. 12 and 12.0) count as duplicates.
    """
    unique_rates: list[Decimal] = []
    seen: set[Decimal] = set()
    for rate in [scenario.annual_rate, *candidate_rates]:
        if rate not in seen:
            seen.add(rate)
            unique_rates.append(rate)

    return compare_interest_rates(scenario.principal, scenario.term_months, unique_rates)
