from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class LoanScenario:
    principal: Decimal
    annual_rate: Decimal  # EA rate in percent, e.g. Decimal("12") for 12%
    term_months: int
    start_date: date  # date of the first installment
    name: str | None = None
    currency: str = "USD"


@dataclass(frozen=True)
class ExtraPayment:
    """Additional principal paid on top of a regular installment."""
    payment_number: int  # 1-indexed installment
    amount: Decimal
    description: str | None = None


@dataclass(frozen=True)
class AmortizationPayment:
    payment_number: int
    date: date
    payment_amount: Decimal  # gross: monthly payment + extra
    principal_portion: Decimal
    interest_portion: Decimal
    remaining_balance: Decimal
    is_extra_payment: bool = False
    extra_amount: Decimal | None = None


@dataclass(frozen=True)
class LoanSummary:
    monthly_payment: Decimal
    total_principal: Decimal
    total_interest: Decimal
    total_payment: Decimal
    payoff_date: date
    term_months: int  # actual number of installments


@dataclass(frozen=True)
class LoanComparison:
    interest_rate: Decimal
    monthly_payment: Decimal
    total_interest: Decimal
    total_payment: Decimal


@dataclass(frozen=True)
class ExtraPaymentImpact:
    original_summary: LoanSummary
    new_summary: LoanSummary
    months_saved: int
    interest_saved: Decimal


@dataclass(frozen=True)
class PaymentRangeSummary:
    payment_count: int
    total_principal: Decimal
    total_interest: Decimal
    total_paid: Decimal


@dataclass(frozen=True)
class YearlyLoanSummary:
    year: int  # calendar year
    principal: Decimal
    interest: Decimal
    total_paid: Decimal
    ending_balance: Decimal
