import pytest
from datetime import date
from decimal import Decimal

from src.engine.errors import InvalidLoanParameters
from src.engine.payment import monthly_payment, loan_summary
from src.engine.rates import round_currency, to_monthly_rate


class TestMonthlyPayment:
    def test_standard_mortgage(self):
        """$100K at 12% EA for 30 years, against the float PMT formula."""
        pmt = monthly_payment(Decimal("100000"), Decimal("12"), 360)
        r = 1.12 ** (1 / 12) - 1
        expected = 100000 * r * (1 + r) ** 360 / ((1 + r) ** 360 - 1)
        assert abs(float(pmt) - expected) <= 0.01
        assert pmt == pmt.quantize(Decimal("0.01"))

    def test_single_installment(self):
        """One installment is principal plus one period's interest."""
        pmt = monthly_payment(Decimal("1000"), Decimal("12"), 1)
        expected = round_currency(Decimal("1000") * (1 + to_monthly_rate(Decimal("12"))))
        assert pmt == expected
        assert pmt == Decimal("1009.49")

    def test_higher_rate_higher_payment(self):
        low = monthly_payment(Decimal("50000"), Decimal("8"), 120)
        high = monthly_payment(Decimal("50000"), Decimal("15"), 120)
        assert high > low

    def test_vanishing_rate_falls_back_to_straight_line(self):
        pmt = monthly_payment(Decimal("1200"), Decimal("1E-30"), 12)
        assert pmt == Decimal("100.00")

    @pytest.mark.parametrize(
        "principal, rate, term",
        [
            (Decimal("0"), Decimal("12"), 360),
            (Decimal("-1000"), Decimal("12"), 360),
            (Decimal("1000"), Decimal("0"), 360),
            (Decimal("1000"), Decimal("-5"), 360),
            (Decimal("1000"), Decimal("12"), 0),
            (Decimal("1000"), Decimal("12"), -12),
        ],
    )
    def test_rejects_non_positive_inputs(self, principal, rate, term):
        with pytest.raises(InvalidLoanParameters):
            monthly_payment(principal, rate, term)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            monthly_payment(Decimal("1000"), Decimal("12"), 0)


class TestLoanSummary:
    def test_totals(self):
        summary = loan_summary(Decimal("100000"), Decimal("12"), 360, date(2025, 1, 1))
        assert summary.total_payment == summary.monthly_payment * 360
        assert summary.total_interest == summary.total_payment - Decimal("100000")
        assert summary.total_principal == Decimal("100000")
        assert summary.term_months == 360

    def test_payoff_date(self):
        summary = loan_summary(Decimal("10000"), Decimal("10"), 1, "2025-01-31")
        assert summary.payoff_date == date(2025, 2, 28)

    def test_invalid_term_not_coerced(self):
        with pytest.raises(InvalidLoanParameters):
            loan_summary(Decimal("10000"), Decimal("10"), 0, date(2025, 1, 1))
