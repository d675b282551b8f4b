"""CLI for running a loan simulation locally and printing a terminal report.

Usage:
    python -m src.cli 100000 12 360 --start 2025-01-31
    python -m src.cli 10000 10 12 --extra 1:2000 --extra 6:500 --compare 8 --compare 14
    python -m src.cli 250000 9.5 240 --yearly
"""

import argparse
import logging
import sys
from datetime import date
from decimal import Decimal, InvalidOperation

from src.config import settings
from src.engine.comparison import generate_loan_comparisons
from src.engine.dates import parse_date
from src.engine.errors import InvalidLoanParameters
from src.engine.impact import extra_payment_impact
from src.engine.schedule import generate_schedule, yearly_summary
from src.models.loan import ExtraPayment, LoanScenario


def _money(v: Decimal) -> str:
    return f"${v:,.2f}"


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


def _parse_extra(raw: str) -> ExtraPayment:
    """Parse N:AMOUNT into an ExtraPayment."""
    try:
        number, amount = raw.split(":", 1)
        return ExtraPayment(payment_number=int(number), amount=Decimal(amount))
    except (ValueError, InvalidOperation):
        raise argparse.ArgumentTypeError(f"expected N:AMOUNT, got {raw!r}")


def print_summary(impact) -> None:
    orig = impact.original_summary
    new = impact.new_summary
    _header("Loan Summary")
    print(f"  Monthly Payment:   {_money(orig.monthly_payment)}")
    print(f"  Total Payment:     {_money(orig.total_payment)}")
    print(f"  Total Interest:    {_money(orig.total_interest)}")
    print(f"  Payoff Date:       {orig.payoff_date.isoformat()}")
    print(f"  Term:              {orig.term_months} months")

    if impact.months_saved or impact.interest_saved:
        _header("With Extra Payments")
        print(f"  Total Payment:     {_money(new.total_payment)}")
        print(f"  Total Interest:    {_money(new.total_interest)}")
        print(f"  Payoff Date:       {new.payoff_date.isoformat()}")
        print(f"  Term:              {new.term_months} months")
        print(f"  Months Saved:      {impact.months_saved}")
        print(f"  Interest Saved:    {_money(impact.interest_saved)}")


def print_comparisons(rows, base_rate: Decimal) -> None:
    _header("Interest Rate Comparison")
    print(f"  {'Rate':>8}  {'Monthly':>14}  {'Interest':>16}  {'Total':>16}")
    for c in rows:
        marker = "*" if c.interest_rate == base_rate else " "
        print(
            f" {marker}{c.interest_rate:>7}%  {_money(c.monthly_payment):>14}"
            f"  {_money(c.total_interest):>16}  {_money(c.total_payment):>16}"
        )


def print_yearly(rows) -> None:
    _header("Yearly Projection")
    print(f"  {'Year':>6}  {'Principal':>16}  {'Interest':>14}  {'Balance':>16}")
    for y in rows:
        print(
            f"  {y.year:>6}  {_money(y.principal):>16}  {_money(y.interest):>14}"
            f"  {_money(y.ending_balance):>16}"
        )


def print_schedule(payments) -> None:
    _header("Amortization Schedule")
    print(f"  {'#':>4}  {'Date':>10}  {'Payment':>13}  {'Principal':>13}  {'Interest':>12}  {'Balance':>15}")
    for p in payments:
        extra = " +extra" if p.is_extra_payment else ""
        print(
            f"  {p.payment_number:>4}  {p.date.isoformat():>10}  {_money(p.payment_amount):>13}"
            f"  {_money(p.principal_portion):>13}  {_money(p.interest_portion):>12}"
            f"  {_money(p.remaining_balance):>15}{extra}"
        )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Loan amortization simulator")
    parser.add_argument("principal", type=Decimal, help="Loan amount")
    parser.add_argument("rate", type=Decimal, help="EA interest rate in percent (e.g. 12 for 12%%)")
    parser.add_argument("term", type=int, help="Term in months")
    parser.add_argument("--start", default=None, help="First installment date, YYYY-MM-DD (default: today)")
    parser.add_argument("--extra", action="append", type=_parse_extra, default=[],
                        help="Extra payment as N:AMOUNT (repeatable)")
    parser.add_argument("--compare", action="append", type=Decimal, default=[],
                        help="Additional EA rate to compare (repeatable)")
    parser.add_argument("--yearly", action="store_true", help="Print yearly totals instead of every installment")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level="DEBUG" if args.verbose else settings.log_level)

    if args.term > settings.max_term_months:
        parser.error(f"term may not exceed {settings.max_term_months} months")

    scenario = LoanScenario(
        principal=args.principal,
        annual_rate=args.rate,
        term_months=args.term,
        start_date=parse_date(args.start) if args.start else date.today(),
    )

    try:
        impact = extra_payment_impact(scenario, args.extra)
        payments = generate_schedule(scenario, args.extra)
        comparisons = generate_loan_comparisons(scenario, args.compare)
    except InvalidLoanParameters as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_summary(impact)
    if len(comparisons) > 1:
        print_comparisons(comparisons, scenario.annual_rate)
    if args.yearly:
        print_yearly(yearly_summary(payments))
    else:
        print_schedule(payments)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
