"""EA (effective annual) to monthly rate conversion and currency rounding.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

TWO_PLACES = Decimal("0.01")
ONE_TWELFTH = Decimal("1") / Decimal("12")


def round_currency(value: Decimal) -> Decimal:
    """Round to cents, half-up."""
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)


def to_monthly_rate(annual_rate_percent: Decimal) -> Decimal:
    """Convert an EA rate in percent to the equivalent monthly rate.

    monthly = (1 + EA)^(1/12) - 1

    The EA rate already includes compounding, so twelve monthly periods at
    the returned rate reproduce it exactly. Dividing by 12 would overstate it.
    """
    return (1 + annual_rate_percent / 100) ** ONE_TWELFTH - 1
