"""Calendar month arithmetic and payoff date resolution.

Pure functions apart from the today() fallback in parse_date. No I/O.
"""

import calendar
import logging
from datetime import date, datetime

logger = logging.getLogger(__name__)


def add_months(value: date, months: int) -> date:
    """Add whole calendar months, clamping the day to the target month's length.

    Jan 31 + 1 month is Feb 28 (Feb 29 in a leap year), never early March.
    """
    index = value.month - 1 + months
    year = value.year + index // 12
    month = index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def _manual_parse(value: str) -> date | None:
    parts = value.strip().split("-")
    if len(parts) != 3:
        return None
    try:
        year, month, day = (int(p) for p in parts)
        return date(year, month, day)
    except ValueError:
        return None


def parse_date(value: date | datetime | str) -> date:
    """Best-effort date parsing that never raises.

    Order: ISO parse, then a manual YYYY-MM-DD split (accepts unpadded parts
    such as "2025-1-5"), then today's date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    try:
        return datetime.fromisoformat(value.strip()).date()
    except (ValueError, AttributeError):
        pass

    parsed = _manual_parse(value) if isinstance(value, str) else None
    if parsed is not None:
        return parsed

    logger.warning("Unparseable start date %r, falling back to today", value)
    return date.today()


def payoff_date(start_date: date | datetime | str, term_months: int) -> date:
    """Date of the final payment: start_date plus term_months calendar months."""
    return add_months(parse_date(start_date), term_months)
