"""Normalisation of human-entered check-in/check-out dates."""
from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional, Tuple, Union

from .exceptions import UnparseableDateError

# Order matters: the first format that parses wins.
ACCEPTED_DATE_FORMATS = (
    "%B %d, %Y",  # March 27, 2025
    "%d-%m-%Y",  # 27-3-2025
    "%Y/%m/%d",  # 2025/3/27
    "%Y-%m-%d",  # 2025-03-27
    "%d %b %Y",  # 27 Mar 2025
)
TOKEN_FORMAT = "%m%d%Y"

DateInput = Union[str, date, None]


def parse_date(value: str) -> date:
    """Return the first interpretation of ``value`` among the accepted formats."""

    text = (value or "").strip()
    for fmt in ACCEPTED_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise UnparseableDateError(value)


def format_token(value: date) -> str:
    """Format a date as the fixed-width ``MMDDYYYY`` token used in search URLs."""

    return value.strftime(TOKEN_FORMAT)


def normalise_date(value: str) -> str:
    """Parse a free-text date and return its canonical token."""

    return format_token(parse_date(value))


def _coerce(value: DateInput) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_date(value)


def resolve_stay_dates(
    checkin: DateInput, checkout: DateInput, today: Optional[date] = None
) -> Tuple[date, date]:
    """Return ``(checkin, checkout)`` with defaults applied.

    A missing check-in falls back to ``today`` and a missing check-out to the
    day after check-in. Unparseable strings raise :class:`UnparseableDateError`
    rather than being defaulted.
    """

    checkin_date = _coerce(checkin) or today or date.today()
    checkout_date = _coerce(checkout) or checkin_date + timedelta(days=1)
    return checkin_date, checkout_date


__all__ = [
    "ACCEPTED_DATE_FORMATS",
    "format_token",
    "normalise_date",
    "parse_date",
    "resolve_stay_dates",
]
