# src/tiny_desk/scraper/dates.py

from __future__ import annotations

from datetime import date, timedelta


def last_day_of_month(year: int, month: int) -> int:
    """Return the number of days in `month` of `year`.

    Computed as the day before the first of the following month, so leap
    years come for free.
    """
    if not 1 <= month <= 12:
        msg = f"month must be in 1..12, got {month}."
        raise ValueError(msg)

    next_year, next_month = (year + 1, 1) if month == 12 else (year, month + 1)
    return (date(next_year, next_month, 1) - timedelta(days=1)).day


def validate_day_in_range(year: int, month: int, day: int) -> bool:
    """True if `day` exists in the given month."""
    return 1 <= day <= last_day_of_month(year, month)
