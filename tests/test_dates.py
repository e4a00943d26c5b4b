from __future__ import annotations

import pytest

from tiny_desk.scraper.dates import last_day_of_month, validate_day_in_range


@pytest.mark.parametrize(
    ("year", "month", "expected"),
    [
        (2024, 2, 29),
        (2023, 2, 28),
        (2000, 2, 29),
        (1900, 2, 28),
        (2023, 1, 31),
        (2023, 4, 30),
        (1999, 4, 30),
        (2023, 12, 31),
    ],
)
def test_last_day_of_month(year: int, month: int, expected: int) -> None:
    assert last_day_of_month(year, month) == expected


@pytest.mark.parametrize("month", [0, 13])
def test_last_day_of_month_rejects_bad_month(month: int) -> None:
    with pytest.raises(ValueError):
        last_day_of_month(2023, month)


def test_validate_day_in_range() -> None:
    assert validate_day_in_range(2024, 2, 29) is True
    assert validate_day_in_range(2023, 2, 29) is False
    assert validate_day_in_range(2023, 4, 31) is False
    assert validate_day_in_range(2023, 1, 1) is True
    assert validate_day_in_range(2023, 1, 0) is False
