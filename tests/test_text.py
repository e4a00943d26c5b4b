from __future__ import annotations

import pytest

from tiny_desk.scraper.text import remove_date_substring, strip_quotes


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ('"Song Title"', "Song Title"),
        ("'Song'", "Song"),
        ("Plain", "Plain"),
        ('  "Padded"  ', "Padded"),
        ('"Only leading', "Only leading"),
        ("Only trailing'", "Only trailing"),
        ("Don't Stop", "Don't Stop"),
        ('""', ""),
        ("", ""),
    ],
)
def test_strip_quotes(raw: str, expected: str) -> None:
    assert strip_quotes(raw) == expected


@pytest.mark.parametrize("raw", ['"Song Title"', "'Song'", "Plain", "  x  "])
def test_strip_quotes_is_idempotent(raw: str) -> None:
    once = strip_quotes(raw)
    assert strip_quotes(once) == once


def test_remove_date_substring_strips_bullet() -> None:
    assert (
        remove_date_substring("Jan 1, 2023 • Great show", "Jan 1, 2023")
        == "Great show"
    )


def test_remove_date_substring_handles_mis_decoded_bullet() -> None:
    assert remove_date_substring("Jan 1, 2023 â€¢ Great show", "Jan 1, 2023") == (
        "Great show"
    )


def test_remove_date_substring_not_found_returns_trimmed_text() -> None:
    assert remove_date_substring("  Great show  ", "Jan 1, 2023") == "Great show"


def test_remove_date_substring_empty_date_text() -> None:
    assert remove_date_substring(" Jan 1, 2023 • Great show ", "") == (
        "Jan 1, 2023 • Great show"
    )


def test_remove_date_substring_only_first_occurrence() -> None:
    result = remove_date_substring("May 5 • Recorded May 5", "May 5")
    assert result == "Recorded May 5"
