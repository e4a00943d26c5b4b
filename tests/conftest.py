"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from tiny_desk.scraper.document import Document

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def concert_document() -> Document:
    return Document.from_html(load_fixture("sample_concert.html"))


@pytest.fixture
def archive_document() -> Document:
    return Document.from_html(load_fixture("sample_archive.html"))


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's .env / shell settings out of the tests."""
    for name in (
        "TINY_DESK_PROJECT_ROOT",
        "TINY_DESK_OUTPUT_DIR",
        "TINY_DESK_RENDERER",
        "TINY_DESK_DETAIL_TIMEOUT_MS",
        "TINY_DESK_ARCHIVE_TIMEOUT_MS",
        "TINY_DESK_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
