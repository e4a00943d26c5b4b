# src/tiny_desk/scraper/diagnose.py

"""Save a concert page that did not parse well, for regression tests.

The saved HTML lands in tests/fixtures/failures/ and is picked up by the
regression test automatically.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from tiny_desk.scraper.client import ScraperClient
from tiny_desk.scraper.detail import (
    ALBUM_HEADING,
    DATE_TIME,
    MUSICIANS_MARKER,
    SET_LIST_MARKER,
    build_record,
    extract_detail,
)
from tiny_desk.scraper.document import Document

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TemplateReport:
    """Which parts of the concert template a page contains."""

    has_title: bool
    has_album: bool
    has_date: bool
    has_set_list: bool
    has_musicians: bool

    @property
    def is_complete(self) -> bool:
        return all(
            (
                self.has_title,
                self.has_album,
                self.has_date,
                self.has_set_list,
                self.has_musicians,
            )
        )


def analyze_html(html: str) -> TemplateReport:
    document = Document.from_html(html)
    paragraph_texts = [document.text(p) for p in document.find_all("p")]

    return TemplateReport(
        has_title=document.exists("title"),
        has_album=document.exists(ALBUM_HEADING),
        has_date=document.exists(DATE_TIME),
        has_set_list=any(SET_LIST_MARKER in t for t in paragraph_texts),
        has_musicians=any(MUSICIANS_MARKER in t for t in paragraph_texts),
    )


def capture_failure(
    url: str,
    test_name: str,
    failures_dir: Path,
    *,
    client: ScraperClient | None = None,
) -> tuple[Path, TemplateReport]:
    """Fetch `url`, store it as `<failures_dir>/<test_name>.html` and analyze it.

    Raises:
        httpx.HTTPError: if the page could not be fetched.
    """
    if not test_name.strip() or Path(test_name).name != test_name:
        msg = f"test_name must be a plain file name, got {test_name!r}."
        raise ValueError(msg)

    logger.info("Fetching HTML from %s...", url)
    if client is None:
        with ScraperClient() as own_client:
            html = own_client.fetch_html(url)
    else:
        html = client.fetch_html(url)

    failures_dir.mkdir(parents=True, exist_ok=True)
    path = failures_dir / f"{test_name}.html"
    path.write_text(html, encoding="utf-8")
    logger.info("Saved HTML to %s for regression testing.", path)

    report = analyze_html(html)
    logger.info("HTML analysis results:")
    logger.info("  - Has title: %s", report.has_title)
    logger.info("  - Has story title: %s", report.has_album)
    logger.info("  - Has date: %s", report.has_date)
    logger.info("  - Has set list section: %s", report.has_set_list)
    logger.info("  - Has musicians section: %s", report.has_musicians)

    document = Document.from_html(html)
    record = build_record(extract_detail(document), title=document.title, url=url)
    logger.info(
        "Extracted %s songs and %s musicians for %r.",
        len(record.set_list),
        len(record.musicians),
        record.artist,
    )

    if not report.is_complete:
        logger.info("Missing required HTML elements - structural issue.")
    elif not record.set_list or not record.musicians:
        logger.info("Has all required elements - likely a content parsing issue.")
    else:
        logger.info("Page parsed fully; this may not be a failure case.")

    return path, report
