# src/tiny_desk/scraper/archive.py

"""Parse a monthly archive page into ArchiveListing entries."""

from __future__ import annotations

import logging

from tiny_desk.domain.models import ArchiveListing
from tiny_desk.scraper.dates import last_day_of_month
from tiny_desk.scraper.document import Document
from tiny_desk.scraper.text import remove_date_substring

logger = logging.getLogger(__name__)

ARCHIVE_URL = "https://www.npr.org/series/tiny-desk-concerts/archive"

# Present once the archive page has rendered its listings.
ARCHIVE_CONTAINER = "#main-section"

LISTING_ITEM = "article.item"
LISTING_TITLE_LINK = ".title a"
LISTING_TIME = "time"
LISTING_TEASER = ".teaser"


def build_archive_url(year: str, month: str, day: str | None = None) -> str:
    """Build the archive URL for a date; no day means the last of the month."""
    if day is None:
        day = f"{last_day_of_month(int(year), int(month)):02d}"
        logger.info("No day specified, using last day of month: %s", day)
    return f"{ARCHIVE_URL}?date={month}-{day}-{year}"


def extract_listings(document: Document) -> list[ArchiveListing]:
    """Return one ArchiveListing per complete listing item, in page order.

    Items lacking a title link, a time element or a teaser are skipped.
    """
    listings: list[ArchiveListing] = []

    for index, item in enumerate(document.find_all(LISTING_ITEM)):
        link = document.find(LISTING_TITLE_LINK, item)
        time_el = document.find(LISTING_TIME, item)
        teaser_el = document.find(LISTING_TEASER, item)

        if link is None or time_el is None or teaser_el is None:
            logger.debug(
                "Skipping listing item %s (title=%s, time=%s, teaser=%s).",
                index,
                link is not None,
                time_el is not None,
                teaser_el is not None,
            )
            continue

        date_text = document.text(time_el).strip()
        teaser = remove_date_substring(document.text(teaser_el), date_text)

        listings.append(
            ArchiveListing(
                title=document.text(link).strip(),
                url=document.attribute(link, "href") or "",
                date=document.attribute(time_el, "datetime") or "",
                teaser=teaser,
            ),
        )

    return listings
