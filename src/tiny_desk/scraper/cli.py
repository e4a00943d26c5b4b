# src/tiny_desk/scraper/cli.py

"""Command line entry points.

    tiny-desk-concert <URL>
    tiny-desk-archive <YEAR> <MONTH> [DAY]
    tiny-desk-capture <URL> <TEST_NAME>
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import Callable

import httpx

from tiny_desk.config import Settings, load_settings
from tiny_desk.domain.models import ArchiveListing, ConcertRecord
from tiny_desk.scraper.archive import (
    ARCHIVE_CONTAINER,
    build_archive_url,
    extract_listings,
)
from tiny_desk.scraper.dates import last_day_of_month, validate_day_in_range
from tiny_desk.scraper.detail import DETAIL_CONTAINER, build_record, extract_detail
from tiny_desk.scraper.diagnose import capture_failure
from tiny_desk.scraper.render import RenderError, make_renderer
from tiny_desk.scraper.storage import save_listings, save_record

logger = logging.getLogger(__name__)

YEAR_RE = re.compile(r"^\d{4}$")
MONTH_RE = re.compile(r"^(0[1-9]|1[0-2])$")
DAY_RE = re.compile(r"^(0[1-9]|[12][0-9]|3[01])$")

TEASER_PREVIEW_CHARS = 100


# ---------------------------------------------------------------------------
# Concert detail
# ---------------------------------------------------------------------------


def main_concert(argv: list[str] | None = None) -> None:
    """Scrape one concert page into `<artist>_info.json`."""
    parser = argparse.ArgumentParser(
        prog="tiny-desk-concert",
        description="Extract set list and musicians from a Tiny Desk concert page.",
    )
    parser.add_argument("url", help="URL of the concert page.")
    args = parser.parse_args(argv)

    settings = load_settings()
    _configure_logging(settings.log_level)

    try:
        _cmd_concert(args.url, settings)
    except RenderError as exc:
        logger.error("Error scraping %s: %s", exc.url or args.url, exc)
        sys.exit(1)
    except ValueError as exc:
        # e.g. the page title yields no usable artist name
        logger.error("Error processing %s: %s", args.url, exc)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user. Exiting.")
        sys.exit(1)


def _cmd_concert(url: str, settings: Settings) -> None:
    with make_renderer(settings) as renderer:
        page = renderer.render(
            url,
            wait_for=DETAIL_CONTAINER,
            timeout_ms=settings.detail_timeout_ms,
        )

    record = build_record(extract_detail(page.document), title=page.title, url=url)
    _log_record(record)

    path = save_record(settings.output_dir, record)
    logger.info("Information saved to %s", path)


def _log_record(record: ConcertRecord) -> None:
    logger.info("Artist: %s", record.artist)
    logger.info("Story Title: %s", record.album or "(none found)")
    logger.info("Date: %s", record.date or "(none found)")
    if not record.description:
        logger.info("No description found")

    if record.set_list:
        logger.info("Set list:")
        for song in record.set_list:
            logger.info("%s. %s", song.song_number, song.title)
    else:
        logger.info("No set list found")

    if record.musicians:
        logger.info("Musicians:")
        for index, musician in enumerate(record.musicians, start=1):
            if musician.instruments:
                logger.info(
                    "%s. %s (%s)", index, musician.name, ", ".join(musician.instruments)
                )
            else:
                logger.info("%s. %s", index, musician.name)
    else:
        logger.info("No musicians list found")


# ---------------------------------------------------------------------------
# Archive listing
# ---------------------------------------------------------------------------


def main_archive(argv: list[str] | None = None) -> None:
    """Scrape a monthly archive page into `listing_<year>_<month>[_<day>].json`."""
    parser = _build_archive_parser()
    args = parser.parse_args(argv)

    if args.day is not None and not validate_day_in_range(
        int(args.year), int(args.month), int(args.day)
    ):
        last_day = last_day_of_month(int(args.year), int(args.month))
        parser.error(
            f"Invalid day: {args.day}. For {args.month}/{args.year}, "
            f"days must be between 1 and {last_day}"
        )

    settings = load_settings()
    _configure_logging(settings.log_level)

    try:
        _cmd_archive(args.year, args.month, args.day, settings)
    except RenderError as exc:
        logger.error("Error scraping the archive: %s", exc)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user. Exiting.")
        sys.exit(1)


def _build_archive_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tiny-desk-archive",
        description="List Tiny Desk concerts from the monthly archive.",
        epilog="Example: tiny-desk-archive 2023 01 15",
    )
    parser.add_argument(
        "year",
        type=_pattern_arg(YEAR_RE, "Year must be in YYYY format (e.g., 2023)"),
        help="Four digit year.",
    )
    parser.add_argument(
        "month",
        type=_pattern_arg(MONTH_RE, "Month must be in MM format (e.g., 01 for January)"),
        help="Two digit month.",
    )
    parser.add_argument(
        "day",
        nargs="?",
        default=None,
        type=_pattern_arg(DAY_RE, "Day must be in DD format (e.g., 01 for the 1st)"),
        help="Two digit day (default: last day of the month).",
    )
    return parser


def _pattern_arg(pattern: re.Pattern[str], message: str) -> Callable[[str], str]:
    def check(value: str) -> str:
        if not pattern.match(value):
            raise argparse.ArgumentTypeError(message)
        return value

    return check


def _cmd_archive(year: str, month: str, day: str | None, settings: Settings) -> None:
    url = build_archive_url(year, month, day)

    with make_renderer(settings) as renderer:
        page = renderer.render(
            url,
            wait_for=ARCHIVE_CONTAINER,
            timeout_ms=settings.archive_timeout_ms,
        )

    listings = extract_listings(page.document)

    if day:
        display_date = f"{month}/{day}/{year}"
    else:
        last_day = last_day_of_month(int(year), int(month))
        display_date = f"{month}/{last_day:02d}/{year} (last day of month)"
    logger.info("Found %s Tiny Desk Concerts for %s", len(listings), display_date)

    if not listings:
        logger.info("No Tiny Desk Concerts found for this period")
        return

    _log_listings(listings)
    path = save_listings(settings.output_dir, listings, year=year, month=month, day=day)
    logger.info("Listings saved to %s", path)


def _log_listings(listings: list[ArchiveListing]) -> None:
    for index, listing in enumerate(listings, start=1):
        logger.info("%s. %s (%s)", index, listing.title, listing.date)
        if listing.teaser:
            teaser = listing.teaser
            if len(teaser) > TEASER_PREVIEW_CHARS:
                teaser = teaser[:TEASER_PREVIEW_CHARS] + "..."
            logger.info("   %s", teaser)
        logger.info("   URL: %s", listing.url)


# ---------------------------------------------------------------------------
# Failure capture
# ---------------------------------------------------------------------------


def main_capture(argv: list[str] | None = None) -> None:
    """Save a concert page's HTML as a regression fixture and report on it."""
    parser = argparse.ArgumentParser(
        prog="tiny-desk-capture",
        description="Save a concert page that fails to parse for regression tests.",
    )
    parser.add_argument("url", help="URL of the concert page.")
    parser.add_argument("test_name", help="File name (without .html) for the fixture.")
    args = parser.parse_args(argv)

    settings = load_settings()
    _configure_logging(settings.log_level)

    try:
        capture_failure(args.url, args.test_name, settings.failures_dir)
    except ValueError as exc:
        parser.error(str(exc))
    except httpx.HTTPError as exc:
        logger.error("Failed to fetch %s: %s", args.url, exc)
        sys.exit(1)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


if __name__ == "__main__":
    # python -m tiny_desk.scraper.cli https://www.npr.org/2023/01/30/...
    main_concert()
