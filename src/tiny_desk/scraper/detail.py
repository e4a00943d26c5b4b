# src/tiny_desk/scraper/detail.py

"""Parse a single concert page: description, set list, musicians."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from bs4 import Tag

from tiny_desk.domain.models import (
    SHOW_NAME,
    ConcertDetail,
    ConcertRecord,
    Musician,
    Song,
)
from tiny_desk.scraper.document import Document
from tiny_desk.scraper.text import strip_quotes

logger = logging.getLogger(__name__)

# Present once the concert page has rendered its body text.
DETAIL_CONTAINER = "#storytext"

SET_LIST_MARKER = "SET LIST"
MUSICIANS_MARKER = "MUSICIANS"

DATE_TIME = ".dateblock time"
ALBUM_HEADING = ".storytitle h1"
LIST_TAGS = ("ul", "ol")


# ---------------------------------------------------------------------------
# Paragraph classification
# ---------------------------------------------------------------------------


class DescriptionState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


class DescriptionLatch:
    """One-way switch: description paragraphs are collected until the first marker."""

    def __init__(self) -> None:
        self.state = DescriptionState.OPEN

    @property
    def is_open(self) -> bool:
        return self.state is DescriptionState.OPEN

    def close(self) -> None:
        self.state = DescriptionState.CLOSED


@dataclass(slots=True)
class ParagraphSections:
    """Result of walking the paragraphs of the concert body."""

    description: str | None = None
    set_list_marker: Tag | None = None
    musicians_marker: Tag | None = None
    ignored: list[Tag] = field(default_factory=list)


def classify_paragraphs(document: Document, paragraphs: Iterable[Tag]) -> ParagraphSections:
    """Split paragraphs into description, the two marker paragraphs and the rest.

    A paragraph containing both markers is recorded as both; each section
    then reads the same sibling list.
    """
    sections = ParagraphSections()
    latch = DescriptionLatch()
    description_parts: list[str] = []

    for paragraph in paragraphs:
        text = document.text(paragraph).strip()
        if not text:
            continue

        is_marker = False
        if SET_LIST_MARKER in text:
            sections.set_list_marker = paragraph
            is_marker = True
        if MUSICIANS_MARKER in text:
            sections.musicians_marker = paragraph
            is_marker = True

        if is_marker:
            latch.close()
        elif latch.is_open:
            description_parts.append(text)
        else:
            sections.ignored.append(paragraph)

    if description_parts:
        sections.description = "\n\n".join(description_parts)
    return sections


def sibling_list_items(document: Document, marker: Tag | None) -> list[str]:
    """Items of the list element directly after `marker`, quote-stripped.

    Returns an empty list when there is no marker or the next element is
    not a list.
    """
    if marker is None:
        return []

    sibling = document.next_sibling(marker)
    if sibling is None or document.tag_name(sibling) not in LIST_TAGS:
        return []

    return [strip_quotes(document.text(li)) for li in document.find_all("li", sibling)]


# ---------------------------------------------------------------------------
# Line parsing
# ---------------------------------------------------------------------------


def parse_musician(line: str) -> Musician:
    """Parse 'Name: instrument, instrument' into a Musician.

    Lines without exactly one colon are kept whole as the name.
    """
    parts = line.split(":")
    if len(parts) != 2:
        return Musician(name=line.strip())

    name, instruments = parts
    tokens = tuple(
        token.strip() for token in instruments.strip().split(", ") if token.strip()
    )
    return Musician(name=name.strip(), instruments=tokens)


def build_set_list(lines: Iterable[str]) -> tuple[Song, ...]:
    return tuple(
        Song(song_number=number, title=title.strip())
        for number, title in enumerate(lines, start=1)
    )


def artist_from_title(title: str) -> str:
    """'Artist: Tiny Desk Concert : NPR' -> 'Artist'."""
    return title.split(":", 1)[0].strip()


# ---------------------------------------------------------------------------
# Page level
# ---------------------------------------------------------------------------


def extract_detail(document: Document) -> ConcertDetail:
    """Read date, album, description, set list and musicians from a concert page."""
    container = document.find(DETAIL_CONTAINER)
    if container is None:
        logger.warning("No %s container found; returning empty detail.", DETAIL_CONTAINER)
        paragraphs: list[Tag] = []
    else:
        paragraphs = document.find_all("p", container)

    sections = classify_paragraphs(document, paragraphs)

    set_list_lines = sibling_list_items(document, sections.set_list_marker)
    musician_lines = sibling_list_items(document, sections.musicians_marker)

    if sections.set_list_marker is not None and not set_list_lines:
        logger.info("'%s' marker found but no list follows it.", SET_LIST_MARKER)
    if sections.musicians_marker is not None and not musician_lines:
        logger.info("'%s' marker found but no list follows it.", MUSICIANS_MARKER)

    return ConcertDetail(
        date=_parse_date(document),
        album=_parse_album(document),
        description=sections.description,
        set_list=build_set_list(set_list_lines),
        musicians=tuple(parse_musician(line) for line in musician_lines),
    )


def build_record(detail: ConcertDetail, *, title: str, url: str) -> ConcertRecord:
    """Combine page detail with the page title and requested URL."""
    return ConcertRecord(
        artist=artist_from_title(title),
        source=url.strip(),
        show=SHOW_NAME,
        date=detail.date,
        album=detail.album,
        description=detail.description,
        set_list=detail.set_list,
        musicians=detail.musicians,
    )


def _parse_date(document: Document) -> str | None:
    time_el = document.find(DATE_TIME)
    if time_el is None:
        return None
    return document.attribute(time_el, "datetime") or None


def _parse_album(document: Document) -> str | None:
    heading = document.find(ALBUM_HEADING)
    if heading is None:
        return None
    return document.text(heading).strip() or None
