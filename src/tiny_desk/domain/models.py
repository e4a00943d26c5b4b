# tiny_desk/domain/models.py

"""Core domain models for concert archive listings and concert pages."""

from __future__ import annotations

from dataclasses import dataclass

SHOW_NAME = "Tiny Desk Concerts"


@dataclass(frozen=True, slots=True)
class ArchiveListing:
    """One entry on a monthly archive page."""

    title: str
    url: str
    date: str  # verbatim `datetime` attribute, e.g. "2023-01-31"
    teaser: str


@dataclass(frozen=True, slots=True)
class Song:
    """A set list entry. `song_number` is its 1-based position."""

    song_number: int
    title: str


@dataclass(frozen=True, slots=True)
class Musician:
    name: str
    instruments: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ConcertDetail:
    """Everything read from a concert page body.

    Artist, source and show are not part of the page body; see ConcertRecord.
    """

    date: str | None = None
    album: str | None = None
    description: str | None = None
    set_list: tuple[Song, ...] = ()
    musicians: tuple[Musician, ...] = ()


@dataclass(frozen=True, slots=True)
class ConcertRecord:
    """A single concert as written to `<artist>_info.json`."""

    artist: str
    source: str
    show: str = SHOW_NAME
    date: str | None = None
    album: str | None = None
    description: str | None = None
    set_list: tuple[Song, ...] = ()
    musicians: tuple[Musician, ...] = ()
