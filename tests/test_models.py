"""Smoke tests for core data models."""

from __future__ import annotations

import dataclasses

import pytest

from tiny_desk.domain.models import (
    SHOW_NAME,
    ArchiveListing,
    ConcertRecord,
    Musician,
    Song,
)


def test_musician_defaults_to_no_instruments() -> None:
    musician = Musician(name="Solo Performer")
    assert musician.name == "Solo Performer"
    assert musician.instruments == ()


def test_concert_record_defaults() -> None:
    record = ConcertRecord(artist="Mon Laferte", source="https://example.com/1")
    assert record.show == SHOW_NAME
    assert record.date is None
    assert record.album is None
    assert record.description is None
    assert record.set_list == ()
    assert record.musicians == ()


def test_models_are_immutable() -> None:
    listing = ArchiveListing(title="A", url="/a", date="2023-01-01", teaser="t")
    with pytest.raises(dataclasses.FrozenInstanceError):
        listing.title = "B"  # type: ignore[misc]

    song = Song(song_number=1, title="Intro")
    with pytest.raises(dataclasses.FrozenInstanceError):
        song.song_number = 2  # type: ignore[misc]
