# src/tiny_desk/scraper/storage.py

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from tiny_desk.domain.models import ArchiveListing, ConcertRecord, Musician, Song


def _song_to_dict(song: Song) -> dict[str, Any]:
    return {
        "songNumber": song.song_number,
        "title": song.title,
    }


def _musician_to_dict(musician: Musician) -> dict[str, Any]:
    return {
        "name": musician.name,
        "instruments": list(musician.instruments),
    }


def listing_to_dict(listing: ArchiveListing) -> dict[str, Any]:
    return {
        "title": listing.title,
        "url": listing.url,
        "date": listing.date,
        "teaser": listing.teaser,
    }


def record_to_dict(record: ConcertRecord) -> dict[str, Any]:
    return {
        "artist": record.artist,
        "source": record.source,
        "show": record.show,
        "date": record.date,
        "album": record.album,
        "description": record.description,
        "setList": [_song_to_dict(s) for s in record.set_list],
        "musicians": [_musician_to_dict(m) for m in record.musicians],
    }


def concert_filename(artist: str) -> str:
    """'Mon Laferte!' -> 'mon_laferte_info.json'."""
    sanitized = re.sub(r"[^\w\s]", "", artist)
    sanitized = re.sub(r"\s+", "_", sanitized.strip()).lower()
    if not sanitized:
        msg = f"Cannot build a file name from artist {artist!r}."
        raise ValueError(msg)
    return f"{sanitized}_info.json"


def listing_filename(year: str, month: str, day: str | None = None) -> str:
    if day:
        return f"listing_{year}_{month}_{day}.json"
    return f"listing_{year}_{month}.json"


def write_json(path: Path, data: Any) -> Path:
    """Write `data` as pretty-printed UTF-8 JSON, replacing any existing file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
        f.write("\n")
    return path


def save_record(output_dir: Path, record: ConcertRecord) -> Path:
    """Write a concert record to `<output_dir>/<artist>_info.json`."""
    return write_json(output_dir / concert_filename(record.artist), record_to_dict(record))


def save_listings(
    output_dir: Path,
    listings: list[ArchiveListing],
    *,
    year: str,
    month: str,
    day: str | None = None,
) -> Path:
    """Write archive listings to `<output_dir>/listing_<year>_<month>[_<day>].json`."""
    path = output_dir / listing_filename(year, month, day)
    return write_json(path, [listing_to_dict(item) for item in listings])
