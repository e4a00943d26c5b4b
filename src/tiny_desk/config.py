# tiny_desk/config.py

"""Shared configuration and environment setup."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

try:
    from dotenv import load_dotenv

    load_dotenv(override=True)
except ImportError:
    pass

DEFAULT_DETAIL_TIMEOUT_MS = 10_000
DEFAULT_ARCHIVE_TIMEOUT_MS = 15_000
RENDERERS = ("playwright", "http")


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime settings read from the environment."""

    project_root: Path
    output_dir: Path
    renderer: str = "playwright"
    detail_timeout_ms: int = DEFAULT_DETAIL_TIMEOUT_MS
    archive_timeout_ms: int = DEFAULT_ARCHIVE_TIMEOUT_MS
    log_level: str = "INFO"

    @property
    def failures_dir(self) -> Path:
        return self.project_root / "tests" / "fixtures" / "failures"


def get_project_root() -> Path:
    """Return the project root directory.

    Prefers TINY_DESK_PROJECT_ROOT env var. Falls back to current working directory.
    """
    if root := os.getenv("TINY_DESK_PROJECT_ROOT"):
        return Path(root).resolve()
    return Path.cwd()


def load_settings() -> Settings:
    """Build Settings from TINY_DESK_* environment variables."""
    root = get_project_root()

    output_dir = Path(os.getenv("TINY_DESK_OUTPUT_DIR") or root)

    renderer = os.getenv("TINY_DESK_RENDERER", "playwright").strip().lower()
    if renderer not in RENDERERS:
        msg = f"TINY_DESK_RENDERER must be one of {RENDERERS}, got {renderer!r}."
        raise ValueError(msg)

    return Settings(
        project_root=root,
        output_dir=output_dir,
        renderer=renderer,
        detail_timeout_ms=_int_env(
            "TINY_DESK_DETAIL_TIMEOUT_MS", DEFAULT_DETAIL_TIMEOUT_MS
        ),
        archive_timeout_ms=_int_env(
            "TINY_DESK_ARCHIVE_TIMEOUT_MS", DEFAULT_ARCHIVE_TIMEOUT_MS
        ),
        log_level=os.getenv("TINY_DESK_LOG_LEVEL", "INFO").upper(),
    )


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        msg = f"{name} must be an integer, got {raw!r}."
        raise ValueError(msg) from exc
    if value <= 0:
        msg = f"{name} must be positive."
        raise ValueError(msg)
    return value
