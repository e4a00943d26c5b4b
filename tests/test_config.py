from __future__ import annotations

from pathlib import Path

import pytest

from tiny_desk.config import (
    DEFAULT_ARCHIVE_TIMEOUT_MS,
    DEFAULT_DETAIL_TIMEOUT_MS,
    load_settings,
)


def test_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)

    settings = load_settings()

    assert settings.project_root == tmp_path.resolve()
    assert settings.output_dir == tmp_path.resolve()
    assert settings.renderer == "playwright"
    assert settings.detail_timeout_ms == DEFAULT_DETAIL_TIMEOUT_MS
    assert settings.archive_timeout_ms == DEFAULT_ARCHIVE_TIMEOUT_MS
    assert settings.failures_dir == tmp_path.resolve() / "tests" / "fixtures" / "failures"


def test_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TINY_DESK_PROJECT_ROOT", str(tmp_path))
    monkeypatch.setenv("TINY_DESK_OUTPUT_DIR", str(tmp_path / "out"))
    monkeypatch.setenv("TINY_DESK_RENDERER", "HTTP")
    monkeypatch.setenv("TINY_DESK_DETAIL_TIMEOUT_MS", "2500")
    monkeypatch.setenv("TINY_DESK_LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.project_root == tmp_path.resolve()
    assert settings.output_dir == tmp_path / "out"
    assert settings.renderer == "http"
    assert settings.detail_timeout_ms == 2500
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("TINY_DESK_RENDERER", "selenium"),
        ("TINY_DESK_DETAIL_TIMEOUT_MS", "soon"),
        ("TINY_DESK_ARCHIVE_TIMEOUT_MS", "0"),
    ],
)
def test_invalid_values(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        load_settings()
