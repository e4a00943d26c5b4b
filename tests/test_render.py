from __future__ import annotations

import httpx
import pytest

from conftest import load_fixture
from tiny_desk.config import Settings
from tiny_desk.scraper.render import (
    HttpRenderer,
    PlaywrightRenderer,
    RenderError,
    make_renderer,
)


class FakeClient:
    def __init__(self, html: str = "", error: Exception | None = None) -> None:
        self.html = html
        self.error = error
        self.closed = False

    def fetch_html(self, url: str) -> str:
        if self.error is not None:
            raise self.error
        return self.html

    def close(self) -> None:
        self.closed = True


def test_http_renderer_returns_document() -> None:
    client = FakeClient(load_fixture("sample_concert.html"))

    with HttpRenderer(client) as renderer:  # type: ignore[arg-type]
        page = renderer.render("https://example.com/c", wait_for="#storytext", timeout_ms=1)

    assert page.title == "Test Artist: Tiny Desk Concert : NPR"
    assert page.document.exists(".dateblock time")
    assert client.closed


def test_http_renderer_missing_selector_raises() -> None:
    client = FakeClient("<html><body><p>nothing</p></body></html>")

    with HttpRenderer(client) as renderer:  # type: ignore[arg-type]
        with pytest.raises(RenderError) as excinfo:
            renderer.render("https://example.com/c", wait_for="#storytext", timeout_ms=1)

    assert excinfo.value.selector == "#storytext"
    assert excinfo.value.url == "https://example.com/c"
    assert client.closed


def test_http_renderer_wraps_network_errors() -> None:
    client = FakeClient(error=httpx.ConnectError("connection refused"))

    with HttpRenderer(client) as renderer:  # type: ignore[arg-type]
        with pytest.raises(RenderError) as excinfo:
            renderer.render("https://example.com/c", wait_for="#storytext", timeout_ms=1)

    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


def test_renderer_requires_context_manager() -> None:
    with pytest.raises(RuntimeError):
        HttpRenderer().render("https://example.com", wait_for="body", timeout_ms=1)


def test_make_renderer(tmp_path) -> None:
    http = Settings(project_root=tmp_path, output_dir=tmp_path, renderer="http")
    browser = Settings(project_root=tmp_path, output_dir=tmp_path)

    assert isinstance(make_renderer(http), HttpRenderer)
    assert isinstance(make_renderer(browser), PlaywrightRenderer)
