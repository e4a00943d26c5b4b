# src/tiny_desk/scraper/render.py

"""Turn a URL into a queryable Document.

Two interchangeable renderers exist: a headless Chromium via Playwright for
pages that build their content with JavaScript, and a plain HTTP fetch.
Both wait for (or check) a selector and raise RenderError if it never shows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from tiny_desk.config import Settings
from tiny_desk.scraper.client import ScraperClient
from tiny_desk.scraper.document import Document

logger = logging.getLogger(__name__)


class RenderError(Exception):
    """Navigation, network or selector-wait failure for a page."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        selector: str | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.selector = selector


@dataclass(frozen=True, slots=True)
class RenderedPage:
    url: str
    title: str
    document: Document


class PageRenderer(Protocol):
    def render(self, url: str, *, wait_for: str, timeout_ms: int) -> RenderedPage: ...

    def __enter__(self) -> "PageRenderer": ...

    def __exit__(self, exc_type, exc, tb) -> None: ...


class PlaywrightRenderer:
    """Headless Chromium renderer. Use as a context manager."""

    def __init__(self, *, headless: bool = True) -> None:
        self._headless = headless
        self._playwright = None
        self._browser = None

    def __enter__(self) -> "PlaywrightRenderer":
        self._playwright = sync_playwright().start()
        try:
            self._browser = self._playwright.chromium.launch(headless=self._headless)
        except PlaywrightError as exc:
            self._playwright.stop()
            self._playwright = None
            msg = f"Failed to launch Chromium: {exc}"
            raise RenderError(msg) from exc
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the browser and stop Playwright."""
        if self._browser is not None:
            self._browser.close()
            self._browser = None
        if self._playwright is not None:
            self._playwright.stop()
            self._playwright = None

    def render(self, url: str, *, wait_for: str, timeout_ms: int) -> RenderedPage:
        if self._browser is None:
            msg = "PlaywrightRenderer must be entered before rendering."
            raise RuntimeError(msg)

        page = self._browser.new_page()
        try:
            logger.info("Navigating to %s...", url)
            page.goto(url, wait_until="domcontentloaded")
            title = page.title()
            page.wait_for_selector(wait_for, timeout=timeout_ms)
            html = page.content()
        except PlaywrightError as exc:
            # playwright's TimeoutError subclasses Error
            msg = f"Failed to render {url}: {exc}"
            raise RenderError(msg, url=url, selector=wait_for) from exc
        finally:
            page.close()

        return RenderedPage(url=url, title=title, document=Document.from_html(html))


class HttpRenderer:
    """Static renderer: fetch HTML over HTTP and check for the selector once."""

    def __init__(self, client: ScraperClient | None = None) -> None:
        self._client = client

    def __enter__(self) -> "HttpRenderer":
        if self._client is None:
            self._client = ScraperClient()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def render(self, url: str, *, wait_for: str, timeout_ms: int) -> RenderedPage:
        if self._client is None:
            msg = "HttpRenderer must be entered before rendering."
            raise RuntimeError(msg)

        logger.info("Fetching %s...", url)
        try:
            html = self._client.fetch_html(url)
        except httpx.HTTPError as exc:
            msg = f"Failed to fetch {url}: {exc}"
            raise RenderError(msg, url=url, selector=wait_for) from exc

        document = Document.from_html(html)
        if not document.exists(wait_for):
            # static HTML: presence is checked once
            msg = f"Selector {wait_for!r} not present on {url}"
            raise RenderError(msg, url=url, selector=wait_for)

        return RenderedPage(url=url, title=document.title, document=document)


def make_renderer(settings: Settings) -> PageRenderer:
    """Pick the renderer configured by TINY_DESK_RENDERER."""
    if settings.renderer == "http":
        return HttpRenderer()
    return PlaywrightRenderer()
