# src/tiny_desk/scraper/client.py

from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)


DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "tiny-desk-scraper/0.1 (+https://example.com)"


class ScraperClient:
    """Plain HTTP client for fetching concert and archive pages.

    Unlike a browser this sees the server-rendered HTML only. Failures are
    raised, not retried.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str | None = None,
    ) -> None:
        if timeout <= 0:
            msg = "timeout must be positive."
            raise ValueError(msg)

        headers = {
            "User-Agent": user_agent or DEFAULT_USER_AGENT,
            "Accept": "text/html,application/xhtml+xml",
        }

        self._client = httpx.Client(
            headers=headers,
            timeout=timeout,
            follow_redirects=True,
        )

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> "ScraperClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # type: ignore[override]
        self.close()

    def fetch_html(self, url: str) -> str:
        """Fetch raw HTML for `url`.

        Raises:
            httpx.HTTPStatusError: for 4xx/5xx responses.
            httpx.RequestError: for network problems.
        """
        response = self._client.get(url)
        response.raise_for_status()
        logger.debug("Fetched %s (status=%s).", url, response.status_code)
        return response.text
