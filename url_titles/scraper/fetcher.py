"""Title fetchers: turn a URL into a page title.

Two strategies share the :class:`TitleFetcher` interface:

* :class:`HttpTitleFetcher`: plain ``httpx`` GET, redirects followed by hand,
  title pulled out of the HTML with :func:`~url_titles.scraper.extractor.extract_title`.
* :class:`~url_titles.scraper.browser.BrowserTitleFetcher`: Playwright-driven
  Chromium, title read from the rendered document.

A fetcher is opened once per batch and closed once at the end, so the HTTP
connection pool (or the browser) is shared by every URL in the run.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import httpx

from url_titles.config import Settings, Strategy
from url_titles.errors import FetchError, RedirectLoopError
from url_titles.scraper.extractor import extract_title

_REDIRECT_CODES = {301, 302, 303, 307, 308}


# ---------------------------------------------------------------------------
# Abstract base
# ---------------------------------------------------------------------------

class TitleFetcher(ABC):
    """Resolve a URL to its page title."""

    def open(self) -> None:
        """Acquire whatever the fetcher needs for a batch (no-op by default)."""

    def close(self) -> None:
        """Release resources acquired by :meth:`open` (no-op by default)."""

    def __enter__(self) -> TitleFetcher:
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def accepts(self, url: str) -> bool:
        """Return ``False`` for URLs this strategy skips without fetching."""
        return True

    @abstractmethod
    def fetch_title(self, url: str) -> str | None:
        """Return the title of *url*, or ``None`` if the page has none.

        Raises:
            FetchError: If the page could not be retrieved.
        """


# ---------------------------------------------------------------------------
# Direct HTTP strategy
# ---------------------------------------------------------------------------

class HttpTitleFetcher(TitleFetcher):
    """Fetch pages with ``httpx`` and extract ``<title>`` from the raw HTML."""

    def __init__(self, settings: Settings, client: httpx.Client | None = None) -> None:
        self.settings = settings
        self._client = client
        self._owns_client = client is None

    def open(self) -> None:
        if self._client is None:
            self._client = httpx.Client(
                headers={"User-Agent": self.settings.user_agent},
                timeout=self.settings.request_timeout,
                follow_redirects=False,
            )
            self._owns_client = True

    def close(self) -> None:
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def fetch_html(self, url: str) -> str:
        """GET *url*, following redirects, and return the final body as text.

        Raises:
            RedirectLoopError: More than ``settings.max_redirects`` hops, or a
                redirect response without a ``Location`` header.
            FetchError: Transport failure or a non-2xx, non-redirect status.
        """
        if self._client is None:
            self.open()

        current = url
        for _ in range(self.settings.max_redirects + 1):
            try:
                response = self._client.get(current)
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                raise FetchError(url, cause=exc) from exc

            if response.status_code in _REDIRECT_CODES:
                location = response.headers.get("location")
                if not location:
                    raise RedirectLoopError(
                        url,
                        status=response.status_code,
                        message=f"HTTP {response.status_code} without Location header",
                    )
                try:
                    current = str(response.url.join(location))
                except httpx.InvalidURL as exc:
                    raise FetchError(url, cause=exc) from exc
                continue

            if not response.is_success:
                raise FetchError(url, status=response.status_code)
            return response.text

        raise RedirectLoopError(
            url, message=f"more than {self.settings.max_redirects} redirects"
        )

    def fetch_title(self, url: str) -> str | None:
        return extract_title(self.fetch_html(url))


def create_fetcher(strategy: Strategy, settings: Settings) -> TitleFetcher:
    """Return the fetcher implementation for *strategy*."""
    if strategy is Strategy.BROWSER:
        from url_titles.scraper.browser import BrowserTitleFetcher  # noqa: PLC0415

        return BrowserTitleFetcher(settings)
    return HttpTitleFetcher(settings)
