"""Rendered-page title fetcher backed by a Playwright-driven Chromium.

Playwright is imported lazily so the HTTP strategy (and the test suite) work
without a browser installed.
"""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Any
from urllib.parse import urlparse

from url_titles.config import Settings
from url_titles.errors import BrowserLaunchError, FetchError
from url_titles.scraper.fetcher import TitleFetcher

# Paths with these extensions are downloads, not documents with a title.
_NON_HTML_EXTENSIONS = frozenset({
    ".pdf", ".txt", ".csv", ".json", ".xml",
    ".png", ".jpg", ".jpeg", ".gif", ".webp", ".svg", ".ico",
    ".zip", ".gz", ".tgz", ".bz2", ".xz", ".7z", ".rar", ".tar",
    ".mp3", ".mp4", ".m4a", ".wav", ".ogg", ".webm", ".avi", ".mov", ".mkv",
    ".doc", ".docx", ".xls", ".xlsx", ".ppt", ".pptx", ".odt", ".ods", ".epub",
    ".exe", ".msi", ".dmg", ".deb", ".rpm", ".apk", ".iso",
})


def is_renderable(url: str) -> bool:
    """Return ``True`` if *url* is an http(s) URL that should be rendered."""
    parsed = urlparse(url)
    if parsed.scheme.lower() not in ("http", "https"):
        return False
    return PurePosixPath(parsed.path).suffix.lower() not in _NON_HTML_EXTENSIONS


class BrowserTitleFetcher(TitleFetcher):
    """Load each URL in a real browser page and read ``document.title``.

    The browser is launched once in :meth:`open` and shut down in
    :meth:`close`; every URL gets a fresh page that is closed after use.
    With ``settings.browser_user_data_dir`` set the user's profile is reused
    through a persistent context.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._playwright: Any = None
        self._browser: Any = None
        self._context: Any = None

    def open(self) -> None:
        if self._context is not None:
            return
        from playwright.sync_api import Error as PlaywrightError  # noqa: PLC0415
        from playwright.sync_api import sync_playwright  # noqa: PLC0415

        executable = self.settings.resolved_browser_executable()
        try:
            self._playwright = sync_playwright().start()
            chromium = self._playwright.chromium
            if self.settings.browser_user_data_dir:
                self._context = chromium.launch_persistent_context(
                    self.settings.browser_user_data_dir,
                    executable_path=executable,
                    headless=self.settings.browser_headless,
                )
            else:
                self._browser = chromium.launch(
                    executable_path=executable,
                    headless=self.settings.browser_headless,
                )
                self._context = self._browser.new_context(
                    user_agent=self.settings.user_agent,
                )
        except PlaywrightError as exc:
            self.close()
            raise BrowserLaunchError(f"Could not launch browser: {exc}") from exc

    def close(self) -> None:
        try:
            if self._context is not None:
                self._context.close()
            if self._browser is not None:
                self._browser.close()
        finally:
            if self._playwright is not None:
                self._playwright.stop()
            self._playwright = None
            self._browser = None
            self._context = None

    def accepts(self, url: str) -> bool:
        return is_renderable(url)

    def fetch_title(self, url: str) -> str | None:
        if not is_renderable(url):
            return None
        if self._context is None:
            self.open()

        from playwright.sync_api import Error as PlaywrightError  # noqa: PLC0415

        page = None
        try:
            page = self._context.new_page()
            page.goto(
                url,
                timeout=int(self.settings.request_timeout * 1000),
                wait_until="domcontentloaded",
            )
            return page.title()
        except PlaywrightError as exc:
            raise FetchError(url, cause=exc) from exc
        finally:
            if page is not None:
                try:
                    page.close()
                except PlaywrightError as exc:
                    raise FetchError(url, cause=exc) from exc
