"""Runtime settings for url-titles.

All configuration is resolved here in one place.  Values can be overridden via
environment variables or a `.env` file in the working directory (loaded
automatically when this module is imported).  The CLI builds a single
:class:`Settings` at startup and hands it to the fetchers and the pipeline.
"""

from __future__ import annotations

import getpass
import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path.cwd() / ".env", override=False)

_TRUTHY = {"1", "true", "yes", "on"}

_DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/122.0.0.0 Safari/537.36"
)


class Strategy(str, Enum):
    """How a URL is turned into a page title."""

    HTTP = "http"
    BROWSER = "browser"


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


def default_browser_executable() -> str:
    """Return the usual Chrome install location for this platform."""
    if sys.platform.startswith("win"):
        return r"C:\Program Files\Google\Chrome\Application\chrome.exe"
    if sys.platform == "darwin":
        return "/Applications/Google Chrome.app/Contents/MacOS/Google Chrome"
    return "/usr/bin/google-chrome"


def default_browser_user_data_dir() -> str:
    """Return the current user's Chrome profile directory for this platform."""
    user = getpass.getuser()
    if sys.platform.startswith("win"):
        return rf"C:\Users\{user}\AppData\Local\Google\Chrome\User Data"
    if sys.platform == "darwin":
        return f"/Users/{user}/Library/Application Support/Google/Chrome"
    return f"/home/{user}/.config/google-chrome"


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # HTTP fetcher
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    max_redirects: int = field(
        default_factory=lambda: int(os.environ.get("MAX_REDIRECTS", "10"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get("URL_TITLES_USER_AGENT", _DEFAULT_USER_AGENT)
    )

    # ------------------------------------------------------------------
    # Throttling (milliseconds between two fetches)
    # ------------------------------------------------------------------
    http_throttle_ms: float = field(
        default_factory=lambda: float(os.environ.get("HTTP_THROTTLE_MS", "1000"))
    )
    browser_throttle_ms: float = field(
        default_factory=lambda: float(os.environ.get("BROWSER_THROTTLE_MS", "2000"))
    )

    # ------------------------------------------------------------------
    # Input parsing
    # ------------------------------------------------------------------
    strip_comments: bool = field(
        default_factory=lambda: _env_bool("STRIP_COMMENTS", True)
    )

    # ------------------------------------------------------------------
    # Browser (rendered strategy)
    # ------------------------------------------------------------------
    browser_executable_path: str = field(
        default_factory=lambda: os.environ.get("BROWSER_EXECUTABLE_PATH", "")
    )
    browser_user_data_dir: str = field(
        default_factory=lambda: os.environ.get(
            "BROWSER_USER_DATA_DIR", default_browser_user_data_dir()
        )
    )
    browser_headless: bool = field(
        default_factory=lambda: _env_bool("BROWSER_HEADLESS", True)
    )

    def throttle_ms_for(self, strategy: Strategy) -> float:
        """Default delay between fetches for *strategy*."""
        if strategy is Strategy.BROWSER:
            return self.browser_throttle_ms
        return self.http_throttle_ms

    def resolved_browser_executable(self) -> str | None:
        """Executable to launch, or ``None`` for Playwright's bundled Chromium.

        An explicitly configured path is always used as-is; the platform
        default is only used when it is actually installed.
        """
        if self.browser_executable_path:
            return self.browser_executable_path
        path = default_browser_executable()
        return path if Path(path).exists() else None
