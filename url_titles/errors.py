"""Exception types raised by the url-titles pipeline.

Fatal errors (:class:`InputReadError`, :class:`BrowserLaunchError`) stop a run
before any URL is fetched.  :class:`FetchError` is per-URL: the batch runner
records the URL without a title and moves on.
"""

from __future__ import annotations


class UrlTitlesError(Exception):
    """Base class for all url-titles errors."""


class InputReadError(UrlTitlesError):
    """The input file could not be read."""


class BrowserLaunchError(UrlTitlesError):
    """The browser automation session could not be started."""


class FetchError(UrlTitlesError):
    """Fetching a single URL failed.

    Exactly one of *status* (an unexpected HTTP status code) or *cause* (the
    underlying transport / browser exception) is normally set.
    """

    def __init__(
        self,
        url: str,
        status: int | None = None,
        cause: BaseException | None = None,
        message: str | None = None,
    ) -> None:
        self.url = url
        self.status = status
        self.cause = cause
        if message is None:
            if status is not None:
                message = f"HTTP {status}"
            elif cause is not None:
                message = f"{type(cause).__name__}: {cause}"
            else:
                message = "fetch failed"
        super().__init__(message)


class RedirectLoopError(FetchError):
    """Too many redirects, or a redirect without a ``Location`` header."""
