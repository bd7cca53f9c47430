"""Batch runner: fetch the title of every URL, one at a time, in order.

``run_batch`` is the core loop.  For each URL it asks the fetcher for a title,
formats the result line, hands it to ``on_line`` straight away (live progress)
and appends it to the :class:`~url_titles.pipeline.models.OutputDocument`,
then waits ``throttle_ms`` before the next URL.

A failure on one URL never stops the batch: the URL is recorded without a
title, the error is reported through ``on_progress``, and the loop carries on.
There is no retry.
"""

from __future__ import annotations

import time
from typing import Callable, Optional, Sequence

from url_titles.config import Settings, Strategy
from url_titles.errors import FetchError
from url_titles.pipeline.files import PathLike, read_input
from url_titles.pipeline.models import OutputDocument, TitleResult
from url_titles.pipeline.urls import build_url_set, parse_urls
from url_titles.scraper.fetcher import TitleFetcher, create_fetcher

LineCallback = Callable[[str], None]


def _noop(_: str) -> None:
    pass


def run_batch(
    urls: Sequence[str],
    fetcher: TitleFetcher,
    throttle_ms: float,
    on_line: Optional[LineCallback] = None,
    on_progress: Optional[LineCallback] = None,
    announce: bool = False,
    sleep: Optional[Callable[[float], None]] = None,
    document: Optional[OutputDocument] = None,
) -> OutputDocument:
    """Fetch titles for *urls* with *fetcher* and build the output document.

    The fetcher is opened before the first URL and closed after the last one,
    whether or not individual fetches failed.  Errors raised while opening it
    (e.g. :class:`~url_titles.errors.BrowserLaunchError`) propagate before
    anything is fetched.

    Args:
        urls: URLs to visit, already de-duplicated / sorted as required.
        fetcher: Strategy used to resolve a URL to a title.
        throttle_ms: Delay between two consecutive fetches, in milliseconds.
        on_line: Receives each formatted result line as soon as it exists.
        on_progress: Receives diagnostic messages (failures, announcements).
        announce: Also report the start of every fetch through *on_progress*.
        sleep: Sleep function taking seconds (default :func:`time.sleep`).
        document: Document to append to; lines already added survive an
            exception that aborts the batch.

    Returns:
        The accumulated :class:`OutputDocument`, in input order.
    """
    emit = on_line or _noop
    report = on_progress or _noop
    pause = sleep or time.sleep
    if document is None:
        document = OutputDocument()
    delay = max(throttle_ms, 0) / 1000.0

    with fetcher:
        for index, url in enumerate(urls):
            if index and delay:
                pause(delay)

            if announce:
                report(f"[fetch] Fetching {url} …")

            title = None
            if not fetcher.accepts(url):
                report(f"[fetch] {url} skipped (not an HTML page)")
            else:
                try:
                    title = fetcher.fetch_title(url)
                except FetchError as exc:
                    report(f"[fetch] {url} failed: {exc}")

            line = TitleResult(url=url, title=title).to_markdown()
            emit(line)
            document.append(line)

    return document


def fetch_url_titles(
    input_path: PathLike,
    settings: Settings,
    strategy: Strategy = Strategy.HTTP,
    unique: bool = False,
    sort: bool = False,
    throttle_ms: Optional[float] = None,
    on_line: Optional[LineCallback] = None,
    on_progress: Optional[LineCallback] = None,
    announce: bool = False,
    fetcher: Optional[TitleFetcher] = None,
    sleep: Optional[Callable[[float], None]] = None,
    document: Optional[OutputDocument] = None,
) -> OutputDocument:
    """Read *input_path*, build the URL set, and run the batch over it.

    Pipeline:
        1. :func:`~url_titles.pipeline.files.read_input` — load the list.
        2. :func:`~url_titles.pipeline.urls.parse_urls` — one URL per line.
        3. :func:`~url_titles.pipeline.urls.build_url_set` — dedup, then sort.
        4. :func:`run_batch` — fetch and format every URL.

    *throttle_ms* defaults to the strategy's configured delay; *fetcher*
    defaults to :func:`~url_titles.scraper.fetcher.create_fetcher`.

    Raises:
        InputReadError: The input file could not be read.
        BrowserLaunchError: The rendered strategy could not start a browser.
    """
    text = read_input(input_path)
    urls = build_url_set(
        parse_urls(text, strip_comments=settings.strip_comments),
        unique=unique,
        sort=sort,
    )

    if throttle_ms is None:
        throttle_ms = settings.throttle_ms_for(strategy)
    if fetcher is None:
        fetcher = create_fetcher(strategy, settings)

    return run_batch(
        urls,
        fetcher,
        throttle_ms,
        on_line=on_line,
        on_progress=on_progress,
        announce=announce,
        sleep=sleep,
        document=document,
    )
