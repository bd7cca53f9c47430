"""Pipeline package: input parsing, batch fetching, and output assembly."""

from url_titles.pipeline.models import OutputDocument, TitleResult
from url_titles.pipeline.runner import fetch_url_titles, run_batch
from url_titles.pipeline.urls import build_url_set, normalize_line, parse_urls

__all__ = [
    "normalize_line",
    "parse_urls",
    "build_url_set",
    "run_batch",
    "fetch_url_titles",
    "TitleResult",
    "OutputDocument",
]
