"""Scraper package — fetch a URL and extract its page title."""

from url_titles.scraper.extractor import extract_title
from url_titles.scraper.fetcher import HttpTitleFetcher, TitleFetcher, create_fetcher

__all__ = ["extract_title", "create_fetcher", "TitleFetcher", "HttpTitleFetcher"]
