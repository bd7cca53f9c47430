"""url-titles: turn a list of URLs into a Markdown list of page titles."""

__version__ = "1.0.0"
