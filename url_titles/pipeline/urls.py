"""Turning raw input text into the list of URLs to visit."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

# An unescaped "#" and everything after it, with any whitespace before it.
_COMMENT_RE = re.compile(r"\s*(?<!\\)#.*")
_ESCAPED_HASH_RE = re.compile(r"\\#")
_LIST_MARKER_RE = re.compile(r"^-\s*")
_MARKDOWN_LINK_RE = re.compile(r"^\[.*?\]\((.*?)\)$")
_NEWLINE_RE = re.compile(r"\r\n|\r|\n")


def normalize_line(line: str, strip_comments: bool = True) -> Optional[str]:
    """Reduce one input line to a URL, or ``None`` if it holds none.

    Steps, in order:

    1. Trim surrounding whitespace.
    2. Drop a trailing ``# comment`` (when *strip_comments* is set).  ``\\#``
       escapes a literal ``#``, e.g. for URL fragments.
    3. Drop a leading ``-`` list marker.
    4. Replace a whole-line Markdown link ``[label](target)`` with ``target``.

    Text that does not look like a Markdown link is passed through as is.
    """
    text = line.strip()
    if strip_comments:
        text = _COMMENT_RE.sub("", text, count=1)
        text = _ESCAPED_HASH_RE.sub("#", text)
    text = _LIST_MARKER_RE.sub("", text)
    text = _MARKDOWN_LINK_RE.sub(r"\1", text)
    text = text.strip()
    return text or None


def parse_urls(text: str, strip_comments: bool = True) -> List[str]:
    """Return the URLs found in *text*, one candidate per line, in order."""
    urls: List[str] = []
    for line in _NEWLINE_RE.split(text):
        url = normalize_line(line, strip_comments=strip_comments)
        if url:
            urls.append(url)
    return urls


def build_url_set(urls: Iterable[str], unique: bool = False, sort: bool = False) -> List[str]:
    """Apply optional de-duplication, then optional sorting, to *urls*.

    De-duplication keeps the first occurrence of each URL.  Sorting is a plain
    ascending string sort and always runs after de-duplication.
    """
    result = list(urls)
    if unique:
        result = list(dict.fromkeys(result))
    if sort:
        result.sort()
    return result
