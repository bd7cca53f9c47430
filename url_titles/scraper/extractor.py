"""Title extraction from raw HTML."""

from __future__ import annotations

import re

_TITLE_RE = re.compile(r"<title>([^<]*)</title>")


def extract_title(html: str) -> str | None:
    """Return the inner text of the first ``<title>`` element in *html*.

    The text is returned verbatim: entities are not decoded and whitespace is
    not collapsed.  Returns ``None`` when the document has no title element;
    an empty ``<title></title>`` yields ``""``.
    """
    match = _TITLE_RE.search(html)
    if match:
        return match.group(1)
    return None
