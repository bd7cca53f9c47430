"""Reading the URL list and writing the finished document."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from url_titles.errors import InputReadError

PathLike = Union[str, Path]


def read_input(path: PathLike) -> str:
    """Return the UTF-8 text of *path* with line endings normalised to ``\\n``.

    Raises:
        InputReadError: If the file is missing, unreadable, or not UTF-8.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(f"Cannot read input file {str(path)!r}: {exc}") from exc


def write_output(path: PathLike, text: str) -> None:
    """Write *text* to *path* as UTF-8, using the platform's line endings."""
    Path(path).write_text(text, encoding="utf-8")
