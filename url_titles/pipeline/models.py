"""Data models for the title pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional


@dataclass(frozen=True)
class TitleResult:
    """The outcome of fetching one URL."""

    url: str
    title: Optional[str] = None

    @property
    def has_title(self) -> bool:
        # An empty title formats the same way as a missing one.
        return bool(self.title)

    def to_markdown(self) -> str:
        """Format as ``- [title](url)``, or ``- url`` when there is no title."""
        if self.has_title:
            return f"- [{self.title}]({self.url})"
        return f"- {self.url}"


@dataclass
class OutputDocument:
    """Append-only list of formatted result lines for one run."""

    lines: List[str] = field(default_factory=list)

    def append(self, line: str) -> None:
        self.lines.append(line)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def text(self) -> str:
        """The document as newline-terminated text."""
        return "".join(line + "\n" for line in self.lines)
