"""Tests for input parsing: line normalisation and URL-set building."""

from __future__ import annotations

import pytest

from url_titles.pipeline.urls import build_url_set, normalize_line, parse_urls


# ---------------------------------------------------------------------------
# normalize_line
# ---------------------------------------------------------------------------

class TestNormalizeLine:
    def test_bare_url_passes_through(self) -> None:
        assert normalize_line("https://example.com/a") == "https://example.com/a"

    def test_surrounding_whitespace_trimmed(self) -> None:
        assert normalize_line("   https://example.com/a \t") == "https://example.com/a"

    @pytest.mark.parametrize(
        "line",
        [
            "- [Label](http://x)",
            "-[Label](http://x)",
            "  -   [Some longer label](http://x)  ",
            "[Label](http://x)",
        ],
    )
    def test_markdown_list_link_yields_target(self, line: str) -> None:
        assert normalize_line(line) == "http://x"

    def test_list_marker_stripped(self) -> None:
        assert normalize_line("- https://example.com/a") == "https://example.com/a"

    @pytest.mark.parametrize("line", ["", "   ", "\t", "# comment line", "   # indented", "-", "- # note"])
    def test_empty_lines_yield_nothing(self, line: str) -> None:
        assert normalize_line(line) is None

    def test_trailing_comment_stripped(self) -> None:
        assert normalize_line("https://example.com/a   # read later") == "https://example.com/a"

    def test_hash_without_space_starts_comment(self) -> None:
        assert normalize_line("https://example.com/a#section") == "https://example.com/a"

    def test_escaped_hash_is_kept(self) -> None:
        assert normalize_line(r"https://example.com/a\#section") == "https://example.com/a#section"

    def test_comments_kept_when_disabled(self) -> None:
        assert (
            normalize_line("https://example.com/a#section", strip_comments=False)
            == "https://example.com/a#section"
        )
        assert normalize_line("# heading", strip_comments=False) == "# heading"

    def test_non_link_text_passes_through(self) -> None:
        assert normalize_line("[broken](http://x") == "[broken](http://x"

    def test_link_must_span_whole_line(self) -> None:
        line = "see [Label](http://x) here"
        assert normalize_line(line) == line


# ---------------------------------------------------------------------------
# parse_urls
# ---------------------------------------------------------------------------

class TestParseUrls:
    def test_mixed_formats_and_line_endings(self) -> None:
        text = (
            "# comment line\r\n"
            "- [Ignored](https://example.com/a)\r\n"
            "\n"
            "https://example.com/a\n"
            "https://example.com/b  # second\r"
        )
        assert parse_urls(text) == [
            "https://example.com/a",
            "https://example.com/a",
            "https://example.com/b",
        ]

    def test_empty_text(self) -> None:
        assert parse_urls("") == []


# ---------------------------------------------------------------------------
# build_url_set
# ---------------------------------------------------------------------------

class TestBuildUrlSet:
    _URLS = ["c", "a", "b", "a", "c"]

    def test_no_flags_keeps_input(self) -> None:
        assert build_url_set(self._URLS) == self._URLS

    def test_unique_keeps_first_occurrence_order(self) -> None:
        assert build_url_set(self._URLS, unique=True) == ["c", "a", "b"]

    def test_sort_keeps_duplicates(self) -> None:
        assert build_url_set(self._URLS, sort=True) == ["a", "a", "b", "c", "c"]

    def test_unique_and_sort(self) -> None:
        assert build_url_set(self._URLS, unique=True, sort=True) == ["a", "b", "c"]

    def test_sort_is_codepoint_order(self) -> None:
        assert build_url_set(["b", "B", "a"], sort=True) == ["B", "a", "b"]

    def test_input_is_not_mutated(self) -> None:
        urls = list(self._URLS)
        build_url_set(urls, unique=True, sort=True)
        assert urls == self._URLS

    def test_end_to_end_example(self) -> None:
        text = (
            "# comment line\n"
            "- [Ignored](https://example.com/a)\n"
            "https://example.com/a\n"
            "https://example.com/b\n"
        )
        assert build_url_set(parse_urls(text), unique=True, sort=True) == [
            "https://example.com/a",
            "https://example.com/b",
        ]
