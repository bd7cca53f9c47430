"""url-titles CLI — fetch the title of every URL listed in a text file.

Usage:
    url-titles urls.txt -u -s -o titles.md
    python cli/main.py --help

Each line of the input file may be a bare URL, a ``- URL`` list item, or a
Markdown link ``[label](URL)``; blank lines and ``# comments`` are ignored.
Every URL becomes one line of output, ``- [title](url)`` or ``- url``, printed
as soon as it is fetched.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from url_titles.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import Optional

import typer

from url_titles.config import Settings, Strategy
from url_titles.errors import BrowserLaunchError, InputReadError
from url_titles.pipeline.files import write_output
from url_titles.pipeline.models import OutputDocument
from url_titles.pipeline.runner import fetch_url_titles

app = typer.Typer(
    name="url-titles",
    help="Write a Markdown list of page titles for the URLs in a text file.",
    add_completion=False,
)


def _echo_err(message: str) -> None:
    typer.echo(message, err=True)


def _fail(message: str) -> None:
    typer.echo(f"ERROR: {message}", err=True)
    raise typer.Exit(code=1)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def main(
    input_file: Path = typer.Argument(..., help="Input file with URLs, one per line."),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Also write the result list to this file."
    ),
    unique: bool = typer.Option(False, "--unique", "-u", help="Drop duplicate URLs."),
    sort: bool = typer.Option(False, "--sort", "-s", help="Sort URLs (after de-duplication)."),
    throttle: Optional[float] = typer.Option(
        None,
        "--throttle",
        "-t",
        min=0,
        help="Delay between requests in ms (default: 1000, or 2000 with --browser).",
    ),
    browser: bool = typer.Option(
        False, "--browser", "-b", help="Render pages in a browser (Playwright) to read titles."
    ),
    keep_comments: bool = typer.Option(
        False, "--keep-comments", help="Do not strip '# comments' from input lines."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Report every fetch on stderr."
    ),
) -> None:
    """Fetch the title of each URL in INPUT_FILE and print a Markdown list."""
    settings = Settings()
    if keep_comments:
        settings.strip_comments = False
    strategy = Strategy.BROWSER if browser else Strategy.HTTP
    announce = verbose or output is not None

    document = OutputDocument()
    try:
        fetch_url_titles(
            input_file,
            settings,
            strategy=strategy,
            unique=unique,
            sort=sort,
            throttle_ms=throttle,
            on_line=typer.echo,
            on_progress=_echo_err,
            announce=announce,
            document=document,
        )
    except (InputReadError, BrowserLaunchError) as exc:
        _fail(str(exc))
    except Exception:
        # Keep the lines finished before the abort.
        if output is not None and len(document):
            write_output(output, document.text)
            _echo_err(f"[abort] Wrote {len(document)} completed URL(s) to {output}")
        raise

    if output is not None:
        try:
            write_output(output, document.text)
        except OSError as exc:
            _fail(f"Cannot write output file {str(output)!r}: {exc}")

    if announce:
        target = f" → {output}" if output is not None else ""
        _echo_err(f"[done] {len(document)} URL(s){target}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
