"""Console script for pyjscompat."""

from __future__ import annotations

import json

import click
from rich.console import Console

from ._version import __version__ as _version
from .analyzer import analyze_code
from .constants import DEFAULT_MAX_SNIPPETS, EMPTY_SOURCE_LINE
from .exceptions import CompatError
from .http import fetch_script, is_url
from .render_basic import render_basic
from .util.debug import configure_logging, debug_log


def _read_source(source: str) -> tuple[str, str]:
    """Return (code, display title) for a path, "-" (stdin) or URL."""
    if is_url(source):
        return fetch_script(source), source
    try:
        with click.open_file(source, encoding="utf-8") as handle:
            code = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise click.FileError(source, hint=str(exc)) from exc
    return code, "stdin" if source == "-" else source


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument(
    "source",
    metavar="<file|url|->",
    required=False,
    default="-",
    type=click.STRING,
)
@click.option("--json", "as_json", is_flag=True, help="Print the analysis result as JSON.")
@click.option(
    "--snippets/--no-snippets",
    default=True,
    show_default=True,
    help="Show where each feature occurs in the source.",
)
@click.option(
    "--max-snippets",
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_SNIPPETS,
    show_default=True,
    help="Occurrences to show per feature.",
)
@click.version_option(_version, "-v", "--version")
def main(source: str, as_json: bool, snippets: bool, max_snippets: int) -> None:
    """
    Check which browsers can run a piece of JavaScript

    \b
    Example usages:
      jscompat app.js
      cat app.js | jscompat
      jscompat https://example.com/static/app.js --no-snippets
      jscompat app.js --json
    """
    configure_logging()
    try:
        code, title = _read_source(source)
        if not code.strip():
            raise CompatError(EMPTY_SOURCE_LINE)
        debug_log("analyzing %s", title)
        result = analyze_code(code)
    except CompatError as exc:
        raise click.ClickException(str(exc)) from exc

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    console = Console()
    console.print(
        render_basic(result, title=title, show_snippets=snippets, max_snippets=max_snippets)
    )
