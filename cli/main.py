"""sitegrab CLI: fetch one or many sites and write their artifacts.

Usage:
    python cli/main.py --help
    python cli/main.py --url https://example.com
    python cli/main.py --all --no-screenshot
    python cli/main.py https://a.example https://b.example

With no URL, no ``--all`` and no positional targets the built-in demo list is
processed.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from sitegrab.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import List, Optional

import typer

from sitegrab.batch import run_batch, summary_path_for
from sitegrab.config import DEFAULT_TARGETS, settings
from sitegrab.scraper.screenshot import PlaywrightCapturer

app = typer.Typer(
    name="sitegrab",
    help="Save HTML, outbound links and full-page screenshots for a list of sites.",
    add_completion=False,
)


def resolve_targets(url: Optional[str], run_all: bool, extra: List[str]) -> List[str]:
    """Pick the target list: ``--url`` first, then ``--all``/default, then positionals."""
    if url:
        return [url]
    if run_all or not extra:
        return list(DEFAULT_TARGETS)
    return list(extra)


@app.command()
def main(
    targets: Optional[List[str]] = typer.Argument(
        None, help="Ad-hoc target URLs (used when --url and --all are absent)."
    ),
    url: Optional[str] = typer.Option(None, "--url", help="Fetch a single URL (e.g. https://example.com)."),
    run_all: bool = typer.Option(False, "--all", help="Run the built-in list of demo sites."),
    out: Path = typer.Option(settings.output_root, "--out", help="Output root directory."),
    timeout: float = typer.Option(settings.site_timeout, "--timeout", help="Per-site timeout in seconds."),
    no_screenshot: bool = typer.Option(
        False, "--no-screenshot", help="Skip screenshots (HTML + links only)."
    ),
    save_error_pages: bool = typer.Option(
        settings.save_error_pages, "--save-error-pages", help="Also save the body of HTTP 4xx/5xx responses."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Fetch each target, save its artifacts and write summary.json."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        out.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        typer.echo(f"[-] could not create output directory: {exc}", err=True)
        raise typer.Exit(code=2)

    selected = resolve_targets(url, run_all, targets or [])
    capturer = None if no_screenshot else PlaywrightCapturer()

    run_batch(
        selected,
        out,
        timeout=timeout,
        capturer=capturer,
        save_error_pages=save_error_pages,
        echo=typer.echo,
    )

    typer.echo(f"\n[+] Done. Summary: {summary_path_for(out)}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
