"""Batch runner: processes targets one at a time and writes ``summary.json``."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, List

from sitegrab import storage
from sitegrab.config import SUMMARY_FILENAME, settings
from sitegrab.pipeline import scrape_site
from sitegrab.scraper.models import SiteResult
from sitegrab.scraper.screenshot import ScreenshotCapturer

logger = logging.getLogger(__name__)


def _format_outcome(result: SiteResult) -> str:
    if not result.ok:
        return f"   [-] Error: {result.error}"
    return (
        f"   [+] HTML saved. Status={result.http_status}, "
        f"Links={result.links_found}, Screenshot={result.screenshot_ok}"
    )


def run_batch(
    targets: Iterable[str],
    out_root: Path,
    *,
    timeout: float | None = None,
    capturer: ScreenshotCapturer | None = None,
    save_error_pages: bool | None = None,
    echo: Callable[[str], None] = print,
) -> List[SiteResult]:
    """Run every target through :func:`~sitegrab.pipeline.scrape_site` in order.

    Targets are processed strictly sequentially; a failing target never stops
    the run.  One progress line is emitted through *echo* before and after
    each target.  When all targets are done the ordered results are written
    to ``out_root/summary.json``.

    Args:
        targets: Target URLs, in processing order.
        out_root: Existing output root directory.
        timeout: Per-site budget in seconds (``settings.site_timeout`` if
            omitted).
        capturer: Screenshot backend; ``None`` disables screenshots.
        save_error_pages: Forwarded to :func:`scrape_site`.
        echo: Sink for progress lines.

    Returns:
        One :class:`SiteResult` per target, in input order.
    """
    if timeout is None:
        timeout = settings.site_timeout

    targets = list(targets)
    total = len(targets)
    results: List[SiteResult] = []

    for i, target in enumerate(targets, start=1):
        echo(f"\n[{i}/{total}] {target}")
        result = scrape_site(
            target,
            out_root,
            timeout=timeout,
            capturer=capturer,
            save_error_pages=save_error_pages,
        )
        results.append(result)
        echo(_format_outcome(result))

    summary_path = summary_path_for(out_root)
    try:
        storage.write_json(summary_path, [r.to_dict() for r in results])
    except OSError as exc:
        logger.warning("could not write %s: %s", summary_path, exc)
    return results


def summary_path_for(out_root: Path) -> Path:
    """Return the location of the aggregate summary under *out_root*."""
    return out_root / SUMMARY_FILENAME
