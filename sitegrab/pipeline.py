"""Per-site pipeline.

``scrape_site`` runs one target through every stage and always returns a
:class:`~sitegrab.scraper.models.SiteResult`:

    validate → prepare folder → fetch → save HTML → extract/save links
             → screenshot (optional) → write meta.json

Every failure is recorded on the result instead of being raised.  Artifacts
written by earlier stages are never removed by a later failure.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from urllib.parse import urlsplit, urlunsplit

from sitegrab import storage
from sitegrab.config import (
    HTML_FILENAME,
    LINKS_FILENAME,
    META_FILENAME,
    SCREENSHOT_FILENAME,
    settings,
)
from sitegrab.scraper.extractor import extract_links
from sitegrab.scraper.fetcher import FetchError, HTTPStatusError, fetch_page
from sitegrab.scraper.models import SiteResult
from sitegrab.scraper.screenshot import ScreenshotCapturer, ScreenshotError
from sitegrab.scraper.slug import make_site_slug

logger = logging.getLogger(__name__)


class InvalidURLError(ValueError):
    """The target is not an absolute URL with both scheme and host."""


def parse_target(raw_url: str) -> str:
    """Validate *raw_url* and return its canonical string form.

    Raises:
        InvalidURLError: If the URL cannot be parsed or lacks scheme/host.
    """
    try:
        parts = urlsplit(raw_url.strip())
    except ValueError as exc:
        raise InvalidURLError("invalid URL") from exc
    if not parts.scheme or not parts.hostname:
        raise InvalidURLError("invalid URL")
    return urlunsplit(parts)


def _write_meta(out_dir: Path, result: SiteResult) -> None:
    try:
        storage.write_json(out_dir / META_FILENAME, result.to_dict())
    except OSError as exc:
        logger.warning("could not write %s for %s: %s", META_FILENAME, result.url, exc)


def _save_page(out_dir: Path, url: str, body: bytes) -> int:
    """Persist HTML and links; return the number of links extracted.

    Raises:
        OSError: If the HTML file could not be written.  A failed links write
            is only logged.
    """
    storage.write_html(out_dir / HTML_FILENAME, body)

    links = extract_links(url, body)
    try:
        storage.write_links(out_dir / LINKS_FILENAME, links)
    except OSError as exc:
        logger.warning("could not write %s for %s: %s", LINKS_FILENAME, url, exc)
    return len(links)


def scrape_site(
    raw_url: str,
    out_root: Path,
    *,
    timeout: float | None = None,
    capturer: ScreenshotCapturer | None = None,
    save_error_pages: bool | None = None,
) -> SiteResult:
    """Fetch *raw_url* and write its artifacts under ``out_root/<slug>/``.

    Args:
        raw_url: The target as given by the user.
        out_root: Existing output root directory.
        timeout: Total budget in seconds for fetch + screenshot.  Defaults to
            ``settings.site_timeout``.
        capturer: Screenshot backend; ``None`` disables screenshots.
        save_error_pages: Persist the body of HTTP >= 400 responses (and its
            links) while still recording the HTTP error.  Defaults to
            ``settings.save_error_pages``.

    Returns:
        The finished :class:`SiteResult`.  ``meta.json`` has been written
        unless the URL was invalid or the folder could not be created.
    """
    if timeout is None:
        timeout = settings.site_timeout
    if save_error_pages is None:
        save_error_pages = settings.save_error_pages

    result = SiteResult(url=raw_url)

    # ------------------------------------------------------------------
    # 1: Validate (no filesystem writes on failure)
    # ------------------------------------------------------------------
    try:
        url = parse_target(raw_url)
    except InvalidURLError as exc:
        result.error = str(exc)
        return result

    # ------------------------------------------------------------------
    # 2: Prepare the per-site folder
    # ------------------------------------------------------------------
    out_dir = out_root / make_site_slug(url)
    result.out_dir = str(out_dir)
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        result.error = f"could not create output directory: {exc}"
        return result

    deadline = time.monotonic() + timeout

    # ------------------------------------------------------------------
    # 3: Fetch
    # ------------------------------------------------------------------
    started = time.perf_counter()
    try:
        page = fetch_page(url, timeout=deadline - time.monotonic())
    except FetchError as exc:
        result.fetch_elapsed_ms = int((time.perf_counter() - started) * 1000)
        result.http_status = exc.status_code
        result.http_status_text = exc.status_text
        result.error = str(exc)
        if save_error_pages and isinstance(exc, HTTPStatusError) and exc.body is not None:
            # The HTTP error stays on the result even when the page saves.
            try:
                result.links_found = _save_page(out_dir, url, exc.body)
            except OSError as write_exc:
                logger.warning("could not write error page for %s: %s", url, write_exc)
        _write_meta(out_dir, result)
        return result

    result.fetch_elapsed_ms = int((time.perf_counter() - started) * 1000)
    result.http_status = page.status_code
    result.http_status_text = page.status_text

    # ------------------------------------------------------------------
    # 4 & 5: Save HTML, then extract and save links
    # ------------------------------------------------------------------
    try:
        result.links_found = _save_page(out_dir, url, page.body)
    except OSError as exc:
        result.error = f"could not write HTML: {exc}"
        _write_meta(out_dir, result)
        return result

    # ------------------------------------------------------------------
    # 6: Screenshot (failure is recorded, earlier artifacts stay)
    # ------------------------------------------------------------------
    if capturer is not None:
        try:
            capturer.capture(url, out_dir / SCREENSHOT_FILENAME, deadline - time.monotonic())
        except ScreenshotError as exc:
            result.error = f"screenshot failed: {exc}"
            logger.info("screenshot failed for %s: %s", url, exc)
        else:
            result.screenshot_ok = True

    # ------------------------------------------------------------------
    # 7: meta.json
    # ------------------------------------------------------------------
    _write_meta(out_dir, result)
    return result
