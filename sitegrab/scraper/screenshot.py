"""Full-page screenshots through a headless Chromium browser.

The pipeline only depends on the :class:`ScreenshotCapturer` protocol, so tests
(and machines without a browser) can swap in any object with a matching
``capture`` method.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Protocol

from sitegrab.config import settings

logger = logging.getLogger(__name__)

_BROWSER_ARGS = [
    "--disable-gpu",
    "--no-sandbox",
    "--disable-dev-shm-usage",
]


class ScreenshotError(Exception):
    """Browser launch, navigation or capture failed."""


class ScreenshotCapturer(Protocol):
    def capture(self, url: str, out_path: Path, timeout: float) -> None:
        """Write a full-page image of *url* to *out_path* within *timeout* seconds.

        Raises :class:`ScreenshotError` on failure, leaving no file behind.
        """
        ...


class PlaywrightCapturer:
    """Launches a fresh headless Chromium per capture; nothing is pooled."""

    def __init__(self, viewport_width: int | None = None, viewport_height: int | None = None) -> None:
        self.viewport = {
            "width": viewport_width or settings.viewport_width,
            "height": viewport_height or settings.viewport_height,
        }

    def capture(self, url: str, out_path: Path, timeout: float) -> None:
        # Imported lazily so the rest of the package works without a browser.
        from playwright.sync_api import Error as PlaywrightError  # noqa: PLC0415
        from playwright.sync_api import sync_playwright  # noqa: PLC0415

        if timeout <= 0:
            raise ScreenshotError("site timeout exceeded before screenshot")
        deadline = time.monotonic() + timeout

        def remaining_ms() -> int:
            # Each browser step only gets what is left of the shared budget.
            left = deadline - time.monotonic()
            if left <= 0:
                raise ScreenshotError("site timeout exceeded during screenshot")
            return max(1, int(left * 1000))

        try:
            with sync_playwright() as pw:
                browser = pw.chromium.launch(
                    headless=True,
                    args=_BROWSER_ARGS,
                    timeout=remaining_ms(),
                )
                try:
                    page = browser.new_page(viewport=self.viewport)
                    page.goto(url, wait_until="domcontentloaded", timeout=remaining_ms())
                    page.wait_for_selector("body", state="attached", timeout=remaining_ms())
                    png = page.screenshot(full_page=True, type="png", timeout=remaining_ms())
                finally:
                    browser.close()
        except PlaywrightError as exc:
            raise ScreenshotError(str(exc)) from exc

        try:
            out_path.write_bytes(png)
        except OSError as exc:
            raise ScreenshotError(f"could not write screenshot: {exc}") from exc
        logger.debug("screenshot for %s written to %s (%d bytes)", url, out_path, len(png))
