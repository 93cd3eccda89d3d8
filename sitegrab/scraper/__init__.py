"""Scraper package: fetch, link extraction, slugs and screenshots."""

from sitegrab.scraper.extractor import extract_links
from sitegrab.scraper.fetcher import (
    BodyReadError,
    FetchError,
    HTTPStatusError,
    NetworkError,
    fetch_page,
)
from sitegrab.scraper.models import FetchResult, SiteResult
from sitegrab.scraper.screenshot import PlaywrightCapturer, ScreenshotCapturer, ScreenshotError
from sitegrab.scraper.slug import make_site_slug, sanitize

__all__ = [
    "fetch_page",
    "extract_links",
    "make_site_slug",
    "sanitize",
    "FetchResult",
    "SiteResult",
    "FetchError",
    "NetworkError",
    "BodyReadError",
    "HTTPStatusError",
    "ScreenshotCapturer",
    "ScreenshotError",
    "PlaywrightCapturer",
]
