"""sitegrab: fetch pages, save HTML, links and full-page screenshots."""

from sitegrab.batch import run_batch
from sitegrab.pipeline import InvalidURLError, parse_target, scrape_site

__all__ = ["run_batch", "scrape_site", "parse_target", "InvalidURLError"]
