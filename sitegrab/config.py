"""Centralised settings for sitegrab.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


# Demo target list run by ``--all`` (and by default when no URL is given).
DEFAULT_TARGETS: list[str] = [
    "https://example.com/",
    "https://httpbin.org/html",
    "https://www.iana.org/domains/reserved",
    "https://www.rfc-editor.org/",
    "https://www.ietf.org/",
    "https://go.dev/",
    "https://pkg.go.dev/",
    "https://docs.python.org/tr/3/",
    "https://git-scm.com/book/tr/v2",
    "https://developer.mozilla.org/tr/",
    "https://learn.microsoft.com/tr-tr/",
    "https://tr.wikipedia.org/wiki/Anasayfa",
    "https://tr.wikipedia.org/wiki/Türkiye",
    "https://tr.wiktionary.org/wiki/Vikis%C3%B6zl%C3%BCk:Anasayfa",
    "https://tr.wikiquote.org/wiki/Anasayfa",
]

# Per-site artifact names, relative to ``<output_root>/<slug>/``.
HTML_FILENAME = "site_data.html"
LINKS_FILENAME = "links.txt"
SCREENSHOT_FILENAME = "screenshot.png"
META_FILENAME = "meta.json"

# Aggregate file, relative to ``<output_root>/``.
SUMMARY_FILENAME = "summary.json"


def _env_flag(name: str, default: str = "0") -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    output_root: Path = field(
        default_factory=lambda: Path(os.environ.get("SITEGRAB_OUTPUT", "output"))
    )
    save_error_pages: bool = field(
        default_factory=lambda: _env_flag("SITEGRAB_SAVE_ERROR_PAGES")
    )

    # ------------------------------------------------------------------
    # Timeouts (seconds)
    # ------------------------------------------------------------------
    site_timeout: float = field(
        default_factory=lambda: float(os.environ.get("SITEGRAB_SITE_TIMEOUT", "25"))
    )
    fetch_timeout: float = field(
        default_factory=lambda: float(os.environ.get("SITEGRAB_FETCH_TIMEOUT", "20"))
    )

    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "SITEGRAB_USER_AGENT", "sitegrab/1.0 (+https://example.com)"
        )
    )

    # ------------------------------------------------------------------
    # Screenshot browser
    # ------------------------------------------------------------------
    viewport_width: int = field(
        default_factory=lambda: int(os.environ.get("SITEGRAB_VIEWPORT_WIDTH", "1366"))
    )
    viewport_height: int = field(
        default_factory=lambda: int(os.environ.get("SITEGRAB_VIEWPORT_HEIGHT", "768"))
    )


# Module-level singleton; import this everywhere:
#   from sitegrab.config import settings
settings = Settings()
