"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any


def utc_timestamp() -> str:
    """Return the current UTC time in RFC 3339 form, e.g. ``2025-01-31T09:15:02Z``."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


@dataclass
class FetchResult:
    """The raw HTTP response for a single URL fetch."""

    url: str
    status_code: int
    status_text: str
    body: bytes


@dataclass
class SiteResult:
    """Outcome record for one target, written to ``meta.json`` and the summary.

    Field order is the key order of the serialised JSON.
    """

    url: str
    out_dir: str = ""
    http_status: int = 0
    http_status_text: str = ""
    fetch_elapsed_ms: int = 0
    screenshot_ok: bool = False
    links_found: int = 0
    error: str = ""
    timestamp_utc: str = field(default_factory=utc_timestamp)

    @property
    def ok(self) -> bool:
        """``True`` when no stage recorded an error."""
        return not self.error

    def to_dict(self) -> dict[str, Any]:
        """Serialisable mapping; ``error`` is omitted when empty."""
        data = asdict(self)
        if not data["error"]:
            del data["error"]
        return data
