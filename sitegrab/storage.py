"""On-disk artifact writers for per-site outputs and the run summary."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable


def write_json(path: Path, data: Any) -> None:
    """Write *data* as pretty-printed (2-space) UTF-8 JSON."""
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def write_html(path: Path, body: bytes) -> None:
    """Write the response body byte-for-byte."""
    path.write_bytes(body)


def write_links(path: Path, links: Iterable[str]) -> None:
    """Write one URL per line with a trailing newline."""
    path.write_text("\n".join(links) + "\n", encoding="utf-8")
