"""Link extraction: pulls absolute ``href`` targets out of raw HTML bytes.

This is a lexical scan, not an HTML parser.  It only sees literal
``href="..."`` / ``href='...'`` attributes, misses script-built links and may
pick up attribute-like text inside comments or ``<script>`` blocks.
"""

from __future__ import annotations

from typing import List
from urllib.parse import urldefrag, urljoin

_MARKER = b"href="
_QUOTES = (ord('"'), ord("'"))
_SKIP_PREFIXES = ("#", "javascript:", "mailto:")


def _iter_href_values(html: bytes):
    """Yield the raw quoted value following every ``href=`` (case-insensitive).

    An unquoted value is skipped; an unterminated quote ends the scan.
    """
    # bytes.lower() only touches ASCII, so offsets in *lower* match *html*.
    lower = html.lower()
    pos = 0
    while True:
        hit = lower.find(_MARKER, pos)
        if hit < 0:
            return
        start = hit + len(_MARKER)
        if start >= len(html):
            return
        quote = html[start]
        if quote not in _QUOTES:
            pos = start
            continue
        start += 1
        end = html.find(bytes([quote]), start)
        if end < 0:
            return
        pos = end + 1
        yield html[start:end].decode("utf-8", errors="replace").strip()


def _is_skipped(href: str) -> bool:
    return not href or href.lower().startswith(_SKIP_PREFIXES)


def extract_links(base_url: str, html: bytes) -> List[str]:
    """Return the sorted, deduplicated absolute URLs linked from *html*.

    Every ``href`` value is resolved against *base_url* and its fragment is
    dropped before deduplication.  Empty values, fragment-only references,
    ``javascript:`` and ``mailto:`` links are skipped.
    """
    found: set[str] = set()
    for href in _iter_href_values(html):
        if _is_skipped(href):
            continue
        try:
            absolute = urljoin(base_url, href)
        except ValueError:
            # e.g. a malformed IPv6 host in the reference
            continue
        found.add(urldefrag(absolute).url)
    return sorted(found)
