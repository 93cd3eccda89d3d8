"""Filesystem-safe output folder names derived from URLs."""

from __future__ import annotations

import hashlib
import re
from urllib.parse import urlsplit

_PLACEHOLDER = "site"
_UNSAFE = re.compile(r"[^a-z0-9_-]")


def sanitize(value: str) -> str:
    """Lowercase *value* and replace everything outside ``[a-z0-9_-]`` with ``_``.

    Leading/trailing underscores are trimmed; an empty result becomes ``"site"``.
    """
    cleaned = _UNSAFE.sub("_", value.lower()).strip("_")
    return cleaned or _PLACEHOLDER


def make_site_slug(url: str) -> str:
    """Return ``<sanitized host>_<first 8 hex chars of sha1(url)>``.

    The hash covers the exact *url* string, so the same URL always maps to the
    same folder (re-runs overwrite) while different URLs on one host do not
    collide.  Never raises: an unparsable URL falls back to the placeholder
    host.
    """
    host = _PLACEHOLDER
    try:
        netloc = urlsplit(url).netloc
    except ValueError:
        netloc = ""
    # host[:port] only; userinfo never reaches the folder name
    netloc = netloc.rpartition("@")[2]
    if netloc:
        host = netloc

    digest = hashlib.sha1(url.encode("utf-8")).hexdigest()[:8]
    return f"{sanitize(host)}_{digest}"
