"""HTTP fetcher: a single GET per target, no retries."""

from __future__ import annotations

import logging
import time

import httpx

from sitegrab.config import settings
from sitegrab.scraper.models import FetchResult

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Base class for fetch failures.

    ``status_code`` is 0 when no response was received.  ``body`` is only set
    for :class:`HTTPStatusError`, where the error page was read in full.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int = 0,
        status_text: str = "",
        body: bytes | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.status_text = status_text
        self.body = body


class NetworkError(FetchError):
    """DNS, connect, TLS, timeout or other transport failure."""


class BodyReadError(FetchError):
    """The status line arrived but reading the body failed."""


class HTTPStatusError(FetchError):
    """The server answered with status >= 400; the body is still available."""


def _status_text(response: httpx.Response) -> str:
    """Return the ``"404 Not Found"`` form of the response status."""
    return f"{response.status_code} {response.reason_phrase}".strip()


def fetch_page(url: str, timeout: float | None = None) -> FetchResult:
    """Fetch *url* and return a :class:`FetchResult`.

    Redirects are followed.  *timeout* is the caller's remaining budget in
    seconds; the effective timeout is never longer than
    ``settings.fetch_timeout``.

    Raises:
        NetworkError: No response was received, or the deadline passed
            before the body was complete.
        BodyReadError: The response body could not be read.
        HTTPStatusError: The server returned a 4xx/5xx status code.
    """
    effective = settings.fetch_timeout
    if timeout is not None:
        effective = min(effective, timeout)
    if effective <= 0:
        raise NetworkError("connection error: site timeout exceeded before fetch")

    headers = {"User-Agent": settings.user_agent}
    logger.debug("GET %s (timeout=%.1fs)", url, effective)

    # httpx timeouts apply per connect/read/write; the deadline caps the total.
    deadline = time.monotonic() + effective
    timed_out = f"connection error: timed out after {effective:.1f}s"

    with httpx.Client(
        headers=headers,
        timeout=effective,
        follow_redirects=True,
    ) as client:
        try:
            with client.stream("GET", url) as response:
                if time.monotonic() > deadline:
                    raise NetworkError(timed_out)
                status_code = response.status_code
                status_text = _status_text(response)
                chunks = []
                try:
                    for chunk in response.iter_bytes():
                        chunks.append(chunk)
                        if time.monotonic() > deadline:
                            raise NetworkError(timed_out)
                except httpx.HTTPError as exc:
                    raise BodyReadError(
                        f"could not read body: {exc}",
                        status_code=status_code,
                        status_text=status_text,
                    ) from exc
                body = b"".join(chunks)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise NetworkError(f"connection error: {exc}") from exc

    if status_code >= 400:
        raise HTTPStatusError(
            f"HTTP error: {status_text}",
            status_code=status_code,
            status_text=status_text,
            body=body,
        )

    logger.debug("%s -> %s (%d bytes)", url, status_text, len(body))
    return FetchResult(url=url, status_code=status_code, status_text=status_text, body=body)
