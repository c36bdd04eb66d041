"""Page fetching for the job scraper.

Single GET per request with an explicit timeout, a cap on the bytes read
and truncation to the content budget. No retries.
"""

import logging
from urllib.parse import urlparse

import httpx

from ..errors import FetchError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_BYTES = 2_097_152
DEFAULT_CONTENT_BUDGET = 50_000

HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-IN,en-US;q=0.9,en;q=0.8",
}


def truncate_content(text: str, budget: int) -> str:
    """Keep exactly the first `budget` characters."""
    return text[:budget]


class PageFetcher:
    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        max_bytes: int = DEFAULT_MAX_BYTES,
        content_budget: int = DEFAULT_CONTENT_BUDGET,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.timeout = timeout
        self.max_bytes = max_bytes
        self.content_budget = content_budget
        self._transport = transport

    def fetch(self, url: str) -> str:
        """Return the page text at `url`, truncated to the content budget.

        Raises FetchError on invalid URLs, network errors and non-success statuses.
        """
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise FetchError(f"Unsupported URL: {url}")

        try:
            with httpx.Client(
                follow_redirects=True,
                timeout=self.timeout,
                headers=HEADERS,
                transport=self._transport,
            ) as client:
                with client.stream("GET", url) as response:
                    if response.status_code >= 400:
                        logger.warning("Fetch failed: url=%s status=%d", url, response.status_code)
                        raise FetchError(f"Failed to fetch page: HTTP {response.status_code}")
                    body = self._read_capped(response)
                    encoding = response.encoding or "utf-8"
        except httpx.HTTPError as exc:
            logger.warning("Fetch failed: url=%s error=%s", url, type(exc).__name__)
            raise FetchError(f"Failed to fetch page: {type(exc).__name__}") from exc

        text = body.decode(encoding, errors="replace")
        logger.info("Fetched %s: %d bytes, %d chars", url, len(body), len(text))
        return truncate_content(text, self.content_budget)

    def _read_capped(self, response: httpx.Response) -> bytes:
        chunks = []
        size = 0
        for chunk in response.iter_bytes():
            remaining = self.max_bytes - size
            if len(chunk) >= remaining:
                chunks.append(chunk[:remaining])
                logger.info("Response body capped at %d bytes", self.max_bytes)
                break
            chunks.append(chunk)
            size += len(chunk)
        return b"".join(chunks)
