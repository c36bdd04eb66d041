"""Job scraper service: fetch page -> prompt -> model call -> best-effort recovery."""

import logging

from ..errors import FetchError
from ..integrations.fetcher import PageFetcher
from ..integrations.json_recovery import ListingsResult, recover_listings
from ..integrations.provider import GenerativeProvider
from ..prompts import build_extraction_prompt

logger = logging.getLogger(__name__)


def extract_listings(provider: GenerativeProvider, content: str) -> ListingsResult:
    """Ask the model for job records in `content` and recover what it returns."""
    prompt = build_extraction_prompt(content)
    text = provider.generate(prompt)
    return recover_listings(text)


def scrape_jobs(provider: GenerativeProvider, fetcher: PageFetcher, url: str) -> dict:
    """Extract job listings from the page at `url`.

    Fetch and provider failures propagate as typed errors. Output that cannot
    be structured is not an error: it comes back as one opaque record.
    """
    url = url.strip()
    logger.info("Fetching content from %s", url)
    content = fetcher.fetch(url)
    if not content.strip():
        raise FetchError("Fetched page is empty")

    logger.info("Sending %d chars to %s for extraction", len(content), provider.name)
    result = extract_listings(provider, content)
    jobs = result.to_records()
    logger.info("Extraction complete for %s: %d records (%s)", url, len(jobs), type(result).__name__)
    return {"jobs": jobs, "source": url}
