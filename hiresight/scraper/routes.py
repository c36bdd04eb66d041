"""Job scraper JSON route."""

from fastapi import APIRouter, Depends

from ..dependencies import get_fetcher, get_provider
from ..integrations.fetcher import PageFetcher
from ..integrations.provider import GenerativeProvider
from .schemas import ScrapeJobsRequest, ScrapeJobsResponse
from .service import scrape_jobs

router = APIRouter(tags=["scraper"])


@router.post("/scrape-jobs", response_model=ScrapeJobsResponse)
def scrape(
    body: ScrapeJobsRequest,
    provider: GenerativeProvider = Depends(get_provider),
    fetcher: PageFetcher = Depends(get_fetcher),
):
    return scrape_jobs(provider, fetcher, body.url)
