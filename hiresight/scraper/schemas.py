"""Job scraper request/response schemas."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class ScrapeJobsRequest(BaseModel):
    url: str = Field(..., min_length=1, max_length=2048)

    @field_validator("url")
    @classmethod
    def strip_url(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("url must not be blank")
        return v


class ScrapeJobsResponse(BaseModel):
    """Extracted listings.

    Each job is loosely shaped: title, company, location, salary, experience,
    skills and description are all optional. When the model reply could not
    be structured, `jobs` holds a single {"rawData": <reply text>} entry.
    """

    jobs: list[dict[str, Any]]
    source: str
