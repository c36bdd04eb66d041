"""Shared test fixtures."""

import copy
import json
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from hiresight.config import Settings
from hiresight.dependencies import get_fetcher, get_provider
from hiresight.integrations.fetcher import PageFetcher
from hiresight.main import create_app

VALID_INSIGHTS = {
    "growthOutlook": {"trend": "Growing", "description": "Demand keeps rising across sectors."},
    "salaryRanges": {"min": 400000, "avg": 800000, "max": 1500000, "currency": "INR"},
    "jobRoles": [
        {"title": "Data Analyst", "count": 1200},
        {"title": "Business Analyst", "count": 900},
        {"title": "BI Developer", "count": 450},
        {"title": "Analytics Consultant", "count": 300},
        {"title": "Reporting Analyst", "count": 250},
    ],
    "technicalSkills": [
        {"skill": "SQL", "importance": "High"},
        {"skill": "Python", "importance": "High"},
        {"skill": "Power BI", "importance": "Medium"},
    ],
    "softSkills": [
        {"skill": "Communication", "importance": "High"},
        {"skill": "Curiosity", "importance": "Low"},
    ],
    "topLocations": ["Bengaluru", "Hyderabad", "Pune"],
    "marketDemand": "Strong demand driven by digital adoption.",
}


class StubProvider:
    """Records prompts and answers with a canned reply or error."""

    name = "stub"

    def __init__(self, reply: str = "", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[dict] = []

    def generate(self, prompt: str, *, json_mode: bool = False, search_grounding: bool = False) -> str:
        self.calls.append({"prompt": prompt, "json_mode": json_mode, "search_grounding": search_grounding})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def test_settings(tmp_path):
    """Settings built explicitly, independent of .env files."""
    return Settings(
        _env_file=None,
        ai_provider="gemini",
        gemini_api_key="test-key",
        log_dir=str(tmp_path / "logs"),
        job_dataset_path=str(tmp_path / "missing.csv"),
    )


@pytest.fixture
def valid_insights():
    return copy.deepcopy(VALID_INSIGHTS)


@pytest.fixture
def insights_json():
    return json.dumps(VALID_INSIGHTS)


@pytest.fixture
def stub_provider():
    return StubProvider()


@pytest.fixture
def stub_fetcher():
    fetcher = MagicMock(spec=PageFetcher)
    fetcher.fetch.return_value = "<html><body><div class='job'>Data Analyst at Acme</div></body></html>"
    return fetcher


@pytest.fixture
def app_client(test_settings, stub_provider, stub_fetcher):
    """TestClient with the AI provider and page fetcher replaced by stubs."""
    app = create_app(test_settings)
    app.dependency_overrides[get_provider] = lambda: stub_provider
    app.dependency_overrides[get_fetcher] = lambda: stub_fetcher
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def unconfigured_client(test_settings, stub_fetcher):
    """TestClient for an app started without any provider credential."""
    config = test_settings.model_copy(update={"gemini_api_key": ""})
    app = create_app(config)
    app.dependency_overrides[get_fetcher] = lambda: stub_fetcher
    return TestClient(app, raise_server_exceptions=False)
