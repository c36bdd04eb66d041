"""Shared FastAPI dependencies."""

from fastapi import Request

from .careers.dataset import DatasetJob
from .config import Settings
from .errors import ConfigError
from .integrations.fetcher import PageFetcher
from .integrations.provider import GenerativeProvider


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_provider(request: Request) -> GenerativeProvider:
    """Get the AI provider from app state, or fail before any I/O if it was never configured."""
    provider = request.app.state.provider
    if provider is None:
        raise ConfigError(request.app.state.config_error)
    return provider


def get_fetcher(request: Request) -> PageFetcher:
    return request.app.state.fetcher


def get_job_dataset(request: Request) -> list[DatasetJob]:
    return request.app.state.job_dataset
