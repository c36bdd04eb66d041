"""Tests for provider selection."""

import pytest

from hiresight.config import Settings
from hiresight.errors import ConfigError
from hiresight.integrations.anthropic_client import AnthropicProvider
from hiresight.integrations.gemini_client import GeminiProvider
from hiresight.integrations.provider import create_provider


def _settings(**kwargs) -> Settings:
    return Settings(_env_file=None, **kwargs)


class TestCreateProvider:
    def test_gemini(self):
        provider = create_provider(_settings(ai_provider="gemini", gemini_api_key="k", gemini_model="gemini-x"))
        assert isinstance(provider, GeminiProvider)
        assert provider.model == "gemini-x"

    def test_anthropic(self):
        provider = create_provider(_settings(ai_provider="Anthropic", anthropic_api_key="k"))
        assert isinstance(provider, AnthropicProvider)

    def test_timeout_comes_from_settings(self):
        provider = create_provider(_settings(ai_provider="gemini", gemini_api_key="k", ai_timeout_seconds=7))
        assert provider.timeout == 7

    def test_missing_credential(self):
        with pytest.raises(ConfigError, match="incomplete"):
            create_provider(_settings(ai_provider="gemini", gemini_api_key=""))

    def test_unknown_provider(self):
        with pytest.raises(ConfigError, match="unknown provider"):
            create_provider(_settings(ai_provider="mystery", gemini_api_key="k"))
