"""Generative provider interface with Protocol pattern for dependency injection.

Both pipelines only need "prompt in, text out, typed error out", so any
provider client that satisfies GenerativeProvider can be swapped in
without touching prompt building or response recovery.
"""

from typing import Protocol

from ..config import Settings
from ..errors import ConfigError


class GenerativeProvider(Protocol):
    """Generative model interface."""

    name: str

    def generate(self, prompt: str, *, json_mode: bool = False, search_grounding: bool = False) -> str: ...


def create_provider(config: Settings) -> GenerativeProvider:
    """Factory: create the provider client selected by configuration.

    Raises ConfigError when the provider is unknown or its credential is missing.
    """
    choice = config.ai_provider.lower().strip()
    if choice == "gemini":
        from .gemini_client import GeminiProvider

        return GeminiProvider(
            api_key=config.gemini_api_key,
            model=config.gemini_model,
            temperature=config.ai_temperature,
            max_output_tokens=config.ai_max_output_tokens,
            timeout=config.ai_timeout_seconds,
        )
    if choice == "anthropic":
        from .anthropic_client import AnthropicProvider

        return AnthropicProvider(
            api_key=config.anthropic_api_key,
            model=config.anthropic_model,
            temperature=config.ai_temperature,
            max_output_tokens=config.ai_max_output_tokens,
            timeout=config.ai_timeout_seconds,
        )
    raise ConfigError(f"AI provider configuration is incomplete: unknown provider {config.ai_provider!r}")
