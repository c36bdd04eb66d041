"""Anthropic API client behind the GenerativeProvider interface.

The SDK's own retry loop is disabled: failures go straight back to the
caller as RateLimited / PaymentRequired / ProviderError.
"""

import logging

import anthropic

from ..errors import ConfigError, PaymentRequired, ProviderError, RateLimited
from ..prompts import JSON_ONLY_SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class AnthropicProvider:
    name = "anthropic"

    def __init__(
        self,
        api_key: str,
        model: str = "claude-haiku-4-5-20251001",
        temperature: float = 0.3,
        max_output_tokens: int = 8192,
        timeout: float = 60.0,
        client: anthropic.Anthropic | None = None,
    ) -> None:
        if not api_key:
            raise ConfigError("AI provider configuration is incomplete: ANTHROPIC_API_KEY is not set")
        self.model = model
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self._client = client or anthropic.Anthropic(api_key=api_key, timeout=timeout, max_retries=0)

    def generate(self, prompt: str, *, json_mode: bool = False, search_grounding: bool = False) -> str:
        """Send a prompt and return the concatenated text blocks of the reply.

        Anthropic has no JSON response mode; it is requested through the system prompt.
        Search grounding is a Gemini feature and is ignored here.
        """
        kwargs = {
            "model": self.model,
            "max_tokens": self.max_output_tokens,
            "temperature": self.temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if json_mode:
            kwargs["system"] = JSON_ONLY_SYSTEM_PROMPT

        try:
            message = self._client.messages.create(**kwargs)
        except anthropic.RateLimitError as exc:
            logger.warning("Anthropic rate limit hit (model=%s)", self.model)
            raise RateLimited() from exc
        except anthropic.APIStatusError as exc:
            if exc.status_code == 402:
                logger.warning("Anthropic payment required (model=%s)", self.model)
                raise PaymentRequired() from exc
            logger.error("Anthropic API error: status=%d body=%s", exc.status_code, str(exc.body)[:2000])
            raise ProviderError() from exc
        except anthropic.APIConnectionError as exc:
            logger.error("Anthropic request failed (model=%s): %s", self.model, type(exc).__name__)
            raise ProviderError("AI provider is unreachable") from exc

        text = "".join(block.text for block in message.content if getattr(block, "type", "") == "text")
        if not text:
            logger.error("Anthropic reply had no text content (stop_reason=%s)", message.stop_reason)
            raise ProviderError("AI provider returned an unexpected response")

        logger.info(
            "Anthropic call complete (model=%s, input_tokens=%d, output_tokens=%d)",
            self.model,
            message.usage.input_tokens,
            message.usage.output_tokens,
        )
        return text
