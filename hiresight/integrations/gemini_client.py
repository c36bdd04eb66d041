"""Google Gemini integration via the Generative Language REST API.

One generateContent call per prompt, no retries. HTTP failures are mapped
onto the error taxonomy: 429 -> RateLimited, 402 -> PaymentRequired,
anything else -> ProviderError (body logged, never returned to callers).
"""

import logging

import httpx

from ..errors import ConfigError, PaymentRequired, ProviderError, RateLimited

logger = logging.getLogger(__name__)

API_BASE = "https://generativelanguage.googleapis.com/v1beta/models"


class GeminiProvider:
    name = "gemini"

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.0-flash",
        temperature: float = 0.3,
        max_output_tokens: int = 8192,
        timeout: float = 60.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not api_key:
            raise ConfigError("AI provider configuration is incomplete: GEMINI_API_KEY is not set")
        self._api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self.timeout = timeout
        self._transport = transport

    def _payload(self, prompt: str, json_mode: bool, search_grounding: bool) -> dict:
        generation_config = {
            "temperature": self.temperature,
            "maxOutputTokens": self.max_output_tokens,
        }
        if json_mode:
            generation_config["responseMimeType"] = "application/json"
        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": generation_config,
        }
        if search_grounding:
            payload["tools"] = [{"googleSearch": {}}]
        return payload

    def generate(self, prompt: str, *, json_mode: bool = False, search_grounding: bool = False) -> str:
        """Send a prompt and return the text of the first candidate."""
        url = f"{API_BASE}/{self.model}:generateContent"
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.post(
                    url,
                    params={"key": self._api_key},
                    json=self._payload(prompt, json_mode, search_grounding),
                )
        except httpx.HTTPError as exc:
            logger.error("Gemini request failed (model=%s): %s", self.model, type(exc).__name__)
            raise ProviderError("AI provider is unreachable") from exc

        if response.status_code == 429:
            logger.warning("Gemini rate limit hit (model=%s)", self.model)
            raise RateLimited()
        if response.status_code == 402:
            logger.warning("Gemini payment required (model=%s)", self.model)
            raise PaymentRequired()
        if response.status_code >= 400:
            logger.error("Gemini API error: status=%d body=%s", response.status_code, response.text[:2000])
            raise ProviderError()

        try:
            data = response.json()
            return data["candidates"][0]["content"]["parts"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            logger.error("Unexpected Gemini response envelope: %s", response.text[:2000])
            raise ProviderError("AI provider returned an unexpected response") from exc
