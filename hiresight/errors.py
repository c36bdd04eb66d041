"""Error taxonomy for the AI pipelines.

Every class carries the HTTP status the app boundary answers with.
The message is what the caller sees in the ``{"error": ...}`` envelope,
so it must never contain raw provider output or credentials.
"""


class HiresightError(Exception):
    """Base class for errors converted to a JSON error envelope in main.py."""

    status_code: int = 500

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message or self.default_message()

    @classmethod
    def default_message(cls) -> str:
        return "Internal error"


class ConfigError(HiresightError):
    """Required process configuration (e.g. the provider credential) is missing."""

    @classmethod
    def default_message(cls) -> str:
        return "AI provider configuration is incomplete"


class FetchError(HiresightError):
    """The target page could not be retrieved."""

    @classmethod
    def default_message(cls) -> str:
        return "Failed to fetch the requested page"


class RateLimited(HiresightError):
    status_code = 429

    @classmethod
    def default_message(cls) -> str:
        return "Rate limit exceeded. Please try again later."


class PaymentRequired(HiresightError):
    status_code = 402

    @classmethod
    def default_message(cls) -> str:
        return "AI credits required. Please add credits to continue."


class ProviderError(HiresightError):
    """Any other non-success answer (or no answer) from the AI provider."""

    @classmethod
    def default_message(cls) -> str:
        return "AI provider error"


class MalformedModelOutput(HiresightError):
    """JSON-mode output that could not be parsed or validated."""

    @classmethod
    def default_message(cls) -> str:
        return "AI response could not be parsed"


class NotFound(HiresightError):
    status_code = 404

    @classmethod
    def default_message(cls) -> str:
        return "Not found"
