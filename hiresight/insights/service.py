"""Career insights service: prompt -> JSON-mode model call -> strict validation."""

import logging

from ..errors import PaymentRequired, ProviderError
from ..integrations.json_recovery import parse_json_mode
from ..integrations.provider import GenerativeProvider
from ..integrations.validation import validate_insights
from ..prompts import build_insights_prompt

logger = logging.getLogger(__name__)


def generate_insights(
    provider: GenerativeProvider,
    subject: str,
    region: str = "India",
    search_grounding: bool = False,
) -> dict:
    """Return a fully validated CareerInsights dict for `subject` in `region`.

    Raises RateLimited, ProviderError or MalformedModelOutput. There is no
    partial result: either every field validates or the call fails.
    """
    logger.info("Analyzing career field %r in %r (provider=%s)", subject, region, provider.name)
    prompt = build_insights_prompt(subject, region)

    try:
        text = provider.generate(prompt, json_mode=True, search_grounding=search_grounding)
    except PaymentRequired as exc:
        # Credit exhaustion is only reported as such by the scraper route.
        raise ProviderError() from exc

    insights = validate_insights(parse_json_mode(text))
    logger.info("Analysis complete for %r: trend=%s", subject, insights["growthOutlook"]["trend"])
    return insights
