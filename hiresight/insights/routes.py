"""Career insights JSON route."""

from fastapi import APIRouter, Depends

from ..config import Settings
from ..dependencies import get_provider, get_settings
from ..integrations.provider import GenerativeProvider
from .schemas import AnalyzeCareerRequest, AnalyzeCareerResponse
from .service import generate_insights

router = APIRouter(tags=["insights"])


@router.post("/analyze-career", response_model=AnalyzeCareerResponse)
def analyze_career(
    body: AnalyzeCareerRequest,
    provider: GenerativeProvider = Depends(get_provider),
    config: Settings = Depends(get_settings),
):
    insights = generate_insights(
        provider,
        body.careerField,
        (body.location or "").strip() or config.default_region,
        search_grounding=config.gemini_search_grounding,
    )
    return {"insights": insights}
