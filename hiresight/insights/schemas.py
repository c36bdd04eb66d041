"""Career insights request/response schemas."""

from pydantic import BaseModel, Field, field_validator

from ..integrations.validation import CareerInsights


class AnalyzeCareerRequest(BaseModel):
    careerField: str = Field(..., min_length=1, max_length=200)
    location: str | None = Field(None, max_length=200)

    @field_validator("careerField")
    @classmethod
    def strip_career_field(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("careerField must not be blank")
        return v


class AnalyzeCareerResponse(BaseModel):
    insights: CareerInsights
