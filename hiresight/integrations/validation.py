"""Pydantic validation schemas for AI response parsing.

CareerInsights is strict: every field is required and typed, enum-like
values are case-normalised and then checked. Anything that does not fit
is rejected as a whole; callers turn that into MalformedModelOutput.
"""

import logging
from typing import Literal

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..errors import MalformedModelOutput

logger = logging.getLogger(__name__)

Trend = Literal["Growing", "Stable", "Declining"]
Importance = Literal["High", "Medium", "Low"]


def _title_case(v: object) -> object:
    if isinstance(v, str):
        return v.strip().capitalize()
    return v


# ── Career insights ───────────────────────────────────────────────────


class GrowthOutlook(BaseModel):
    trend: Trend
    description: str

    @field_validator("trend", mode="before")
    @classmethod
    def normalize_trend(cls, v: object) -> object:
        return _title_case(v)


class SalaryRanges(BaseModel):
    min: float = Field(ge=0, allow_inf_nan=False)
    avg: float = Field(ge=0, allow_inf_nan=False)
    max: float = Field(ge=0, allow_inf_nan=False)
    currency: str


class JobRoleCount(BaseModel):
    title: str
    count: int = Field(ge=0)


class SkillImportance(BaseModel):
    skill: str
    importance: Importance

    @field_validator("importance", mode="before")
    @classmethod
    def normalize_importance(cls, v: object) -> object:
        return _title_case(v)


class CareerInsights(BaseModel):
    """Market insights for one career field, as returned to the client."""

    growthOutlook: GrowthOutlook
    salaryRanges: SalaryRanges
    jobRoles: list[JobRoleCount]
    technicalSkills: list[SkillImportance]
    softSkills: list[SkillImportance]
    topLocations: list[str]
    marketDemand: str


# ── Validation entry points ───────────────────────────────────────────


def validate_insights(raw: object) -> dict:
    """Validate a parsed insights payload and return a clean dict.

    Raises MalformedModelOutput when the payload does not match the schema.
    """
    try:
        validated = CareerInsights.model_validate(raw)
    except ValidationError as exc:
        logger.warning("Insights validation failed: %d errors, first=%s", exc.error_count(), exc.errors()[0])
        raise MalformedModelOutput("AI response did not match the expected insights structure") from exc
    return validated.model_dump()
