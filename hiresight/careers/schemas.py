"""Career field reference data schemas."""

from typing import Literal

from pydantic import BaseModel, Field


class CareerJobRole(BaseModel):
    title: str
    description: str
    experienceLevel: Literal["Entry", "Mid", "Senior"]


class SkillCategory(BaseModel):
    technical: list[str] = Field(default_factory=list)
    soft: list[str] = Field(default_factory=list)


class SalaryBands(BaseModel):
    entry: str
    mid: str
    senior: str


class FieldGrowthOutlook(BaseModel):
    trend: Literal["Growing", "Stable", "Declining"]
    percentage: str
    description: str


class StateData(BaseModel):
    averageSalary: str
    jobOpenings: int = 0


class CareerField(BaseModel):
    id: str
    name: str
    icon: str
    shortDescription: str
    description: str
    jobRoles: list[CareerJobRole]
    skills: SkillCategory
    salaryRanges: SalaryBands
    growthOutlook: FieldGrowthOutlook
    stateData: dict[str, StateData] | None = None


class RoleOpenings(BaseModel):
    title: str
    count: int


class SkillFrequency(BaseModel):
    name: str
    importance: Literal["High", "Medium", "Low"]


class SalarySummary(BaseModel):
    minimum: int
    average: int
    maximum: int


class ExperienceSummary(BaseModel):
    min: int
    max: int


class FieldStats(BaseModel):
    """Aggregate of the CSV job dataset for one career field."""

    totalOpenings: int
    topRoles: list[RoleOpenings]
    topSkills: list[SkillFrequency]
    salaryRange: SalarySummary
    companies: list[str]
    avgExperience: ExperienceSummary


class MarketDataResponse(BaseModel):
    field: str
    stats: FieldStats | None = None
