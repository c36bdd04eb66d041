"""Tests for career insights validation."""

import pytest

from hiresight.errors import MalformedModelOutput
from hiresight.integrations.validation import CareerInsights, validate_insights


class TestValidateInsights:
    def test_accepts_complete_payload(self, valid_insights):
        result = validate_insights(valid_insights)
        assert result["growthOutlook"]["trend"] == "Growing"
        assert result["salaryRanges"]["currency"] == "INR"
        assert result["jobRoles"][0]["title"] == "Data Analyst"
        assert set(result) == set(CareerInsights.model_fields)

    def test_normalizes_enum_case(self, valid_insights):
        valid_insights["growthOutlook"] = {"trend": "declining", "description": "Shrinking"}
        valid_insights["softSkills"] = [{"skill": "Empathy", "importance": "HIGH"}]
        result = validate_insights(valid_insights)
        assert result["growthOutlook"]["trend"] == "Declining"
        assert result["softSkills"][0]["importance"] == "High"

    def test_coerces_numeric_strings(self, valid_insights):
        valid_insights["jobRoles"] = [{"title": "Analyst", "count": "12"}]
        assert validate_insights(valid_insights)["jobRoles"][0]["count"] == 12

    def test_rejects_missing_field(self, valid_insights):
        del valid_insights["marketDemand"]
        with pytest.raises(MalformedModelOutput):
            validate_insights(valid_insights)

    def test_rejects_unknown_trend(self, valid_insights):
        valid_insights["growthOutlook"] = {"trend": "Booming", "description": "x"}
        with pytest.raises(MalformedModelOutput):
            validate_insights(valid_insights)

    def test_rejects_negative_salary(self, valid_insights):
        valid_insights["salaryRanges"] = {"min": -1, "avg": 10, "max": 20, "currency": "INR"}
        with pytest.raises(MalformedModelOutput):
            validate_insights(valid_insights)

    @pytest.mark.parametrize("value", [float("inf"), float("nan")])
    def test_rejects_non_finite_salary(self, valid_insights, value):
        valid_insights["salaryRanges"]["max"] = value
        with pytest.raises(MalformedModelOutput):
            validate_insights(valid_insights)

    def test_rejects_bad_importance(self, valid_insights):
        valid_insights["technicalSkills"] = [{"skill": "SQL", "importance": "Critical"}]
        with pytest.raises(MalformedModelOutput):
            validate_insights(valid_insights)

    def test_rejects_non_object(self):
        with pytest.raises(MalformedModelOutput):
            validate_insights(["not", "an", "object"])

    def test_does_not_enforce_salary_ordering(self, valid_insights):
        valid_insights["salaryRanges"] = {"min": 900, "avg": 500, "max": 100, "currency": "USD"}
        result = validate_insights(valid_insights)
        assert result["salaryRanges"]["min"] == 900
