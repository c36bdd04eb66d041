"""Tests for the CSV job dataset loader and aggregation."""

from hiresight.careers.dataset import (
    DatasetJob,
    analyze_field_data,
    jobs_for_field,
    load_job_dataset,
    parse_row,
)

HEADER = "Company Name,Company Type,Job Title,Number of Openings,Required Skills,Salary Range,Min Experience,Max Experience\n"


def _job(title="Data Analyst", company="Acme", openings=10, skills=None, salary="", min_exp=0, max_exp=2):
    return DatasetJob(company, "Product", title, openings, skills or [], salary, min_exp, max_exp)


class TestParseRow:
    def test_full_row(self):
        job = parse_row(["Infosys", "IT Services", "Developer", "120", "Java, SQL ,Git", "₹1 - ₹2", "0", "3"])
        assert job.company == "Infosys"
        assert job.openings == 120
        assert job.skills == ["Java", "SQL", "Git"]
        assert job.maxExperience == 3

    def test_short_row(self):
        assert parse_row(["Infosys", "IT Services", "Developer"]) is None

    def test_non_numeric_fields_become_zero(self):
        job = parse_row(["A", "B", "C", "many", "", "", "n/a", ""])
        assert job.openings == 0
        assert job.minExperience == 0
        assert job.skills == []


class TestLoadJobDataset:
    def test_loads_quoted_fields(self, tmp_path):
        path = tmp_path / "jobs.csv"
        path.write_text(
            HEADER + 'Infosys,IT Services,Software Developer,120,"Java, Spring","₹4,00,000 - ₹7,00,000",0,3\n',
            encoding="utf-8",
        )
        jobs = load_job_dataset(path)
        assert len(jobs) == 1
        assert jobs[0].skills == ["Java", "Spring"]
        assert jobs[0].salaryRange == "₹4,00,000 - ₹7,00,000"

    def test_skips_malformed_and_blank_rows(self, tmp_path):
        path = tmp_path / "jobs.csv"
        path.write_text(
            HEADER + "broken,row\n\nTCS,IT Services,Data Engineer,45,SQL,,2,5\n",
            encoding="utf-8",
        )
        jobs = load_job_dataset(path)
        assert [j.company for j in jobs] == ["TCS"]

    def test_missing_file_is_empty(self, tmp_path):
        assert load_job_dataset(tmp_path / "nope.csv") == []

    def test_header_only(self, tmp_path):
        path = tmp_path / "jobs.csv"
        path.write_text(HEADER, encoding="utf-8")
        assert load_job_dataset(path) == []


class TestJobsForField:
    def test_matches_title_or_skills(self):
        jobs = [
            _job(title="Digital Marketing Manager"),
            _job(title="Analyst", skills=["Marketing Analytics"]),
            _job(title="Registered Nurse"),
        ]
        matched = jobs_for_field(jobs, "Marketing & Communications")
        assert len(matched) == 2

    def test_symbol_words_are_keywords(self):
        jobs = [_job(title="R&D Associate"), _job(title="Registered Nurse")]
        assert jobs_for_field(jobs, "Research & Development") == [jobs[0]]

    def test_case_insensitive(self):
        assert jobs_for_field([_job(title="ENGINEERING LEAD")], "Engineering")


class TestAnalyzeFieldData:
    def test_empty(self):
        assert analyze_field_data([]) is None

    def test_aggregates(self):
        jobs = [
            _job(title="Developer", company="Acme", openings=10, skills=["SQL", "Python"],
                 salary="₹4,00,000 - ₹6,00,000", min_exp=1, max_exp=3),
            _job(title="Developer", company="Globex", openings=5, skills=["SQL"],
                 salary="₹6,00,000 - ₹10,00,000", min_exp=3, max_exp=5),
            _job(title="Tester", company="Acme", openings=2, skills=["SQL", "Selenium"],
                 salary="negotiable", min_exp=0, max_exp=1),
            _job(title="Architect", company="Initech", openings=1, skills=["UML"], min_exp=8, max_exp=12),
        ]
        stats = analyze_field_data(jobs)
        assert stats.totalOpenings == 18
        assert stats.topRoles[0].title == "Developer"
        assert stats.topRoles[0].count == 15
        assert stats.topSkills[0].name == "SQL"
        assert stats.topSkills[0].importance == "High"
        importance = {s.name: s.importance for s in stats.topSkills}
        assert importance["Python"] == "Low"
        assert stats.salaryRange.minimum == 500000
        assert stats.salaryRange.maximum == 800000
        assert stats.salaryRange.average == 650000
        assert stats.companies == ["Acme", "Globex", "Initech"]
        assert stats.avgExperience.min == 3
        assert stats.avgExperience.max == 5

    def test_medium_importance(self):
        jobs = [_job(skills=["Excel"]), _job(skills=["Excel"]), _job(), _job(), _job()]
        stats = analyze_field_data(jobs)
        assert len(stats.topSkills) == 1
        assert stats.topSkills[0].importance == "Medium"

    def test_halves_round_up(self):
        jobs = [
            _job(salary="₹1 - ₹2", min_exp=2, max_exp=3),
            _job(salary="₹2 - ₹4", min_exp=3, max_exp=4),
        ]
        stats = analyze_field_data(jobs)
        assert stats.avgExperience.min == 3
        assert stats.avgExperience.max == 4
        assert stats.salaryRange.minimum == 2
        assert stats.salaryRange.maximum == 3
        assert stats.salaryRange.average == 3

    def test_no_parseable_salaries(self):
        stats = analyze_field_data([_job(salary="Not disclosed")])
        assert stats.salaryRange.minimum == 0
        assert stats.salaryRange.average == 0
        assert stats.salaryRange.maximum == 0
