"""CSV job dataset: loading, per-field filtering and aggregation.

Pure, synchronous, in-memory. Malformed rows are skipped; a missing file
gives an empty dataset.
"""

import csv
import logging
import math
import re
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

from .schemas import FieldStats

logger = logging.getLogger(__name__)

EXPECTED_COLUMNS = 8
_SALARY_RE = re.compile(r"₹([\d,]+)\s*-\s*₹([\d,]+)")


@dataclass
class DatasetJob:
    company: str
    companyType: str
    title: str
    openings: int
    skills: list[str] = field(default_factory=list)
    salaryRange: str = ""
    minExperience: int = 0
    maxExperience: int = 0


def _to_int(value: str) -> int:
    try:
        return int(value.strip())
    except (ValueError, AttributeError):
        return 0


def parse_row(row: list[str]) -> DatasetJob | None:
    """Build a DatasetJob from one CSV row, or None if the row is too short."""
    if len(row) < EXPECTED_COLUMNS:
        return None
    values = [v.strip() for v in row]
    return DatasetJob(
        company=values[0],
        companyType=values[1],
        title=values[2],
        openings=_to_int(values[3]),
        skills=[s.strip() for s in values[4].split(",") if s.strip()],
        salaryRange=values[5],
        minExperience=_to_int(values[6]),
        maxExperience=_to_int(values[7]),
    )


def load_job_dataset(path: str | Path) -> list[DatasetJob]:
    """Read the job dataset CSV. The header row is skipped."""
    path = Path(path)
    try:
        with path.open(newline="", encoding="utf-8") as fh:
            reader = csv.reader(fh)
            next(reader, None)
            jobs = []
            for line_no, row in enumerate(reader, start=2):
                if not row:
                    continue
                job = parse_row(row)
                if job is None:
                    logger.warning("Skipping malformed dataset row %d in %s", line_no, path)
                    continue
                jobs.append(job)
    except (OSError, UnicodeDecodeError, csv.Error):
        logger.exception("Job dataset not readable: %s", path)
        return []

    logger.info("Loaded %d jobs from %s", len(jobs), path)
    return jobs


def jobs_for_field(jobs: list[DatasetJob], field_name: str) -> list[DatasetJob]:
    """Jobs whose title or skills mention any word of the field name."""
    keywords = [k for k in field_name.lower().split(" ") if k]
    matched = []
    for job in jobs:
        title = job.title.lower()
        skills = " ".join(job.skills).lower()
        if any(k in title or k in skills for k in keywords):
            matched.append(job)
    return matched


def _round_half_up(value: float) -> int:
    """Round .5 upwards, unlike the banker's rounding of round()."""
    return math.floor(value + 0.5)


def _importance(count: int, total: int) -> str:
    if count > total * 0.5:
        return "High"
    if count > total * 0.25:
        return "Medium"
    return "Low"


def analyze_field_data(jobs: list[DatasetJob]) -> FieldStats | None:
    """Aggregate openings, roles, skills, salaries and experience for a job subset."""
    if not jobs:
        return None

    total = len(jobs)

    role_counts: Counter[str] = Counter()
    for job in jobs:
        role_counts[job.title] += job.openings
    top_roles = [{"title": t, "count": c} for t, c in role_counts.most_common(5)]

    skill_counts: Counter[str] = Counter()
    for job in jobs:
        skill_counts.update(job.skills)
    top_skills = [{"name": s, "importance": _importance(c, total)} for s, c in skill_counts.most_common(10)]

    salaries = []
    for job in jobs:
        match = _SALARY_RE.search(job.salaryRange)
        if match:
            salaries.append((int(match.group(1).replace(",", "")), int(match.group(2).replace(",", ""))))
    if salaries:
        avg_min = _round_half_up(sum(s[0] for s in salaries) / len(salaries))
        avg_max = _round_half_up(sum(s[1] for s in salaries) / len(salaries))
    else:
        avg_min = avg_max = 0

    return FieldStats(
        totalOpenings=sum(job.openings for job in jobs),
        topRoles=top_roles,
        topSkills=top_skills,
        salaryRange={"minimum": avg_min, "average": _round_half_up((avg_min + avg_max) / 2), "maximum": avg_max},
        companies=list(dict.fromkeys(job.company for job in jobs)),
        avgExperience={
            "min": _round_half_up(sum(job.minExperience for job in jobs) / total),
            "max": _round_half_up(sum(job.maxExperience for job in jobs) / total),
        },
    )
