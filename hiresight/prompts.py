CAREER_INSIGHTS_PROMPT = """Act as a market-research analyst. Analyze the current job market for {career_field} in {location}.

Provide comprehensive, up-to-date insights including:
1. Growth outlook (trend as "Growing", "Stable", or "Declining" and a detailed description)
2. Salary ranges in the local currency (minimum, average, maximum for professionals with 2-5 years experience)
3. Top 5 common job roles with approximate number of current openings
4. Top 8 technical skills required (with importance level: High/Medium/Low)
5. Top 5 soft skills required (with importance level: High/Medium/Low)
6. Top 3 hiring locations in {location}
7. Market demand description (2-3 sentences about current demand and future prospects)

Return JSON in this exact structure:
{{
  "growthOutlook": {{
    "trend": "Growing" | "Stable" | "Declining",
    "description": "string"
  }},
  "salaryRanges": {{
    "min": number,
    "avg": number,
    "max": number,
    "currency": "string"
  }},
  "jobRoles": [
    {{"title": "string", "count": number}}
  ],
  "technicalSkills": [
    {{"skill": "string", "importance": "High" | "Medium" | "Low"}}
  ],
  "softSkills": [
    {{"skill": "string", "importance": "High" | "Medium" | "Low"}}
  ],
  "topLocations": ["string"],
  "marketDemand": "string"
}}"""

JOB_EXTRACTION_PROMPT = """You are a job data extraction specialist. Extract job listings from HTML content and return structured data in JSON format.
For each job, extract: title, company, location, salary (if available), experience required, skills required, and job description summary.
Use these keys for every job object: "title", "company", "location", "salary", "experience", "skills" (array of strings), "description".
Return an array of job objects. If no jobs are found, return an empty array.

Extract job listings from this HTML content:

{content}

Return only valid JSON with an array of job objects."""

DEFAULT_REGION = "India"

JSON_ONLY_SYSTEM_PROMPT = (
    "Respond ONLY with valid JSON. No text before or after, no markdown code blocks."
)


def build_insights_prompt(subject: str, region: str = DEFAULT_REGION) -> str:
    """Render the market-research prompt for a career field and region."""
    if not subject or not subject.strip():
        raise ValueError("career field must be a non-empty string")
    region = region.strip() if region and region.strip() else DEFAULT_REGION
    return CAREER_INSIGHTS_PROMPT.format(career_field=subject.strip(), location=region)


def build_extraction_prompt(content: str) -> str:
    """Render the job-extraction prompt around already truncated page content."""
    if not content or not content.strip():
        raise ValueError("page content must be a non-empty string")
    return JOB_EXTRACTION_PROMPT.format(content=content)
