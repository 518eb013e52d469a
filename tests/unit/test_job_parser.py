"""Unit tests for heuristic job posting parsing."""

import pytest

from refit.contexts.intake.job_parser import JobPosting, parse_job_buffer, parse_job_text

POSTING = """Backend Engineer

We need 3-5 years of professional work.
Experience with Python, Django; PostgreSQL. Knowledge of AWS.
Skills: Docker, Kubernetes, CI/CD
"""


@pytest.mark.unit
def test_skills_from_phrases_and_lists():
    """Skill phrases and "Skills:" lists are split on commas and semicolons."""
    posting = parse_job_text(POSTING)

    assert posting.keywords == ["Python", "Django", "PostgreSQL", "AWS", "Docker", "Kubernetes", "CI/CD"]
    assert posting.required_skills == posting.keywords


@pytest.mark.unit
def test_required_skills_capped_at_ten():
    skills = ", ".join(f"Skill{i:02d}" for i in range(15))
    posting = parse_job_text(f"Skills: {skills}")

    assert len(posting.keywords) == 15
    assert posting.required_skills == [f"Skill{i:02d}" for i in range(10)]


@pytest.mark.unit
def test_short_and_long_fragments_dropped():
    """Pieces outside 3..49 characters are not skills."""
    posting = parse_job_text("Skills: Go, C, " + "z" * 50 + ", Rust")

    assert posting.keywords == ["Rust"]


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, level",
    [
        ("Senior Data Engineer", "senior"),
        ("Team lead for payments", "senior"),
        ("Junior developer role", "entry"),
        ("Entry level analyst", "entry"),
        ("Director of Engineering", "executive"),
        ("Software developer", "mid"),
    ],
)
def test_experience_level(text, level):
    assert parse_job_text(text).experience_level == level


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, years",
    [
        ("3-5 years of experience", "3-5 years"),
        ("5+ years required", "5+ years"),
        ("at least 2 yrs", "2+ years"),
        ("3 to 5 years", "3-5 years"),
        ("no requirement stated", ""),
    ],
)
def test_years_experience(text, years):
    assert parse_job_text(text).years_experience == years


@pytest.mark.unit
def test_parse_job_buffer_txt():
    """Uploaded postings go through text extraction first."""
    posting = parse_job_buffer(b"Senior role. Skills: Terraform, Ansible", "posting.txt")

    assert posting.experience_level == "senior"
    assert posting.keywords == ["Terraform", "Ansible"]


@pytest.mark.unit
def test_to_dict_has_all_fields():
    assert set(JobPosting().to_dict()) == {
        "required_skills",
        "preferred_skills",
        "responsibilities",
        "qualifications",
        "keywords",
        "experience_level",
        "years_experience",
    }
