"""Unit tests for plain-text export."""

import pytest

from refit.contexts.intake.resume_data_structure import EducationEntry, ExperienceEntry, ParsedResume
from refit.contexts.templating.plaintext import PlaintextRenderer, to_plaintext

EXPECTED = """Jane Doe
Senior Support Engineer
jane.doe@example.com
(555) 123-4567
Austin, TX

PROFESSIONAL SUMMARY
Support engineer with eight years of experience resolving enterprise escalations.

WORK EXPERIENCE

Senior Support Engineer
Acme Cloud
Jan 2020 - Present
• Led migration of ticketing to ServiceNow
• Cut escalation backlog by 40%

Support Analyst
Globex
2016 - 2019
Handled tier 2 incidents for Windows and Linux fleets

SKILLS
Python, AWS, Jira, Leadership

CERTIFICATIONS
ITIL Foundation

EDUCATION

B.S. Computer Science
State University, 2016"""


@pytest.mark.unit
def test_full_resume(sample_resume):
    assert to_plaintext(sample_resume) == EXPECTED


@pytest.mark.unit
def test_empty_resume():
    assert to_plaintext(ParsedResume()) == ""


@pytest.mark.unit
def test_missing_fields_are_skipped():
    """Empty header fields and sections leave no blank lines behind."""
    resume = ParsedResume(
        name="Jane Doe",
        phone="555-123-4567",
        experience=[ExperienceEntry(title="Engineer")],
        education=[EducationEntry(degree="MBA", details="Night program")],
    )

    assert to_plaintext(resume) == (
        "Jane Doe\n555-123-4567\n\nWORK EXPERIENCE\n\nEngineer\n\nEDUCATION\n\nMBA\nNight program"
    )


@pytest.mark.unit
def test_templates_are_cached():
    renderer = PlaintextRenderer()

    assert renderer.get_template() is renderer.get_template()


@pytest.mark.unit
def test_custom_template_dir(tmp_path, sample_resume):
    (tmp_path / "resume.txt.jinja").write_text("{{ resume.name }} <{{ resume.email }}>")

    assert to_plaintext(sample_resume, PlaintextRenderer(tmp_path)) == "Jane Doe <jane.doe@example.com>"
