"""Shared fixtures: sample resumes, the bundled template table, and document builders."""

from io import BytesIO
from typing import Callable, List

import docx
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from refit.contexts.intake.resume_data_structure import (
    EducationEntry,
    ExperienceEntry,
    ParsedResume,
)
from refit.contexts.templating.template_registry import (
    BUNDLED_TEMPLATES_PATH,
    TemplateRegistry,
    load_template_registry,
)

SAMPLE_RESUME_TEXT = """Jane Doe
Senior Support Engineer
jane.doe@example.com | (555) 123-4567

SUMMARY
Support engineer with eight years of experience resolving enterprise escalations.

EXPERIENCE
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
Python, SQL, AWS, Jira, Leadership

EDUCATION
B.S. Computer Science
State University, 2016
"""


@pytest.fixture
def sample_resume_text() -> str:
    return SAMPLE_RESUME_TEXT


@pytest.fixture(scope="session")
def registry() -> TemplateRegistry:
    return load_template_registry(BUNDLED_TEMPLATES_PATH)


@pytest.fixture
def sample_resume() -> ParsedResume:
    return ParsedResume(
        name="Jane Doe",
        email="jane.doe@example.com",
        phone="(555) 123-4567",
        location="Austin, TX",
        title="Senior Support Engineer",
        summary="Support engineer with eight years of experience resolving enterprise escalations.",
        experience=[
            ExperienceEntry(
                title="Senior Support Engineer",
                company="Acme Cloud",
                period="Jan 2020 - Present",
                bullets=[
                    "Led migration of ticketing to ServiceNow",
                    "Cut escalation backlog by 40%",
                ],
            ),
            ExperienceEntry(
                title="Support Analyst",
                company="Globex",
                period="2016 - 2019",
                description="2016 - 2019\nHandled tier 2 incidents for Windows and Linux fleets",
            ),
        ],
        education=[
            EducationEntry(degree="B.S. Computer Science", school="State University", year="2016")
        ],
        skills=["Python", "AWS", "Jira", "Leadership"],
        certifications=["ITIL Foundation"],
    )


@pytest.fixture
def long_resume(sample_resume) -> ParsedResume:
    """A resume with enough experience to need several Letter pages."""
    bullet = (
        "Coordinated cross-functional incident reviews and published follow-up actions "
        "that reduced repeat outages across regional data centers"
    )
    sample_resume.experience = [
        ExperienceEntry(
            title=f"Support Engineer {i}",
            company=f"Company {i}",
            period="2010 - 2012",
            bullets=[f"{bullet} ({i}.{j})" for j in range(8)],
        )
        for i in range(14)
    ]
    return sample_resume


@pytest.fixture
def make_pdf() -> Callable[[List[str]], bytes]:
    """Build a text PDF with one drawn line per entry; "" leaves a gap."""

    def _make(lines: List[str]) -> bytes:
        buffer = BytesIO()
        pdf = canvas.Canvas(buffer, pagesize=letter)
        y = letter[1] - 72
        for line in lines:
            if line:
                pdf.setFont("Helvetica", 11)
                pdf.drawString(72, y, line)
            y -= 16
            if y < 72:
                pdf.showPage()
                y = letter[1] - 72
        pdf.showPage()
        pdf.save()
        return buffer.getvalue()

    return _make


@pytest.fixture
def make_docx() -> Callable[[List[str]], bytes]:
    """Build a DOCX with one paragraph per entry; "" makes an empty paragraph."""

    def _make(paragraphs: List[str]) -> bytes:
        document = docx.Document()
        for text in paragraphs:
            document.add_paragraph(text)
        buffer = BytesIO()
        document.save(buffer)
        return buffer.getvalue()

    return _make
