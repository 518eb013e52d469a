"""
Per-section field extraction.

Each processor is a pure function of the text accumulated for one section.
Contact extraction runs over the whole document, independent of sections.
"""

from typing import Callable, Dict, List

from refit.contexts.intake.extraction_patterns import ContactPatterns, SectionContentPatterns
from refit.contexts.intake.resume_data_structure import (
    EducationEntry,
    ExperienceEntry,
    ParsedResume,
)

MIN_SKILL_LENGTH = 2
MAX_SKILL_LENGTH = 50


# =============================================================================
# SECTION PROCESSORS
# =============================================================================


def extract_summary(block: str) -> str:
    """Summary is the section text, trimmed."""
    return block.strip()


def extract_skills(block: str) -> List[str]:
    """
    Split a skills block into unique skill names.

    Splits on commas, bullets, hyphens and newlines, drops tokens outside
    2..50 characters, and removes exact duplicates keeping first-seen order.
    Deduplication is case-sensitive: "Python" and "python" are both kept.

    Args:
        block: Accumulated skills section text

    Returns:
        List of skills
    """
    tokens = (token.strip() for token in SectionContentPatterns.SKILL_DELIMITERS.split(block))
    kept = [t for t in tokens if MIN_SKILL_LENGTH <= len(t) <= MAX_SKILL_LENGTH]
    return list(dict.fromkeys(kept))


def split_paragraphs(block: str) -> List[List[str]]:
    """Split a block on blank lines into lists of non-empty, stripped lines."""
    paragraphs = []
    for chunk in SectionContentPatterns.PARAGRAPH_BREAK.split(block):
        lines = [line.strip() for line in chunk.split("\n") if line.strip()]
        if lines:
            paragraphs.append(lines)
    return paragraphs


def _find_period(lines: List[str]) -> str:
    for line in lines:
        match = SectionContentPatterns.DATE_RANGE.search(line)
        if match:
            return match.group(0)
    return ""


def _find_bullets(lines: List[str]) -> List[str]:
    bullets = []
    for line in lines:
        match = SectionContentPatterns.BULLET_LINE.match(line)
        if match:
            bullets.append(match.group(1).strip())
    return bullets


def extract_experience(block: str) -> List[ExperienceEntry]:
    """
    Parse experience entries from blank-line separated paragraphs.

    A paragraph needs at least two lines: title, then company. Remaining lines
    become the description; date ranges and bullet lines among them are also
    lifted into period and bullets.
    """
    entries = []
    for lines in split_paragraphs(block):
        if len(lines) < 2:
            continue
        rest = lines[2:]
        entries.append(
            ExperienceEntry(
                title=lines[0],
                company=lines[1],
                period=_find_period(rest),
                description="\n".join(rest),
                bullets=_find_bullets(rest),
            )
        )
    return entries


def extract_education(block: str) -> List[EducationEntry]:
    """Parse education entries: degree on the first line, the rest as details."""
    entries = []
    for lines in split_paragraphs(block):
        year_match = SectionContentPatterns.YEAR.search("\n".join(lines))
        entries.append(
            EducationEntry(
                degree=lines[0],
                year=year_match.group(0) if year_match else "",
                details="\n".join(lines[1:]),
            )
        )
    return entries


# =============================================================================
# SECTION DISPATCH
# =============================================================================


def _apply_summary(resume: ParsedResume, block: str) -> None:
    resume.summary = extract_summary(block)


def _apply_skills(resume: ParsedResume, block: str) -> None:
    resume.skills = extract_skills(block)


def _apply_experience(resume: ParsedResume, block: str) -> None:
    resume.experience.extend(extract_experience(block))


def _apply_education(resume: ParsedResume, block: str) -> None:
    resume.education.extend(extract_education(block))


SECTION_PROCESSORS: Dict[str, Callable[[ParsedResume, str], None]] = {
    "summary": _apply_summary,
    "skills": _apply_skills,
    "experience": _apply_experience,
    "education": _apply_education,
}


def apply_section(resume: ParsedResume, section: str, block: str) -> None:
    """
    Run the processor for a section and store its result on the resume.

    Summary and skills are replaced by a later section of the same kind;
    experience and education entries accumulate.
    """
    processor = SECTION_PROCESSORS.get(section)
    if processor is not None:
        processor(resume, block)


# =============================================================================
# DOCUMENT-WIDE CONTACT EXTRACTION
# =============================================================================


def extract_email(text: str) -> str:
    """First email-like token in the text, or ""."""
    match = ContactPatterns.EMAIL.search(text)
    return match.group(0) if match else ""


def extract_phone(text: str) -> str:
    """First phone-like token in the text, or ""."""
    match = ContactPatterns.PHONE.search(text)
    return match.group(0) if match else ""
