"""
Heuristic job posting parsing for the Intake context.

Produces a JobPosting from raw posting text using pattern matching only. This is
the path used when AI analysis is unavailable; the AI collaborator receives the
raw text separately.
"""

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

from refit.contexts.intake.extraction_patterns import (
    DEFAULT_EXPERIENCE_LEVEL,
    EXPERIENCE_LEVEL_KEYWORDS,
    JOB_SKILL_PATTERNS,
    JobPostingPatterns,
)
from refit.contexts.intake.format_detector import DocumentFormat, detect_format
from refit.contexts.intake.logger import _log_debug
from refit.contexts.intake.text_extractor import extract_text

MAX_REQUIRED_SKILLS = 10

# Skill phrases outside this length range are sentence fragments, not skills
MIN_JOB_SKILL_LENGTH = 3
MAX_JOB_SKILL_LENGTH = 49


@dataclass
class JobPosting:
    """
    Structured job posting.

    Attributes:
        required_skills: Up to ten skills detected in the posting
        preferred_skills: Nice-to-have skills (empty for heuristic parsing)
        responsibilities: Role responsibilities (empty for heuristic parsing)
        qualifications: Qualifications (empty for heuristic parsing)
        keywords: Every detected skill phrase
        experience_level: One of entry, mid, senior, executive
        years_experience: e.g. "3-5 years", "5+ years", or ""
    """

    required_skills: List[str] = field(default_factory=list)
    preferred_skills: List[str] = field(default_factory=list)
    responsibilities: List[str] = field(default_factory=list)
    qualifications: List[str] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)
    experience_level: str = DEFAULT_EXPERIENCE_LEVEL
    years_experience: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _extract_skills(text: str) -> List[str]:
    """Collect skill phrases in first-seen order."""
    skills: Dict[str, None] = {}
    for pattern in JOB_SKILL_PATTERNS:
        for match in pattern.finditer(text):
            for piece in JobPostingPatterns.SKILL_SEPARATORS.split(match.group(1)):
                cleaned = piece.strip()
                if MIN_JOB_SKILL_LENGTH <= len(cleaned) <= MAX_JOB_SKILL_LENGTH:
                    skills.setdefault(cleaned)
    return list(skills)


def _extract_experience_level(text: str) -> str:
    lowered = text.lower()
    for level, keywords in EXPERIENCE_LEVEL_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return level
    return DEFAULT_EXPERIENCE_LEVEL


def _extract_years(text: str) -> str:
    match = JobPostingPatterns.YEARS_EXPERIENCE.search(text)
    if not match:
        return ""
    low, high = match.group(1), match.group(2)
    return f"{low}-{high} years" if high else f"{low}+ years"


def parse_job_text(text: str) -> JobPosting:
    """
    Parse job posting text with heuristics.

    Args:
        text: Raw job description

    Returns:
        JobPosting with detected skills, experience level and years
    """
    skills = _extract_skills(text)
    posting = JobPosting(
        required_skills=skills[:MAX_REQUIRED_SKILLS],
        keywords=skills,
        experience_level=_extract_experience_level(text),
        years_experience=_extract_years(text),
    )
    _log_debug(
        f"Job posting: {len(skills)} skills, level={posting.experience_level}, "
        f"years={posting.years_experience or 'n/a'}"
    )
    return posting


def parse_job_buffer(buffer: bytes, fmt: Union[DocumentFormat, str]) -> JobPosting:
    """Extract text from an uploaded posting and parse it."""
    return parse_job_text(extract_text(buffer, fmt))


def parse_job_file(file_path: Union[str, Path]) -> JobPosting:
    """Parse a job posting file from disk."""
    file_path = Path(file_path)
    fmt = detect_format(file_path.name)
    return parse_job_buffer(file_path.read_bytes(), fmt)
