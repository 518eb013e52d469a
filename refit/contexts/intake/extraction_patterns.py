"""
Reusable regex patterns for resume and job posting field extraction.

Pattern classes follow the convention of section_patterns.py:
- Dataclasses with frozen=True for immutability
- Class-level constants for compiled patterns
- Helper functions live in the modules that use them
"""

import re
from dataclasses import dataclass

# =============================================================================
# CONTACT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ContactPatterns:
    """
    Document-wide contact detection.

    Each pattern is searched over the full extracted text; the first hit wins.
    """

    # local@domain.tld
    EMAIL: re.Pattern = re.compile(r"[\w.-]+@[\w.-]+\.\w+")

    # Optional country code, optional parentheses, dot/dash/space separators, 10 digits
    # e.g. "+1 (555) 123-4567", "555.123.4567", "5551234567"
    PHONE: re.Pattern = re.compile(r"(?:\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")


# =============================================================================
# SECTION CONTENT PATTERNS
# =============================================================================

_MONTH = r"(?:jan|feb|mar|apr|may|jun|jul|aug|sep|sept|oct|nov|dec)[a-z]*\.?"


@dataclass(frozen=True)
class SectionContentPatterns:
    """
    Patterns applied to the accumulated text of one section.
    """

    # Blank line(s) between entries
    PARAGRAPH_BREAK: re.Pattern = re.compile(r"\n\s*\n")

    # Skill list delimiters: commas, bullets, hyphens, newlines
    SKILL_DELIMITERS: re.Pattern = re.compile(r"[,•\-\n]")

    # Line starting with a bullet marker; group 1 is the bullet text
    BULLET_LINE: re.Pattern = re.compile(r"^[•\-*▪◦·]\s*(.+)$")

    # Date range such as "Jan 2020 - Present", "2018 – 2021", "06/2019 to 08/2021"
    DATE_RANGE: re.Pattern = re.compile(
        rf"\b(?:{_MONTH}\s+|\d{{1,2}}/)?(?:19|20)\d{{2}}\s*(?:-|–|—|to)\s*"
        rf"(?:(?:{_MONTH}\s+|\d{{1,2}}/)?(?:19|20)\d{{2}}|present|current|now)\b",
        re.IGNORECASE,
    )

    # Four-digit year
    YEAR: re.Pattern = re.compile(r"\b(?:19|20)\d{2}\b")


# =============================================================================
# JOB POSTING PATTERNS
# =============================================================================


@dataclass(frozen=True)
class JobPostingPatterns:
    """
    Heuristic patterns for job postings when no AI analysis is available.
    """

    # "experience with X, Y and Z." / "proficiency in X"
    SKILL_PHRASE: re.Pattern = re.compile(
        r"(?:experience with|proficiency in|knowledge of|skilled in)\s+([^.]+)", re.IGNORECASE
    )

    # "Skills: X, Y, Z"
    SKILL_LIST: re.Pattern = re.compile(r"(?:skills?:\s*)([^.\n]+)", re.IGNORECASE)

    # Delimiters inside a captured skill phrase
    SKILL_SEPARATORS: re.Pattern = re.compile(r"[,;]")

    # "5+ years", "3-5 years", "3 to 5 yrs"
    YEARS_EXPERIENCE: re.Pattern = re.compile(
        r"(\d+)[+\-\s]*(?:to|-)?\s*(\d+)?\s*(?:years?|yrs?)", re.IGNORECASE
    )


# Convenience list for iteration
JOB_SKILL_PATTERNS = [
    JobPostingPatterns.SKILL_PHRASE,
    JobPostingPatterns.SKILL_LIST,
]

# Experience level keywords, checked in order; first hit wins
EXPERIENCE_LEVEL_KEYWORDS = (
    ("senior", ("senior", "lead")),
    ("entry", ("entry", "junior")),
    ("executive", ("executive", "director")),
)

DEFAULT_EXPERIENCE_LEVEL = "mid"
