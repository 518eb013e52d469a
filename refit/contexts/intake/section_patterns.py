"""
Keyword tables for resume section header identification.

Pattern classes follow the convention of the other pattern modules:
- Dataclasses with frozen=True for immutability
- Class-level constants for keyword tuples
- Helper objects that use these keywords
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

# =============================================================================
# SECTION HEADER KEYWORDS
# =============================================================================


@dataclass(frozen=True)
class SectionHeaderKeywords:
    """
    Keywords that introduce a resume section.

    A line is a header when, lowercased, it equals a keyword or starts with one.
    Prefix matching means "Summary of Qualifications" is a summary header and
    "Experienced engineer ..." is an experience header.
    """

    EXPERIENCE: tuple = ("experience", "work history", "employment", "professional experience")
    EDUCATION: tuple = ("education", "academic", "qualifications")
    SKILLS: tuple = ("skills", "technical skills", "core competencies", "technologies")
    SUMMARY: tuple = ("summary", "profile", "objective", "about")


# Checked in this order; the first section with a matching keyword wins
SECTION_KEYWORDS: Mapping[str, tuple] = MappingProxyType(
    {
        "experience": SectionHeaderKeywords.EXPERIENCE,
        "education": SectionHeaderKeywords.EDUCATION,
        "skills": SectionHeaderKeywords.SKILLS,
        "summary": SectionHeaderKeywords.SUMMARY,
    }
)


# =============================================================================
# MATCHER
# =============================================================================


class SectionHeaderMatcher:
    """
    Classifies a single line as a section header.

    Swappable strategy: the segmenter only calls match(), so a different table or
    a trained classifier can replace this without touching the scan.
    """

    def __init__(self, keywords: Optional[Mapping[str, Sequence[str]]] = None):
        source = SECTION_KEYWORDS if keywords is None else keywords
        self.keywords: Mapping[str, tuple] = MappingProxyType(
            {section: tuple(k.lower() for k in words) for section, words in source.items()}
        )

    def match(self, line: str) -> Optional[str]:
        """
        Return the section a header line introduces, or None.

        Args:
            line: A trimmed, non-empty line of resume text

        Returns:
            Section name (e.g. "experience") or None for a non-header line
        """
        lowered = line.lower()
        for section, words in self.keywords.items():
            if any(lowered == word or lowered.startswith(word) for word in words):
                return section
        return None
