"""
Skill grouping for the skills section.

A flat skill list is shown as labelled groups. Each skill is tested against the
keyword patterns in a fixed order and lands in the first group that matches;
skills matching nothing are core capabilities.

Pattern classes follow the convention from intake/extraction_patterns.py:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

CORE_CAPABILITIES = "CORE CAPABILITIES"
SYSTEMS_AND_PLATFORMS = "SYSTEMS & PLATFORMS"
TOOLS_AND_PRACTICES = "TOOLS & PRACTICES"
LANGUAGES_AND_DATA = "LANGUAGES & DATA"

# Display order
SKILL_GROUP_ORDER = (
    CORE_CAPABILITIES,
    SYSTEMS_AND_PLATFORMS,
    TOOLS_AND_PRACTICES,
    LANGUAGES_AND_DATA,
)


@dataclass(frozen=True)
class SkillGroupPatterns:
    """Substring patterns per group, case-insensitive."""

    LANGUAGES = re.compile(r"(python|c#|java|sql|json|xml|html|css)", re.IGNORECASE)
    PLATFORMS = re.compile(
        r"(windows|aws|docker|kubernetes|linux|active directory|sql server|mongodb)",
        re.IGNORECASE,
    )
    TOOLING = re.compile(
        r"(servicenow|salesforce|zendesk|devops|jira|bug|release|git)", re.IGNORECASE
    )


# Match order; first hit wins
SKILL_GROUP_MATCHERS: Tuple[Tuple[str, "re.Pattern[str]"], ...] = (
    (LANGUAGES_AND_DATA, SkillGroupPatterns.LANGUAGES),
    (SYSTEMS_AND_PLATFORMS, SkillGroupPatterns.PLATFORMS),
    (TOOLS_AND_PRACTICES, SkillGroupPatterns.TOOLING),
)


def classify_skill(skill: str) -> str:
    """Return the group label for one skill."""
    for label, pattern in SKILL_GROUP_MATCHERS:
        if pattern.search(skill):
            return label
    return CORE_CAPABILITIES


def group_skills(skills: Sequence[str]) -> Dict[str, List[str]]:
    """
    Bucket skills into the four display groups.

    Every group label is present in the result (in display order), possibly with
    an empty list; input order is preserved within a group.

    Examples:
        >>> group_skills(["Python", "AWS", "Jira", "Leadership"])
        {'CORE CAPABILITIES': ['Leadership'], 'SYSTEMS & PLATFORMS': ['AWS'], 'TOOLS & PRACTICES': ['Jira'], 'LANGUAGES & DATA': ['Python']}
    """
    groups: Dict[str, List[str]] = {label: [] for label in SKILL_GROUP_ORDER}
    for skill in skills:
        groups[classify_skill(skill)].append(skill)
    return groups
