"""
Structured resume record produced by ingestion and consumed by generation.

Every field defaults to an empty string or list, so consumers never need to
distinguish a missing field from an empty one.
"""

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Optional


def _text(value: Any) -> str:
    """Coerce a loosely-typed value (None, number, str) to a stripped string."""
    if value is None:
        return ""
    return str(value).strip()


def _text_list(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        value = [value]
    return [_text(item) for item in value if _text(item)]


@dataclass
class ExperienceEntry:
    """
    One job in the experience section.

    Attributes:
        title: Role title (first line of the entry)
        company: Employer (second line of the entry)
        period: Date range, e.g. "Jan 2020 - Present"
        description: Remaining lines, newline-joined
        bullets: Achievement bullets, marker stripped
    """

    title: str = ""
    company: str = ""
    period: str = ""
    description: str = ""
    bullets: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExperienceEntry":
        return cls(
            title=_text(data.get("title") or data.get("position")),
            company=_text(data.get("company")),
            period=_text(data.get("period")),
            description=_text(data.get("description")),
            bullets=_text_list(data.get("bullets")),
        )


@dataclass
class EducationEntry:
    """
    One entry in the education section.

    Attributes:
        degree: Degree or program (first line of the entry)
        school: Institution name
        year: Graduation year
        details: Remaining lines, newline-joined
    """

    degree: str = ""
    school: str = ""
    year: str = ""
    details: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EducationEntry":
        return cls(
            degree=_text(data.get("degree")),
            school=_text(data.get("school")),
            year=_text(data.get("year")),
            details=_text(data.get("details")),
        )


@dataclass
class ParsedResume:
    """
    Normalized resume record.

    Skills are unique (case-sensitive) and keep first-seen order. Certifications are
    never produced by the segmenter; they come from edited or optimized content.
    """

    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    title: str = ""
    summary: str = ""
    experience: List[ExperienceEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)
    certifications: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict for persistence and JSON output."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ParsedResume":
        """
        Build a record from stored or hand-edited data.

        Unknown keys are ignored, missing keys take their empty default, and
        duplicate skills are dropped.

        Args:
            data: Dict with any subset of ParsedResume fields

        Returns:
            ParsedResume instance
        """
        data = data or {}
        scalar_fields = {"name", "email", "phone", "location", "title", "summary"}
        kwargs = {f.name: _text(data.get(f.name)) for f in fields(cls) if f.name in scalar_fields}

        return cls(
            **kwargs,
            experience=[ExperienceEntry.from_dict(e) for e in data.get("experience") or []],
            education=[EducationEntry.from_dict(e) for e in data.get("education") or []],
            skills=list(dict.fromkeys(_text_list(data.get("skills")))),
            certifications=_text_list(data.get("certifications")),
        )

    def is_empty(self) -> bool:
        """True when nothing beyond the defaults was extracted."""
        return self == ParsedResume()


@dataclass
class IngestionResult:
    """
    Output of the ingestion pipeline.

    Attributes:
        text: Extracted plain text (input material for AI analysis)
        resume: Structured record parsed from the text
        format: Source document format
    """

    text: str
    resume: ParsedResume
    format: Optional[str] = None
