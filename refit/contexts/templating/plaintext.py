"""
Plaintext Export

Renders a ParsedResume back to plain text. After a user edits their structured
resume, this text is what gets sent for re-analysis against a job posting.
"""

from pathlib import Path
from typing import Dict, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template

from refit.contexts.intake.resume_data_structure import ParsedResume

TEMPLATES_DIR = Path(__file__).parent / "templates"
PLAINTEXT_TEMPLATE = "resume.txt.jinja"


class PlaintextRenderer:
    """Loads and caches the Jinja2 templates used for text export."""

    def __init__(self, templates_dir: Path = TEMPLATES_DIR):
        self.templates_dir = templates_dir
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            # Catches silent failures
            undefined=StrictUndefined,
            # Block tags on their own line leave no trace in the output
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def get_template(self, name: str = PLAINTEXT_TEMPLATE) -> Template:
        if name not in self._cache:
            self._cache[name] = self.env.get_template(name)
        return self._cache[name]

    def render(self, resume: ParsedResume, name: str = PLAINTEXT_TEMPLATE) -> str:
        return self.get_template(name).render(resume=resume).strip()


def to_plaintext(resume: ParsedResume, renderer: Optional[PlaintextRenderer] = None) -> str:
    """
    Render a resume as plain text.

    Header lines come first (name, title, email, phone, location; empty ones
    skipped), then PROFESSIONAL SUMMARY, WORK EXPERIENCE, SKILLS, CERTIFICATIONS
    and EDUCATION blocks separated by blank lines.

    Args:
        resume: Structured resume
        renderer: Optional renderer (defaults to the bundled template)

    Returns:
        Plain text without leading or trailing blank lines
    """
    renderer = renderer or PlaintextRenderer()
    return renderer.render(resume)
