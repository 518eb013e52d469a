"""
Layout Engine

Turns a ParsedResume plus a resolved template into a format-agnostic sequence of
positioned blocks. Both document backends consume the same Layout, so section
order, summary truncation, bullet limits and skill grouping are decided here
once and cannot drift between PDF and DOCX.

Blocks are built in two passes:
1. Build: header, then each section in variant order. Text is wrapped to the
   content width with standard-font metrics.
2. Paginate: a running top offset is advanced block by block on a Letter page.
   A block that would cross the bottom margin moves to a new page (signalled by
   a page_break block); headings are kept with the first line of what follows;
   paragraphs taller than the remaining space are split into continuation blocks.

Examples:
    >>> spec, config = resolve_render_config(registry, "tech_saas")
    >>> result = layout(resume, spec, config)
    >>> result.section_titles()
    ('PROFESSIONAL SUMMARY', 'SKILLS', 'EXPERIENCE', 'EDUCATION')
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from reportlab.lib.pagesizes import letter
from reportlab.lib.utils import simpleSplit

from refit.contexts.intake.resume_data_structure import ParsedResume
from refit.contexts.templating.fonts import standard_font
from refit.contexts.templating.logger import log_layout_result
from refit.contexts.templating.render_config import (
    RenderConfig,
    RenderOverrides,
    merge_render_config,
)
from refit.contexts.templating.skill_groups import group_skills
from refit.contexts.templating.template_spec import TemplateSpec

PAGE_WIDTH, PAGE_HEIGHT = letter

SUMMARY_MAX_CHARS = 320
ELLIPSIS = "..."
MAX_BULLETS = 5
DEFAULT_NAME = "Your Name"
CONTACT_SEPARATOR = " | "

SECTION_TITLES = {
    "summary": "PROFESSIONAL SUMMARY",
    "experience": "EXPERIENCE",
    "skills": "SKILLS",
    "certifications": "CERTIFICATIONS",
    "education": "EDUCATION",
}

# Points
BULLET_INDENT = 18.0
ENTRY_GAP = 6.0
HEADING_RULE_GAP = 4.0
LINE_GAP = 2.0


class BlockKind(str, Enum):
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    BULLET = "bullet"
    PAGE_BREAK = "page_break"


@dataclass(frozen=True)
class Block:
    """
    One positioned unit of content.

    Attributes:
        kind: heading, paragraph, bullet or page_break
        text: Full logical text (empty on page_break)
        level: Heading level: 1 name, 2 section, 3 entry or skill group
        role: What the block shows (name, title, contact, section, entry, period,
              meta, group, body, bullet)
        section: Section key the block belongs to ("" for the header)
        font_size: Points
        bold: Bold face
        color: #rrggbb
        space_before: Gap above the block in points (not applied at a page top)
        space_after: Gap below the block in points
        indent: Left indent of the text in points, relative to the margin
        line_height: font_size * line_spacing
        lines: Wrapped lines painted on this page
        rule: Draw an accent rule under the block
        page: 1-based page number
        top: Offset of the first line box from the top edge of the page
        continuation: True for the second and later pieces of a split block
    """

    kind: BlockKind
    text: str = ""
    level: int = 0
    role: str = ""
    section: str = ""
    font_size: float = 0.0
    bold: bool = False
    color: str = "#000000"
    space_before: float = 0.0
    space_after: float = 0.0
    indent: float = 0.0
    line_height: float = 0.0
    lines: Tuple[str, ...] = ()
    rule: bool = False
    page: int = 1
    top: float = 0.0
    continuation: bool = False

    @property
    def height(self) -> float:
        return len(self.lines) * self.line_height

    @property
    def keep_with_next(self) -> bool:
        return self.kind is BlockKind.HEADING and self.level >= 2


@dataclass(frozen=True)
class Layout:
    """
    Paginated block sequence for one resume.

    Attributes:
        config: Effective styling the layout was computed with
        blocks: Blocks in paint order, page_break blocks included
        page_count: Number of pages
        sections: Section keys that produced content, in display order
    """

    config: RenderConfig
    blocks: Tuple[Block, ...]
    page_count: int
    sections: Tuple[str, ...]
    page_width: float = PAGE_WIDTH
    page_height: float = PAGE_HEIGHT

    def content_blocks(self) -> Tuple[Block, ...]:
        return tuple(b for b in self.blocks if b.kind is not BlockKind.PAGE_BREAK)

    def section_titles(self) -> Tuple[str, ...]:
        return tuple(
            b.text for b in self.blocks if b.role == "section" and not b.continuation
        )


def truncate_summary(summary: str, limit: int = SUMMARY_MAX_CHARS) -> str:
    """
    Cut a summary to `limit` characters plus an ellipsis.

    Summaries at or under the limit are returned unchanged.

    Examples:
        >>> truncate_summary("x" * 400) == "x" * 320 + "..."
        True
    """
    summary = summary.strip()
    if len(summary) <= limit:
        return summary
    return summary[:limit].rstrip() + ELLIPSIS


def wrap_text(text: str, font_name: str, font_size: float, width: float) -> Tuple[str, ...]:
    """Wrap text to a width using standard-font metrics. Blank lines are dropped."""
    lines: List[str] = []
    for raw_line in text.splitlines():
        raw_line = raw_line.strip()
        if raw_line:
            lines.extend(simpleSplit(raw_line, font_name, font_size, width))
    return tuple(lines)


class _BlockFactory:
    """Creates unpositioned blocks styled from a RenderConfig."""

    def __init__(self, config: RenderConfig):
        self.config = config
        self.font = standard_font(config.typography.font)
        self.content_width = PAGE_WIDTH - 2 * config.spacing.margin

    def make(
        self,
        kind: BlockKind,
        text: str,
        font_size: float,
        role: str,
        section: str = "",
        level: int = 0,
        bold: bool = False,
        color: Optional[str] = None,
        space_before: float = 0.0,
        space_after: float = 0.0,
        indent: float = 0.0,
        rule: bool = False,
    ) -> Optional[Block]:
        text = (text or "").strip()
        lines = wrap_text(text, self.font.face(bold), font_size, self.content_width - indent)
        if not lines:
            return None

        return Block(
            kind=kind,
            text=text,
            level=level,
            role=role,
            section=section,
            font_size=font_size,
            bold=bold,
            color=color or self.config.palette.body,
            space_before=space_before,
            space_after=space_after,
            indent=indent,
            line_height=font_size * self.config.spacing.line_spacing,
            lines=lines,
            rule=rule,
        )

    def section_heading(self, section: str) -> Block:
        return self.make(
            BlockKind.HEADING,
            SECTION_TITLES[section],
            self.config.typography.heading_size,
            role="section",
            section=section,
            level=2,
            bold=True,
            color=self.config.palette.accent,
            space_before=self.config.spacing.section_gap,
            space_after=HEADING_RULE_GAP,
            rule=True,
        )

    def entry_heading(self, text: str, section: str, first: bool, role: str = "entry") -> Optional[Block]:
        typography = self.config.typography
        return self.make(
            BlockKind.HEADING,
            text,
            typography.group_size if role == "group" else typography.body_size,
            role=role,
            section=section,
            level=3,
            bold=True,
            color=self.config.palette.header,
            space_before=0.0 if first else ENTRY_GAP,
            space_after=LINE_GAP,
        )

    def body(self, text: str, section: str, role: str = "body", space_after: Optional[float] = None) -> Optional[Block]:
        muted = role in ("period", "meta")
        return self.make(
            BlockKind.PARAGRAPH,
            text,
            self.config.typography.contact_size if muted else self.config.typography.body_size,
            role=role,
            section=section,
            color=self.config.palette.muted if muted else self.config.palette.body,
            space_after=LINE_GAP if space_after is None else space_after,
        )

    def bullet(self, text: str, section: str) -> Optional[Block]:
        return self.make(
            BlockKind.BULLET,
            text,
            self.config.typography.body_size,
            role="bullet",
            section=section,
            space_after=self.config.spacing.bullet_gap,
            indent=BULLET_INDENT,
        )


def _compact(blocks: List[Optional[Block]]) -> List[Block]:
    return [b for b in blocks if b is not None]


def _header_blocks(resume: ParsedResume, factory: _BlockFactory) -> List[Block]:
    typography = factory.config.typography
    palette = factory.config.palette
    contact = CONTACT_SEPARATOR.join(
        part for part in (resume.location, resume.phone, resume.email) if part.strip()
    )
    return _compact(
        [
            factory.make(
                BlockKind.HEADING,
                resume.name.strip() or DEFAULT_NAME,
                typography.name_size,
                role="name",
                level=1,
                bold=True,
                color=palette.header,
                space_after=LINE_GAP,
            ),
            factory.make(
                BlockKind.PARAGRAPH,
                resume.title,
                typography.title_size,
                role="title",
                color=palette.header,
                space_after=LINE_GAP,
            ),
            factory.make(
                BlockKind.PARAGRAPH,
                contact,
                typography.contact_size,
                role="contact",
                color=palette.muted,
                space_after=HEADING_RULE_GAP,
            ),
        ]
    )


def _summary_blocks(resume: ParsedResume, factory: _BlockFactory) -> List[Block]:
    return _compact([factory.body(truncate_summary(resume.summary), "summary")])


def _experience_blocks(resume: ParsedResume, factory: _BlockFactory) -> List[Block]:
    blocks: List[Optional[Block]] = []
    for entry in resume.experience:
        heading_text = " - ".join(part for part in (entry.title, entry.company) if part)
        entry_blocks = [
            factory.entry_heading(heading_text, "experience", first=not _compact(blocks)),
            factory.body(entry.period, "experience", role="period"),
        ]
        if entry.bullets:
            entry_blocks.extend(factory.bullet(b, "experience") for b in entry.bullets[:MAX_BULLETS])
        else:
            entry_blocks.extend(
                factory.body(line, "experience")
                for line in entry.description.splitlines()
                if line.strip() and line.strip() != entry.period
            )
        blocks.extend(entry_blocks)
    return _compact(blocks)


def _skills_blocks(resume: ParsedResume, factory: _BlockFactory) -> List[Block]:
    blocks: List[Block] = []
    for label, items in group_skills(resume.skills).items():
        if not items:
            continue
        blocks.extend(
            _compact(
                [
                    factory.entry_heading(label, "skills", first=not blocks, role="group"),
                    factory.body(
                        ", ".join(items), "skills", space_after=factory.config.spacing.bullet_gap
                    ),
                ]
            )
        )
    return blocks


def _certification_blocks(resume: ParsedResume, factory: _BlockFactory) -> List[Block]:
    return _compact([factory.bullet(cert, "certifications") for cert in resume.certifications])


def _education_blocks(resume: ParsedResume, factory: _BlockFactory) -> List[Block]:
    blocks: List[Optional[Block]] = []
    for entry in resume.education:
        # Parsed entries often repeat the year in their details line
        year = "" if entry.year and entry.year in entry.details else entry.year
        meta = CONTACT_SEPARATOR.join(part for part in (entry.school, year) if part)
        blocks.append(factory.entry_heading(entry.degree, "education", first=not _compact(blocks)))
        blocks.append(factory.body(meta, "education", role="meta"))
        blocks.extend(factory.body(line, "education") for line in entry.details.splitlines())
    return _compact(blocks)


SECTION_BUILDERS: Dict[str, Callable[[ParsedResume, _BlockFactory], List[Block]]] = {
    "summary": _summary_blocks,
    "experience": _experience_blocks,
    "skills": _skills_blocks,
    "certifications": _certification_blocks,
    "education": _education_blocks,
}


def _keep_together_height(blocks: List[Block], index: int) -> float:
    """Height needed at blocks[index] so no heading ends a page without its content."""
    block = blocks[index]
    required = block.height
    while block.keep_with_next and index + 1 < len(blocks):
        index += 1
        following = blocks[index]
        required += block.space_after + following.space_before
        required += following.height if following.keep_with_next else following.line_height
        block = following
    return required


def paginate(blocks: List[Block], margin: float) -> Tuple[Tuple[Block, ...], int]:
    """
    Assign page numbers and top offsets.

    Args:
        blocks: Unpositioned blocks in paint order
        margin: Top and bottom page margin in points

    Returns:
        (positioned blocks including page_break blocks, page count)
    """
    top_limit = margin
    bottom_limit = PAGE_HEIGHT - margin
    placed: List[Block] = []
    page = 1
    cursor = top_limit

    def start_new_page() -> None:
        nonlocal page, cursor
        page += 1
        cursor = top_limit
        placed.append(Block(kind=BlockKind.PAGE_BREAK, page=page, top=top_limit))

    for index, block in enumerate(blocks):
        before = block.space_before if cursor > top_limit else 0.0

        # Headings move whole; other blocks only need their first line to fit here
        if block.kind is BlockKind.HEADING:
            required = before + _keep_together_height(blocks, index)
        else:
            required = before + block.line_height

        if cursor + required > bottom_limit and cursor > top_limit:
            start_new_page()
            before = 0.0

        remaining = block.lines
        continuation = False
        while remaining:
            room = bottom_limit - (cursor + before)
            fits = int(room // block.line_height)
            if fits <= 0:
                if cursor > top_limit:
                    start_new_page()
                    before = 0.0
                    continue
                # Line taller than an empty page; place it anyway
                fits = 1

            chunk, remaining = remaining[:fits], remaining[fits:]
            top = cursor + before
            placed.append(
                replace(block, lines=chunk, page=page, top=top, continuation=continuation)
            )
            cursor = top + len(chunk) * block.line_height
            if remaining:
                start_new_page()
                before = 0.0
                continuation = True

        cursor += block.space_after

    return tuple(placed), page


def layout(
    resume: ParsedResume,
    spec: TemplateSpec,
    config: Optional[RenderConfig] = None,
) -> Layout:
    """
    Compute the paginated layout of a resume.

    Args:
        resume: Structured resume
        spec: Resolved template
        config: Effective styling; defaults to the template's own values

    Returns:
        Layout
    """
    if config is None:
        config = merge_render_config(spec, RenderOverrides())

    factory = _BlockFactory(config)
    blocks = _header_blocks(resume, factory)
    sections = []

    for section in config.section_order:
        content = SECTION_BUILDERS[section](resume, factory)
        if not content:
            continue
        blocks.append(factory.section_heading(section))
        blocks.extend(content)
        sections.append(section)

    positioned, page_count = paginate(blocks, config.spacing.margin)
    log_layout_result(config.template_id, config.variant, len(positioned), page_count)

    return Layout(
        config=config,
        blocks=positioned,
        page_count=page_count,
        sections=tuple(sections),
    )
