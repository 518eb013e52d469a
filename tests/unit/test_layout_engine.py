"""Unit tests for block layout and pagination."""

import pytest

from refit.contexts.intake.resume_data_structure import EducationEntry, ExperienceEntry, ParsedResume
from refit.contexts.templating.layout_engine import (
    DEFAULT_NAME,
    MAX_BULLETS,
    PAGE_HEIGHT,
    BlockKind,
    layout,
    truncate_summary,
)
from refit.contexts.templating.render_config import resolve_render_config


def _section_blocks(doc_layout, section):
    return [b for b in doc_layout.content_blocks() if b.section == section and b.role != "section"]


class TestTruncateSummary:
    """Tests for truncate_summary()."""

    @pytest.mark.unit
    def test_long_summary_is_cut(self):
        assert truncate_summary("x" * 400) == "x" * 320 + "..."

    @pytest.mark.unit
    def test_short_summary_unchanged(self):
        assert truncate_summary("y" * 300) == "y" * 300
        assert truncate_summary("z" * 320) == "z" * 320

    @pytest.mark.unit
    def test_trailing_space_before_ellipsis_dropped(self):
        summary = "a" * 319 + " " + "b" * 50

        assert truncate_summary(summary) == "a" * 319 + "..."


class TestSections:
    """Tests for section selection and ordering."""

    @pytest.mark.unit
    def test_default_template_order(self, sample_resume, registry):
        result = layout(sample_resume, registry.resolve(None))

        assert result.section_titles() == ("PROFESSIONAL SUMMARY", "EXPERIENCE", "SKILLS", "EDUCATION")
        assert result.sections == ("summary", "experience", "skills", "education")

    @pytest.mark.unit
    def test_tech_variant_order(self, sample_resume, registry):
        spec, config = resolve_render_config(registry, "tech_saas")

        assert layout(sample_resume, spec, config).section_titles() == (
            "PROFESSIONAL SUMMARY",
            "SKILLS",
            "EXPERIENCE",
            "EDUCATION",
        )

    @pytest.mark.unit
    def test_industrial_includes_certifications(self, sample_resume, registry):
        result = layout(sample_resume, registry.resolve("industrial"))

        assert result.section_titles() == (
            "PROFESSIONAL SUMMARY",
            "EXPERIENCE",
            "CERTIFICATIONS",
            "SKILLS",
            "EDUCATION",
        )
        assert [b.text for b in _section_blocks(result, "certifications")] == ["ITIL Foundation"]

    @pytest.mark.unit
    def test_unknown_variant_uses_general_order(self, sample_resume, registry):
        spec, config = resolve_render_config(registry, "tech_saas", {"variant": "unheard_of"})

        assert layout(sample_resume, spec, config).sections == (
            "summary",
            "experience",
            "skills",
            "education",
        )

    @pytest.mark.unit
    def test_empty_sections_are_omitted(self, registry):
        resume = ParsedResume(name="Solo", skills=["Python"])
        result = layout(resume, registry.resolve(None))

        assert result.section_titles() == ("SKILLS",)


class TestHeader:
    """Tests for the name, title and contact blocks."""

    @pytest.mark.unit
    def test_header_blocks(self, sample_resume, registry):
        blocks = layout(sample_resume, registry.resolve(None)).content_blocks()

        assert [(b.role, b.text) for b in blocks[:3]] == [
            ("name", "Jane Doe"),
            ("title", "Senior Support Engineer"),
            ("contact", "Austin, TX | (555) 123-4567 | jane.doe@example.com"),
        ]
        assert blocks[0].level == 1

    @pytest.mark.unit
    def test_missing_name_uses_placeholder(self, registry):
        result = layout(ParsedResume(), registry.resolve(None))

        assert [b.text for b in result.content_blocks()] == [DEFAULT_NAME]
        assert result.page_count == 1
        assert result.sections == ()


class TestContent:
    """Tests for per-section content rules."""

    @pytest.mark.unit
    def test_summary_is_truncated(self, registry):
        result = layout(ParsedResume(summary="s" * 400), registry.resolve(None))

        assert [b.text for b in _section_blocks(result, "summary")] == ["s" * 320 + "..."]

    @pytest.mark.unit
    def test_bullets_limited(self, registry):
        entry = ExperienceEntry(title="Engineer", company="Acme", bullets=[f"Did {i}" for i in range(8)])
        result = layout(ParsedResume(experience=[entry]), registry.resolve(None))

        bullets = [b for b in _section_blocks(result, "experience") if b.kind is BlockKind.BULLET]
        assert [b.text for b in bullets] == [f"Did {i}" for i in range(MAX_BULLETS)]
        assert all(b.indent > 0 for b in bullets)

    @pytest.mark.unit
    def test_entry_without_bullets_uses_description(self, sample_resume, registry):
        result = layout(sample_resume, registry.resolve(None))
        blocks = _section_blocks(result, "experience")

        assert [b.text for b in blocks if b.role == "entry"] == [
            "Senior Support Engineer - Acme Cloud",
            "Support Analyst - Globex",
        ]
        assert [b.text for b in blocks if b.role == "period"] == ["Jan 2020 - Present", "2016 - 2019"]
        assert [b.text for b in blocks if b.role == "body"] == [
            "Handled tier 2 incidents for Windows and Linux fleets"
        ]

    @pytest.mark.unit
    def test_skills_grouped_in_display_order(self, sample_resume, registry):
        result = layout(sample_resume, registry.resolve(None))
        blocks = _section_blocks(result, "skills")

        assert [b.text for b in blocks] == [
            "CORE CAPABILITIES",
            "Leadership",
            "SYSTEMS & PLATFORMS",
            "AWS",
            "TOOLS & PRACTICES",
            "Jira",
            "LANGUAGES & DATA",
            "Python",
        ]

    @pytest.mark.unit
    def test_empty_skill_groups_skipped(self, registry):
        result = layout(ParsedResume(skills=["Python", "SQL"]), registry.resolve(None))

        assert [b.text for b in _section_blocks(result, "skills")] == ["LANGUAGES & DATA", "Python, SQL"]

    @pytest.mark.unit
    def test_education_meta_line(self, sample_resume, registry):
        result = layout(sample_resume, registry.resolve(None))

        assert [(b.role, b.text) for b in _section_blocks(result, "education")] == [
            ("entry", "B.S. Computer Science"),
            ("meta", "State University | 2016"),
        ]

    @pytest.mark.unit
    def test_education_year_shown_once(self, registry):
        """A year already present in the details is left out of the meta line."""
        resume = ParsedResume(
            name="Jane Doe",
            education=[
                EducationEntry(degree="MBA", school="State University", year="2016", details="State University, 2016"),
                EducationEntry(degree="B.S. Physics", year="2012", details="Tech Institute, 2012"),
            ],
        )

        blocks = _section_blocks(layout(resume, registry.resolve(None)), "education")

        assert [(b.role, b.text) for b in blocks] == [
            ("entry", "MBA"),
            ("meta", "State University"),
            ("body", "State University, 2016"),
            ("entry", "B.S. Physics"),
            ("body", "Tech Institute, 2012"),
        ]

    @pytest.mark.unit
    def test_overrides_flow_into_blocks(self, sample_resume, registry):
        spec, config = resolve_render_config(registry, None, {"accentColor": "#ff0000"})
        result = layout(sample_resume, spec, config)

        headings = [b for b in result.content_blocks() if b.role == "section"]
        assert {b.color for b in headings} == {"#ff0000"}
        assert all(b.rule for b in headings)


class TestPagination:
    """Tests for page assignment."""

    @pytest.mark.unit
    def test_short_resume_fits_one_page(self, sample_resume, registry):
        result = layout(sample_resume, registry.resolve(None))

        assert result.page_count == 1
        assert all(b.kind is not BlockKind.PAGE_BREAK for b in result.blocks)
        assert result.content_blocks()[0].top == registry.resolve(None).spacing.margin

    @pytest.mark.unit
    def test_long_resume_spans_pages(self, long_resume, registry):
        result = layout(long_resume, registry.resolve(None))
        breaks = [b for b in result.blocks if b.kind is BlockKind.PAGE_BREAK]

        assert result.page_count > 1
        assert len(breaks) == result.page_count - 1
        assert [b.page for b in breaks] == list(range(2, result.page_count + 1))

    @pytest.mark.unit
    def test_blocks_stay_inside_margins(self, long_resume, registry):
        spec = registry.resolve(None)
        margin = spec.spacing.margin
        result = layout(long_resume, spec)

        for block in result.content_blocks():
            assert block.top >= margin
            assert block.top + block.height <= PAGE_HEIGHT - margin + 1e-6

    @pytest.mark.unit
    def test_pages_never_decrease(self, long_resume, registry):
        pages = [b.page for b in layout(long_resume, registry.resolve(None)).blocks]

        assert pages == sorted(pages)

    @pytest.mark.unit
    def test_headings_kept_with_content(self, long_resume, registry):
        """A section or entry heading is never the last block on its page."""
        blocks = layout(long_resume, registry.resolve(None)).blocks

        for block, following in zip(blocks, blocks[1:]):
            if block.keep_with_next:
                assert following.kind is not BlockKind.PAGE_BREAK
                assert following.page == block.page

    @pytest.mark.unit
    def test_layout_is_deterministic(self, long_resume, registry):
        spec = registry.resolve("classic")

        assert layout(long_resume, spec) == layout(long_resume, spec)
