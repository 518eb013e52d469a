"""
Templating Context

Responsibilities:
- Loads the static template table and resolves template ids and variants
- Merges caller style overrides onto template defaults
- Lays out a structured resume as positioned, paginated blocks
- Groups skills for display and truncates long summaries
- Exports a structured resume back to plain text

Owns: Template table, section ordering, layout and pagination decisions
Never: Writes PDF or DOCX bytes
"""

from refit.contexts.templating.exceptions import InvalidTemplateTableError, TemplateNotFoundError
from refit.contexts.templating.layout_engine import (
    Block,
    BlockKind,
    Layout,
    layout,
    truncate_summary,
)
from refit.contexts.templating.plaintext import to_plaintext
from refit.contexts.templating.render_config import (
    RenderConfig,
    RenderOverrides,
    merge_render_config,
    parse_overrides,
    resolve_render_config,
)
from refit.contexts.templating.skill_groups import SKILL_GROUP_ORDER, group_skills
from refit.contexts.templating.template_registry import TemplateRegistry, load_template_registry
from refit.contexts.templating.template_spec import TemplateSpec

__all__ = [
    # Errors
    "TemplateNotFoundError",
    "InvalidTemplateTableError",
    # Template table
    "TemplateRegistry",
    "TemplateSpec",
    "load_template_registry",
    # Render config
    "RenderConfig",
    "RenderOverrides",
    "parse_overrides",
    "merge_render_config",
    "resolve_render_config",
    # Layout
    "Block",
    "BlockKind",
    "Layout",
    "layout",
    "truncate_summary",
    "group_skills",
    "SKILL_GROUP_ORDER",
    # Text export
    "to_plaintext",
]
