"""
Render Config Resolution

Merges a caller's override map (stored alongside an optimized resume) onto the
defaults of a resolved TemplateSpec. The merge is field by field: an override
wins when present and well-formed, otherwise the template default is kept.

Override maps come from persisted JSON, so both camelCase and snake_case keys
are accepted:

    {"variant": "tech_saas", "accentColor": "#2563EB", "font": "Georgia"}
    {"accent_color": "#06c", "header_color": "#111"}

Merging never raises. Unknown keys are logged at debug level and dropped; values
that fail validation are logged as warnings and replaced by the default.
"""

import re
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional, Tuple

from refit.contexts.templating.logger import _log_debug, _log_warning
from refit.contexts.templating.template_registry import TemplateRegistry
from refit.contexts.templating.template_spec import Palette, Spacing, TemplateSpec, Typography

HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# Accepted spellings -> canonical field
OVERRIDE_KEYS = {
    "variant": "variant",
    "accentColor": "accent_color",
    "accent_color": "accent_color",
    "headerColor": "header_color",
    "header_color": "header_color",
    "font": "font",
    "fontFamily": "font",
    "font_family": "font",
}

COLOR_FIELDS = ("accent_color", "header_color")


@dataclass(frozen=True)
class RenderOverrides:
    """Validated caller overrides; None means 'use the template default'."""

    variant: Optional[str] = None
    accent_color: Optional[str] = None
    header_color: Optional[str] = None
    font: Optional[str] = None


@dataclass(frozen=True)
class RenderConfig:
    """
    Effective styling for one render call.

    Carries the same typography, palette and spacing types as TemplateSpec so the
    layout engine only ever reads the merged values.
    """

    template_id: str
    variant: str
    section_order: Tuple[str, ...]
    typography: Typography
    palette: Palette
    spacing: Spacing


def normalize_hex_color(value: Any) -> Optional[str]:
    """
    Normalize a hex color to lowercase #rrggbb.

    Returns None if the value is not a 3- or 6-digit hex color.

    Examples:
        >>> normalize_hex_color("#2563EB")
        '#2563eb'
        >>> normalize_hex_color("06c")
        '#0066cc'
        >>> normalize_hex_color("blue") is None
        True
    """
    if not isinstance(value, str):
        return None

    match = HEX_COLOR.match(value.strip())
    if not match:
        return None

    digits = match.group(1).lower()
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return f"#{digits}"


def parse_overrides(raw: Optional[Mapping[str, Any]]) -> RenderOverrides:
    """
    Validate a raw override map.

    Args:
        raw: Caller-supplied map, may be None or empty

    Returns:
        RenderOverrides with only well-formed values set
    """
    if not raw:
        return RenderOverrides()

    values = {}
    for key, value in raw.items():
        field_name = OVERRIDE_KEYS.get(key)
        if field_name is None:
            _log_debug(f"Ignoring unknown render override '{key}'")
            continue
        if value is None or value == "":
            continue

        if field_name in COLOR_FIELDS:
            color = normalize_hex_color(value)
            if color is None:
                _log_warning(f"Ignoring invalid color for '{key}': {value!r}")
                continue
            values[field_name] = color
        elif isinstance(value, str):
            values[field_name] = value.strip()
        else:
            _log_warning(f"Ignoring non-string value for '{key}': {value!r}")

    return RenderOverrides(**values)


def merge_render_config(
    spec: TemplateSpec,
    overrides: RenderOverrides,
    registry: Optional[TemplateRegistry] = None,
) -> RenderConfig:
    """
    Overlay validated overrides onto a template's defaults.

    Args:
        spec: Resolved template
        overrides: Output of parse_overrides()
        registry: Needed only to look up the section order of an overridden variant

    Returns:
        RenderConfig
    """
    variant = spec.variant
    section_order = spec.section_order
    if overrides.variant and overrides.variant != spec.variant:
        if registry is None:
            _log_warning("Variant override given without a registry; keeping template variant")
        elif overrides.variant in registry.variants:
            variant = overrides.variant
            section_order = registry.section_order(variant)
        else:
            _log_debug(f"Unknown variant '{overrides.variant}', using '{registry.default_variant}'")
            variant = registry.default_variant
            section_order = registry.section_order(variant)

    typography = spec.typography
    if overrides.font:
        typography = replace(typography, font=overrides.font)

    palette = Palette(
        accent=overrides.accent_color or spec.palette.accent,
        header=overrides.header_color or spec.palette.header,
        body=spec.palette.body,
        muted=spec.palette.muted,
    )

    return RenderConfig(
        template_id=spec.template_id,
        variant=variant,
        section_order=section_order,
        typography=typography,
        palette=palette,
        spacing=spec.spacing,
    )


def resolve_render_config(
    registry: TemplateRegistry,
    template_id: Optional[str],
    raw_overrides: Optional[Mapping[str, Any]] = None,
) -> Tuple[TemplateSpec, RenderConfig]:
    """Resolve a template id and raw override map into its TemplateSpec and the effective RenderConfig."""
    overrides = parse_overrides(raw_overrides)
    spec = registry.resolve(template_id, overrides.variant)
    return spec, merge_render_config(spec, overrides, registry)
