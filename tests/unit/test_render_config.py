"""Unit tests for render override parsing and merging."""

import pytest

from refit.contexts.templating.render_config import (
    RenderOverrides,
    merge_render_config,
    normalize_hex_color,
    parse_overrides,
    resolve_render_config,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [
        ("#2563EB", "#2563eb"),
        ("2563eb", "#2563eb"),
        ("#06c", "#0066cc"),
        (" #ABC ", "#aabbcc"),
        ("blue", None),
        ("#12345", None),
        (255, None),
        (None, None),
    ],
)
def test_normalize_hex_color(value, expected):
    assert normalize_hex_color(value) == expected


@pytest.mark.unit
def test_camel_and_snake_case_keys():
    assert parse_overrides({"accentColor": "#111", "header_color": "#222", "font": "Georgia"}) == (
        RenderOverrides(accent_color="#111111", header_color="#222222", font="Georgia")
    )


@pytest.mark.unit
def test_unknown_keys_and_bad_values_are_dropped():
    """Parsing never raises: junk is logged and ignored."""
    overrides = parse_overrides(
        {
            "accentColor": "not-a-color",
            "fontSize": 99,
            "font": 12,
            "variant": "",
            "headerColor": None,
        }
    )

    assert overrides == RenderOverrides()


@pytest.mark.unit
def test_empty_overrides():
    assert parse_overrides(None) == RenderOverrides()
    assert parse_overrides({}) == RenderOverrides()


@pytest.mark.unit
def test_merge_without_overrides_keeps_template(registry):
    spec = registry.get("tech_saas")
    config = merge_render_config(spec, RenderOverrides())

    assert config.template_id == "tech_saas"
    assert config.variant == spec.variant
    assert config.section_order == spec.section_order
    assert config.typography == spec.typography
    assert config.palette == spec.palette
    assert config.spacing == spec.spacing


@pytest.mark.unit
def test_merge_is_field_by_field(registry):
    spec = registry.get("premium_professional")
    config = merge_render_config(spec, RenderOverrides(accent_color="#ff0000", font="Georgia"))

    assert config.palette.accent == "#ff0000"
    assert config.palette.header == spec.palette.header
    assert config.typography.font == "Georgia"
    assert config.typography.body_size == spec.typography.body_size


@pytest.mark.unit
def test_resolve_render_config_applies_variant(registry):
    spec, config = resolve_render_config(
        registry, "premium_professional", {"variant": "tech_saas", "accentColor": "#0ea5e9"}
    )

    assert spec.template_id == "premium_professional"
    assert config.variant == "tech_saas"
    assert config.section_order == ("summary", "skills", "experience", "education")
    assert config.palette.accent == "#0ea5e9"


@pytest.mark.unit
def test_resolve_render_config_unknown_everything(registry):
    """Unknown template and variant resolve to the defaults without raising."""
    spec, config = resolve_render_config(registry, "nope", {"variant": "nope", "color": "red"})

    assert config.template_id == "premium_professional"
    assert config.variant == "general"
    assert config.section_order == ("summary", "experience", "skills", "education")


@pytest.mark.unit
def test_merge_variant_override_with_registry(registry):
    spec = registry.get("classic")
    config = merge_render_config(spec, RenderOverrides(variant="industrial"), registry)

    assert config.section_order == (
        "summary",
        "experience",
        "certifications",
        "skills",
        "education",
    )
