"""
Template Table and Resolution

Loads the static template table (templates.yaml) once and resolves a template id
plus variant into an immutable TemplateSpec. The registry is constructed explicitly
and passed to whoever needs it; there is no module-level instance.

Examples:
    >>> registry = load_template_registry()
    >>> spec = registry.resolve("premium_professional", "tech_saas")
    >>> spec.section_order
    ('summary', 'skills', 'experience', 'education')

    >>> registry.resolve("no_such_template").template_id
    'premium_professional'
"""

import os
from dataclasses import replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from dotenv import load_dotenv
from omegaconf import OmegaConf

from refit.contexts.templating.exceptions import InvalidTemplateTableError, TemplateNotFoundError
from refit.contexts.templating.logger import _log_debug, _log_warning
from refit.contexts.templating.template_spec import TemplateSpec

load_dotenv()

BUNDLED_TEMPLATES_PATH = Path(__file__).parent / "templates.yaml"
TEMPLATES_PATH = Path(os.getenv("TEMPLATES_PATH", str(BUNDLED_TEMPLATES_PATH)))

DEFAULT_TEMPLATE_ID = "premium_professional"
DEFAULT_VARIANT = "general"

KNOWN_SECTIONS = ("summary", "experience", "skills", "education", "certifications")


class TemplateRegistry:
    """
    Read-only table of templates and section-order variants.

    Args:
        templates: Template id -> resolved table entry (font, sizes, colors, spacing,
                   and optional default variant)
        variants: Variant name -> ordered section names
        default_template: Fallback for unknown template ids
        default_variant: Fallback for unknown variants
    """

    def __init__(
        self,
        templates: Mapping[str, Dict[str, Any]],
        variants: Mapping[str, Sequence[str]],
        default_template: str = DEFAULT_TEMPLATE_ID,
        default_variant: str = DEFAULT_VARIANT,
    ):
        if default_variant not in variants:
            raise InvalidTemplateTableError(
                f"Default variant '{default_variant}' missing from variants {sorted(variants)}"
            )
        if default_template not in templates:
            raise InvalidTemplateTableError(
                f"Default template '{default_template}' missing from templates {sorted(templates)}"
            )

        self._variants: Mapping[str, Tuple[str, ...]] = MappingProxyType(
            {name: self._check_order(name, order) for name, order in variants.items()}
        )
        self.default_template = default_template
        self.default_variant = default_variant

        specs = {}
        for template_id, entry in templates.items():
            variant = entry.get("variant") or default_variant
            if variant not in self._variants:
                raise InvalidTemplateTableError(
                    f"Template '{template_id}' uses unknown variant '{variant}'"
                )
            try:
                specs[template_id] = TemplateSpec.from_table_entry(
                    template_id, entry, variant, self._variants[variant]
                )
            except (KeyError, TypeError, ValueError) as e:
                raise InvalidTemplateTableError(
                    f"Template '{template_id}' is malformed: {e}"
                ) from e
        self._specs: Mapping[str, TemplateSpec] = MappingProxyType(specs)

    @staticmethod
    def _check_order(name: str, order: Sequence[str]) -> Tuple[str, ...]:
        unknown = [section for section in order if section not in KNOWN_SECTIONS]
        if unknown:
            raise InvalidTemplateTableError(f"Variant '{name}' lists unknown sections {unknown}")
        return tuple(order)

    @classmethod
    def from_yaml(cls, config_path: Path) -> "TemplateRegistry":
        """
        Build a registry from a templates YAML file.

        Interpolations (e.g. `${shared.premium_sizes}`) are resolved on load.

        Raises:
            InvalidTemplateTableError: If required top-level keys are missing
        """
        table = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

        for key in ("templates", "variants"):
            if key not in table:
                raise InvalidTemplateTableError(f"{config_path} must define '{key}'")

        return cls(
            templates=table["templates"],
            variants=table["variants"],
            default_template=table.get("default_template", DEFAULT_TEMPLATE_ID),
            default_variant=table.get("default_variant", DEFAULT_VARIANT),
        )

    @property
    def template_ids(self) -> Tuple[str, ...]:
        return tuple(self._specs.keys())

    @property
    def variants(self) -> Mapping[str, Tuple[str, ...]]:
        return self._variants

    def section_order(self, variant: Optional[str]) -> Tuple[str, ...]:
        """Section ordering for a variant; unknown variants get the default ordering."""
        if variant in self._variants:
            return self._variants[variant]
        return self._variants[self.default_variant]

    def get(self, template_id: str, variant: Optional[str] = None) -> TemplateSpec:
        """
        Strict lookup.

        Args:
            template_id: Key in the template table
            variant: Section ordering; None keeps the template's own variant,
                     unknown names fall back to the default variant

        Raises:
            TemplateNotFoundError: If template_id is not in the table
        """
        if template_id not in self._specs:
            raise TemplateNotFoundError(template_id, self._specs.keys())

        spec = self._specs[template_id]
        if not variant:
            return spec

        if variant not in self._variants:
            _log_debug(f"Unknown variant '{variant}', using '{self.default_variant}'")
            variant = self.default_variant

        return replace(spec, variant=variant, section_order=self._variants[variant])

    def resolve(self, template_id: Optional[str], variant: Optional[str] = None) -> TemplateSpec:
        """
        Lenient lookup used by the generation pipeline.

        Unknown or empty template ids resolve to the default template; this never
        raises for a well-formed registry.
        """
        try:
            return self.get(template_id or self.default_template, variant)
        except TemplateNotFoundError as e:
            _log_warning(f"{e.message}; falling back to '{self.default_template}'")
            return self.get(self.default_template, variant)


def load_template_registry(config_path: Optional[Path] = None) -> TemplateRegistry:
    """
    Load the template table.

    Args:
        config_path: Optional path to a templates YAML (defaults to TEMPLATES_PATH env
                     variable, or the bundled templates.yaml)

    Returns:
        TemplateRegistry
    """
    if config_path is None:
        config_path = TEMPLATES_PATH

    registry = TemplateRegistry.from_yaml(Path(config_path))
    _log_debug(f"Loaded {len(registry.template_ids)} templates from {config_path}")
    return registry
