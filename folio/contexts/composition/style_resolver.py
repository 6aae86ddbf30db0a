"""
Style Resolution

Two-layer style cascade: template defaults overridden field by field by the
document's global settings, resolved once per render into a frozen value.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from folio.contexts.composition.document_data_structure import StyleOverrides
from folio.contexts.templating.template_data_structures import TemplateDescriptor


@dataclass(frozen=True)
class EffectiveStyle:
    """
    Fully resolved style of one render. Hashable, so it can key render caches.

    Attributes:
        page_padding: Page padding in pixels
        section_gap: Gap between sections in pixels
        paragraph_gap: Gap between entries within a section in pixels
        header_size: Heading font size in pixels
        subheader_size: Subheading font size in pixels
        theme_color: Accent color
    """

    page_padding: float
    section_gap: float
    paragraph_gap: float
    header_size: float
    subheader_size: float
    theme_color: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def template_defaults(template: TemplateDescriptor) -> Dict[str, Any]:
    """Style attribute defaults owned by a template."""
    return {
        "page_padding": template.spacing.content_padding,
        "section_gap": template.spacing.section_gap,
        "paragraph_gap": template.spacing.item_gap,
        "header_size": template.typography.header_size,
        "subheader_size": template.typography.subheader_size,
        "theme_color": template.color_scheme.primary,
    }


def resolve_style(
    template: TemplateDescriptor, overrides: Optional[StyleOverrides] = None
) -> EffectiveStyle:
    """
    Merge document overrides onto template defaults.

    Each attribute independently takes the override when it is set (not None),
    else the template default. Neither input is modified.

    Args:
        template: Template supplying defaults
        overrides: Document global settings, may be None or partially populated

    Returns:
        EffectiveStyle for this render
    """
    resolved = template_defaults(template)

    if overrides is not None:
        for attribute, value in asdict(overrides).items():
            if value is not None:
                resolved[attribute] = value

    return EffectiveStyle(**resolved)
