"""
Templating Context

Responsibilities:
- Defines template descriptors (color scheme, spacing and typography defaults)
- Defines declarative zone policies used to partition sections into columns
- Loads the process-wide template registry once and serves it read-only

Owns: Template descriptors, zone policies, registry configuration
Never: Reads resume document content
"""

from folio.contexts.templating.exceptions import (
    InvalidDocumentStructureError,
    TemplateRegistryError,
    TemplateRenderError,
    UnknownTemplateError,
)
from folio.contexts.templating.registries import (
    TemplateDescriptorRegistry,
    get_default_registry,
)
from folio.contexts.templating.template_data_structures import (
    PRIMARY_ZONE,
    SECONDARY_ZONE,
    ColorScheme,
    SpacingDefaults,
    TemplateDescriptor,
    TypographyDefaults,
    ZonePolicy,
)

__all__ = [
    # Registry
    "TemplateDescriptorRegistry",
    "get_default_registry",
    # Data structures
    "ColorScheme",
    "SpacingDefaults",
    "TypographyDefaults",
    "TemplateDescriptor",
    "ZonePolicy",
    "PRIMARY_ZONE",
    "SECONDARY_ZONE",
    # Exceptions
    "InvalidDocumentStructureError",
    "TemplateRegistryError",
    "TemplateRenderError",
    "UnknownTemplateError",
]
