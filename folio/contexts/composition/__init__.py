"""
Composition Context

Responsibilities:
- Represents resume documents as structured data
- Resolves personal-info fields, active sections and the effective style
- Partitions sections into zones and dispatches them to content renderers
- Assembles the final render tree per template layout

Owns: Document model, render tree, composition strategies
Never: Draws pixels or writes output files
"""

from folio.contexts.composition.composer import (
    LAYOUTS,
    Layout,
    TemplateComposer,
    compose_document,
)
from folio.contexts.composition.document_data_structure import (
    BasicInfo,
    ResumeDocument,
    SectionDescriptor,
    StyleOverrides,
)
from folio.contexts.composition.field_resolver import FieldResolver, resolve_fields
from folio.contexts.composition.icons import IconRegistry
from folio.contexts.composition.render_tree import RenderTree
from folio.contexts.composition.section_dispatcher import (
    SectionContentDispatcher,
    SectionKind,
)
from folio.contexts.composition.section_registry import active_ordered, content_sections
from folio.contexts.composition.style_resolver import EffectiveStyle, resolve_style
from folio.contexts.composition.zone_assigner import assign_zones

__all__ = [
    # Orchestration
    "TemplateComposer",
    "compose_document",
    "Layout",
    "LAYOUTS",
    # Resolution steps
    "FieldResolver",
    "resolve_fields",
    "active_ordered",
    "content_sections",
    "resolve_style",
    "EffectiveStyle",
    "assign_zones",
    "SectionContentDispatcher",
    "SectionKind",
    "IconRegistry",
    # Data structures
    "ResumeDocument",
    "BasicInfo",
    "SectionDescriptor",
    "StyleOverrides",
    "RenderTree",
]
