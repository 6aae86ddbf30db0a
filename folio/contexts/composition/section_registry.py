"""
Section Registry

Filters and orders a document's declared sections by enablement and explicit
order index.
"""

from typing import Iterable, List

from folio.contexts.composition.document_data_structure import (
    BASIC_SECTION_ID,
    SectionDescriptor,
)


def active_ordered(sections: Iterable[SectionDescriptor]) -> List[SectionDescriptor]:
    """
    Enabled sections in ascending order.

    The sort is stable: sections sharing an order index keep their declaration
    order. The basic-info section is included.

    Args:
        sections: Declared sections in declaration order

    Returns:
        Enabled sections sorted by order
    """
    return sorted((s for s in sections if s.enabled), key=lambda s: s.order)


def content_sections(sections: Iterable[SectionDescriptor]) -> List[SectionDescriptor]:
    """
    Active sections minus the basic-info section, which templates render as a
    fixed header.
    """
    return [s for s in active_ordered(sections) if s.id != BASIC_SECTION_ID]


def header_section(sections: Iterable[SectionDescriptor]):
    """The active basic-info section, or None when it is disabled or undeclared."""
    for section in active_ordered(sections):
        if section.id == BASIC_SECTION_ID:
            return section
    return None
