"""
Template Composition

Orchestrates style resolution, section ordering, zone assignment and section
dispatch into a RenderTree. Templates differ only by data (descriptor + zone
policy) and by the layout strategy their descriptor names; there is one engine.

Layouts:
- columns: profile header (with the contribution panel), primary/secondary zones
- split: profile header, titled primary/secondary zones, panel in the body
- navigation: banner header, basic info rendered inline, single zone plus a
  navigation rail of section titles
"""

import os
from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Optional, Tuple

from dotenv import load_dotenv

from folio.contexts.composition.document_data_structure import ResumeDocument
from folio.contexts.composition.logger import _log_debug
from folio.contexts.composition.render_tree import (
    ContentBlock,
    ExtrasBlock,
    HeaderBlock,
    NavigationItem,
    PlacedSection,
    RenderTree,
    Zone,
)
from folio.contexts.composition.section_dispatcher import (
    SectionContentDispatcher,
    build_photo_block,
)
from folio.contexts.composition.section_registry import (
    active_ordered,
    content_sections,
    header_section,
)
from folio.contexts.composition.style_resolver import EffectiveStyle, resolve_style
from folio.contexts.composition.zone_assigner import assign_zones
from folio.contexts.templating.registries import (
    TemplateDescriptorRegistry,
    get_default_registry,
)
from folio.contexts.templating.template_data_structures import (
    PRIMARY_ZONE,
    TemplateDescriptor,
)

load_dotenv()
DEFAULT_LOCALE = os.getenv("FOLIO_DEFAULT_LOCALE", "en")

GITHUB_CONTRIBUTIONS = "github_contributions"

# Banner headings are drawn this much larger than the header size
BANNER_SIZE_INCREMENT = 6


@dataclass(frozen=True)
class CompositionContext:
    """Inputs shared by the header and body strategies of one render."""

    document: ResumeDocument
    template: TemplateDescriptor
    style: EffectiveStyle
    locale: str
    dispatcher: SectionContentDispatcher

    def render_section(self, section_id: str) -> Optional[ContentBlock]:
        return self.dispatcher.render(section_id, self.document, self.style, self.locale)


HeaderStrategy = Callable[[CompositionContext], HeaderBlock]
BodyStrategy = Callable[[CompositionContext, bool], Tuple[Tuple[Zone, ...], Tuple[NavigationItem, ...]]]


def profile_header(ctx: CompositionContext) -> HeaderBlock:
    """Name, title, resolved fields and photo; empty when basic info is disabled."""
    if header_section(ctx.document.menu_sections) is None:
        return HeaderBlock()

    basic = ctx.document.basic
    return HeaderBlock(
        name=basic.name,
        title=basic.title,
        fields=tuple(ctx.dispatcher.field_resolver.resolve(basic, ctx.locale)),
        photo=build_photo_block(basic),
    )


def banner_header(ctx: CompositionContext) -> HeaderBlock:
    """Page banner only; the basic-info section renders in the body."""
    return HeaderBlock(
        banner=ctx.template.banner_title or ctx.template.name,
        banner_size=ctx.style.header_size + BANNER_SIZE_INCREMENT,
    )


def place_sections(blocks: List[ContentBlock]) -> Tuple[PlacedSection, ...]:
    """Slot rendered blocks in order, with a separator after all but the last."""
    last = len(blocks) - 1
    return tuple(
        PlacedSection(block=block, separator_after=index < last)
        for index, block in enumerate(blocks)
    )


def _render_blocks(ctx: CompositionContext, section_ids, show_titles: bool) -> List[ContentBlock]:
    blocks = []
    for section_id in section_ids:
        block = ctx.render_section(section_id)
        # Sections without content take no slot at all
        if block is None:
            continue
        blocks.append(replace(block, show_title=show_titles))
    return blocks


def zoned_body(ctx: CompositionContext, show_titles: bool):
    """Content sections partitioned by the template's zone policy."""
    assignment = assign_zones(
        ctx.template.zone_policy, content_sections(ctx.document.menu_sections)
    )
    zones = tuple(
        Zone(
            name=zone_name,
            sections=place_sections(
                _render_blocks(ctx, (s.id for s in sections), show_titles)
            ),
        )
        for zone_name, sections in assignment.items()
    )
    return zones, ()


def navigation_body(ctx: CompositionContext, show_titles: bool):
    """
    Every active section, basic info included, in one zone plus a navigation rail.

    The rail lists every active section, including ones that render no content.
    """
    sections = active_ordered(ctx.document.menu_sections)
    blocks = _render_blocks(ctx, (s.id for s in sections), show_titles)
    navigation = tuple(
        NavigationItem(
            section_id=section.id,
            title=section.display_title,
            icon=ctx.dispatcher.icons.lookup(section.icon),
        )
        for section in sections
    )
    return (Zone(name=PRIMARY_ZONE, sections=place_sections(blocks)),), navigation


@dataclass(frozen=True)
class Layout:
    """
    Pluggable composition strategy of a template family.

    Attributes:
        layout_id: Id referenced by template descriptors
        header: Builds the header block
        body: Builds zones and the navigation rail
        show_section_titles: Whether section blocks draw their titles
        extras_placement: Where conditional panels go ("header" or "body")
    """

    layout_id: str
    header: HeaderStrategy
    body: BodyStrategy
    show_section_titles: bool = True
    extras_placement: str = "body"


LAYOUTS: Dict[str, Layout] = {
    "columns": Layout("columns", profile_header, zoned_body, True, "header"),
    "split": Layout("split", profile_header, zoned_body, True, "body"),
    "navigation": Layout("navigation", banner_header, navigation_body, False, "body"),
}


def get_layout(layout_id: str) -> Layout:
    """
    Raises:
        ValueError: If no layout is registered under layout_id
    """
    if layout_id not in LAYOUTS:
        raise ValueError(f"Unknown layout '{layout_id}'. Available layouts: {sorted(LAYOUTS)}")
    return LAYOUTS[layout_id]


def build_extras(document: ResumeDocument, placement: str) -> Tuple[ExtrasBlock, ...]:
    """Conditional panels driven by basic-info flags rather than section ordering."""
    basic = document.basic
    if not basic.github_contributions_visible:
        return ()
    return (
        ExtrasBlock(
            kind=GITHUB_CONTRIBUTIONS,
            placement=placement,
            data={"username": basic.github_username, "has_key": bool(basic.github_key)},
        ),
    )


class TemplateComposer:
    """
    Composes documents under one template.

    A composer holds no per-render state; one instance can compose any number
    of documents, from any number of threads.
    """

    def __init__(
        self,
        template: TemplateDescriptor,
        dispatcher: Optional[SectionContentDispatcher] = None,
        layout: Optional[Layout] = None,
    ):
        """
        Args:
            template: Template descriptor from the registry
            dispatcher: Section dispatcher (defaults to built-in renderers)
            layout: Strategy override; defaults to the layout named by the template
        """
        self.template = template
        self.dispatcher = dispatcher or SectionContentDispatcher()
        self.layout = layout or get_layout(template.layout)

    def compose(self, document: ResumeDocument, locale: Optional[str] = None) -> RenderTree:
        """
        Compose a document into a render tree.

        Args:
            document: Resume document
            locale: Locale for field formatting (defaults to FOLIO_DEFAULT_LOCALE)

        Returns:
            RenderTree with header, zones, navigation rail and extras
        """
        locale = locale or DEFAULT_LOCALE
        style = resolve_style(self.template, document.global_settings)
        ctx = CompositionContext(
            document=document,
            template=self.template,
            style=style,
            locale=locale,
            dispatcher=self.dispatcher,
        )

        _log_debug(f"Composing with template '{self.template.template_id}' (layout: {self.layout.layout_id})")

        zones, navigation = self.layout.body(ctx, self.layout.show_section_titles)

        return RenderTree(
            template_id=self.template.template_id,
            layout=self.layout.layout_id,
            style=style.to_dict(),
            colors={
                "primary": self.template.color_scheme.primary,
                "secondary": self.template.color_scheme.secondary,
                "background": self.template.color_scheme.background,
                "text": self.template.color_scheme.text,
            },
            header=self.layout.header(ctx),
            zones=zones,
            navigation=navigation,
            extras=build_extras(document, self.layout.extras_placement),
            locale=locale,
        )


def compose_document(
    document: ResumeDocument,
    template_id: str,
    locale: Optional[str] = None,
    registry: Optional[TemplateDescriptorRegistry] = None,
) -> RenderTree:
    """
    Compose a document with a registered template.

    Args:
        document: Resume document
        template_id: Registered template id (e.g., "popular-columns")
        locale: Locale for field formatting
        registry: Template registry (defaults to the process-wide registry)

    Returns:
        RenderTree

    Raises:
        UnknownTemplateError: If template_id is not registered
    """
    registry = registry or get_default_registry()
    return TemplateComposer(registry.get(template_id)).compose(document, locale)
