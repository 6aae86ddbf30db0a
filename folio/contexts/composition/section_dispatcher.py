"""
Section Content Dispatch

Produces section-specific content blocks. Built-in section kinds form a closed
enum mapped to renderer functions; every other section id takes the custom
path, which only yields content when the document carries data for it.
"""

from dataclasses import asdict, dataclass, replace
from enum import Enum
from typing import Callable, Dict, List, Mapping, Optional

from folio.contexts.composition.document_data_structure import (
    BasicInfo,
    CustomItem,
    ResumeDocument,
    SectionDescriptor,
)
from folio.contexts.composition.field_resolver import FieldResolver
from folio.contexts.composition.icons import DEFAULT_ICONS, IconRegistry
from folio.contexts.composition.render_tree import ContentBlock, PhotoBlock
from folio.contexts.composition.style_resolver import EffectiveStyle

CUSTOM_KIND = "custom"


class SectionKind(str, Enum):
    """Closed set of built-in section kinds. The value is the section id."""

    BASIC = "basic"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    PROJECTS = "projects"
    SKILLS = "skills"

    @classmethod
    def from_section_id(cls, section_id: str) -> Optional["SectionKind"]:
        """Built-in kind for a section id, or None for custom sections."""
        try:
            return cls(section_id)
        except ValueError:
            return None


@dataclass(frozen=True)
class SectionContext:
    """
    Everything a section renderer may read.

    Attributes:
        section: Declared section (title, icon)
        document: Source document
        style: Effective style of this render
        locale: Locale for field formatting
        field_resolver: Resolver for the basic-info fields
    """

    section: SectionDescriptor
    document: ResumeDocument
    style: EffectiveStyle
    locale: str
    field_resolver: FieldResolver


SectionRenderer = Callable[[SectionContext], ContentBlock]


def build_photo_block(basic: BasicInfo) -> Optional[PhotoBlock]:
    """Photo block with explicit geometry, or None when there is no visible photo."""
    config = basic.photo_config
    if not basic.photo or not config.visible:
        return None
    return PhotoBlock(
        src=basic.photo,
        width=config.width,
        height=config.height,
        corner_radius=config.corner_radius,
    )


def _block(ctx: SectionContext, kind: str, items, **kwargs) -> ContentBlock:
    return ContentBlock(
        kind=kind,
        section_id=ctx.section.id,
        title=ctx.section.display_title,
        items=tuple(items),
        paragraph_spacing=ctx.style.paragraph_gap,
        section_spacing=0,
        **kwargs,
    )


def render_basic(ctx: SectionContext) -> ContentBlock:
    basic = ctx.document.basic
    fields = ctx.field_resolver.resolve(basic, ctx.locale)
    photo = build_photo_block(basic)
    return _block(
        ctx,
        SectionKind.BASIC.value,
        (asdict(f) for f in fields),
        meta={
            "name": basic.name,
            "title": basic.title,
            "photo": asdict(photo) if photo else None,
        },
    )


def render_experience(ctx: SectionContext) -> ContentBlock:
    return _block(
        ctx,
        SectionKind.EXPERIENCE.value,
        (
            {
                "company": e.company,
                "position": e.position,
                "date": e.date,
                "details": e.details,
            }
            for e in ctx.document.experience
            if e.visible
        ),
    )


def render_education(ctx: SectionContext) -> ContentBlock:
    return _block(
        ctx,
        SectionKind.EDUCATION.value,
        (
            {
                "school": e.school,
                "major": e.major,
                "degree": e.degree,
                "start_date": e.start_date,
                "end_date": e.end_date,
                "gpa": e.gpa,
                "location": e.location,
                "description": e.description,
            }
            for e in ctx.document.education
            if e.visible
        ),
    )


def render_projects(ctx: SectionContext) -> ContentBlock:
    return _block(
        ctx,
        SectionKind.PROJECTS.value,
        (
            {
                "name": p.name,
                "role": p.role,
                "date": p.date,
                "description": p.description,
                "link": p.link,
            }
            for p in ctx.document.projects
            if p.visible
        ),
    )


def render_skills(ctx: SectionContext) -> ContentBlock:
    return _block(
        ctx,
        SectionKind.SKILLS.value,
        (
            {"name": s.name, "level": s.level, "keywords": tuple(s.keywords)}
            for s in ctx.document.skills
        ),
        text=ctx.document.skill_content,
    )


def render_custom(ctx: SectionContext, items: List[CustomItem]) -> ContentBlock:
    return _block(
        ctx,
        CUSTOM_KIND,
        (
            {
                "title": item.title,
                "subtitle": item.subtitle,
                "date_range": item.date_range,
                "description": item.description,
            }
            for item in items
            if item.visible
        ),
    )


DEFAULT_RENDERERS: Mapping[SectionKind, SectionRenderer] = {
    SectionKind.BASIC: render_basic,
    SectionKind.EXPERIENCE: render_experience,
    SectionKind.EDUCATION: render_education,
    SectionKind.PROJECTS: render_projects,
    SectionKind.SKILLS: render_skills,
}


class SectionContentDispatcher:
    """
    Dispatches section ids to content renderers.

    Built-in kinds go through the renderer mapping supplied at construction
    (defaults to DEFAULT_RENDERERS, with per-kind replacements allowed). Other
    ids render as custom sections when document.custom_data has their key,
    even if the item list is empty; otherwise they produce no content.
    """

    def __init__(
        self,
        renderers: Optional[Mapping[SectionKind, SectionRenderer]] = None,
        field_resolver: Optional[FieldResolver] = None,
        icons: IconRegistry = DEFAULT_ICONS,
    ):
        merged: Dict[SectionKind, SectionRenderer] = dict(DEFAULT_RENDERERS)
        # SectionKind(...) rejects keys outside the closed set with ValueError
        merged.update({SectionKind(kind): renderer for kind, renderer in (renderers or {}).items()})

        self._renderers = merged
        self.field_resolver = field_resolver or FieldResolver()
        self.icons = icons

    def render(
        self,
        section_id: str,
        document: ResumeDocument,
        style: EffectiveStyle,
        locale: str = "en",
    ) -> Optional[ContentBlock]:
        """
        Produce the content block of one section.

        Args:
            section_id: Section to render
            document: Source document
            style: Effective style of this render
            locale: Locale for field formatting

        Returns:
            ContentBlock, or None when a custom section has no data key
        """
        section = document.find_section(section_id) or SectionDescriptor(id=section_id)
        ctx = SectionContext(
            section=section,
            document=document,
            style=style,
            locale=locale,
            field_resolver=self.field_resolver,
        )

        kind = SectionKind.from_section_id(section_id)
        if kind is not None:
            block = self._renderers[kind](ctx)
        elif section_id in document.custom_data:
            block = render_custom(ctx, document.custom_data[section_id])
        else:
            return None

        icon = self.icons.lookup(section.icon)
        if icon is not None:
            block = replace(block, icon=icon)
        return block
