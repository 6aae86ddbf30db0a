"""
Render Tree Data Structures

The composition engine's output: a frozen, serializable description of the
header, zones, section content blocks and computed style of one render.
Nothing here references the source document.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class FieldEntry:
    """One resolved personal-info field ready for display."""

    key: str
    label: str
    value: str


@dataclass(frozen=True)
class PhotoBlock:
    """Photo box with explicit geometry in pixels."""

    src: str
    width: float
    height: float
    corner_radius: float


@dataclass(frozen=True)
class IconHandle:
    """
    Renderable icon reference from the bounded icon registry.

    Attributes:
        name: Accepted icon name (e.g., "Briefcase")
        css_class: Class used by the HTML preview (e.g., "icon-briefcase")
    """

    name: str
    css_class: str


@dataclass(frozen=True)
class HeaderBlock:
    """
    Heading of the page.

    Attributes:
        name: Person name (empty for layouts that show basic info in the body)
        title: Professional title
        fields: Resolved contact/personal fields in display order
        photo: Optional photo block
        banner: Optional banner heading text
        banner_size: Font size of the banner heading
    """

    name: str = ""
    title: str = ""
    fields: Tuple[FieldEntry, ...] = ()
    photo: Optional[PhotoBlock] = None
    banner: Optional[str] = None
    banner_size: Optional[float] = None


@dataclass(frozen=True)
class ContentBlock:
    """
    Section-specific content produced by a section renderer.

    Attributes:
        kind: Built-in kind value ("experience", ...) or "custom"
        section_id: Id of the section that produced the block
        title: Declared section title (falls back to the id)
        items: Typed entries of the section as plain mappings
        paragraph_spacing: Gap between items in pixels
        section_spacing: Always 0; the composer owns inter-section gaps
        icon: Resolved section icon, if any
        show_title: Whether the layout draws the section title
        text: Free-form rich text (skills content)
        meta: Section-level values that are not items (e.g., heading name and title)
    """

    kind: str
    section_id: str
    title: str
    items: Tuple[Dict[str, Any], ...] = ()
    paragraph_spacing: float = 0
    section_spacing: float = 0
    icon: Optional[IconHandle] = None
    show_title: bool = True
    text: str = ""
    meta: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class PlacedSection:
    """A content block at its slot in a zone."""

    block: ContentBlock
    separator_after: bool = False


@dataclass(frozen=True)
class Zone:
    """Named layout region with its ordered sections."""

    name: str
    sections: Tuple[PlacedSection, ...] = ()

    @property
    def section_ids(self) -> Tuple[str, ...]:
        return tuple(placed.block.section_id for placed in self.sections)


@dataclass(frozen=True)
class NavigationItem:
    """Entry of a navigation rail."""

    section_id: str
    title: str
    icon: Optional[IconHandle] = None


@dataclass(frozen=True)
class ExtrasBlock:
    """
    Template-specific panel outside the section ordering system.

    Attributes:
        kind: Panel kind (e.g., "github_contributions")
        placement: "header" or "body"
        data: Panel payload (never contains credentials)
    """

    kind: str
    placement: str
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RenderTree:
    """
    Fully composed layout of one document under one template.

    Attributes:
        template_id: Template that produced the tree
        layout: Composer strategy id
        style: Effective style values as a mapping
        colors: Template color scheme as a mapping
        header: Heading block
        zones: Zones in display order
        navigation: Navigation rail items (empty for layouts without one)
        extras: Conditional template-specific panels
        locale: Locale the fields were formatted for
    """

    template_id: str
    layout: str
    style: Dict[str, Any]
    colors: Dict[str, str]
    header: HeaderBlock
    zones: Tuple[Zone, ...] = ()
    navigation: Tuple[NavigationItem, ...] = ()
    extras: Tuple[ExtrasBlock, ...] = ()
    locale: str = "en"

    def zone(self, name: str) -> Optional[Zone]:
        for zone in self.zones:
            if zone.name == name:
                return zone
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Plain nested dict/list form, suitable for JSON output."""
        return asdict(self)
