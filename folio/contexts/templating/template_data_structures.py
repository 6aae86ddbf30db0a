"""
Template Data Structures

Immutable descriptors loaded once from the template registry YAML: color
schemes, spacing and typography defaults, zone policies and the templates
that combine them.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional, Tuple

PRIMARY_ZONE = "primary"
SECONDARY_ZONE = "secondary"
ZONES = (PRIMARY_ZONE, SECONDARY_ZONE)

# Unmatched sections keep their sorted position within the default zone
INLINE_PLACEMENT = "inline"
# Unmatched sections follow every matched section of the default zone
APPEND_PLACEMENT = "append"
UNMATCHED_PLACEMENTS = (INLINE_PLACEMENT, APPEND_PLACEMENT)


@dataclass(frozen=True)
class ColorScheme:
    """
    Named color scheme of a template.

    Attributes:
        primary: Accent color, also the default theme color
        secondary: Muted accent for subtitles and borders
        background: Page background
        text: Body text color
    """

    primary: str
    secondary: str
    background: str
    text: str


@dataclass(frozen=True)
class SpacingDefaults:
    """Default spacing values in pixels."""

    content_padding: float
    section_gap: float
    item_gap: float


@dataclass(frozen=True)
class TypographyDefaults:
    """Default heading sizes in pixels."""

    header_size: float = 24
    subheader_size: float = 16


@dataclass(frozen=True)
class ZonePolicy:
    """
    Declarative routing table from section kinds to layout zones.

    Attributes:
        policy_id: Registry key (e.g., "columns_by_topic")
        primary: Section ids routed to the primary zone
        secondary: Section ids routed to the secondary zone
        default_zone: Zone receiving section ids matched by neither set
        unmatched_placement: "inline" keeps unmatched sections at their sorted
            position, "append" places them after the matched sections
    """

    policy_id: str
    primary: FrozenSet[str] = frozenset()
    secondary: FrozenSet[str] = frozenset()
    default_zone: str = PRIMARY_ZONE
    unmatched_placement: str = INLINE_PLACEMENT

    def __post_init__(self):
        if self.default_zone not in ZONES:
            raise ValueError(
                f"Invalid default_zone '{self.default_zone}' for policy '{self.policy_id}'. "
                f"Must be one of {ZONES}"
            )
        if self.unmatched_placement not in UNMATCHED_PLACEMENTS:
            raise ValueError(
                f"Invalid unmatched_placement '{self.unmatched_placement}' for policy "
                f"'{self.policy_id}'. Must be one of {UNMATCHED_PLACEMENTS}"
            )
        overlap = self.primary & self.secondary
        if overlap:
            raise ValueError(
                f"Section ids routed to both zones in policy '{self.policy_id}': {sorted(overlap)}"
            )

    @property
    def zones(self) -> Tuple[str, ...]:
        """Zones this policy can populate, in display order."""
        if not self.secondary and self.default_zone == PRIMARY_ZONE:
            return (PRIMARY_ZONE,)
        return ZONES

    @property
    def is_single_column(self) -> bool:
        return self.zones == (PRIMARY_ZONE,)

    def classify(self, section_id: str) -> Tuple[str, bool]:
        """
        Route a section id to a zone.

        Returns:
            Tuple of (zone name, whether the id was explicitly matched)
        """
        if section_id in self.primary:
            return PRIMARY_ZONE, True
        if section_id in self.secondary:
            return SECONDARY_ZONE, True
        return self.default_zone, False

    @classmethod
    def from_dict(cls, policy_id: str, data: Dict[str, Any]) -> "ZonePolicy":
        return cls(
            policy_id=policy_id,
            primary=frozenset(data.get("primary") or ()),
            secondary=frozenset(data.get("secondary") or ()),
            default_zone=data.get("default_zone", PRIMARY_ZONE),
            unmatched_placement=data.get("unmatched_placement", INLINE_PLACEMENT),
        )


@dataclass(frozen=True)
class TemplateDescriptor:
    """
    A named visual/layout variant.

    Attributes:
        template_id: Registry key (e.g., "popular-columns")
        name: Display name
        layout: Composer strategy id ("columns", "split", "navigation")
        zone_policy: Policy partitioning content sections into zones
        color_scheme: Template colors
        spacing: Spacing defaults overridable per document
        typography: Heading size defaults overridable per document
        banner_title: Page heading text for layouts that draw a banner
    """

    template_id: str
    name: str
    layout: str
    zone_policy: ZonePolicy
    color_scheme: ColorScheme
    spacing: SpacingDefaults
    typography: TypographyDefaults = field(default_factory=TypographyDefaults)
    banner_title: Optional[str] = None
