"""
Zone Assignment

Partitions ordered content sections into layout zones using a declarative
ZonePolicy. Order within a zone follows the incoming sequence; nothing is
re-sorted here.
"""

from typing import Dict, List, Sequence

from folio.contexts.composition.document_data_structure import (
    BASIC_SECTION_ID,
    SectionDescriptor,
)
from folio.contexts.composition.logger import _log_debug
from folio.contexts.templating.template_data_structures import (
    APPEND_PLACEMENT,
    ZonePolicy,
)


def assign_zones(
    policy: ZonePolicy, sections: Sequence[SectionDescriptor]
) -> Dict[str, List[SectionDescriptor]]:
    """
    Map each content section to a zone.

    Args:
        policy: Routing table of the template
        sections: Active content sections, already sorted

    Returns:
        Dict from zone name to ordered sections, with one key per zone of the
        policy (possibly empty lists). The basic-info section is never placed.
    """
    zones: Dict[str, List[SectionDescriptor]] = {zone: [] for zone in policy.zones}
    appended: List[SectionDescriptor] = []

    for section in sections:
        if section.id == BASIC_SECTION_ID:
            continue

        zone, matched = policy.classify(section.id)
        if not matched and policy.unmatched_placement == APPEND_PLACEMENT:
            appended.append(section)
        else:
            zones[zone].append(section)

    zones[policy.default_zone].extend(appended)

    _log_debug(
        f"Zone policy '{policy.policy_id}': "
        + ", ".join(f"{zone}={[s.id for s in placed]}" for zone, placed in zones.items())
    )
    return zones
