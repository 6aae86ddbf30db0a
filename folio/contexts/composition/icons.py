"""
Icon Lookup

Bounded registry of accepted section icon names. Anything outside the
vocabulary resolves to None instead of raising.
"""

import re
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from folio.contexts.composition.render_tree import IconHandle

# Icon names accepted from the section editor
ACCEPTED_ICON_NAMES = (
    "User",
    "Briefcase",
    "GraduationCap",
    "FolderKanban",
    "FolderGit2",
    "Code",
    "Wrench",
    "Star",
    "Award",
    "Trophy",
    "Medal",
    "BookOpen",
    "Languages",
    "Globe",
    "Heart",
    "Lightbulb",
    "Sparkles",
    "Users",
    "HandHeart",
    "Mail",
    "Phone",
    "MapPin",
    "Calendar",
    "Github",
    "Linkedin",
)


def _css_class(name: str) -> str:
    """PascalCase icon name to a kebab-case CSS class ("GraduationCap" -> "icon-graduation-cap")."""
    kebab = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "-", name).lower()
    return f"icon-{kebab}"


class IconRegistry:
    """
    Closed mapping from icon names to renderable handles.

    Lookups are exact-name matches; the accepted vocabulary is fixed at
    construction time.
    """

    def __init__(self, names: Iterable[str] = ACCEPTED_ICON_NAMES):
        self._icons: Mapping[str, IconHandle] = MappingProxyType(
            {name: IconHandle(name=name, css_class=_css_class(name)) for name in names}
        )

    def lookup(self, name: Optional[str]) -> Optional[IconHandle]:
        """Handle for an accepted icon name, or None for anything else (including None)."""
        if not name or not isinstance(name, str):
            return None
        return self._icons.get(name)

    def names(self):
        return tuple(self._icons)

    def __contains__(self, name: str) -> bool:
        return name in self._icons


DEFAULT_ICONS = IconRegistry()
