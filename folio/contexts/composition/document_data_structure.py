"""
Resume Document Structure

Defines the structured resume document consumed by the composition engine.
Documents come from the (external) editor as camelCase JSON/YAML; loading maps
them onto snake_case dataclasses once, so composition never inspects raw dicts.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from omegaconf import OmegaConf

from folio.contexts.templating.exceptions import InvalidDocumentStructureError

BASIC_SECTION_ID = "basic"

# Pixel radius for each named photo corner style
PHOTO_BORDER_RADII = {
    "none": 0,
    "medium": 8,
    "full": 9999,
}

# BasicInfo keys that are structural rather than displayable scalar fields
_BASIC_STRUCTURAL_KEYS = {
    "name",
    "title",
    "photo",
    "photoConfig",
    "fieldOrder",
    "customFields",
    "githubContributionsVisible",
    "githubUseName",
    "githubKey",
    "icons",
    "photo_config",
    "field_order",
    "custom_fields",
    "github_contributions_visible",
    "github_username",
    "github_key",
}


def _get(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first present key among snake_case/camelCase spellings."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _as_list(value: Any, what: str) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise InvalidDocumentStructureError(f"'{what}' must be a list, got {type(value).__name__}")
    return value


def _as_mapping(value: Any, what: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise InvalidDocumentStructureError(
            f"'{what}' entries must be mappings, got {type(value).__name__}"
        )
    return value


def _as_bool(value: Any, what: str, default: bool) -> bool:
    """Strict flag: null means the default, anything but a real bool is rejected."""
    if value is None:
        return default
    if not isinstance(value, bool):
        raise InvalidDocumentStructureError(
            f"'{what}' must be true or false, got {value!r}"
        )
    return value


def _as_int(value: Any, what: str, default: int) -> int:
    if value is None:
        return default
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise InvalidDocumentStructureError(f"'{what}' must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise InvalidDocumentStructureError(
            f"'{what}' must be an integer, got {value!r}"
        ) from e


@dataclass(frozen=True)
class SectionDescriptor:
    """
    A named, orderable, enable/disable-able unit of resume content.

    Attributes:
        id: Section identity, unique within a document (e.g., "experience", "hobbies")
        title: Display title chosen in the editor
        enabled: Whether the section is shown
        order: Explicit ordering index (ascending)
        icon: Optional icon name from the accepted icon vocabulary
    """

    id: str
    title: str = ""
    enabled: bool = True
    order: int = 0
    icon: Optional[str] = None

    @property
    def display_title(self) -> str:
        return self.title or self.id

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SectionDescriptor":
        data = _as_mapping(data, "menuSections")
        if not data.get("id"):
            raise InvalidDocumentStructureError(f"Section descriptor missing 'id': {data}")
        return cls(
            id=str(data["id"]),
            title=data.get("title") or "",
            enabled=_as_bool(data.get("enabled"), "menuSections.enabled", True),
            order=_as_int(data.get("order"), "menuSections.order", 0),
            icon=data.get("icon") or None,
        )


@dataclass
class FieldOrderEntry:
    """User-chosen display position and visibility of a fixed basic-info field."""

    key: str
    label: str = ""
    visible: bool = True


@dataclass
class CustomField:
    """Fully user-defined basic-info field."""

    id: str
    label: str = ""
    value: str = ""
    visible: bool = True


@dataclass
class PhotoConfig:
    """
    Photo box geometry.

    Attributes:
        width: Box width in pixels
        height: Box height in pixels
        border_radius: "none", "medium", "full" or "custom"
        custom_border_radius: Radius in pixels when border_radius is "custom"
        visible: Whether the photo is drawn at all
    """

    width: float = 90
    height: float = 120
    border_radius: str = "none"
    custom_border_radius: float = 0
    visible: bool = True

    @property
    def corner_radius(self) -> float:
        if self.border_radius == "custom":
            return self.custom_border_radius
        return PHOTO_BORDER_RADII.get(self.border_radius, 0)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PhotoConfig":
        if not data:
            return cls()
        return cls(
            width=_get(data, "width", default=90),
            height=_get(data, "height", default=120),
            border_radius=_get(data, "border_radius", "borderRadius", default="none"),
            custom_border_radius=_get(
                data, "custom_border_radius", "customBorderRadius", default=0
            ),
            visible=_as_bool(data.get("visible"), "photoConfig.visible", True),
        )


@dataclass
class BasicInfo:
    """
    Personal-info block.

    Attributes:
        name: Heading name
        title: Heading title / professional brand
        fields: Named scalar fields (email, phone, location, birthDate, ...)
        field_order: Optional user ordering of fixed fields; None means fallback order
        custom_fields: User-defined fields, always shown after the ordered ones
        photo: Photo URL or data URI
        photo_config: Photo box geometry
        github_contributions_visible: Whether the contribution panel is shown
        github_username: GitHub user for the contribution panel
        github_key: Access token for the contribution panel (never rendered)
    """

    name: str = ""
    title: str = ""
    fields: Dict[str, str] = field(default_factory=dict)
    field_order: Optional[List[FieldOrderEntry]] = None
    custom_fields: List[CustomField] = field(default_factory=list)
    photo: str = ""
    photo_config: PhotoConfig = field(default_factory=PhotoConfig)
    github_contributions_visible: bool = False
    github_username: str = ""
    github_key: str = ""

    def get_field(self, key: str) -> Any:
        """Raw value of a named field, including the heading fields."""
        if key == "name":
            return self.name
        if key == "title":
            return self.title
        return self.fields.get(key)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BasicInfo":
        if not isinstance(data, dict):
            raise InvalidDocumentStructureError("'basic' must be a mapping")

        scalar_fields = {
            key: str(value)
            for key, value in data.items()
            if key not in _BASIC_STRUCTURAL_KEYS
            and isinstance(value, (str, int, float))
            and not isinstance(value, bool)
        }

        raw_order = _get(data, "field_order", "fieldOrder")
        field_order = None
        if raw_order is not None:
            field_order = [
                FieldOrderEntry(
                    key=str(entry.get("key", "")),
                    label=entry.get("label") or "",
                    visible=_as_bool(entry.get("visible"), "visible", True),
                )
                for entry in (_as_mapping(e, "fieldOrder") for e in _as_list(raw_order, "fieldOrder"))
            ]

        custom_fields = [
            CustomField(
                id=str(entry.get("id", "")),
                label=entry.get("label") or "",
                value="" if entry.get("value") is None else str(entry["value"]),
                visible=_as_bool(entry.get("visible"), "visible", True),
            )
            for entry in (
                _as_mapping(e, "customFields")
                for e in _as_list(_get(data, "custom_fields", "customFields"), "customFields")
            )
        ]

        return cls(
            name=data.get("name") or "",
            title=data.get("title") or "",
            fields=scalar_fields,
            field_order=field_order,
            custom_fields=custom_fields,
            photo=data.get("photo") or "",
            photo_config=PhotoConfig.from_dict(_get(data, "photo_config", "photoConfig")),
            github_contributions_visible=_as_bool(
                _get(data, "github_contributions_visible", "githubContributionsVisible"),
                "githubContributionsVisible",
                False,
            ),
            github_username=_get(data, "github_username", "githubUseName", default=""),
            github_key=_get(data, "github_key", "githubKey", default=""),
        )


@dataclass
class Experience:
    id: str = ""
    company: str = ""
    position: str = ""
    date: str = ""
    details: str = ""
    visible: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Experience":
        data = _as_mapping(data, "experience")
        return cls(
            id=str(data.get("id", "")),
            company=data.get("company") or "",
            position=data.get("position") or "",
            date=data.get("date") or "",
            details=data.get("details") or "",
            visible=_as_bool(data.get("visible"), "visible", True),
        )


@dataclass
class Education:
    id: str = ""
    school: str = ""
    major: str = ""
    degree: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: str = ""
    location: str = ""
    description: str = ""
    visible: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Education":
        data = _as_mapping(data, "education")
        return cls(
            id=str(data.get("id", "")),
            school=data.get("school") or "",
            major=data.get("major") or "",
            degree=data.get("degree") or "",
            start_date=_get(data, "start_date", "startDate", default=""),
            end_date=_get(data, "end_date", "endDate", default=""),
            gpa=str(data.get("gpa") or ""),
            location=data.get("location") or "",
            description=data.get("description") or "",
            visible=_as_bool(data.get("visible"), "visible", True),
        )


@dataclass
class Project:
    id: str = ""
    name: str = ""
    role: str = ""
    date: str = ""
    description: str = ""
    link: str = ""
    visible: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        data = _as_mapping(data, "projects")
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name") or "",
            role=data.get("role") or "",
            date=data.get("date") or "",
            description=data.get("description") or "",
            link=data.get("link") or "",
            visible=_as_bool(data.get("visible"), "visible", True),
        )


@dataclass
class Skill:
    name: str
    level: str = ""
    keywords: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "Skill":
        # Plain strings are accepted as bare skill names
        if isinstance(data, str):
            return cls(name=data)
        data = _as_mapping(data, "skills")
        return cls(
            name=data.get("name") or "",
            level=data.get("level") or "",
            keywords=[str(k) for k in data.get("keywords") or []],
        )


@dataclass
class CustomItem:
    """One entry of a user-defined section."""

    id: str = ""
    title: str = ""
    subtitle: str = ""
    date_range: str = ""
    description: str = ""
    visible: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CustomItem":
        data = _as_mapping(data, "customData")
        return cls(
            id=str(data.get("id", "")),
            title=data.get("title") or "",
            subtitle=data.get("subtitle") or "",
            date_range=_get(data, "date_range", "dateRange", default=""),
            description=data.get("description") or "",
            visible=_as_bool(data.get("visible"), "visible", True),
        )


@dataclass
class StyleOverrides:
    """
    Per-document style overrides. None means "use the template default".

    Attributes:
        page_padding: Page padding in pixels
        section_gap: Gap between sections in pixels
        paragraph_gap: Gap between entries within a section in pixels
        header_size: Heading font size in pixels
        subheader_size: Subheading font size in pixels
        theme_color: Accent color
    """

    page_padding: Optional[float] = None
    section_gap: Optional[float] = None
    paragraph_gap: Optional[float] = None
    header_size: Optional[float] = None
    subheader_size: Optional[float] = None
    theme_color: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["StyleOverrides"]:
        if data is None:
            return None
        data = _as_mapping(data, "globalSettings")
        return cls(
            page_padding=_get(data, "page_padding", "pagePadding"),
            section_gap=_get(data, "section_gap", "sectionSpacing"),
            paragraph_gap=_get(data, "paragraph_gap", "paragraphSpacing"),
            header_size=_get(data, "header_size", "headerSize"),
            subheader_size=_get(data, "subheader_size", "subheaderSize"),
            theme_color=_get(data, "theme_color", "themeColor") or None,
        )


@dataclass
class ResumeDocument:
    """
    Structured representation of a complete resume document.

    Attributes:
        basic: Personal-info block
        experience: Work history entries, in display order
        education: Education entries, in display order
        projects: Project entries, in display order
        skills: Structured skill entries
        skill_content: Free-form skills text from the editor
        custom_data: User-defined sections keyed by section id
        menu_sections: Declared sections with enablement and ordering
        global_settings: Optional style overrides
    """

    basic: BasicInfo = field(default_factory=BasicInfo)
    experience: List[Experience] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    skills: List[Skill] = field(default_factory=list)
    skill_content: str = ""
    custom_data: Dict[str, List[CustomItem]] = field(default_factory=dict)
    menu_sections: List[SectionDescriptor] = field(default_factory=list)
    global_settings: Optional[StyleOverrides] = None

    def find_section(self, section_id: str) -> Optional[SectionDescriptor]:
        for section in self.menu_sections:
            if section.id == section_id:
                return section
        return None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResumeDocument":
        """
        Build a document from editor-shaped data (camelCase or snake_case keys).

        Raises:
            InvalidDocumentStructureError: If required structure is missing or malformed
        """
        if not isinstance(data, dict):
            raise InvalidDocumentStructureError("Resume document must be a mapping")

        menu_sections = [
            SectionDescriptor.from_dict(s)
            for s in _as_list(_get(data, "menu_sections", "menuSections"), "menuSections")
        ]
        seen = set()
        for section in menu_sections:
            if section.id in seen:
                raise InvalidDocumentStructureError(f"Duplicate section id '{section.id}'")
            seen.add(section.id)

        raw_custom = _get(data, "custom_data", "customData", default={})
        if not isinstance(raw_custom, dict):
            raise InvalidDocumentStructureError("'customData' must be a mapping")
        custom_data = {
            section_id: [CustomItem.from_dict(item) for item in _as_list(items, f"customData.{section_id}")]
            for section_id, items in raw_custom.items()
        }

        return cls(
            basic=BasicInfo.from_dict(data.get("basic") or {}),
            experience=[Experience.from_dict(e) for e in _as_list(data.get("experience"), "experience")],
            education=[Education.from_dict(e) for e in _as_list(data.get("education"), "education")],
            projects=[Project.from_dict(p) for p in _as_list(data.get("projects"), "projects")],
            skills=[Skill.from_dict(s) for s in _as_list(data.get("skills"), "skills")],
            skill_content=_get(data, "skill_content", "skillContent", default=""),
            custom_data=custom_data,
            menu_sections=menu_sections,
            global_settings=StyleOverrides.from_dict(_get(data, "global_settings", "globalSettings")),
        )

    @classmethod
    def from_file(cls, path: Path) -> "ResumeDocument":
        """
        Load a document from a YAML or JSON file.

        Raises:
            FileNotFoundError: If path does not exist
            InvalidDocumentStructureError: If the content is malformed
        """
        if type(path) is str:
            path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Resume document not found: {path}")

        data = OmegaConf.to_container(OmegaConf.load(path), resolve=True)

        # Editor exports wrap the resume in a "document" key
        if isinstance(data, dict) and "document" in data and "basic" not in data:
            data = data["document"]

        return cls.from_dict(data)
