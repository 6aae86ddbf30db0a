"""Unit tests for section content dispatch and icon lookup."""

import pytest

from folio.contexts.composition.document_data_structure import (
    BasicInfo,
    CustomItem,
    Experience,
    PhotoConfig,
    ResumeDocument,
    SectionDescriptor,
)
from folio.contexts.composition.icons import DEFAULT_ICONS, IconRegistry
from folio.contexts.composition.render_tree import ContentBlock
from folio.contexts.composition.section_dispatcher import (
    SectionContentDispatcher,
    SectionKind,
    build_photo_block,
)
from folio.contexts.composition.style_resolver import EffectiveStyle

STYLE = EffectiveStyle(
    page_padding=24,
    section_gap=16,
    paragraph_gap=10,
    header_size=24,
    subheader_size=16,
    theme_color="#2563eb",
)


@pytest.fixture
def dispatcher():
    return SectionContentDispatcher()


@pytest.mark.unit
class TestCustomSections:
    """Custom sections render only when the document carries their data key."""

    def test_empty_custom_data_yields_empty_block(self, dispatcher):
        document = ResumeDocument(
            custom_data={"hobbies": []},
            menu_sections=[SectionDescriptor(id="hobbies", title="Hobbies")],
        )

        block = dispatcher.render("hobbies", document, STYLE)

        assert block is not None
        assert block.kind == "custom"
        assert block.items == ()
        assert block.title == "Hobbies"

    def test_missing_custom_data_yields_no_content(self, dispatcher):
        document = ResumeDocument(menu_sections=[SectionDescriptor(id="hobbies")])

        assert dispatcher.render("hobbies", document, STYLE) is None

    def test_hidden_custom_items_filtered(self, dispatcher):
        document = ResumeDocument(
            custom_data={
                "awards": [
                    CustomItem(title="Shown"),
                    CustomItem(title="Hidden", visible=False),
                ]
            }
        )

        block = dispatcher.render("awards", document, STYLE)

        assert [item["title"] for item in block.items] == ["Shown"]
        # Undeclared sections fall back to their id as title
        assert block.title == "awards"


@pytest.mark.unit
class TestBuiltinSections:
    """Tests for the built-in renderers."""

    def test_experience_block(self, dispatcher):
        document = ResumeDocument(
            experience=[
                Experience(company="Acme", position="Engineer", date="2020"),
                Experience(company="Hidden", visible=False),
            ],
            menu_sections=[SectionDescriptor(id="experience", title="Work")],
        )

        block = dispatcher.render("experience", document, STYLE)

        assert block.kind == SectionKind.EXPERIENCE.value
        assert [item["company"] for item in block.items] == ["Acme"]
        assert block.paragraph_spacing == 10
        assert block.section_spacing == 0

    def test_empty_builtin_section_still_renders(self, dispatcher):
        block = dispatcher.render("projects", ResumeDocument(), STYLE)

        assert block.kind == "projects"
        assert block.items == ()

    def test_skills_carry_free_text(self, dispatcher):
        document = ResumeDocument.from_dict(
            {"skills": ["Python", {"name": "Go", "level": "Advanced"}], "skillContent": "<p>More</p>"}
        )

        block = dispatcher.render("skills", document, STYLE)

        assert [item["name"] for item in block.items] == ["Python", "Go"]
        assert block.text == "<p>More</p>"

    def test_basic_block_uses_field_resolver(self, dispatcher):
        document = ResumeDocument(
            basic=BasicInfo(name="Ada", title="Engineer", fields={"email": "ada@example.com"})
        )

        block = dispatcher.render("basic", document, STYLE)

        assert block.meta["name"] == "Ada"
        assert block.meta["photo"] is None
        assert block.items == ({"key": "email", "label": "Email", "value": "ada@example.com"},)

    def test_renderer_override(self):
        def compact_experience(ctx):
            return ContentBlock(kind="experience", section_id=ctx.section.id, title="Compact")

        dispatcher = SectionContentDispatcher(renderers={"experience": compact_experience})

        block = dispatcher.render("experience", ResumeDocument(), STYLE)
        assert block.title == "Compact"

        # Other kinds keep their default renderers
        assert dispatcher.render("education", ResumeDocument(), STYLE).title == "education"

    def test_renderer_override_outside_closed_set_rejected(self):
        with pytest.raises(ValueError):
            SectionContentDispatcher(renderers={"hobbies": lambda ctx: None})


@pytest.mark.unit
class TestIcons:
    """Tests for the bounded icon registry."""

    def test_known_icon_attached(self, dispatcher):
        document = ResumeDocument(
            menu_sections=[SectionDescriptor(id="experience", icon="Briefcase")]
        )

        block = dispatcher.render("experience", document, STYLE)

        assert block.icon.name == "Briefcase"
        assert block.icon.css_class == "icon-briefcase"

    def test_unknown_icon_resolves_to_none(self, dispatcher):
        document = ResumeDocument(
            menu_sections=[SectionDescriptor(id="experience", icon="__class__")]
        )

        assert dispatcher.render("experience", document, STYLE).icon is None

    @pytest.mark.parametrize("name", [None, "", 42, "briefcase", "NotAnIcon"])
    def test_lookup_outside_vocabulary(self, name):
        assert DEFAULT_ICONS.lookup(name) is None

    def test_css_class_kebab_case(self):
        assert DEFAULT_ICONS.lookup("GraduationCap").css_class == "icon-graduation-cap"
        assert DEFAULT_ICONS.lookup("FolderGit2").css_class == "icon-folder-git2"

    def test_custom_vocabulary(self):
        icons = IconRegistry(["Star"])

        assert "Star" in icons
        assert icons.lookup("Briefcase") is None
        assert icons.names() == ("Star",)


@pytest.mark.unit
class TestPhotoBlock:
    """Tests for photo geometry."""

    @pytest.mark.parametrize(
        "border_radius,expected",
        [("none", 0), ("medium", 8), ("full", 9999), ("unknown", 0)],
    )
    def test_named_corner_radii(self, border_radius, expected):
        basic = BasicInfo(photo="ada.png", photo_config=PhotoConfig(border_radius=border_radius))

        assert build_photo_block(basic).corner_radius == expected

    def test_custom_corner_radius(self):
        basic = BasicInfo(
            photo="ada.png",
            photo_config=PhotoConfig(border_radius="custom", custom_border_radius=14),
        )

        assert build_photo_block(basic).corner_radius == 14

    def test_hidden_or_missing_photo(self):
        assert build_photo_block(BasicInfo()) is None
        assert build_photo_block(BasicInfo(photo="ada.png", photo_config=PhotoConfig(visible=False))) is None

