"""
Integration tests for template composition.

Composes the sample editor export under every registered template and checks
zones, separators, header and extras of the resulting render trees.
"""

import json

import pytest

from folio.contexts.composition import TemplateComposer, compose_document
from folio.contexts.composition.composer import LAYOUTS, Layout, get_layout, profile_header, zoned_body
from folio.contexts.composition.document_data_structure import ResumeDocument, SectionDescriptor
from folio.contexts.templating.exceptions import UnknownTemplateError


def _separators(zone):
    return [placed.separator_after for placed in zone.sections]


@pytest.mark.integration
class TestPopularColumns:
    """Two columns by topic, contribution panel in the header."""

    @pytest.fixture
    def tree(self, sample_document, registry):
        return compose_document(sample_document, "popular-columns", locale="en", registry=registry)

    def test_zones(self, tree):
        assert tree.layout == "columns"
        assert [zone.name for zone in tree.zones] == ["primary", "secondary"]
        assert tree.zone("primary").section_ids == ("experience", "education", "projects")
        # volunteering has no data key and takes no slot
        assert tree.zone("secondary").section_ids == ("skills", "hobbies", "awards")

    def test_separators_between_rendered_sections_only(self, tree):
        assert _separators(tree.zone("primary")) == [True, True, False]
        assert _separators(tree.zone("secondary")) == [True, True, False]

    def test_empty_custom_section_keeps_its_slot(self, tree):
        awards = tree.zone("secondary").sections[-1].block

        assert awards.kind == "custom"
        assert awards.items == ()

    def test_header(self, tree):
        assert tree.header.name == "Ada Lovelace"
        assert tree.header.title == "Analytical Engineer"
        assert [(f.key, f.value) for f in tree.header.fields] == [
            ("email", "ada@example.com"),
            ("birthDate", "May 1990"),
            ("website", "ada.example.com"),
        ]
        assert tree.header.photo.corner_radius == 8
        assert tree.header.banner is None

    def test_hidden_entries_not_rendered(self, tree):
        experience = tree.zone("primary").sections[0].block

        assert [item["company"] for item in experience.items] == ["Analytical Engines Ltd"]

    def test_icons(self, tree):
        blocks = {placed.block.section_id: placed.block for zone in tree.zones for placed in zone.sections}

        assert blocks["experience"].icon.name == "Briefcase"
        assert blocks["projects"].icon is None
        assert blocks["awards"].icon is None

    def test_style_overrides_applied(self, tree):
        assert tree.style["page_padding"] == 20
        assert tree.style["theme_color"] == "#ff0000"
        assert tree.style["section_gap"] == 16
        assert tree.colors["primary"] == "#2563eb"

    def test_extras_in_header_without_credentials(self, tree):
        assert len(tree.extras) == 1
        extra = tree.extras[0]
        assert extra.kind == "github_contributions"
        assert extra.placement == "header"
        assert extra.data == {"username": "ada", "has_key": True}
        assert "ghp_secret_token" not in json.dumps(tree.to_dict())


@pytest.mark.integration
class TestClassicSplit:
    """Two columns by type, unmatched sections appended to the primary column."""

    @pytest.fixture
    def tree(self, sample_document, registry):
        return compose_document(sample_document, "classic-split", locale="en", registry=registry)

    def test_zones(self, tree):
        assert tree.layout == "split"
        assert tree.zone("primary").section_ids == ("experience", "projects", "hobbies", "awards")
        assert tree.zone("secondary").section_ids == ("skills", "education")

    def test_section_titles_shown(self, tree):
        assert all(placed.block.show_title for zone in tree.zones for placed in zone.sections)

    def test_extras_in_body(self, tree):
        assert tree.extras[0].placement == "body"

    def test_template_padding_used_without_override(self, tree, registry):
        document = ResumeDocument.from_dict({"menuSections": [{"id": "experience"}]})

        plain = compose_document(document, "classic-split", registry=registry)

        assert plain.style["page_padding"] == 40
        assert tree.style["page_padding"] == 20


@pytest.mark.integration
class TestNavigation:
    """Banner header, single zone and a navigation rail."""

    @pytest.fixture
    def tree(self, sample_document, registry):
        return compose_document(sample_document, "navigation", locale="en", registry=registry)

    def test_single_zone_includes_basic(self, tree):
        assert [zone.name for zone in tree.zones] == ["primary"]
        assert tree.zones[0].section_ids == (
            "basic",
            "experience",
            "skills",
            "education",
            "projects",
            "hobbies",
            "awards",
        )

    def test_banner_header(self, tree):
        assert tree.header.banner == "Resume"
        assert tree.header.banner_size == 30
        assert tree.header.name == ""

    def test_navigation_rail_lists_every_active_section(self, tree):
        """Sections without content still get a rail entry; disabled ones do not."""
        rail = [item.section_id for item in tree.navigation]

        assert rail == list(tree.zones[0].section_ids) + ["volunteering"]
        assert "languages" not in rail
        assert tree.navigation[-1].title == "Volunteering"
        assert tree.navigation[-1].icon is None
        assert tree.navigation[0].title == "Profile"
        assert tree.navigation[0].icon.name == "User"

    def test_section_titles_hidden(self, tree):
        assert not any(placed.block.show_title for placed in tree.zones[0].sections)

    def test_basic_block_in_body(self, tree):
        basic = tree.zones[0].sections[0].block

        assert basic.meta["name"] == "Ada Lovelace"
        assert [item["key"] for item in basic.items] == ["email", "birthDate", "website"]


@pytest.mark.integration
class TestComposerContract:
    """Properties shared by every template."""

    @pytest.mark.parametrize("template_id", ["popular-columns", "classic-split", "navigation"])
    def test_compose_is_idempotent(self, sample_document, registry, template_id):
        composer = TemplateComposer(registry.get(template_id))

        assert composer.compose(sample_document, "en") == composer.compose(sample_document, "en")

    @pytest.mark.parametrize("template_id", ["popular-columns", "classic-split", "navigation"])
    def test_disabled_sections_never_rendered(self, sample_document, registry, template_id):
        tree = compose_document(sample_document, template_id, registry=registry)
        rendered = [s for zone in tree.zones for s in zone.section_ids]

        assert "languages" not in rendered
        assert len(rendered) == len(set(rendered))

    def test_locale_changes_field_formatting(self, sample_document, registry):
        tree = compose_document(sample_document, "popular-columns", locale="zh", registry=registry)

        birth_date = next(f for f in tree.header.fields if f.key == "birthDate")
        assert birth_date.value == "1990年5月"
        assert birth_date.label == "出生日期"

    def test_disabled_basic_gives_empty_header(self, registry):
        document = ResumeDocument(
            menu_sections=[
                SectionDescriptor(id="basic", enabled=False),
                SectionDescriptor(id="experience", order=1),
            ]
        )

        tree = compose_document(document, "popular-columns", registry=registry)

        assert tree.header.name == ""
        assert tree.header.fields == ()

    def test_no_extras_when_panel_hidden(self, registry):
        tree = compose_document(ResumeDocument(), "classic-split", registry=registry)

        assert tree.extras == ()
        assert all(zone.sections == () for zone in tree.zones)

    def test_unknown_template(self, sample_document, registry):
        with pytest.raises(UnknownTemplateError):
            compose_document(sample_document, "glossy-magazine", registry=registry)

    def test_layout_override(self, sample_document, registry):
        """Any template can be composed with another layout strategy."""
        flat = Layout("flat", profile_header, zoned_body, show_section_titles=False)

        tree = TemplateComposer(registry.get("popular-columns"), layout=flat).compose(sample_document)

        assert tree.layout == "flat"
        assert tree.template_id == "popular-columns"
        assert not any(placed.block.show_title for zone in tree.zones for placed in zone.sections)

    def test_unknown_layout(self):
        with pytest.raises(ValueError, match="Unknown layout"):
            get_layout("magazine")
        assert set(LAYOUTS) == {"columns", "split", "navigation"}
