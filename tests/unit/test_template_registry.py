"""Unit tests for TemplateDescriptorRegistry."""

import pytest

from folio.contexts.templating.exceptions import TemplateRegistryError, UnknownTemplateError
from folio.contexts.templating.registries import (
    TEMPLATES_PATH,
    TemplateDescriptorRegistry,
    get_default_registry,
)


@pytest.mark.unit
def test_registry_loads_packaged_templates(registry):
    """Test the packaged registry declares every template family."""
    assert registry.config_path == TEMPLATES_PATH
    assert registry.template_ids() == ["popular-columns", "classic-split", "navigation"]
    assert len(registry) == 3
    assert "navigation" in registry


@pytest.mark.unit
def test_template_descriptor_fields(registry):
    """Test descriptor blocks are parsed into typed values."""
    template = registry.get("classic-split")

    assert template.layout == "split"
    assert template.zone_policy.policy_id == "columns_by_type"
    assert template.color_scheme.primary == "#0f766e"
    assert template.spacing.content_padding == 40
    # Omitted typography block falls back to defaults
    assert template.typography.header_size == 24


@pytest.mark.unit
def test_unknown_template(registry):
    """Test error handling for an unregistered id."""
    with pytest.raises(UnknownTemplateError) as exc_info:
        registry.get("glossy-magazine")

    assert exc_info.value.template_id == "glossy-magazine"
    assert "popular-columns" in str(exc_info.value)


@pytest.mark.unit
def test_unknown_template_is_key_error(registry):
    with pytest.raises(KeyError):
        registry.get("")


@pytest.mark.unit
def test_default_registry_is_shared():
    """Test the process-wide registry is loaded once."""
    assert get_default_registry() is get_default_registry()


@pytest.mark.unit
def test_missing_registry_file(tmp_path):
    with pytest.raises(TemplateRegistryError, match="not found"):
        TemplateDescriptorRegistry(tmp_path / "missing.yaml")


@pytest.mark.unit
def test_partial_template_entry_gets_defaults(tmp_path):
    """Test entries may omit every block but the name."""
    config = tmp_path / "templates.yaml"
    config.write_text(
        "zone_policies:\n"
        "  single_column: {}\n"
        "templates:\n"
        "  plain:\n"
        "    name: Plain\n"
    )

    template = TemplateDescriptorRegistry(config).get("plain")

    assert template.layout == "columns"
    assert template.zone_policy.is_single_column
    assert template.spacing.section_gap == 24
    assert template.banner_title is None


@pytest.mark.unit
def test_template_with_unknown_zone_policy(tmp_path):
    config = tmp_path / "templates.yaml"
    config.write_text(
        "zone_policies: {}\n"
        "templates:\n"
        "  plain:\n"
        "    zone_policy: sidebar_first\n"
    )

    with pytest.raises(TemplateRegistryError) as exc_info:
        TemplateDescriptorRegistry(config)

    assert exc_info.value.entry == "plain"
    assert "sidebar_first" in str(exc_info.value)


@pytest.mark.unit
def test_invalid_zone_policy(tmp_path):
    config = tmp_path / "templates.yaml"
    config.write_text(
        "zone_policies:\n"
        "  broken:\n"
        "    primary: [skills]\n"
        "    secondary: [skills]\n"
        "templates:\n"
        "  plain:\n"
        "    zone_policy: broken\n"
    )

    with pytest.raises(TemplateRegistryError) as exc_info:
        TemplateDescriptorRegistry(config)

    assert exc_info.value.entry == "broken"


@pytest.mark.unit
def test_unexpected_spacing_key(tmp_path):
    config = tmp_path / "templates.yaml"
    config.write_text(
        "zone_policies:\n"
        "  single_column: {}\n"
        "templates:\n"
        "  plain:\n"
        "    spacing:\n"
        "      gutter: 8\n"
    )

    with pytest.raises(TemplateRegistryError, match="Invalid template fields"):
        TemplateDescriptorRegistry(config)


@pytest.mark.unit
def test_registry_without_templates(tmp_path):
    config = tmp_path / "templates.yaml"
    config.write_text("zone_policies: {}\n")

    with pytest.raises(TemplateRegistryError, match="No templates"):
        TemplateDescriptorRegistry(config)
