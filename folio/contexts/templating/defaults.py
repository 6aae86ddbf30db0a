"""
Default values for FOLIO template descriptors.

Used by the template registry when a template entry omits a block, so every
descriptor carries complete color, spacing and typography defaults.
"""

from typing import Any, Dict

DEFAULT_COLOR_SCHEME = {
    "primary": "#1f2937",
    "secondary": "#4b5563",
    "background": "#ffffff",
    "text": "#111827",
}

# Pixel values
DEFAULT_SPACING = {
    "content_padding": 32,
    "section_gap": 24,
    "item_gap": 12,
}

DEFAULT_TYPOGRAPHY = {
    "header_size": 24,
    "subheader_size": 16,
}

DEFAULT_LAYOUT = "columns"
DEFAULT_ZONE_POLICY = "single_column"


def get_default_template_config() -> Dict[str, Any]:
    """
    Get a complete template entry populated with defaults.

    Returns:
        Dict with color_scheme, spacing, typography, layout and zone_policy
    """
    return {
        "layout": DEFAULT_LAYOUT,
        "zone_policy": DEFAULT_ZONE_POLICY,
        "color_scheme": DEFAULT_COLOR_SCHEME.copy(),
        "spacing": DEFAULT_SPACING.copy(),
        "typography": DEFAULT_TYPOGRAPHY.copy(),
        "banner_title": None,
    }
