"""
Templating Registries

Loads template descriptors and zone policies from YAML once and serves them
read-only for the life of the process.
"""

import os
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping

from dotenv import load_dotenv
from omegaconf import OmegaConf

from folio.contexts.templating.defaults import get_default_template_config
from folio.contexts.templating.exceptions import TemplateRegistryError, UnknownTemplateError
from folio.contexts.templating.logger import log_registry_loaded
from folio.contexts.templating.template_data_structures import (
    ColorScheme,
    SpacingDefaults,
    TemplateDescriptor,
    TypographyDefaults,
    ZonePolicy,
)

load_dotenv()
TYPES_PATH = Path(__file__).parent / "types"
TEMPLATES_PATH = Path(os.getenv("FOLIO_TEMPLATES_PATH", TYPES_PATH / "templates.yaml"))


class TemplateDescriptorRegistry:
    """
    Registry of template descriptors and zone policies.

    The registry YAML has two top-level keys:
    - zone_policies: {policy_id: {primary, secondary, default_zone, unmatched_placement}}
    - templates: {template_id: {name, layout, zone_policy, color_scheme, spacing, typography}}

    Everything is parsed eagerly in __init__; lookups never touch the filesystem.
    """

    def __init__(self, config_path: Path = None):
        """
        Load and validate the registry.

        Args:
            config_path: Path to the registry YAML. Defaults to FOLIO_TEMPLATES_PATH
                         from environment, or the packaged templates.yaml

        Raises:
            TemplateRegistryError: If the file is missing or an entry is malformed
        """
        if config_path is None:
            config_path = TEMPLATES_PATH

        self.config_path = Path(config_path)

        if not self.config_path.exists():
            raise TemplateRegistryError("Template registry not found", config_path=self.config_path)

        config = OmegaConf.to_container(OmegaConf.load(self.config_path), resolve=True)
        if not isinstance(config, dict):
            raise TemplateRegistryError(
                "Template registry must be a mapping", config_path=self.config_path
            )

        self._policies: Mapping[str, ZonePolicy] = MappingProxyType(
            self._load_policies(config.get("zone_policies") or {})
        )
        self._templates: Mapping[str, TemplateDescriptor] = MappingProxyType(
            self._load_templates(config.get("templates") or {})
        )

        if not self._templates:
            raise TemplateRegistryError("No templates defined", config_path=self.config_path)

        log_registry_loaded(self.config_path, self.template_ids(), list(self._policies))

    def _load_policies(self, raw: Dict[str, Any]) -> Dict[str, ZonePolicy]:
        policies = {}
        for policy_id, data in raw.items():
            try:
                policies[policy_id] = ZonePolicy.from_dict(policy_id, data or {})
            except ValueError as e:
                raise TemplateRegistryError(
                    str(e), config_path=self.config_path, entry=policy_id
                ) from e
        return policies

    def _load_templates(self, raw: Dict[str, Any]) -> Dict[str, TemplateDescriptor]:
        templates = {}
        for template_id, data in raw.items():
            templates[template_id] = self._build_descriptor(template_id, data or {})
        return templates

    def _build_descriptor(self, template_id: str, data: Dict[str, Any]) -> TemplateDescriptor:
        # Start from defaults so partial entries still yield complete descriptors
        merged = get_default_template_config()
        for block in ("color_scheme", "spacing", "typography"):
            merged[block].update(data.get(block) or {})
        for key in ("layout", "zone_policy", "banner_title"):
            if data.get(key) is not None:
                merged[key] = data[key]

        policy_id = merged["zone_policy"]
        if policy_id not in self._policies:
            raise TemplateRegistryError(
                f"Unknown zone policy '{policy_id}'. Available: {sorted(self._policies)}",
                config_path=self.config_path,
                entry=template_id,
            )

        try:
            return TemplateDescriptor(
                template_id=template_id,
                name=data.get("name", template_id),
                layout=merged["layout"],
                zone_policy=self._policies[policy_id],
                color_scheme=ColorScheme(**merged["color_scheme"]),
                spacing=SpacingDefaults(**merged["spacing"]),
                typography=TypographyDefaults(**merged["typography"]),
                banner_title=merged["banner_title"],
            )
        except TypeError as e:
            raise TemplateRegistryError(
                f"Invalid template fields: {e}", config_path=self.config_path, entry=template_id
            ) from e

    def get(self, template_id: str) -> TemplateDescriptor:
        """
        Get a template descriptor by id.

        Raises:
            UnknownTemplateError: If the id is not registered
        """
        try:
            return self._templates[template_id]
        except KeyError:
            raise UnknownTemplateError(template_id, self._templates.keys()) from None

    def get_zone_policy(self, policy_id: str) -> ZonePolicy:
        return self._policies[policy_id]

    def template_ids(self) -> List[str]:
        """Registered template ids in registry file order."""
        return list(self._templates)

    def __contains__(self, template_id: str) -> bool:
        return template_id in self._templates

    def __len__(self) -> int:
        return len(self._templates)


_default_registry = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> TemplateDescriptorRegistry:
    """
    Get the process-wide registry, loading it on first use.

    Returns:
        Shared TemplateDescriptorRegistry built from TEMPLATES_PATH
    """
    global _default_registry
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = TemplateDescriptorRegistry()
    return _default_registry
