"""Custom exceptions for the templating context with registry references."""

from pathlib import Path
from typing import Iterable, Optional


class UnknownTemplateError(KeyError):
    """
    Exception raised when a template id is not present in the registry.

    Attributes:
        template_id: The requested template id
        available: Template ids the registry does know about
    """

    def __init__(self, template_id: str, available: Iterable[str] = ()):
        self.template_id = template_id
        self.available = sorted(available)
        super().__init__(template_id)

    def __str__(self) -> str:
        return f"Unknown template '{self.template_id}'. Available templates: {self.available}"


class TemplateRegistryError(Exception):
    """
    Exception raised when the template registry configuration is malformed.

    Attributes:
        message: Error description
        config_path: Path to the registry YAML that failed to load
        entry: Name of the offending template or zone policy entry
    """

    def __init__(
        self,
        message: str,
        config_path: Optional[Path] = None,
        entry: Optional[str] = None,
    ):
        self.message = message
        self.config_path = config_path
        self.entry = entry

        parts = [message]
        if entry:
            parts.append(f"Entry: {entry}")
        if config_path:
            parts.append(f"Registry config: {config_path}")

        super().__init__("\n".join(parts))


class TemplateRenderError(Exception):
    """
    Exception raised when rendering a composed tree to HTML fails.

    Attributes:
        message: Error description
        template_name: Name of the Jinja2 template being rendered
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_name = template_name
        self.original_error = original_error

        parts = [message]

        if template_name:
            parts.append(f"\nTemplate: {template_name}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))


class InvalidDocumentStructureError(ValueError):
    """
    Exception raised when a resume document is missing required structure.

    Raised while loading documents (e.g., 'basic' is not a mapping, or
    'menuSections' entries lack an 'id'). Composition itself never raises it.
    """

    pass
