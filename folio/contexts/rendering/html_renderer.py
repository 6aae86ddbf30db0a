"""
HTML Preview Rendering

Renders a RenderTree to a standalone HTML page. Page templates live in
folio/contexts/rendering/templates/ and receive the tree as plain dicts.
"""

from pathlib import Path
from typing import Any, Dict
from urllib.parse import urlparse

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    TemplateNotFound,
    select_autoescape,
)

from folio.contexts.composition.render_tree import RenderTree
from folio.contexts.rendering.logger import _log_debug, _log_error
from folio.contexts.templating.exceptions import TemplateRenderError

PAGE_TEMPLATES_PATH = Path(__file__).parent / "templates"
DOCUMENT_TEMPLATE = "document.html.jinja"

# Only these schemes become clickable links in the preview
SAFE_LINK_SCHEMES = ("http", "https", "mailto")


def is_safe_link(value: Any) -> bool:
    """Jinja test: true for non-empty links with an allowed URL scheme."""
    if not isinstance(value, str) or not value.strip():
        return False
    return urlparse(value.strip()).scheme.lower() in SAFE_LINK_SCHEMES


class HtmlTemplateRegistry:
    """
    Registry for loading and caching Jinja2 page templates.

    Autoescaping is on; rich-text fields produced by the editor are marked
    safe explicitly inside the templates.
    """

    def __init__(self, templates_path: Path = None):
        """
        Args:
            templates_path: Directory of page templates. Defaults to the packaged templates
        """
        if templates_path is None:
            templates_path = PAGE_TEMPLATES_PATH

        self.templates_path = templates_path
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=select_autoescape(["html", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.tests["safe_link"] = is_safe_link

    def get_template(self, name: str) -> Template:
        """
        Get a template by file name, loading and caching it if necessary.

        Raises:
            TemplateNotFound: If the template file doesn't exist
        """
        if name in self._cache:
            return self._cache[name]

        try:
            template = self.env.get_template(name)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Page template '{name}' not found in {self.templates_path}"
            ) from e

        self._cache[name] = template
        return template

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        return name in self._cache


def render_html(tree: RenderTree, registry: HtmlTemplateRegistry = None) -> str:
    """
    Render a composed tree to HTML.

    Args:
        tree: Render tree from TemplateComposer.compose()
        registry: Page template registry (defaults to the packaged templates)

    Returns:
        Complete HTML document

    Raises:
        TemplateRenderError: If the page template fails to render
    """
    registry = registry or HtmlTemplateRegistry()
    template = registry.get_template(DOCUMENT_TEMPLATE)

    _log_debug(f"Rendering '{tree.template_id}' tree with {DOCUMENT_TEMPLATE}")
    try:
        return template.render(tree=tree.to_dict())
    except TemplateError as e:
        _log_error(f"Failed to render '{tree.template_id}': {e}")
        raise TemplateRenderError(
            f"Failed to render template '{tree.template_id}'",
            template_name=DOCUMENT_TEMPLATE,
            original_error=e,
        ) from e
