"""
Rendering Context

Responsibilities:
- Renders composed render trees to an HTML preview through Jinja2 templates
- Caches loaded page templates

Owns: HTML preview output
Never: Decides section order, zones or style values
"""

from folio.contexts.rendering.html_renderer import HtmlTemplateRegistry, render_html

__all__ = ["HtmlTemplateRegistry", "render_html"]
