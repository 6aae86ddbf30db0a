"""
FOLIO - Flexible Output Layout for Itemized Occupational records

A resume composition system that turns a structured resume document into a
fully laid-out template presentation.

Architecture:
- Templating Context: Template descriptors, zone policies and the style cascade
- Composition Context: Field/section resolution, zone assignment and section dispatch
- Rendering Context: HTML preview of composed render trees
"""

__version__ = "0.1.0"
