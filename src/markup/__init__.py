"""Markup helpers used by the renderers."""

from .tag import a, add_css_class, encode, render_attributes, render_tag

__all__ = ["a", "add_css_class", "encode", "render_attributes", "render_tag"]
