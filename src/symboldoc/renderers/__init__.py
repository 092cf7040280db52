#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/symboldoc/renderers/__init__.py
"""Renderers converting documentation nodes to output formats.

Available renderers:
- HtmlRenderer: Render to an HTML fragment
"""

from symboldoc.renderers.html import HtmlRenderer, render_html

__all__ = ["HtmlRenderer", "render_html"]
