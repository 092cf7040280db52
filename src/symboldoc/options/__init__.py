#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the symboldoc parser and renderer.

Each component has its own frozen Options dataclass.
"""

from __future__ import annotations

from symboldoc.options.base import (
    BaseParserOptions,
    BaseRendererOptions,
    CloneFrozenMixin,
    validate_options_type,
)
from symboldoc.options.doc_xml import DocXmlOptions
from symboldoc.options.html import HtmlRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "DocXmlOptions",
    "HtmlRendererOptions",
    "validate_options_type",
]
