#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from symboldoc.constants import DEFAULT_ESCAPE_HTML, DEFAULT_LABEL_SEPARATOR
from symboldoc.options.base import BaseRendererOptions


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering documentation nodes to HTML.

    Parameters
    ----------
    escape_html : bool, default True
        Escape HTML special characters in text content. Raw HTML nodes are
        never escaped.
    label_separator : str, default ": "
        Text placed after a label name inside its ``<dt>``.

    """

    escape_html: bool = field(
        default=DEFAULT_ESCAPE_HTML,
        metadata={"help": "Escape HTML special characters in text content", "importance": "security"},
    )
    label_separator: str = field(
        default=DEFAULT_LABEL_SEPARATOR,
        metadata={"help": "Separator written after label names", "importance": "advanced"},
    )
