#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/symboldoc/ast/__init__.py
"""Documentation tree module.

The module consists of several components:

- nodes: element variants, DocumentationNode, Parameter and Documentation
- visitors: visitor base class for tree traversal
- utils: text extraction and tree walking helpers
- serialization: dict and JSON conversion of trees and documentation records

Examples
--------
    >>> from symboldoc.ast import DocumentationNode, Paragraph, Text
    >>> from symboldoc.renderers.html import render_html
    >>> render_html([DocumentationNode(Paragraph(), [DocumentationNode(Text("a < b"))])])
    '<p>a &lt; b</p>'

"""

from __future__ import annotations

from symboldoc.ast.nodes import (
    Bold,
    BulletedList,
    CodeBlock,
    CodeVoice,
    Documentation,
    DocumentationNode,
    Element,
    Emphasis,
    Label,
    Link,
    ListItem,
    NumberedCodeLine,
    NumberedList,
    Other,
    Paragraph,
    Parameter,
    RawHTML,
    Strong,
    Text,
)
from symboldoc.ast.serialization import (
    dict_to_node,
    documentation_from_dict,
    documentation_from_json,
    documentation_to_dict,
    documentation_to_json,
    node_to_dict,
)
from symboldoc.ast.utils import extract_text, iter_nodes
from symboldoc.ast.visitors import NodeVisitor

__all__ = [
    # Tree
    "Documentation",
    "DocumentationNode",
    "Element",
    "Parameter",
    # Element variants
    "Bold",
    "BulletedList",
    "CodeBlock",
    "CodeVoice",
    "Emphasis",
    "Label",
    "Link",
    "ListItem",
    "NumberedCodeLine",
    "NumberedList",
    "Other",
    "Paragraph",
    "RawHTML",
    "Strong",
    "Text",
    # Traversal
    "NodeVisitor",
    "extract_text",
    "iter_nodes",
    # Serialization
    "dict_to_node",
    "documentation_from_dict",
    "documentation_from_json",
    "documentation_to_dict",
    "documentation_to_json",
    "node_to_dict",
]
