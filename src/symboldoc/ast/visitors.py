#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/symboldoc/ast/visitors.py
"""Visitor pattern implementation for documentation tree traversal.

Each element variant names a ``visit_*`` method through its
``visitor_method`` attribute; ``DocumentationNode.accept`` looks that method
up on the visitor. Subclasses of NodeVisitor must implement one method per
variant, which keeps renderers exhaustive over the closed set of variants.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from symboldoc.ast.nodes import DocumentationNode


class NodeVisitor(ABC):
    """Abstract base class for documentation tree visitors.

    Examples
    --------
    Visitor collecting link targets:

        >>> class LinkCollector(NodeVisitor):
        ...     def __init__(self):
        ...         self.hrefs = []
        ...
        ...     def visit_link(self, node):
        ...         self.hrefs.append(node.element.href)
        ...         self.visit_children(node)
        ...
        ...     # remaining visit_* methods call self.visit_children(node)

    """

    def visit_children(self, node: DocumentationNode) -> None:
        """Visit every child of ``node`` in order."""
        for child in node.children:
            child.accept(self)

    @abstractmethod
    def visit_text(self, node: DocumentationNode) -> Any:
        """Visit a Text node."""

    @abstractmethod
    def visit_paragraph(self, node: DocumentationNode) -> Any:
        """Visit a Paragraph node."""

    @abstractmethod
    def visit_code_voice(self, node: DocumentationNode) -> Any:
        """Visit a CodeVoice node."""

    @abstractmethod
    def visit_emphasis(self, node: DocumentationNode) -> Any:
        """Visit an Emphasis node."""

    @abstractmethod
    def visit_strong(self, node: DocumentationNode) -> Any:
        """Visit a Strong node."""

    @abstractmethod
    def visit_bold(self, node: DocumentationNode) -> Any:
        """Visit a Bold node."""

    @abstractmethod
    def visit_raw_html(self, node: DocumentationNode) -> Any:
        """Visit a RawHTML node."""

    @abstractmethod
    def visit_link(self, node: DocumentationNode) -> Any:
        """Visit a Link node."""

    @abstractmethod
    def visit_bulleted_list(self, node: DocumentationNode) -> Any:
        """Visit a BulletedList node."""

    @abstractmethod
    def visit_numbered_list(self, node: DocumentationNode) -> Any:
        """Visit a NumberedList node."""

    @abstractmethod
    def visit_list_item(self, node: DocumentationNode) -> Any:
        """Visit a ListItem node."""

    @abstractmethod
    def visit_code_block(self, node: DocumentationNode) -> Any:
        """Visit a CodeBlock node."""

    @abstractmethod
    def visit_numbered_code_line(self, node: DocumentationNode) -> Any:
        """Visit a NumberedCodeLine node."""

    @abstractmethod
    def visit_label(self, node: DocumentationNode) -> Any:
        """Visit a Label node."""

    @abstractmethod
    def visit_other(self, node: DocumentationNode) -> Any:
        """Visit an Other node."""
