#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/symboldoc/renderers/html.py
"""HTML rendering from documentation trees.

This module provides the HtmlRenderer class which converts a sequence of
DocumentationNode instances into an HTML fragment. There is no
``<html>``/``<body>`` wrapper; the output is meant to be embedded.

The rendering process uses the visitor pattern to traverse the tree. An
optional ``should_print`` predicate lets callers drop any node together with
its whole subtree.

"""

from __future__ import annotations

import logging
from html import escape as _html_escape
from typing import Callable, Iterable, Optional

from symboldoc.ast.nodes import DocumentationNode, Label, Link, RawHTML, Text
from symboldoc.ast.visitors import NodeVisitor
from symboldoc.options.base import validate_options_type
from symboldoc.options.html import HtmlRendererOptions

logger = logging.getLogger(__name__)

NodePredicate = Callable[[DocumentationNode], bool]


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape HTML special characters when enabled."""
    if not enabled:
        return text
    return _html_escape(text)


def escape_attribute_quotes(value: str) -> str:
    """Escape double quotes so ``value`` can sit inside a double-quoted attribute.

    Everything else, including ``&``, is kept verbatim.
    """
    return value.replace('"', "&quot;")


class HtmlRenderer(NodeVisitor):
    """Render documentation nodes to an HTML fragment.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from symboldoc.ast import DocumentationNode, Link, Text
        >>> renderer = HtmlRenderer()
        >>> renderer.render_to_string([
        ...     DocumentationNode(Link("http://swift.org"), [DocumentationNode(Text("the website"))])
        ... ])
        '<a href="http://swift.org">the website</a>'

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        validate_options_type(options, HtmlRendererOptions, "html")
        self.options: HtmlRendererOptions = options or HtmlRendererOptions()
        self._output: list[str] = []
        self._should_print: Optional[NodePredicate] = None

    def render_to_string(
        self,
        nodes: Iterable[DocumentationNode],
        should_print: Optional[NodePredicate] = None,
    ) -> str:
        """Render nodes to an HTML string.

        Parameters
        ----------
        nodes : iterable of DocumentationNode
            Nodes to render, in order
        should_print : callable or None, default = None
            Called for every node before it is rendered; returning False
            skips the node and its subtree

        Returns
        -------
        str
            HTML fragment

        """
        self._output = []
        self._should_print = should_print
        try:
            self._render_nodes(nodes)
            return "".join(self._output)
        finally:
            self._output = []
            self._should_print = None

    def _render_nodes(self, nodes: Iterable[DocumentationNode]) -> None:
        for node in nodes:
            if self._should_print is not None and not self._should_print(node):
                continue
            node.accept(self)

    def visit_children(self, node: DocumentationNode) -> None:
        """Render the children of ``node`` honouring the predicate."""
        self._render_nodes(node.children)

    def _write_element(self, tag: str, node: DocumentationNode, attributes: str = "") -> None:
        self._output.append(f"<{tag}{attributes}>")
        self.visit_children(node)
        self._output.append(f"</{tag}>")

    def visit_text(self, node: DocumentationNode) -> None:
        """Render escaped text."""
        assert isinstance(node.element, Text)
        if node.children:
            logger.debug("Text node has %d unexpected children; ignoring them", len(node.children))
        self._output.append(escape_html(node.element.content, enabled=self.options.escape_html))

    def visit_paragraph(self, node: DocumentationNode) -> None:
        self._write_element("p", node)

    def visit_code_voice(self, node: DocumentationNode) -> None:
        self._write_element("code", node)

    def visit_emphasis(self, node: DocumentationNode) -> None:
        self._write_element("em", node)

    def visit_strong(self, node: DocumentationNode) -> None:
        self._write_element("strong", node)

    def visit_bold(self, node: DocumentationNode) -> None:
        self._write_element("b", node)

    def visit_raw_html(self, node: DocumentationNode) -> None:
        """Render raw HTML byte-for-byte."""
        assert isinstance(node.element, RawHTML)
        self._output.append(node.element.html)

    def visit_link(self, node: DocumentationNode) -> None:
        assert isinstance(node.element, Link)
        href = escape_attribute_quotes(node.element.href)
        self._write_element("a", node, f' href="{href}"')

    def visit_bulleted_list(self, node: DocumentationNode) -> None:
        self._write_element("ul", node)

    def visit_numbered_list(self, node: DocumentationNode) -> None:
        self._write_element("ol", node)

    def visit_list_item(self, node: DocumentationNode) -> None:
        self._write_element("li", node)

    def visit_code_block(self, node: DocumentationNode) -> None:
        """Render a code listing as ``<pre>``; the language is not emitted."""
        self._write_element("pre", node)

    def visit_numbered_code_line(self, node: DocumentationNode) -> None:
        """Render one listing line followed by a newline, without a wrapper tag."""
        self.visit_children(node)
        self._output.append("\n")

    def visit_label(self, node: DocumentationNode) -> None:
        """Render a label as a ``<dt>``/``<dd>`` pair; the name is written verbatim."""
        assert isinstance(node.element, Label)
        self._output.append(f"<dt>{node.element.name}{self.options.label_separator}</dt><dd>")
        self.visit_children(node)
        self._output.append("</dd>")

    def visit_other(self, node: DocumentationNode) -> None:
        """Render only the content of an unknown element."""
        self.visit_children(node)


def render_html(
    nodes: Iterable[DocumentationNode],
    should_print: Optional[NodePredicate] = None,
    options: HtmlRendererOptions | None = None,
) -> str:
    """Render nodes to an HTML fragment with a one-off :class:`HtmlRenderer`.

    Parameters
    ----------
    nodes : iterable of DocumentationNode
        Nodes to render
    should_print : callable or None, default = None
        Predicate deciding whether a node (and its subtree) is rendered
    options : HtmlRendererOptions or None, default = None
        Rendering options

    Returns
    -------
    str
        HTML fragment

    """
    return HtmlRenderer(options).render_to_string(nodes, should_print)
