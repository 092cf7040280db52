#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/symboldoc/ast/utils.py
"""Utility functions for working with documentation trees.

Functions
---------
iter_nodes : Walk nodes depth-first in document order
extract_text : Extract plain text from a node or list of nodes

Examples
--------
    >>> from symboldoc.ast import DocumentationNode, Paragraph, Text, CodeVoice
    >>> from symboldoc.ast.utils import extract_text
    >>> para = DocumentationNode(Paragraph(), [
    ...     DocumentationNode(Text("Call ")),
    ...     DocumentationNode(CodeVoice(), [DocumentationNode(Text("run()"))]),
    ... ])
    >>> extract_text(para)
    'Call run()'

"""

from __future__ import annotations

from typing import Iterable, Iterator, Union

from symboldoc.ast.nodes import DocumentationNode, NumberedCodeLine, Text


def _as_iterable(node_or_nodes: Union[DocumentationNode, Iterable[DocumentationNode]]) -> Iterable[DocumentationNode]:
    if isinstance(node_or_nodes, DocumentationNode):
        return (node_or_nodes,)
    return node_or_nodes


def iter_nodes(node_or_nodes: Union[DocumentationNode, Iterable[DocumentationNode]]) -> Iterator[DocumentationNode]:
    """Yield every node depth-first, parents before their children.

    Parameters
    ----------
    node_or_nodes : DocumentationNode or iterable of DocumentationNode
        Starting node(s)

    Yields
    ------
    DocumentationNode
        Nodes in document order

    """
    for node in _as_iterable(node_or_nodes):
        yield node
        yield from iter_nodes(node.children)


def extract_text(node_or_nodes: Union[DocumentationNode, Iterable[DocumentationNode]], joiner: str = "") -> str:
    """Extract plain text from a node or list of nodes.

    Only Text leaves contribute; raw HTML is skipped. Each numbered code line
    is terminated by a newline so code listings keep their line structure.

    Parameters
    ----------
    node_or_nodes : DocumentationNode or iterable of DocumentationNode
        Node(s) to extract text from
    joiner : str, default = ""
        String placed between sibling parts

    Returns
    -------
    str
        Concatenated text content

    """
    parts: list[str] = []
    for node in _as_iterable(node_or_nodes):
        if isinstance(node.element, Text):
            parts.append(node.element.content)
        elif isinstance(node.element, NumberedCodeLine):
            parts.append(extract_text(node.children, joiner) + "\n")
        else:
            child_text = extract_text(node.children, joiner)
            if child_text:
                parts.append(child_text)
    return joiner.join(parts)
