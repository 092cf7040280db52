#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/symboldoc/ast/serialization.py
"""JSON serialization and deserialization for documentation trees.

A node becomes a dictionary with a ``node_type`` key naming its element
variant, one key per variant payload field, and a ``children`` list:

    {"node_type": "Link", "href": "http://swift.org", "children": [...]}

A Documentation record becomes a dictionary keyed by section name; absent
sections are stored as ``None`` so that "absent" and "present but empty"
survive the trip.

Examples
--------
    >>> from symboldoc import parse_doc_xml
    >>> from symboldoc.ast.serialization import documentation_to_json, documentation_from_json
    >>> doc = parse_doc_xml("<Class><Declaration>struct Int</Declaration></Class>")
    >>> documentation_from_json(documentation_to_json(doc)) == doc
    True

"""

from __future__ import annotations

import json
import logging
from dataclasses import fields
from typing import Any, Optional, Sequence

from symboldoc.ast.nodes import (
    Bold,
    BulletedList,
    CodeBlock,
    CodeVoice,
    Documentation,
    DocumentationNode,
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
from symboldoc.constants import SERIALIZATION_SCHEMA_VERSION

logger = logging.getLogger(__name__)

_ELEMENT_TYPES: dict[str, type] = {
    cls.__name__: cls
    for cls in (
        Text,
        Paragraph,
        CodeVoice,
        Emphasis,
        Strong,
        Bold,
        RawHTML,
        Link,
        BulletedList,
        NumberedList,
        ListItem,
        CodeBlock,
        NumberedCodeLine,
        Label,
        Other,
    )
}

_NODE_SECTIONS = ("declaration", "abstract", "discussion", "result_discussion")


def node_to_dict(node: DocumentationNode) -> dict[str, Any]:
    """Convert a node and its subtree to a dictionary.

    Parameters
    ----------
    node : DocumentationNode
        Node to convert

    Returns
    -------
    dict
        Dictionary representation of the node

    Examples
    --------
    >>> node_to_dict(DocumentationNode(Text("Hello")))
    {'node_type': 'Text', 'content': 'Hello', 'children': []}

    """
    element = node.element
    result: dict[str, Any] = {"node_type": type(element).__name__}
    for element_field in fields(element):
        result[element_field.name] = getattr(element, element_field.name)
    result["children"] = [node_to_dict(child) for child in node.children]
    return result


def _nodes_to_list(nodes: Optional[Sequence[DocumentationNode]]) -> Optional[list[dict[str, Any]]]:
    if nodes is None:
        return None
    return [node_to_dict(node) for node in nodes]


def dict_to_node(data: dict[str, Any], strict_mode: bool = True) -> DocumentationNode:
    """Convert a dictionary representation back to a node.

    Parameters
    ----------
    data : dict
        Dictionary produced by :func:`node_to_dict`
    strict_mode : bool, default True
        If True, raise ValueError on unknown or missing node types.
        If False, keep the subtree under an ``Other`` element named after the
        unknown type.

    Returns
    -------
    DocumentationNode
        Reconstructed node

    Raises
    ------
    ValueError
        If the node type is missing or unknown and strict_mode is True

    """
    node_type = data.get("node_type")
    children = [dict_to_node(child, strict_mode) for child in data.get("children", [])]

    element_cls = _ELEMENT_TYPES.get(node_type) if node_type else None
    if element_cls is None:
        if strict_mode:
            if not node_type:
                raise ValueError("Dictionary must contain 'node_type' field")
            raise ValueError(f"Unknown node type: {node_type}")
        logger.warning("Unknown node type %r, keeping children under an Other node", node_type)
        return DocumentationNode(Other(str(node_type or "")), children)

    kwargs = {f.name: data[f.name] for f in fields(element_cls) if f.name in data}
    try:
        element = element_cls(**kwargs)
    except TypeError as e:
        raise ValueError(f"Invalid payload for node type {node_type}: {e}") from e
    return DocumentationNode(element, children)


def _list_to_nodes(data: Optional[list[dict[str, Any]]], strict_mode: bool) -> Optional[list[DocumentationNode]]:
    if data is None:
        return None
    return [dict_to_node(item, strict_mode) for item in data]


def documentation_to_dict(documentation: Documentation) -> dict[str, Any]:
    """Convert a Documentation record to a dictionary.

    Parameters
    ----------
    documentation : Documentation
        Record to convert

    Returns
    -------
    dict
        Dictionary with one key per section plus ``kind``

    """
    result: dict[str, Any] = {"kind": documentation.kind}
    for name in _NODE_SECTIONS:
        result[name] = _nodes_to_list(getattr(documentation, name))
    if documentation.parameters is None:
        result["parameters"] = None
    else:
        result["parameters"] = [
            {"name": parameter.name, "discussion": _nodes_to_list(parameter.discussion)}
            for parameter in documentation.parameters
        ]
    return result


def documentation_from_dict(data: dict[str, Any], strict_mode: bool = True) -> Documentation:
    """Convert a dictionary produced by :func:`documentation_to_dict` back to a record.

    Raises
    ------
    ValueError
        If a node cannot be reconstructed and strict_mode is True, or a
        parameter has no name

    """
    parameters: Optional[list[Parameter]] = None
    if data.get("parameters") is not None:
        parameters = []
        for item in data["parameters"]:
            name = item.get("name")
            if not name:
                raise ValueError("Serialized parameter is missing its name")
            parameters.append(Parameter(name=name, discussion=_list_to_nodes(item.get("discussion"), strict_mode)))

    return Documentation(
        declaration=_list_to_nodes(data.get("declaration"), strict_mode),
        abstract=_list_to_nodes(data.get("abstract"), strict_mode),
        discussion=_list_to_nodes(data.get("discussion"), strict_mode),
        parameters=parameters,
        result_discussion=_list_to_nodes(data.get("result_discussion"), strict_mode),
        kind=data.get("kind"),
    )


def documentation_to_json(documentation: Documentation, indent: int | None = None) -> str:
    """Serialize a Documentation record to JSON with a schema version.

    Parameters
    ----------
    documentation : Documentation
        Record to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string; non-ASCII characters are kept as-is

    """
    versioned = {"schema_version": SERIALIZATION_SCHEMA_VERSION, **documentation_to_dict(documentation)}
    return json.dumps(versioned, indent=indent, ensure_ascii=False)


def documentation_from_json(json_str: str, strict_mode: bool = True) -> Documentation:
    """Deserialize a JSON string produced by :func:`documentation_to_json`.

    A missing ``schema_version`` is read as version 1.

    Raises
    ------
    ValueError
        If the JSON is invalid, the schema version is unsupported, or the
        content cannot be reconstructed

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ValueError("Serialized documentation must be a JSON object")

    schema_version = data.pop("schema_version", SERIALIZATION_SCHEMA_VERSION)
    if schema_version != SERIALIZATION_SCHEMA_VERSION:
        raise ValueError(
            f"Unsupported schema version: {schema_version}. "
            f"This version supports schema version {SERIALIZATION_SCHEMA_VERSION}."
        )
    return documentation_from_dict(data, strict_mode)
