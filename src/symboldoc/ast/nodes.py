#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/symboldoc/ast/nodes.py
"""Tree model for declaration documentation.

This module defines the immutable tree produced by the documentation XML
parser. A tree is made of DocumentationNode instances; each node carries one
element variant describing what it is, plus an ordered tuple of children.

Element Variants
----------------
Leaf-only variants carry their payload and never have children:
    - Text, RawHTML

Container variants wrap their children:
    - Paragraph, CodeVoice, Emphasis, Strong, Bold, Link
    - BulletedList, NumberedList, ListItem
    - CodeBlock, NumberedCodeLine
    - Label, Other

The leaf-only rule is enforced by the parser, not by the types.

A Documentation record groups the node sequences of one declaration by
section (declaration, abstract, discussion, parameters, result discussion).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterator, Optional, Sequence, Union

from symboldoc.constants import DeclarationKind, SectionName

# ============================================================================
# Element variants
# ============================================================================


@dataclass(frozen=True)
class Text:
    """Plain character data.

    Parameters
    ----------
    content : str
        The text, unescaped

    """

    content: str
    visitor_method: ClassVar[str] = "visit_text"


@dataclass(frozen=True)
class Paragraph:
    """A paragraph of inline content."""

    visitor_method: ClassVar[str] = "visit_paragraph"


@dataclass(frozen=True)
class CodeVoice:
    """Inline code."""

    visitor_method: ClassVar[str] = "visit_code_voice"


@dataclass(frozen=True)
class Emphasis:
    visitor_method: ClassVar[str] = "visit_emphasis"


@dataclass(frozen=True)
class Strong:
    visitor_method: ClassVar[str] = "visit_strong"


@dataclass(frozen=True)
class Bold:
    visitor_method: ClassVar[str] = "visit_bold"


@dataclass(frozen=True)
class RawHTML:
    """An HTML fragment carried through verbatim.

    Parameters
    ----------
    html : str
        Raw markup, never escaped on output

    """

    html: str
    visitor_method: ClassVar[str] = "visit_raw_html"


@dataclass(frozen=True)
class Link:
    """A hyperlink around its children.

    Parameters
    ----------
    href : str
        Link target exactly as found in the source

    """

    href: str
    visitor_method: ClassVar[str] = "visit_link"


@dataclass(frozen=True)
class BulletedList:
    visitor_method: ClassVar[str] = "visit_bulleted_list"


@dataclass(frozen=True)
class NumberedList:
    visitor_method: ClassVar[str] = "visit_numbered_list"


@dataclass(frozen=True)
class ListItem:
    visitor_method: ClassVar[str] = "visit_list_item"


@dataclass(frozen=True)
class CodeBlock:
    """A code listing made of NumberedCodeLine children.

    Parameters
    ----------
    language : str or None, default = None
        Source language of the listing, if declared

    """

    language: Optional[str] = None
    visitor_method: ClassVar[str] = "visit_code_block"


@dataclass(frozen=True)
class NumberedCodeLine:
    """One line of a code listing."""

    visitor_method: ClassVar[str] = "visit_numbered_code_line"


@dataclass(frozen=True)
class Label:
    """A labelled callout such as ``Note`` or ``Complexity``.

    Parameters
    ----------
    name : str
        Label shown to the reader (e.g. "Note", "See also")

    """

    name: str
    visitor_method: ClassVar[str] = "visit_label"


@dataclass(frozen=True)
class Other:
    """An element outside the known vocabulary, possibly a custom label.

    Parameters
    ----------
    tag_name : str
        The source element name

    """

    tag_name: str
    visitor_method: ClassVar[str] = "visit_other"


Element = Union[
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
]

LEAF_ELEMENT_TYPES: tuple[type, ...] = (Text, RawHTML)

# ============================================================================
# Tree
# ============================================================================


@dataclass(frozen=True)
class DocumentationNode:
    """A node of the documentation tree.

    Parameters
    ----------
    element : Element
        What this node is, with any payload its variant needs
    children : sequence of DocumentationNode, default = ()
        Ordered child nodes; stored as a tuple

    Examples
    --------
        >>> node = DocumentationNode(Paragraph(), [DocumentationNode(Text("Hi"))])
        >>> node.children[0].element.content
        'Hi'

    """

    element: Element
    children: tuple[DocumentationNode, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_leaf_element(self) -> bool:
        """Whether the element variant is leaf-only (Text or RawHTML)."""
        return isinstance(self.element, LEAF_ELEMENT_TYPES)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to the visitor method matching this node's element.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        return getattr(visitor, self.element.visitor_method)(self)


def _as_node_tuple(nodes: Optional[Sequence[DocumentationNode]]) -> Optional[tuple[DocumentationNode, ...]]:
    if nodes is None:
        return None
    return tuple(nodes)


@dataclass(frozen=True)
class Parameter:
    """Documentation of one parameter.

    Parameters
    ----------
    name : str
        Parameter name, never empty when produced by the parser
    discussion : sequence of DocumentationNode or None, default = None
        All discussion sections of the parameter, concatenated in order

    """

    name: str
    discussion: Optional[tuple[DocumentationNode, ...]] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "discussion", _as_node_tuple(self.discussion))


@dataclass(frozen=True)
class Documentation:
    """Parsed documentation of a single declaration.

    Every section is optional; None means the section was not present in the
    source, which is distinct from a present but empty section.

    Parameters
    ----------
    declaration : sequence of DocumentationNode or None
        Declaration source, normally a single Text node
    abstract : sequence of DocumentationNode or None
        Short summary
    discussion : sequence of DocumentationNode or None
        All discussion sections concatenated in document order
    parameters : sequence of Parameter or None
        Parameter records in document order
    result_discussion : sequence of DocumentationNode or None
        Description of the returned value
    kind : {"Class", "Function", "Other"} or None
        Root element the documentation was parsed from

    """

    declaration: Optional[tuple[DocumentationNode, ...]] = None
    abstract: Optional[tuple[DocumentationNode, ...]] = None
    discussion: Optional[tuple[DocumentationNode, ...]] = None
    parameters: Optional[tuple[Parameter, ...]] = None
    result_discussion: Optional[tuple[DocumentationNode, ...]] = None
    kind: Optional[DeclarationKind] = field(default=None)

    def __post_init__(self) -> None:
        for name in ("declaration", "abstract", "discussion", "parameters", "result_discussion"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

    def sections(self) -> Iterator[tuple[SectionName, tuple[DocumentationNode, ...]]]:
        """Yield ``(section_name, nodes)`` for each present node section.

        Sections come out in the order declaration, abstract, discussion,
        result_discussion. Parameters are not node sections and are skipped.
        """
        for name in ("declaration", "abstract", "discussion", "result_discussion"):
            nodes = getattr(self, name)
            if nodes is not None:
                yield name, nodes  # type: ignore[misc]
