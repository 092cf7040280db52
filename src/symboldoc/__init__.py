"""symboldoc - Parse declaration documentation XML and render it as HTML.

Documentation extractors describe a declaration's doc comment as a small XML
dialect: the declaration source, an abstract, discussion sections, parameter
docs, a result discussion and inline markup such as paragraphs, code voice,
links, lists and code listings. symboldoc parses that XML into an immutable
tree and renders lists of tree nodes as HTML fragments.

Requirements
------------
- Python 3.10+
- defusedxml (XML tokenizing)

Examples
--------
    >>> from symboldoc import parse_doc_xml, render_html
    >>> doc = parse_doc_xml(
    ...     "<Class><Name>Int</Name><Declaration>struct Int</Declaration>"
    ...     "<Abstract><Para>A value.</Para></Abstract></Class>"
    ... )
    >>> render_html(doc.abstract)
    '<p>A value.</p>'

See Also
--------
symboldoc.ast : Tree model, traversal and serialization

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "symboldoc requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from symboldoc.ast import Documentation, DocumentationNode, Parameter  # noqa: E402
from symboldoc.exceptions import (  # noqa: E402
    DocXmlContractError,
    DocXmlError,
    DocXmlParseError,
    DocXmlStructureError,
    ElementNotInsideExpectedParentElementError,
    MissingRequiredAttributeError,
    MissingRequiredChildElementError,
    MoreThanOneElementError,
    ParsingError,
    SymbolDocError,
    UnknownDocXmlParseError,
)
from symboldoc.options import DocXmlOptions, HtmlRendererOptions  # noqa: E402
from symboldoc.parsers.doc_xml import DocXmlParser, parse_doc_xml  # noqa: E402
from symboldoc.renderers.html import HtmlRenderer, render_html  # noqa: E402

__all__ = [
    "__version__",
    # Parsing
    "DocXmlParser",
    "parse_doc_xml",
    # Rendering
    "HtmlRenderer",
    "render_html",
    # Tree
    "Documentation",
    "DocumentationNode",
    "Parameter",
    # Options
    "DocXmlOptions",
    "HtmlRendererOptions",
    # Exceptions
    "DocXmlContractError",
    "DocXmlError",
    "DocXmlParseError",
    "DocXmlStructureError",
    "ElementNotInsideExpectedParentElementError",
    "MissingRequiredAttributeError",
    "MissingRequiredChildElementError",
    "MoreThanOneElementError",
    "ParsingError",
    "SymbolDocError",
    "UnknownDocXmlParseError",
]
