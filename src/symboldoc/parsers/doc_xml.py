#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/symboldoc/parsers/doc_xml.py
"""Documentation XML parser that converts declaration docs to a Documentation tree.

The input is the XML that documentation extractors emit for one declaration:

    <Function>
      <Name>advancedBy(_:)</Name>
      <Declaration>func advancedBy(n: Self.Distance)</Declaration>
      <Abstract><Para>Return the result of advancing self by n positions.</Para></Abstract>
      <Parameters>
        <Parameter><Name>n</Name><Discussion><Para>Distance.</Para></Discussion></Parameter>
      </Parameters>
      <ResultDiscussion><Para>Results are valid</Para></ResultDiscussion>
    </Function>

Tokenizing is done by defusedxml's expat SAX reader; this module only reacts
to its start-element, end-element, character and CDATA events. A stack of
frames tracks the open elements. Structural rule violations are recorded
(the first one wins) while the rest of the stream is consumed, and raised once
the reader finishes.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Union, cast
from xml.sax import SAXException, SAXParseException
from xml.sax.handler import ContentHandler, LexicalHandler, property_lexical_handler
from xml.sax.xmlreader import AttributesImpl

from defusedxml import DefusedXmlException
from defusedxml.expatreader import DefusedExpatParser

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
from symboldoc.constants import (
    ATTRIBUTE_HREF,
    ATTRIBUTE_LANGUAGE,
    DEFAULT_SOURCE_ENCODING,
    ELEMENT_ABSTRACT,
    ELEMENT_CODE_LISTING,
    ELEMENT_DECLARATION,
    ELEMENT_DISCUSSION,
    ELEMENT_LINK,
    ELEMENT_NAME,
    ELEMENT_PARAMETER,
    ELEMENT_PARAMETERS,
    ELEMENT_RESULT_DISCUSSION,
    ELEMENT_SEE,
    LABEL_ELEMENTS,
    PARAMETER_NAME_QUALIFIED,
    ROOT_ELEMENTS,
    ROOT_METADATA_ELEMENTS,
    SEE_ALSO_LABEL,
    DeclarationKind,
)
from symboldoc.exceptions import (
    DocXmlContractError,
    DocXmlParseError,
    DocXmlStructureError,
    ElementNotInsideExpectedParentElementError,
    MissingRequiredAttributeError,
    MissingRequiredChildElementError,
    MoreThanOneElementError,
    UnknownDocXmlParseError,
)
from symboldoc.options.base import validate_options_type
from symboldoc.options.doc_xml import DocXmlOptions

logger = logging.getLogger(__name__)


class _State(Enum):
    ROOT = "root"
    DECLARATION = "declaration"
    ABSTRACT = "abstract"
    DISCUSSION = "discussion"
    PARAMETERS = "parameters"
    PARAMETER = "parameter"
    PARAMETER_NAME = "parameter-name"
    PARAMETER_DISCUSSION = "parameter-discussion"
    RESULT_DISCUSSION = "result-discussion"
    NODE = "node"
    # Ignored substructure; its children are dropped with it
    OTHER = "other"


@dataclass
class _Frame:
    """Parser state while inside one open element.

    Only the fields belonging to ``state`` are used: ``element`` for NODE,
    ``parameter_name`` and ``discussion`` for PARAMETER, ``name_parts`` for
    PARAMETER_NAME.
    """

    state: _State
    element_name: str
    nodes: list[DocumentationNode] = field(default_factory=list)
    element: Optional[Element] = None
    parameter_name: str = ""
    discussion: Optional[list[DocumentationNode]] = None
    name_parts: list[str] = field(default_factory=list)


_SECTION_STATES: dict[str, _State] = {
    ELEMENT_DECLARATION: _State.DECLARATION,
    ELEMENT_ABSTRACT: _State.ABSTRACT,
    ELEMENT_DISCUSSION: _State.DISCUSSION,
    ELEMENT_PARAMETERS: _State.PARAMETERS,
    ELEMENT_RESULT_DISCUSSION: _State.RESULT_DISCUSSION,
}

_INLINE_ELEMENTS: dict[str, Callable[[], Element]] = {
    "Para": Paragraph,
    "rawHTML": lambda: RawHTML(""),
    "codeVoice": CodeVoice,
    "emphasis": Emphasis,
    "strong": Strong,
    "bold": Bold,
    "List-Bullet": BulletedList,
    "List-Number": NumberedList,
    "Item": ListItem,
    "zCodeLineNumbered": NumberedCodeLine,
}

# Sections that may appear at most once, mapped to the attribute holding them
_SINGLE_SECTIONS: dict[_State, str] = {
    _State.DECLARATION: "declaration",
    _State.ABSTRACT: "abstract",
    _State.RESULT_DISCUSSION: "result_discussion",
}


def _element_for_tag(name: str) -> Element:
    factory = _INLINE_ELEMENTS.get(name)
    if factory is not None:
        return factory()
    if name in LABEL_ELEMENTS:
        return Label(name)
    if name == ELEMENT_SEE:
        return Label(SEE_ALSO_LABEL)
    return Other(name)


class _DocXmlContentHandler(ContentHandler, LexicalHandler):
    """SAX handler holding the frame stack and the accumulated sections."""

    def __init__(self, coalesce_text: bool = True):
        ContentHandler.__init__(self)
        self.coalesce_text = coalesce_text
        self.stack: list[_Frame] = []
        self.error: Optional[DocXmlStructureError] = None
        self.kind: Optional[DeclarationKind] = None

        self.declaration: Optional[list[DocumentationNode]] = None
        self.abstract: Optional[list[DocumentationNode]] = None
        self.discussion: Optional[list[DocumentationNode]] = None
        self.result_discussion: Optional[list[DocumentationNode]] = None
        self.parameters: Optional[list[Parameter]] = None

        self._parameter_depth = 0
        self._pending_text: list[str] = []
        self._in_cdata = False
        self._cdata_parts: list[str] = []

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _push(self, state: _State, element_name: str, element: Optional[Element] = None) -> None:
        self.stack.append(_Frame(state=state, element_name=element_name, element=element))

    @staticmethod
    def _is_raw_html(frame: _Frame) -> bool:
        return frame.state is _State.NODE and isinstance(frame.element, RawHTML)

    def _add(self, node: DocumentationNode) -> None:
        self.stack[-1].nodes.append(node)

    def _record_error(self, error: DocXmlStructureError) -> None:
        if self.error is None:
            logger.debug("Recorded documentation XML error: %s", error.message)
            self.error = error
        else:
            logger.debug("Ignoring follow-up documentation XML error: %s", error.message)

    def _flush_text(self) -> None:
        if self._pending_text:
            text = "".join(self._pending_text)
            self._pending_text = []
            self._handle_text(text)

    def build_documentation(self) -> Documentation:
        """Assemble the Documentation record from the committed sections."""
        return Documentation(
            declaration=self.declaration,
            abstract=self.abstract,
            discussion=self.discussion,
            parameters=self.parameters,
            result_discussion=self.result_discussion,
            kind=self.kind,
        )

    # ------------------------------------------------------------------
    # ContentHandler
    # ------------------------------------------------------------------

    def startElement(self, name: str, attrs: AttributesImpl) -> None:  # noqa: N802
        self._flush_text()

        if not self.stack:
            if self.kind is not None or name not in ROOT_ELEMENTS:
                raise DocXmlContractError(f"Unexpected root element <{name}>")
            self.kind = name  # type: ignore[assignment]
            self._push(_State.ROOT, name)
            return

        top = self.stack[-1]
        if self._is_raw_html(top):
            raise DocXmlContractError(f"<{top.element_name}> may only contain CDATA, found <{name}>")
        if top.state is _State.PARAMETER:
            if name == ELEMENT_NAME:
                self._push(_State.PARAMETER_NAME, name)
            elif name == ELEMENT_DISCUSSION:
                self._push(_State.PARAMETER_DISCUSSION, name)
            else:
                # e.g. <Direction isExplicit="0">in</Direction>
                self._push(_State.OTHER, name)
            return

        section_state = _SECTION_STATES.get(name)
        if section_state is not None:
            self._push(section_state, name)
        elif name == ELEMENT_PARAMETER:
            self._start_parameter(name, top)
        elif name == ELEMENT_LINK:
            href = attrs.get(ATTRIBUTE_HREF)
            if href is None:
                self._record_error(MissingRequiredAttributeError(element=name, attribute=ATTRIBUTE_HREF))
                self._push(_State.OTHER, name)
            else:
                self._push(_State.NODE, name, Link(href=href))
        elif name == ELEMENT_CODE_LISTING:
            self._push(_State.NODE, name, CodeBlock(language=attrs.get(ATTRIBUTE_LANGUAGE)))
        elif name in ROOT_METADATA_ELEMENTS:
            if top.state is not _State.ROOT:
                raise DocXmlContractError(f"<{name}> is only expected directly inside the root element")
            self._push(_State.OTHER, name)
        else:
            self._push(_State.NODE, name, _element_for_tag(name))

    def _start_parameter(self, name: str, parent: _Frame) -> None:
        if self._parameter_depth != 0:
            raise DocXmlContractError(f"<{name}> cannot be nested inside another <{name}>")
        self._parameter_depth += 1
        self._push(_State.PARAMETER, name)
        if parent.state is not _State.PARAMETERS:
            self._record_error(
                ElementNotInsideExpectedParentElementError(element=name, expected_parent_element=ELEMENT_PARAMETERS)
            )

    def endElement(self, name: str) -> None:  # noqa: N802
        self._flush_text()

        if not self.stack:
            raise DocXmlContractError(f"Unexpected end of element <{name}>")
        frame = self.stack.pop()
        if frame.element_name != name:
            raise DocXmlContractError(f"End of <{name}> does not match open element <{frame.element_name}>")

        state = frame.state
        if state is _State.NODE:
            self._add(DocumentationNode(cast(Element, frame.element), frame.nodes))
        elif state in _SINGLE_SECTIONS:
            attr = _SINGLE_SECTIONS[state]
            if getattr(self, attr) is not None:
                self._record_error(MoreThanOneElementError(element=name))
            else:
                setattr(self, attr, frame.nodes)
        elif state is _State.DISCUSSION:
            # Docs can have multiple discussions
            if self.discussion is None:
                self.discussion = frame.nodes
            else:
                self.discussion.extend(frame.nodes)
        elif state is _State.PARAMETER:
            self._end_parameter(frame)
        elif state is _State.PARAMETER_NAME:
            self._end_parameter_name(frame)
        elif state is _State.PARAMETER_DISCUSSION:
            parent = self.stack[-1]
            if parent.discussion is None:
                parent.discussion = frame.nodes
            else:
                parent.discussion.extend(frame.nodes)

    def _end_parameter(self, frame: _Frame) -> None:
        self._parameter_depth -= 1
        if not frame.parameter_name:
            self._record_error(MissingRequiredChildElementError(element=ELEMENT_PARAMETER, child_element=ELEMENT_NAME))
            return
        parameter = Parameter(name=frame.parameter_name, discussion=frame.discussion)
        if self.parameters is None:
            self.parameters = [parameter]
        else:
            self.parameters.append(parameter)

    def _end_parameter_name(self, frame: _Frame) -> None:
        name = "".join(frame.name_parts)
        if not name:
            self._record_error(MissingRequiredChildElementError(element=ELEMENT_PARAMETER, child_element=ELEMENT_NAME))
            return
        if frame.nodes:
            logger.warning("Dropping markup inside parameter name %r", name)
        parent = self.stack[-1]
        if parent.parameter_name:
            self._record_error(MoreThanOneElementError(element=PARAMETER_NAME_QUALIFIED))
            return
        parent.parameter_name = name

    def characters(self, content: str) -> None:
        if self._in_cdata:
            self._cdata_parts.append(content)
        elif self.coalesce_text:
            self._pending_text.append(content)
        else:
            self._handle_text(content)

    def _handle_text(self, text: str) -> None:
        # Text directly inside the root carries nothing
        if len(self.stack) <= 1:
            return
        top = self.stack[-1]
        if top.state is _State.PARAMETER_NAME:
            top.name_parts.append(text)
            return
        # Raw HTML is a leaf whose payload comes from CDATA only
        if self._is_raw_html(top):
            raise DocXmlContractError(f"<{top.element_name}> may only contain CDATA, found text {text!r}")
        self._add(DocumentationNode(Text(text)))

    def endDocument(self) -> None:  # noqa: N802
        self._flush_text()

    # ------------------------------------------------------------------
    # LexicalHandler
    # ------------------------------------------------------------------

    def startCDATA(self) -> None:  # noqa: N802
        self._flush_text()
        self._in_cdata = True
        self._cdata_parts = []

    def endCDATA(self) -> None:  # noqa: N802
        self._in_cdata = False
        data = "".join(self._cdata_parts)
        self._cdata_parts = []
        self._handle_cdata(data)

    def _handle_cdata(self, data: str) -> None:
        top = self.stack[-1] if self.stack else None
        if top is not None and top.state is _State.NODE:
            if isinstance(top.element, RawHTML):
                top.element = RawHTML(top.element.html + data)
                return
            if isinstance(top.element, NumberedCodeLine):
                self._add(DocumentationNode(Text(data)))
                return
        where = f"<{top.element_name}>" if top is not None else "the document"
        raise DocXmlContractError(f"Unsupported CDATA block inside {where}")


class DocXmlParser:
    """Parse documentation XML into a Documentation record.

    A parser may be reused for several documents, one at a time; each call to
    :meth:`parse` runs with fresh state.

    Parameters
    ----------
    options : DocXmlOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> parser = DocXmlParser()
        >>> doc = parser.parse("<Class><Declaration>struct Int</Declaration></Class>")
        >>> doc.declaration[0].element
        Text(content='struct Int')

    """

    def __init__(self, options: DocXmlOptions | None = None):
        """Initialize the parser with optional configuration."""
        validate_options_type(options, DocXmlOptions, "doc-xml")
        self.options: DocXmlOptions = options or DocXmlOptions()

    def _create_reader(self, handler: _DocXmlContentHandler) -> DefusedExpatParser:
        reader = DefusedExpatParser(
            forbid_dtd=self.options.forbid_dtd,
            forbid_entities=self.options.forbid_entities,
            forbid_external=self.options.forbid_external,
        )
        reader.setContentHandler(handler)
        reader.setProperty(property_lexical_handler, handler)
        return reader

    def parse(self, source: Union[str, bytes]) -> Optional[Documentation]:
        """Parse one declaration's documentation XML.

        Parameters
        ----------
        source : str or bytes
            The XML text. Bytes are handed to the reader as-is; text is
            encoded as UTF-8.

        Returns
        -------
        Documentation or None
            The parsed documentation, or None when ``source`` is empty

        Raises
        ------
        DocXmlParseError
            If the XML itself is malformed or refused by the reader
        UnknownDocXmlParseError
            If the reader failed without reporting why
        DocXmlStructureError
            The first structural rule violation in the document
        DocXmlContractError
            If the document has structure extractors never emit

        """
        if not source:
            return None

        data = source.encode(DEFAULT_SOURCE_ENCODING) if isinstance(source, str) else source
        handler = _DocXmlContentHandler(coalesce_text=self.options.coalesce_text)
        reader = self._create_reader(handler)
        try:
            reader.feed(data)
            reader.close()
        except SAXParseException as e:
            raise DocXmlParseError(e) from e
        except SAXException as e:
            if e.getException() is None and not e.getMessage():
                raise UnknownDocXmlParseError() from e
            raise DocXmlParseError(e) from e
        except DefusedXmlException as e:
            raise DocXmlParseError(e) from e

        if handler.error is not None:
            raise handler.error
        if handler.stack:
            raise DocXmlContractError(f"{len(handler.stack)} element(s) still open after the document ended")

        documentation = handler.build_documentation()
        logger.debug(
            "Parsed <%s> documentation with %d parameter(s)",
            documentation.kind,
            len(documentation.parameters or ()),
        )
        return documentation


def parse_doc_xml(source: Union[str, bytes], options: DocXmlOptions | None = None) -> Optional[Documentation]:
    """Parse documentation XML with a one-off :class:`DocXmlParser`.

    Returns None for empty input. See :meth:`DocXmlParser.parse` for the
    errors raised.
    """
    return DocXmlParser(options).parse(source)
