#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_doc_xml_parser.py
"""Unit tests for the documentation XML parser.

Tests cover:
- Empty input and tokenizer failures
- Section population and the at-most-once rule
- Discussion and parameter discussion merging
- Parameter name validation
- Inline markup, labels and unknown elements
- CDATA placement and contract violations

"""

import pytest

from symboldoc import (
    DocXmlContractError,
    DocXmlOptions,
    DocXmlParseError,
    DocXmlParser,
    ElementNotInsideExpectedParentElementError,
    MissingRequiredAttributeError,
    MissingRequiredChildElementError,
    MoreThanOneElementError,
    parse_doc_xml,
)
from symboldoc.ast import (
    Bold,
    BulletedList,
    CodeBlock,
    CodeVoice,
    DocumentationNode,
    Emphasis,
    Label,
    Link,
    ListItem,
    NumberedCodeLine,
    NumberedList,
    Other,
    Paragraph,
    RawHTML,
    Strong,
    Text,
)
from symboldoc.exceptions import InvalidOptionsError
from symboldoc.options import HtmlRendererOptions


def text(content):
    return DocumentationNode(Text(content))


def para(*children):
    return DocumentationNode(Paragraph(), children)


@pytest.mark.unit
class TestBasicParsing:
    """Tests for inputs that parse without structural errors."""

    def test_empty_input_returns_none(self):
        assert parse_doc_xml("") is None

    def test_empty_bytes_returns_none(self):
        assert parse_doc_xml(b"") is None

    def test_declaration_and_abstract(self, int_doc_xml):
        doc = parse_doc_xml(int_doc_xml)

        assert doc is not None
        assert doc.kind == "Class"
        assert doc.declaration == (text("struct Int : SignedIntegerType, Comparable, Equatable"),)
        assert doc.abstract == (para(text("A 64-bit signed integer value type.")),)
        assert doc.discussion is None
        assert doc.parameters is None
        assert doc.result_discussion is None

    def test_minimal_class(self):
        doc = parse_doc_xml(
            "<Class><Name>Int</Name><Declaration>struct Int</Declaration>"
            "<Abstract><Para>A value.</Para></Abstract></Class>"
        )

        assert doc.declaration == (text("struct Int"),)
        assert doc.abstract == (para(text("A value.")),)
        assert doc.discussion is None
        assert doc.parameters is None
        assert doc.result_discussion is None

    def test_bytes_input(self):
        doc = parse_doc_xml("<Other><Declaration>let π = 3.14</Declaration></Other>".encode("utf-8"))
        assert doc.kind == "Other"
        assert doc.declaration == (text("let π = 3.14"),)

    def test_multiline_declaration_is_single_text_node(self):
        doc = parse_doc_xml(
            "<Function><Name>advancedBy(_:)</Name>"
            "<Declaration>@warn_unused_result\nfunc advancedBy(n: Self.Distance)</Declaration>"
            "<Abstract><Para>Return the result of advancing self by n positions.</Para></Abstract>"
            "<ResultDiscussion><Para>Results are valid</Para></ResultDiscussion></Function>"
        )

        assert doc.kind == "Function"
        assert doc.declaration == (text("@warn_unused_result\nfunc advancedBy(n: Self.Distance)"),)
        assert doc.abstract == (para(text("Return the result of advancing self by n positions.")),)
        assert doc.result_discussion == (para(text("Results are valid")),)
        assert doc.discussion is None
        assert doc.parameters is None

    def test_entities_are_decoded_into_one_text_node(self):
        doc = parse_doc_xml("<Class><Declaration>a &lt; b &amp;&amp; c</Declaration></Class>")
        assert doc.declaration == (text("a < b && c"),)

    def test_text_fragments_kept_when_coalescing_disabled(self):
        options = DocXmlOptions(coalesce_text=False)
        doc = parse_doc_xml("<Class><Declaration>a &lt; b</Declaration></Class>", options)

        assert len(doc.declaration) > 1
        assert "".join(node.element.content for node in doc.declaration) == "a < b"

    def test_text_directly_in_root_is_ignored(self):
        doc = parse_doc_xml("<Class>stray<Abstract><Para>A</Para></Abstract>more</Class>")
        assert doc.abstract == (para(text("A")),)
        assert doc.discussion is None

    def test_present_but_empty_section(self):
        doc = parse_doc_xml("<Class><Abstract></Abstract></Class>")
        assert doc.abstract == ()
        assert doc.declaration is None

    def test_parser_instance_is_reusable(self, int_doc_xml, parameters_doc_xml):
        parser = DocXmlParser()
        first = parser.parse(int_doc_xml)
        second = parser.parse(parameters_doc_xml)
        third = parser.parse(int_doc_xml)

        assert first == third
        assert first.parameters is None
        assert len(second.parameters) == 2


@pytest.mark.unit
class TestInlineMarkup:
    """Tests for the inline markup vocabulary."""

    def test_rich_discussion(self, string_doc_xml):
        doc = parse_doc_xml(string_doc_xml)

        assert doc.declaration == (text("struct String"),)
        assert doc.parameters is None
        assert doc.result_discussion is None

        discussion = doc.discussion
        assert len(discussion) == 8
        assert discussion[0] == DocumentationNode(RawHTML("<h1>"))
        assert discussion[1] == text("Unicode-Correct")
        assert discussion[2] == DocumentationNode(RawHTML("</h1>"))
        assert discussion[3] == para(
            text("Swift strings blah blah blah "),
            DocumentationNode(CodeVoice(), [text("==")]),
            text(" operator checks for "),
            DocumentationNode(
                Link("http://www.unicode.org/glossary/#deterministic_comparison"),
                [text("Unicode canonical equivalence")],
            ),
            text(", so etc etc."),
        )
        assert discussion[4] == para(
            DocumentationNode(Emphasis(), [text("Test A")]),
            DocumentationNode(Strong(), [text("Test B")]),
            DocumentationNode(Bold(), [text("Another one")]),
        )
        assert discussion[5] == DocumentationNode(
            BulletedList(),
            [
                DocumentationNode(ListItem(), [text("A")]),
                DocumentationNode(ListItem(), [text("BB")]),
                DocumentationNode(ListItem(), [text("CCC")]),
            ],
        )
        assert discussion[6] == DocumentationNode(
            CodeBlock(language="swift"),
            [
                DocumentationNode(NumberedCodeLine(), [text('var a = "foo"')]),
                DocumentationNode(NumberedCodeLine(), [text('print("a=\\(a), b=???")     // a=foo, b=foobar')]),
                DocumentationNode(NumberedCodeLine()),
            ],
        )
        assert discussion[7] == DocumentationNode(
            NumberedList(),
            [
                DocumentationNode(ListItem(), [text("Foo")]),
                DocumentationNode(ListItem(), [text("Bar")]),
            ],
        )

    def test_code_listing_without_language(self):
        doc = parse_doc_xml("<Class><Discussion><CodeListing></CodeListing></Discussion></Class>")
        assert doc.discussion == (DocumentationNode(CodeBlock(language=None)),)

    def test_raw_html_concatenates_cdata_blocks(self):
        doc = parse_doc_xml("<Class><Discussion><rawHTML><![CDATA[<b>]]><![CDATA[x</b>]]></rawHTML></Discussion></Class>")
        assert doc.discussion == (DocumentationNode(RawHTML("<b>x</b>")),)

    def test_empty_cdata_code_line_keeps_empty_text(self):
        doc = parse_doc_xml(
            "<Class><Discussion><CodeListing>"
            "<zCodeLineNumbered><![CDATA[]]></zCodeLineNumbered>"
            "</CodeListing></Discussion></Class>"
        )
        assert doc.discussion == (
            DocumentationNode(CodeBlock(), [DocumentationNode(NumberedCodeLine(), [text("")])]),
        )

    def test_labels_and_custom_elements(self):
        doc = parse_doc_xml(
            "<Function><Name>generate()</Name><Declaration>func generate()</Declaration>"
            "<Abstract><Para>Returns a generator over the elements of this collection.</Para></Abstract>"
            "<Discussion><Complexity><Para>O(1).</Para></Complexity><Note>Something</Note><See>That</See></Discussion>"
            "<Discussion><Para>Part 2</Para></Discussion>"
            "<Discussion><MyLabel>AF</MyLabel></Discussion></Function>"
        )

        assert doc.discussion == (
            DocumentationNode(Label("Complexity"), [para(text("O(1)."))]),
            DocumentationNode(Label("Note"), [text("Something")]),
            DocumentationNode(Label("See also"), [text("That")]),
            para(text("Part 2")),
            DocumentationNode(Other("MyLabel"), [text("AF")]),
        )

    @pytest.mark.parametrize("tag", ["Requires", "Warning", "Postcondition", "Precondition"])
    def test_label_elements_keep_their_name(self, tag):
        doc = parse_doc_xml(f"<Class><Discussion><{tag}>x</{tag}></Discussion></Class>")
        assert doc.discussion == (DocumentationNode(Label(tag), [text("x")]),)


@pytest.mark.unit
class TestSectionRules:
    """Tests for the at-most-once and merging rules of sections."""

    @pytest.mark.parametrize("tag", ["Abstract", "Declaration", "ResultDiscussion"])
    def test_repeated_single_section(self, tag):
        with pytest.raises(MoreThanOneElementError) as exc_info:
            parse_doc_xml(f"<Class><Name>Int</Name><{tag}>B</{tag}><{tag}>A</{tag}></Class>")

        assert exc_info.value.element == tag
        assert exc_info.value == MoreThanOneElementError(tag)

    def test_discussions_concatenate_in_order(self):
        doc = parse_doc_xml(
            "<Class><Discussion><Para>1</Para></Discussion><Abstract>A</Abstract>"
            "<Discussion><Para>2</Para><Para>3</Para></Discussion></Class>"
        )
        assert doc.discussion == (para(text("1")), para(text("2")), para(text("3")))


@pytest.mark.unit
class TestParameters:
    """Tests for parameter records."""

    def test_parameters(self, parameters_doc_xml):
        doc = parse_doc_xml(parameters_doc_xml)

        assert doc.discussion is None
        assert doc.result_discussion is None
        assert [p.name for p in doc.parameters] == ["Bound", "Test"]
        assert doc.parameters[0].discussion == (para(text("The type of the endpoints.")),)
        assert doc.parameters[1].discussion == (para(text("Part 1")), para(text("Fin.")))

    def test_parameter_without_discussion(self):
        doc = parse_doc_xml("<Function><Parameters><Parameter><Name>x</Name></Parameter></Parameters></Function>")
        assert len(doc.parameters) == 1
        assert doc.parameters[0].name == "x"
        assert doc.parameters[0].discussion is None

    def test_parameter_discussion_does_not_leak_into_discussion(self):
        doc = parse_doc_xml(
            "<Function><Parameters><Parameter><Name>x</Name>"
            "<Discussion><Para>p</Para></Discussion></Parameter></Parameters>"
            "<Discussion><Para>d</Para></Discussion></Function>"
        )
        assert doc.discussion == (para(text("d")),)
        assert doc.parameters[0].discussion == (para(text("p")),)

    def test_missing_name(self):
        with pytest.raises(MissingRequiredChildElementError) as exc_info:
            parse_doc_xml(
                "<Class><Name>ClosedInterval</Name><Declaration>struct ClosedInterval</Declaration>"
                "<Parameters><Parameter><Discussion><Para>Test.</Para></Discussion></Parameter></Parameters></Class>"
            )

        assert exc_info.value.element == "Parameter"
        assert exc_info.value.child_element == "Name"

    def test_empty_name(self):
        with pytest.raises(MissingRequiredChildElementError) as exc_info:
            parse_doc_xml(
                "<Class><Parameters><Parameter><Name></Name>"
                "<Discussion><Para>Test.</Para></Discussion></Parameter></Parameters></Class>"
            )

        assert exc_info.value == MissingRequiredChildElementError("Parameter", "Name")

    def test_second_name(self):
        with pytest.raises(MoreThanOneElementError) as exc_info:
            parse_doc_xml(
                "<Class><Name>ClosedInterval</Name><USR>s:Vs14ClosedInterval</USR>"
                "<Declaration>struct ClosedInterval</Declaration>"
                "<Abstract><Para>A closed IntervalType.</Para></Abstract>"
                "<Parameters><Parameter><Name>Bound</Name><Name>Another one</Name>"
                "<Discussion><Para>Test.</Para></Discussion></Parameter></Parameters></Class>"
            )

        assert exc_info.value.element == "Parameter.Name"

    def test_parameter_outside_parameters(self):
        with pytest.raises(ElementNotInsideExpectedParentElementError) as exc_info:
            parse_doc_xml(
                "<Class><Name>ClosedInterval</Name><Declaration>struct ClosedInterval</Declaration>"
                "<Parameter><Name>Test</Name><Discussion><Para>Test.</Para></Discussion></Parameter></Class>"
            )

        assert exc_info.value.element == "Parameter"
        assert exc_info.value.expected_parent_element == "Parameters"

    def test_nested_parameter_is_a_contract_error(self):
        with pytest.raises(DocXmlContractError):
            parse_doc_xml(
                "<Class><Parameters><Parameter><Name>a</Name><Discussion>"
                "<Parameter><Name>b</Name></Parameter></Discussion></Parameter></Parameters></Class>"
            )


@pytest.mark.unit
class TestErrorReporting:
    """Tests for tokenizer failures and the first-error-wins policy."""

    def test_malformed_xml_wraps_tokenizer_error(self):
        with pytest.raises(DocXmlParseError) as exc_info:
            parse_doc_xml("<Class><Name>Int</Name><Abstract><Para></Abstract></Class>")

        assert exc_info.value.original_error is not None
        assert exc_info.value.__cause__ is exc_info.value.original_error

    def test_truncated_document(self):
        with pytest.raises(DocXmlParseError):
            parse_doc_xml("<Class><Abstract>")

    def test_entity_declarations_are_refused(self):
        source = '<!DOCTYPE Class [<!ENTITY e "boom">]><Class><Abstract>&e;</Abstract></Class>'
        with pytest.raises(DocXmlParseError):
            parse_doc_xml(source)

    def test_dtd_refused_when_forbidden(self):
        with pytest.raises(DocXmlParseError):
            parse_doc_xml("<!DOCTYPE Class><Class></Class>", DocXmlOptions(forbid_dtd=True))

    def test_link_without_href(self):
        with pytest.raises(MissingRequiredAttributeError) as exc_info:
            parse_doc_xml("<Class><Name>Int</Name><Abstract><Link>Foo</Link>A</Abstract></Class>")

        assert exc_info.value.element == "Link"
        assert exc_info.value.attribute == "href"

    def test_first_error_wins(self):
        with pytest.raises(MissingRequiredAttributeError):
            parse_doc_xml(
                "<Class><Abstract><Link>Foo</Link></Abstract><Abstract>again</Abstract>"
                "<Parameters><Parameter></Parameter></Parameters></Class>"
            )

    def test_tokenizer_error_takes_precedence_over_structure_error(self):
        with pytest.raises(DocXmlParseError):
            parse_doc_xml("<Class><Abstract>a</Abstract><Abstract>b</Abstract><Para></Class>")

    def test_structure_errors_share_base_class(self):
        from symboldoc import DocXmlStructureError

        with pytest.raises(DocXmlStructureError):
            parse_doc_xml("<Class><Abstract/><Abstract/></Class>")


@pytest.mark.unit
class TestContractViolations:
    """Tests for structure documentation extractors never emit."""

    def test_unexpected_root(self):
        with pytest.raises(DocXmlContractError):
            parse_doc_xml("<Struct><Abstract>A</Abstract></Struct>")

    def test_name_outside_root(self):
        with pytest.raises(DocXmlContractError):
            parse_doc_xml("<Class><Discussion><Name>x</Name></Discussion></Class>")

    def test_cdata_outside_supported_elements(self):
        with pytest.raises(DocXmlContractError):
            parse_doc_xml("<Class><Discussion><Para><![CDATA[x]]></Para></Discussion></Class>")

    def test_text_inside_raw_html(self):
        with pytest.raises(DocXmlContractError):
            parse_doc_xml("<Class><Discussion><rawHTML>abc</rawHTML></Discussion></Class>")

    def test_text_inside_raw_html_without_coalescing(self):
        with pytest.raises(DocXmlContractError):
            parse_doc_xml(
                "<Class><Discussion><rawHTML>abc</rawHTML></Discussion></Class>",
                DocXmlOptions(coalesce_text=False),
            )

    @pytest.mark.parametrize(
        "raw_html",
        [
            "<rawHTML><Para>x</Para></rawHTML>",
            "<rawHTML><![CDATA[<b>]]><Para>x</Para></rawHTML>",
        ],
    )
    def test_element_inside_raw_html(self, raw_html):
        with pytest.raises(DocXmlContractError):
            parse_doc_xml(f"<Class><Discussion>{raw_html}</Discussion></Class>")


@pytest.mark.unit
class TestParserOptions:
    """Tests for parser configuration."""

    def test_default_options(self):
        parser = DocXmlParser()
        assert parser.options == DocXmlOptions()

    def test_wrong_options_type(self):
        with pytest.raises(InvalidOptionsError):
            DocXmlParser(HtmlRendererOptions())

    def test_create_updated(self):
        options = DocXmlOptions().create_updated(forbid_dtd=True)
        assert options.forbid_dtd is True
        assert options.forbid_entities is True
