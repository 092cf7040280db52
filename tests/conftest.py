"""Pytest configuration and shared fixtures for the symboldoc test suite.

This module provides shared fixtures and test configuration used across the
entire test suite.
"""

import pytest

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def int_doc_xml() -> str:
    """Provide documentation XML for a simple struct.

    Returns
    -------
    str
        Class documentation with name, USR, declaration and abstract.

    """
    return (
        "<Class><Name>Int</Name><USR>s:Si</USR>"
        "<Declaration>struct Int : SignedIntegerType, Comparable, Equatable</Declaration>"
        "<Abstract><Para>A 64-bit signed integer value type.</Para></Abstract></Class>"
    )


@pytest.fixture
def string_doc_xml() -> str:
    """Provide documentation XML exercising every inline markup element.

    Returns
    -------
    str
        Class documentation with raw HTML, links, lists and a code listing.

    """
    return (
        "<Class><Name>String</Name><USR>s:SS</USR><Declaration>struct String</Declaration>"
        "<Abstract><Para>An arbitrary Unicode string value.</Para></Abstract>"
        "<Discussion><rawHTML><![CDATA[<h1>]]></rawHTML>Unicode-Correct<rawHTML><![CDATA[</h1>]]></rawHTML>"
        "<Para>Swift strings blah blah blah <codeVoice>==</codeVoice> operator checks for "
        '<Link href="http://www.unicode.org/glossary/#deterministic_comparison">Unicode canonical equivalence</Link>'
        ", so etc etc.</Para>"
        "<Para><emphasis>Test A</emphasis><strong>Test B</strong><bold>Another one</bold></Para>"
        "<List-Bullet><Item>A</Item><Item>BB</Item><Item>CCC</Item></List-Bullet>"
        '<CodeListing language="swift">'
        '<zCodeLineNumbered><![CDATA[var a = "foo"]]></zCodeLineNumbered>'
        '<zCodeLineNumbered><![CDATA[print("a=\\(a), b=???")     // a=foo, b=foobar]]></zCodeLineNumbered>'
        "<zCodeLineNumbered></zCodeLineNumbered>"
        "</CodeListing>"
        "<List-Number><Item>Foo</Item><Item>Bar</Item></List-Number>"
        "</Discussion></Class>"
    )


@pytest.fixture
def parameters_doc_xml() -> str:
    """Provide documentation XML with two documented parameters.

    Returns
    -------
    str
        Class documentation whose second parameter has two discussions.

    """
    return (
        "<Class><Name>ClosedInterval</Name><USR>s:Vs14ClosedInterval</USR>"
        "<Declaration>struct ClosedInterval</Declaration>"
        "<Abstract><Para>A closed IntervalType.</Para></Abstract>"
        "<Parameters>"
        '<Parameter><Name>Bound</Name><Direction isExplicit="0">in</Direction>'
        "<Discussion><Para>The type of the endpoints.</Para></Discussion></Parameter>"
        "<Parameter><Name>Test</Name><Discussion><Para>Part 1</Para></Discussion>"
        "<Discussion><Para>Fin.</Para></Discussion></Parameter>"
        "</Parameters></Class>"
    )
