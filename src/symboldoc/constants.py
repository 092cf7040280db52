#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the symboldoc library.

This module centralizes the element vocabulary of the documentation XML
dialect together with the default configuration values used by the parser
and the HTML renderer.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Element Vocabulary - Recognized XML element and attribute names
3. Parser Defaults - Defaults for DocXmlOptions
4. HTML Renderer Defaults - Defaults for HtmlRendererOptions
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

DeclarationKind = Literal["Class", "Function", "Other"]
SectionName = Literal["declaration", "abstract", "discussion", "result_discussion"]

# =============================================================================
# Element Vocabulary
# =============================================================================

ROOT_ELEMENTS: frozenset[str] = frozenset({"Class", "Function", "Other"})

ELEMENT_DECLARATION = "Declaration"
ELEMENT_ABSTRACT = "Abstract"
ELEMENT_DISCUSSION = "Discussion"
ELEMENT_PARAMETERS = "Parameters"
ELEMENT_PARAMETER = "Parameter"
ELEMENT_RESULT_DISCUSSION = "ResultDiscussion"
ELEMENT_NAME = "Name"
ELEMENT_USR = "USR"
ELEMENT_LINK = "Link"
ELEMENT_CODE_LISTING = "CodeListing"
ELEMENT_SEE = "See"

# Qualified name reported when a <Parameter> carries more than one <Name>
PARAMETER_NAME_QUALIFIED = "Parameter.Name"

ATTRIBUTE_HREF = "href"
ATTRIBUTE_LANGUAGE = "language"

# Tags rendered as a definition-list style label carrying their own name
LABEL_ELEMENTS: frozenset[str] = frozenset(
    {"Complexity", "Note", "Requires", "Warning", "Postcondition", "Precondition"}
)
SEE_ALSO_LABEL = "See also"

# Elements only meaningful directly under the root; consumed and dropped
ROOT_METADATA_ELEMENTS: frozenset[str] = frozenset({ELEMENT_NAME, ELEMENT_USR})

# =============================================================================
# Parser Defaults
# =============================================================================

DEFAULT_FORBID_DTD = False
DEFAULT_FORBID_ENTITIES = True
DEFAULT_FORBID_EXTERNAL = True
DEFAULT_COALESCE_TEXT = True
DEFAULT_SOURCE_ENCODING = "utf-8"

# =============================================================================
# HTML Renderer Defaults
# =============================================================================

DEFAULT_ESCAPE_HTML = True
DEFAULT_LABEL_SEPARATOR = ": "

# Serialization schema version written by documentation_to_json
SERIALIZATION_SCHEMA_VERSION = 1
