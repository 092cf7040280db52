#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for parsing documentation XML."""

from __future__ import annotations

from dataclasses import dataclass, field

from symboldoc.constants import (
    DEFAULT_COALESCE_TEXT,
    DEFAULT_FORBID_DTD,
    DEFAULT_FORBID_ENTITIES,
    DEFAULT_FORBID_EXTERNAL,
)
from symboldoc.options.base import BaseParserOptions


@dataclass(frozen=True)
class DocXmlOptions(BaseParserOptions):
    """Configuration options for the documentation XML parser.

    The ``forbid_*`` flags are handed to defusedxml's expat reader; a document
    refused by one of them fails with DocXmlParseError.

    Parameters
    ----------
    forbid_dtd : bool, default False
        Refuse documents containing a DTD.
    forbid_entities : bool, default True
        Refuse documents declaring entities.
    forbid_external : bool, default True
        Refuse documents referencing external entities.
    coalesce_text : bool, default True
        Merge adjacent character events into a single Text node. The expat
        reader splits a run of text at newlines and entity references; with
        this disabled each fragment becomes its own Text node.

    """

    forbid_dtd: bool = field(
        default=DEFAULT_FORBID_DTD,
        metadata={"help": "Refuse documents containing a DTD", "importance": "security"},
    )
    forbid_entities: bool = field(
        default=DEFAULT_FORBID_ENTITIES,
        metadata={"help": "Refuse documents declaring entities", "importance": "security"},
    )
    forbid_external: bool = field(
        default=DEFAULT_FORBID_EXTERNAL,
        metadata={"help": "Refuse documents referencing external entities", "importance": "security"},
    )
    coalesce_text: bool = field(
        default=DEFAULT_COALESCE_TEXT,
        metadata={"help": "Merge adjacent character events into one Text node", "importance": "advanced"},
    )
