#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/symboldoc/parsers/__init__.py
"""Parsers turning documentation sources into Documentation trees."""

from symboldoc.parsers.doc_xml import DocXmlParser, parse_doc_xml

__all__ = ["DocXmlParser", "parse_doc_xml"]
