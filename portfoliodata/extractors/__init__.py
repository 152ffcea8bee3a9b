"""
Record extraction interfaces and implementations.

This module provides the pluggable page extractors and registers the
built-in ones under their dataset names.
"""

from .base import RecordExtractor
from .career_extractor import CareerTableExtractor, extract_career_records, split_server_cell
from .thanks_extractor import ThanksFeedExtractor, extract_thanks_records
from .extractor_registry import (
    register_extractor,
    get_extractor,
    list_extractors,
    unregister_extractor,
)
from .html_utils import HtmlNode, LxmlNode, parse_html, read_html

register_extractor("career", CareerTableExtractor)
register_extractor("thanks", ThanksFeedExtractor)

__all__ = [
    "RecordExtractor",
    "CareerTableExtractor",
    "ThanksFeedExtractor",
    "extract_career_records",
    "extract_thanks_records",
    "split_server_cell",
    "register_extractor",
    "get_extractor",
    "list_extractors",
    "unregister_extractor",
    "HtmlNode",
    "LxmlNode",
    "parse_html",
    "read_html",
]
