"""
Low-level HTML helpers.

This module handles direct access to parsed HTML:
- parsing page text into a tree
- finding elements by structural selector, in document order
- reading trimmed text and attributes
- copying an element with some descendants removed

It contains no page-specific logic; the career and thanks extractors
decide which selectors to use. Extractors only talk to the HtmlNode
protocol, so fixture trees can stand in for lxml.
"""

from __future__ import annotations

import copy
import re
from pathlib import Path
from typing import List, Optional, Protocol

from lxml import etree
from lxml import html as lxml_html

from ..errors import MissingSourceFile

HTML_PARSER = lxml_html.HTMLParser(recover=True, huge_tree=True)

# lxml refuses str input that carries an encoding declaration
XML_DECLARATION_RE = re.compile(r"^[\ufeff\s]*<\?xml[^>]*\?>", re.IGNORECASE)


class HtmlNode(Protocol):
    def find_all(self, selector: str) -> List["HtmlNode"]:
        """Elements matching selector below this node, in document order."""
        ...

    def text(self) -> str:
        """Text content of this node and its descendants, trimmed."""
        ...

    def attr(self, name: str) -> str:
        """Attribute value, trimmed, or "" when the attribute is absent."""
        ...

    def without(self, selector: str) -> "HtmlNode":
        """Detached copy of this node with matching descendants removed."""
        ...


# ------------------------- Selectors -------------------------

def class_selector(name: str, tag: str = "*") -> str:
    """XPath step matching descendants carrying a CSS class token."""
    return (
        f".//{tag}[contains(concat(' ', normalize-space(@class), ' '), ' {name} ')]"
    )


def descendant(*steps: str) -> str:
    """Chain './/' selector steps, each searched below the previous match."""
    return steps[0] + "".join(step[1:] for step in steps[1:])


# ------------------------- lxml implementation -------------------------

class LxmlNode:
    """HtmlNode backed by an lxml element; selectors are XPath expressions."""

    def __init__(self, element: etree._Element):
        self.element = element

    def find_all(self, selector: str) -> List["LxmlNode"]:
        return [LxmlNode(el) for el in self.element.xpath(selector) if isinstance(el, etree._Element)]

    def text(self) -> str:
        # string() skips comments and processing instructions; entities are decoded
        return self.element.xpath("string()").strip()

    def attr(self, name: str) -> str:
        return (self.element.get(name) or "").strip()

    def without(self, selector: str) -> "LxmlNode":
        clone = copy.deepcopy(self.element)
        for el in clone.xpath(selector):
            _drop_keep_tail(el)
        return LxmlNode(clone)

    def __repr__(self) -> str:
        return f"<LxmlNode {self.element.tag}>"


def _drop_keep_tail(el: etree._Element) -> None:
    """Remove el from its parent while keeping the text that follows it."""
    parent = el.getparent()
    if parent is None:
        return
    if el.tail:
        prev = el.getprevious()
        if prev is not None:
            prev.tail = (prev.tail or "") + el.tail
        else:
            parent.text = (parent.text or "") + el.tail
    parent.remove(el)


def parse_html(text: str) -> LxmlNode:
    """
    Parse page text (full document or fragment) into a document-rooted node.

    Always returns the <html> root so descendant selectors also match the
    outermost element of a fragment. A leading XML declaration (XHTML
    pages) is dropped before parsing.
    """
    text = XML_DECLARATION_RE.sub("", text or "", count=1)
    if not text.strip():
        return LxmlNode(lxml_html.Element("html"))
    try:
        root = lxml_html.document_fromstring(text, parser=HTML_PARSER)
    except etree.ParserError:
        # comment-only or otherwise empty documents
        return LxmlNode(lxml_html.Element("html"))
    return LxmlNode(root)


def first(node: HtmlNode, selector: str) -> Optional[HtmlNode]:
    matches = node.find_all(selector)
    return matches[0] if matches else None


def read_html(path: Path) -> str:
    """Read a source page as UTF-8 text."""
    path = Path(path)
    if not path.is_file():
        raise MissingSourceFile(f"Source file not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise MissingSourceFile(f"Source file unreadable: {path} ({e})") from e
