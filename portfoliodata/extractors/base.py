"""
Base interface for record extractors.

Defines the contract for pluggable page extractors.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Tuple, Union

from ..shared import Record, RecordKind
from .html_utils import HtmlNode, parse_html, read_html

Source = Union[str, HtmlNode]


class RecordExtractor(ABC):
    """
    Abstract base class for record extractors.

    Implementations turn one HTML page into an ordered list of flat
    records of a single kind. Every record carries all fields of the
    kind, in declared order; missing structure degrades to "".
    """

    kind: RecordKind

    @abstractmethod
    def extract_with_warnings(self, source: Source) -> Tuple[List[Record], List[str]]:
        """
        Extract records from page text or an already-parsed tree.

        Args:
            source: HTML text, or any HtmlNode rooted above the data

        Returns:
            (records, warnings); a warning names a row or card where a
            field degraded to "" because its markup was absent.
        """
        ...

    def extract(self, source: Source) -> List[Record]:
        records, _ = self.extract_with_warnings(source)
        return records

    def extract_file(self, path: Path) -> Tuple[List[Record], List[str]]:
        """
        Read a page from disk and extract it.

        Raises:
            MissingSourceFile: If the page does not exist or cannot be read
        """
        return self.extract_with_warnings(read_html(path))

    @staticmethod
    def _as_node(source: Source) -> HtmlNode:
        if isinstance(source, str):
            return parse_html(source)
        return source
