"""
Special-thanks feed extractor.

The gift feed is grouped by year: each `.gift-year` container holds a
`.year-title` heading and a number of `.gift-card` entries. Each card
becomes one thanks record tagged with its group's year.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from ..shared import Record, RecordKind
from .base import RecordExtractor, Source
from .html_utils import HtmlNode, class_selector, descendant, first

YEAR_GROUP_SELECTOR = class_selector("gift-year")
YEAR_TITLE_SELECTOR = class_selector("year-title")
CARD_SELECTOR = class_selector("gift-card")
TYPE_ATTR = "data-type"
DEFAULT_TYPE = "unknown"

NUMBER_SELECTOR = class_selector("gift-number")
USER_SELECTOR = class_selector("gift-user")
ITEM_SELECTOR = descendant(class_selector("gift-card-body"), class_selector("tag"))
TIME_SELECTOR = descendant(class_selector("gift-meta"), ".//time")
TIME_ATTR = "datetime"

# field -> (selector, label used in warnings)
TEXT_FIELDS = (
    ("number", NUMBER_SELECTOR, ".gift-number"),
    ("user", USER_SELECTOR, ".gift-user"),
    ("item", ITEM_SELECTOR, ".gift-card-body .tag"),
)


def _text_or_empty(node: Optional[HtmlNode]) -> str:
    return node.text() if node is not None else ""


class ThanksFeedExtractor(RecordExtractor):
    """Extracts gift entries, grouped by year, from the special-thanks page."""

    kind = RecordKind.THANKS

    def extract_with_warnings(self, source: Source) -> Tuple[List[Record], List[str]]:
        root = self._as_node(source)
        records: List[Record] = []
        warnings: List[str] = []

        for group_no, group in enumerate(root.find_all(YEAR_GROUP_SELECTOR), start=1):
            title = first(group, YEAR_TITLE_SELECTOR)
            year = _text_or_empty(title)
            if title is None:
                warnings.append(f"year group {group_no}: missing .year-title")

            for card_no, card in enumerate(group.find_all(CARD_SELECTOR), start=1):
                label = f"card {card_no} ({year or f'group {group_no}'})"
                values = {
                    "year": year,
                    "type": card.attr(TYPE_ATTR) or DEFAULT_TYPE,
                }

                for name, selector, css in TEXT_FIELDS:
                    node = first(card, selector)
                    if node is None:
                        warnings.append(f"{label}: missing {css}")
                    values[name] = _text_or_empty(node)

                time = first(card, TIME_SELECTOR)
                if time is None:
                    warnings.append(f"{label}: missing .gift-meta time")
                    values["date"] = ""
                    values["displayDate"] = ""
                else:
                    values["date"] = time.attr(TIME_ATTR)
                    values["displayDate"] = time.text()

                records.append(self.kind.new_record(**values))

        return records, warnings


def extract_thanks_records(html: Source) -> List[Record]:
    """Extract thanks records from the special-thanks page."""
    return ThanksFeedExtractor().extract(html)
