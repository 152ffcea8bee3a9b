"""
Career table extractor.

Reads the rows of the career history table. Each data row becomes one
career record; the server-name cell may carry an inline annotation
(<sup data-note="...">[marker]</sup>) which is split out into `note`.
"""

from __future__ import annotations

from typing import List, Tuple

from ..shared import Record, RecordKind
from .base import RecordExtractor, Source
from .html_utils import HtmlNode, class_selector

TABLE_CLASS = "discord-career-table"
# tbody rows; header/footer rows are excluded even when the markup omits <tbody>
ROW_SELECTOR = class_selector(TABLE_CLASS) + "//tr[not(ancestor::thead)][not(ancestor::tfoot)]"
CELL_SELECTOR = "./td"
NOTE_SELECTOR = ".//sup"
NOTE_DETAIL_ATTR = "data-note"

# Cell position -> field; cell 1 is split into serverName + note
CELL_FIELDS = (
    "no",
    "serverName",
    "category",
    "count",
    "department",
    "position",
    "job",
    "term",
)


def split_server_cell(cell: HtmlNode) -> Tuple[str, str]:
    """
    Split a server-name cell into (serverName, note).

    note joins the marker text and the data-note detail with one space,
    dropping whichever is empty; it is "" without an annotation. Several
    <sup> elements concatenate their markers; the detail is the first
    non-empty data-note among them.
    """
    sups = cell.find_all(NOTE_SELECTOR)
    if not sups:
        return cell.text(), ""

    server_name = cell.without(NOTE_SELECTOR).text()
    marker = "".join(sup.text() for sup in sups)
    detail = next((sup.attr(NOTE_DETAIL_ATTR) for sup in sups if sup.attr(NOTE_DETAIL_ATTR)), "")
    note = " ".join(part for part in (marker, detail) if part)
    return server_name, note


class CareerTableExtractor(RecordExtractor):
    """Extracts career history rows from the career table page."""

    kind = RecordKind.CAREER

    def extract_with_warnings(self, source: Source) -> Tuple[List[Record], List[str]]:
        root = self._as_node(source)
        records: List[Record] = []
        warnings: List[str] = []

        for row_no, row in enumerate(root.find_all(ROW_SELECTOR), start=1):
            cells = row.find_all(CELL_SELECTOR)
            if not cells:
                continue

            values = {}
            for idx, name in enumerate(CELL_FIELDS):
                if idx >= len(cells):
                    values[name] = ""
                    continue
                if name == "serverName":
                    values["serverName"], values["note"] = split_server_cell(cells[idx])
                else:
                    values[name] = cells[idx].text()

            if len(cells) < len(CELL_FIELDS):
                missing = ", ".join(CELL_FIELDS[len(cells):])
                warnings.append(f"row {row_no}: missing cells: {missing}")

            records.append(self.kind.new_record(**values))

        return records, warnings


def extract_career_records(html: Source) -> List[Record]:
    """Extract career records from the career table page."""
    return CareerTableExtractor().extract(html)
