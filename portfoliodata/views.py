"""
Consumer-side views of the cached CSV data.

The site's front end re-renders the CSV files: gifts are grouped by year
(newest year first, newest card first) and chip classes are derived from
the gift type. These helpers reproduce that view so the cached data can
be checked from the command line.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, List, Sequence, Tuple

from .shared import Record, RecordKind

TAG_CLASSES = {
    "nitro": "tag-nitro",
    "banner": "tag-banner",
}
DEFAULT_TAG_CLASS = "tag-etc"


def tag_class_for(gift_type: str) -> str:
    return TAG_CLASSES.get(gift_type, DEFAULT_TAG_CLASS)


def _year_sort_key(year: str) -> Tuple[bool, int, str]:
    # numeric years sort by value; anything else sorts after them
    try:
        return True, int(year), year
    except ValueError:
        return False, 0, year


def group_thanks_by_year(records: Sequence[Record]) -> List[Tuple[str, List[Record]]]:
    """
    Group thanks records by year.

    Years are ordered newest first; within a year, cards are ordered by
    their ISO `date` string, newest first (ties keep document order).
    """
    groups: Dict[str, List[Record]] = {}
    for record in records:
        groups.setdefault(record.get("year", ""), []).append(record)

    ordered = sorted(groups, key=_year_sort_key, reverse=True)
    return [
        (year, sorted(groups[year], key=lambda r: r.get("date", ""), reverse=True))
        for year in ordered
    ]


def summarize(records: Sequence[Record], kind: RecordKind) -> List[str]:
    """One-line summaries of a dataset as the front end would present it."""
    if kind is RecordKind.CAREER:
        annotated = sum(1 for r in records if r.get("note"))
        categories = Counter(r.get("category", "") for r in records)
        lines = [f"{len(records)} career row(s), {annotated} annotated"]
        lines.extend(
            f"{category or '(none)'}: {count}" for category, count in sorted(categories.items())
        )
        return lines

    lines = []
    for year, cards in group_thanks_by_year(records):
        types = Counter(card.get("type", "") for card in cards)
        breakdown = ", ".join(f"{t} {n}" for t, n in sorted(types.items()))
        lines.append(f"{year or '(no year)'}: {len(cards)} gift(s) ({breakdown})")
    return lines
