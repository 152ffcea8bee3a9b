"""
CSV codec for record sequences.

Records are written with a header row and read back as header-keyed
dicts of strings. Values are never coerced: every cell is a string on
both sides, so serialize -> deserialize returns the original records for
plain-text values.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import List, Optional, Sequence

from .errors import CSVTargetMissing, CsvFormatError
from .logging_utils import LOG
from .shared import Record

LINE_TERMINATOR = "\n"


def serialize(records: Sequence[Record], fields: Optional[Sequence[str]] = None) -> str:
    """
    Serialize records to CSV text with a header row.

    Columns are `fields` when given, otherwise the key order of the first
    record. Keys missing from a record are written as "".

    Returns:
        CSV text, or "" (no header) for an empty sequence.

    Raises:
        CsvFormatError: If a record has keys outside the column list
    """
    if not records:
        return ""

    columns = list(fields) if fields is not None else list(records[0].keys())
    buf = io.StringIO()
    writer = csv.DictWriter(
        buf,
        fieldnames=columns,
        restval="",
        extrasaction="raise",
        lineterminator=LINE_TERMINATOR,
    )
    writer.writeheader()
    for idx, record in enumerate(records):
        try:
            writer.writerow(record)
        except ValueError as e:
            raise CsvFormatError(f"record {idx} does not fit columns: {e}") from e
    return buf.getvalue()


def deserialize(text: str) -> List[Record]:
    """
    Parse CSV text into records.

    The first non-empty row is the header; cells and header names are
    trimmed, empty lines are skipped and a leading BOM is ignored.

    Raises:
        CsvFormatError: If the CSV is malformed or a row's cell count
            differs from the header's
    """
    if text.startswith("\ufeff"):
        text = text[1:]

    reader = csv.reader(io.StringIO(text, newline=""))
    header: Optional[List[str]] = None
    records: List[Record] = []
    try:
        for row in reader:
            if not row:
                continue
            cells = [cell.strip() for cell in row]
            if header is None:
                if len(set(cells)) != len(cells):
                    raise CsvFormatError(f"duplicate column names in header: {cells}")
                header = cells
                continue
            if len(cells) != len(header):
                raise CsvFormatError(
                    f"line {reader.line_num}: expected {len(header)} cells, got {len(cells)}"
                )
            records.append(dict(zip(header, cells)))
    except csv.Error as e:
        raise CsvFormatError(f"line {reader.line_num}: {e}") from e
    return records


def save_to_csv(records: Sequence[Record], path: Path, fields: Optional[Sequence[str]] = None) -> bool:
    """
    Write records to a CSV file, overwriting it.

    An empty sequence is a no-op: no file is created and False is returned.
    The text is serialized completely before the file is opened, so a
    serialization error never leaves a partial file behind.
    """
    path = Path(path)
    if not records:
        LOG.debug("Nothing to write to %s", path)
        return False

    text = serialize(records, fields)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(text)
    return True


def load_from_csv(path: Path) -> List[Record]:
    """
    Load records from a CSV file.

    Raises:
        CSVTargetMissing: If the file does not exist
        CsvFormatError: If the file is malformed
    """
    path = Path(path)
    if not path.exists():
        raise CSVTargetMissing(f"File not found: {path}")
    with path.open("r", encoding="utf-8-sig", newline="") as f:
        return deserialize(f.read())
