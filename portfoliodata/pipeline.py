"""
Per-dataset pipeline.

Runs one dataset through Extract -> Verify -> Save -> Roundtrip and
records the outcome of each step on a DatasetWork item:

- I/O problems reading the source page propagate (they abort the run)
- validation failures are recorded and leave the output CSV untouched
- degraded rows/cards are logged as warnings and never fail the dataset
"""

from __future__ import annotations

from typing import Optional

from .csv_codec import load_from_csv, save_to_csv
from .errors import CsvFormatError
from .extractors import RecordExtractor, get_extractor, read_html
from .logging_utils import dataset_log
from .shared import DatasetSpec, DatasetWork, StepName
from .verifiers import RecordSchemaVerifier, RecordVerifier, RoundtripVerifier


def extract_dataset(work: DatasetWork, extractor: Optional[RecordExtractor] = None) -> DatasetWork:
    spec = work.spec
    log = dataset_log(spec.name)
    if extractor is None:
        extractor = get_extractor(spec.name)
    if extractor is None:
        raise ValueError(f"unknown extractor: {spec.name}")

    log.debug("reading %s", spec.source)
    html = read_html(spec.source)
    records, warnings = extractor.extract_with_warnings(html)

    work.records = records
    work.ensure_step_status(StepName.Extract)
    for warning in warnings:
        log.warning("%s", warning)
        work.add_warning(StepName.Extract, warning)
    log.debug("extracted %d record(s)", len(records))
    return work


def verify_dataset(work: DatasetWork, verifier: Optional[RecordVerifier] = None) -> DatasetWork:
    spec = work.spec
    log = dataset_log(spec.name)
    verifier = verifier or RecordSchemaVerifier()
    result = verifier.verify(work.records, spec.kind)

    work.ensure_step_status(StepName.Verify)
    for err in result.errors:
        work.add_error(StepName.Verify, err)
    for warn in result.warnings:
        work.add_warning(StepName.Verify, warn)
    if not result.ok:
        log.error("validation failed: %s", "; ".join(result.errors))
    return work


def save_dataset(work: DatasetWork) -> DatasetWork:
    spec = work.spec
    log = dataset_log(spec.name)
    work.ensure_step_status(StepName.Save)
    if not work.records:
        message = "no records extracted; output left untouched"
        log.warning("%s: %s", message, spec.output)
        work.add_warning(StepName.Save, message)
        return work

    work.written = save_to_csv(work.records, spec.output, fields=spec.kind.fields)
    log.info("saved %d record(s) to %s", len(work.records), spec.output)
    return work


def verify_roundtrip(work: DatasetWork) -> DatasetWork:
    """Reload the written CSV and compare it with the extracted records."""
    spec = work.spec
    log = dataset_log(spec.name)
    work.ensure_step_status(StepName.Roundtrip)
    try:
        loaded = load_from_csv(spec.output)
    except CsvFormatError as e:
        work.add_error(StepName.Roundtrip, f"roundtrip: {e}")
        log.error("roundtrip reload failed: %s", e)
        return work

    result = RoundtripVerifier().verify(work.records, spec.kind, target_records=loaded)
    for err in result.errors:
        work.add_error(StepName.Roundtrip, err)
    for warn in result.warnings:
        work.add_warning(StepName.Roundtrip, warn)
    if not result.ok:
        log.error("roundtrip mismatch: %s", "; ".join(result.errors))
    return work


def run_dataset(
    spec: DatasetSpec,
    *,
    roundtrip: bool = True,
    extractor: Optional[RecordExtractor] = None,
    verifier: Optional[RecordVerifier] = None,
) -> DatasetWork:
    """
    Run one dataset end to end.

    Returns:
        DatasetWork with per-step errors/warnings; `written` tells whether
        the output CSV was overwritten.

    Raises:
        MissingSourceFile: If the source page is missing or unreadable
        OSError: If the output CSV cannot be written
    """
    work = DatasetWork(spec=spec)
    work = extract_dataset(work, extractor)

    work = verify_dataset(work, verifier)
    if not work.has_no_errors(StepName.Verify):
        return work

    work = save_dataset(work)
    if roundtrip and work.written:
        work = verify_roundtrip(work)
    return work
