"""
CLI Phase 3: Execute pipeline orchestration.
"""

from __future__ import annotations

from typing import List

from .cli_config import UserConfig
from .csv_codec import load_from_csv
from .logging_utils import LOG, dataset_log
from .pipeline import run_dataset
from .shared import DatasetWork, emit_work_status
from .views import summarize


def _log_summary(work: DatasetWork) -> None:
    spec = work.spec
    log = dataset_log(spec.name)
    for line in summarize(load_from_csv(spec.output), spec.kind):
        log.info("  %s", line)


def execute_pipeline(config: UserConfig) -> int:
    """
    Phase 3: Run every selected dataset.

    Datasets are independent: a validation failure in one does not stop
    the next. Exceptions (missing source page, write failure) propagate
    to the caller and abandon the remaining datasets.

    Returns exit code (0 = success, 1 = a dataset failed and strict is set).
    """
    failed: List[str] = []
    for spec in config.datasets:
        work = run_dataset(spec, roundtrip=config.roundtrip)
        LOG.info(emit_work_status(work))
        if config.summary and work.written:
            _log_summary(work)
        if not work.has_no_errors():
            failed.append(spec.name)

    if failed:
        LOG.warning("Datasets with errors (output not updated or unverified): %s", ", ".join(failed))
        if config.strict:
            return 1
    return 0
