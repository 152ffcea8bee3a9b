"""
Logging helpers for portfoliodata.

Defines the package logger and simple utilities for configuring
console and optional file logging.
"""

from __future__ import annotations

import logging
from typing import List, Optional

LOG = logging.getLogger("portfoliodata")

# Verbosity levels
VERBOSITY_QUIET = 0    # Warnings and errors only
VERBOSITY_NORMAL = 1   # Per-dataset status lines (CLI default)
VERBOSITY_VERBOSE = 2  # Detailed debug output


def _console_formatter(verbosity: int) -> logging.Formatter:
    if verbosity >= VERBOSITY_NORMAL:
        return logging.Formatter("%(levelname)s: %(message)s")
    return logging.Formatter("%(message)s")


def setup_logging(debug: bool, log_file: Optional[str] = None, verbosity: int = VERBOSITY_NORMAL) -> None:
    """
    Setup logging with verbosity control.

    Args:
        debug: Forces VERBOSITY_VERBOSE when set
        log_file: Optional log file path
        verbosity: Verbosity level (0=quiet, 1=normal, 2=verbose)
    """
    if debug:
        verbosity = VERBOSITY_VERBOSE

    if verbosity >= VERBOSITY_VERBOSE:
        level = logging.DEBUG
    elif verbosity >= VERBOSITY_NORMAL:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Handlers may already be installed (e.g., by pytest); only adjust them then
    if logging.root.handlers:
        for handler in logging.root.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                handler.setLevel(level)
                handler.setFormatter(_console_formatter(verbosity))
        logging.root.setLevel(level)
    else:
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(_console_formatter(verbosity))
        handlers: List[logging.Handler] = [console]
        logging.basicConfig(level=level, handlers=handlers, force=True)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # always full detail in file
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logging.root.addHandler(file_handler)


class DatasetLogAdapter(logging.LoggerAdapter):
    """Prefixes every message with the dataset name, e.g. "[career] saved 2 record(s)"."""

    def process(self, msg, kwargs):
        return f"[{self.extra['dataset']}] {msg}", kwargs


def dataset_log(name: str) -> DatasetLogAdapter:
    """Logger for messages about one dataset run."""
    return DatasetLogAdapter(LOG, {"dataset": name})


def fmt_issues(errors: List[str], warnings: List[str]) -> str:
    """
    Compact error/warning string for the one-line-per-dataset status log.
    """
    parts: List[str] = []
    if errors:
        parts.append("errors: " + ", ".join(errors))
    if warnings:
        parts.append("warnings: " + ", ".join(warnings))
    return " | ".join(parts) if parts else "-"
