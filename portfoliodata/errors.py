"""
Exception types raised by portfoliodata.

Validation failures are not exceptions; they are reported through
VerificationResult and recorded on the dataset's work item.
"""

from __future__ import annotations


class PortfolioDataError(Exception):
    """Base class for portfoliodata errors."""


class MissingSourceFile(PortfolioDataError, FileNotFoundError):
    """Raised when a source HTML page does not exist or cannot be read."""


class CSVTargetMissing(PortfolioDataError, FileNotFoundError):
    """Raised when a CSV file to load does not exist."""


class CsvFormatError(PortfolioDataError, ValueError):
    """Raised for malformed CSV text or records that do not fit the columns."""
