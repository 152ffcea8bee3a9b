# portfoliodata/__init__.py

from .csv_codec import deserialize, load_from_csv, save_to_csv, serialize
from .errors import CSVTargetMissing, CsvFormatError, MissingSourceFile, PortfolioDataError
from .extractors import extract_career_records, extract_thanks_records
from .shared import CAREER_FIELDS, THANKS_FIELDS, DatasetSpec, Record, RecordKind
from .verifiers import validate

__all__ = [
    "extract_career_records",
    "extract_thanks_records",
    "validate",
    "serialize",
    "deserialize",
    "save_to_csv",
    "load_from_csv",
    "RecordKind",
    "Record",
    "CAREER_FIELDS",
    "THANKS_FIELDS",
    "DatasetSpec",
    "PortfolioDataError",
    "MissingSourceFile",
    "CSVTargetMissing",
    "CsvFormatError",
]
