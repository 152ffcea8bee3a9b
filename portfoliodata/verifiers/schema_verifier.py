"""
Shape verifier for extracted records.

Checks that every record carries all field names of its kind. Values are
never inspected: an empty string is a valid value, a missing key is not.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List

from ..shared import RecordKind, VerificationResult
from .base import RecordVerifier


class RecordSchemaVerifier(RecordVerifier):
    """
    Verifier that gates records on their kind's field schema.

    An empty sequence passes; whether zero records is acceptable is left
    to the caller.
    """

    def verify(self, records: Any, kind: RecordKind, **kwargs) -> VerificationResult:
        if not isinstance(records, (list, tuple)):
            return VerificationResult(ok=False, errors=["records must be a list"], warnings=[])

        errs: List[str] = []
        for idx, record in enumerate(records):
            if not isinstance(record, Mapping):
                errs.append(f"record {idx} must be a mapping")
                continue
            missing = [name for name in kind.fields if name not in record]
            if missing:
                errs.append(f"record {idx} missing fields: {', '.join(missing)}")

        return VerificationResult(ok=not errs, errors=errs, warnings=[])


def validate(records: Any, kind: RecordKind) -> bool:
    """True when records is a sequence whose every record has all fields of kind."""
    return RecordSchemaVerifier().verify(records, kind).ok
