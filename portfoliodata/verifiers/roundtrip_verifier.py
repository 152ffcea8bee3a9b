"""
Roundtrip verifier for record sequences.

Validates that records read back from CSV are identical to the records
that were written, field by field.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from ..shared import Record, RecordKind, VerificationResult
from .base import RecordVerifier


class RoundtripVerifier(RecordVerifier):
    """
    Verifier comparing written records with their reloaded counterparts.

    Only the kind's declared fields are compared; all values are strings
    on both sides, so no coercion happens.
    """

    def verify(
        self,
        records: Any,
        kind: RecordKind,
        *,
        target_records: Optional[Sequence[Record]] = None,
        **kwargs,
    ) -> VerificationResult:
        if target_records is None:
            return VerificationResult(ok=False, errors=["roundtrip target records are not set"], warnings=[])

        errs: List[str] = []
        if len(records) != len(target_records):
            errs.append(f"record count differs: {len(records)} != {len(target_records)}")

        for idx, (source, target) in enumerate(zip(records, target_records)):
            for name in kind.fields:
                if name not in target:
                    errs.append(f"record {idx} field '{name}' missing")
                elif source.get(name, "") != target[name]:
                    errs.append(f"record {idx} field '{name}' differs")

        extra = sorted(set().union(*(t.keys() for t in target_records)) - set(kind.fields)) if target_records else []
        warns = [f"unexpected columns: {', '.join(extra)}"] if extra else []
        return VerificationResult(ok=not errs, errors=errs, warnings=warns)
