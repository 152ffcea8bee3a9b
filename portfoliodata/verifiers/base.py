"""
Base interface for record verifiers.

Defines the contract for pluggable record verification implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ..shared import RecordKind, VerificationResult


class RecordVerifier(ABC):
    """
    Abstract base class for record verifiers.

    Implementations check a record sequence in different ways, such as
    shape validation against the kind's schema or comparisons between
    two sequences.
    """

    @abstractmethod
    def verify(self, records: Any, kind: RecordKind, **kwargs) -> VerificationResult:
        """
        Verify a record sequence of the given kind.

        Args:
            records: The sequence to check (may be malformed input)
            kind: Record kind whose schema applies
            **kwargs: Verifier-specific arguments

        Returns:
            VerificationResult with errors for failures and warnings for
            suspicious but acceptable input
        """
        ...
