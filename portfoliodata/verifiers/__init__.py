"""
Record verification interfaces and implementations.
"""

from .base import RecordVerifier
from .schema_verifier import RecordSchemaVerifier, validate
from .roundtrip_verifier import RoundtripVerifier

__all__ = [
    "RecordVerifier",
    "RecordSchemaVerifier",
    "RoundtripVerifier",
    "validate",
]
