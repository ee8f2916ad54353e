"""
Domain models and value objects.

Contains request/result models for the BigValue computation interface.
"""

from src.core.domain.computation import (
    COMPARE_RESULTS,
    DECIMAL_PATTERN,
    SCHEMA_VERSION,
    ComputationRequest,
    ComputationResult,
    ErrorKind,
    Operation,
)

__all__ = [
    # Constants
    "COMPARE_RESULTS",
    "DECIMAL_PATTERN",
    "SCHEMA_VERSION",
    # Enums
    "ErrorKind",
    "Operation",
    # Models
    "ComputationRequest",
    "ComputationResult",
]
