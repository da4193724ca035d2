#!/usr/bin/env python3
"""
Validation Result Models

This module contains the data structures returned by the validation
engine: per-key errors and the combined result of one validation pass.
"""

from enum import Enum
from typing import Any, Dict, List, NamedTuple


class ErrorKind(str, Enum):
    """Reason a single configuration key failed validation."""

    MISSING_REQUIRED = "missing_required"
    TYPE_MISMATCH = "type_mismatch"
    UNSUPPORTED_TYPE = "unsupported_type"


class FieldError(NamedTuple):
    """
    A validation failure attributed to one schema key.

    Attributes:
        key: Schema key that failed
        kind: Failure reason
        message: Human-readable message for the report
    """

    key: str
    kind: ErrorKind
    message: str


class ValidationResult(NamedTuple):
    """
    Outcome of validating an environment against a schema.

    Attributes:
        config: Coerced values for every key that resolved successfully
        field_errors: Errors in schema key order
    """

    config: Dict[str, Any]
    field_errors: List[FieldError]

    @property
    def errors(self) -> List[str]:
        """Ordered error messages (the error report)."""
        return [error.message for error in self.field_errors]

    @property
    def ok(self) -> bool:
        """True when no key failed and the config may be used."""
        return not self.field_errors
