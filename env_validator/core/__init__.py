"""
Core validation package for the environment validator.

This package contains the schema normalizer, the value coercion rules and
the collect-all validation engine. Nothing here performs I/O.
"""

from .normalizer import is_required, normalize_entry, normalize_schema
from .coercion import parse_boolean, parse_number
from .engine import is_missing, validate, validate_normalized

__all__ = [
    # Schema normalization
    "is_required",
    "normalize_entry",
    "normalize_schema",
    # Coercion
    "parse_boolean",
    "parse_number",
    # Engine
    "is_missing",
    "validate",
    "validate_normalized",
]
