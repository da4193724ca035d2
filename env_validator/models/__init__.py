#!/usr/bin/env python3
"""
Data Models Module

This module contains all data structures and type definitions used
throughout the environment validator.
"""

from .schema import FieldType, SchemaDescriptor, resolve_field_type
from .result import ErrorKind, FieldError, ValidationResult

__all__ = [
    "FieldType",
    "SchemaDescriptor",
    "resolve_field_type",
    "ErrorKind",
    "FieldError",
    "ValidationResult",
]
