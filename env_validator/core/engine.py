"""
Validation engine.

This module resolves every key of a normalized schema against a raw
environment mapping in a single pass. It collects every failure instead of
stopping at the first one, and it never raises for bad data: deciding what
to do with a failed result is left to the caller.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from ..models import (
    ErrorKind,
    FieldError,
    FieldType,
    SchemaDescriptor,
    ValidationResult,
)
from .coercion import parse_boolean, parse_number
from .normalizer import Schema, normalize_schema

logger = logging.getLogger(__name__)

RawEnvironment = Mapping[str, Optional[str]]


def is_missing(raw: Optional[str]) -> bool:
    """A value is missing when absent or blank (an empty string)."""
    return raw is None or raw == ""


def missing_required_error(key: str) -> FieldError:
    return FieldError(key, ErrorKind.MISSING_REQUIRED, f"Missing required field: {key}")


def type_mismatch_error(key: str, field_type: FieldType) -> FieldError:
    return FieldError(key, ErrorKind.TYPE_MISMATCH, f"{key} should be a {field_type.value}")


def unsupported_type_error(key: str) -> FieldError:
    return FieldError(key, ErrorKind.UNSUPPORTED_TYPE, f"{key} has an unsupported type")


def coerce_value(key: str, raw: str, descriptor: SchemaDescriptor) -> Any:
    """
    Convert a present raw value to the descriptor's declared type.

    Args:
        key: Schema key being resolved
        raw: Non-empty raw string from the environment
        descriptor: Canonical descriptor for the key

    Returns:
        The coerced value, or a FieldError describing why it was rejected
    """
    field_type = descriptor.field_type

    if field_type is FieldType.NUMBER:
        try:
            return parse_number(raw)
        except ValueError:
            return type_mismatch_error(key, field_type)

    if field_type is FieldType.BOOLEAN:
        try:
            return parse_boolean(raw)
        except ValueError:
            return type_mismatch_error(key, field_type)

    if field_type is FieldType.STRING:
        return raw

    return unsupported_type_error(key)


def validate_normalized(
    schema: Mapping[str, SchemaDescriptor], environ: RawEnvironment
) -> ValidationResult:
    """
    Validate an environment against an already-normalized schema.

    Args:
        schema: Mapping of key to SchemaDescriptor, in report order
        environ: Raw environment mapping (key to string or None)

    Returns:
        ValidationResult holding the typed config and every error found
    """
    config: Dict[str, Any] = {}
    errors: List[FieldError] = []

    for key, descriptor in schema.items():
        raw = environ.get(key)

        if is_missing(raw):
            if descriptor.required:
                errors.append(missing_required_error(key))
            elif descriptor.has_default:
                config[key] = descriptor.default
            continue

        value = coerce_value(key, raw, descriptor)
        if isinstance(value, FieldError):
            errors.append(value)
        else:
            config[key] = value

    if errors:
        logger.debug(f"Validation found {len(errors)} error(s) across {len(schema)} key(s)")
    else:
        logger.debug(f"Validated {len(config)} of {len(schema)} key(s)")

    return ValidationResult(config=config, field_errors=errors)


def validate(schema: Schema, environ: RawEnvironment) -> ValidationResult:
    """
    Normalize a schema and validate an environment against it.

    Args:
        schema: Mapping of key to type tag or descriptor, or an annotated class
        environ: Raw environment mapping

    Returns:
        ValidationResult for the whole schema
    """
    return validate_normalized(normalize_schema(schema), environ)
