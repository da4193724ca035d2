"""
Environment validation boundary layer.

This module joins the environment loader and the validation engine and
decides what happens when validation fails. The same engine serves two
postures, selected with FailurePolicy:

- HALT: log a consolidated report and terminate the process (application startup)
- RAISE: raise a single EnvValidationError (embedding frameworks and tests)
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional

from ..constants import DEFAULT_ENV_FILE, EXIT_CONFIG_ERROR, MASKED_VALUE
from ..core import normalize_schema, validate_normalized
from ..core.normalizer import Schema
from ..models import FieldError, FieldType
from .errors import EnvironmentSourceError, EnvValidationError, format_report_lines
from .loader import PathLike, load_environment

logger = logging.getLogger(__name__)


class FailurePolicy(str, Enum):
    """How the boundary layer reacts to a failed validation."""

    HALT = "halt"
    RAISE = "raise"


def report_errors(field_errors: list[FieldError]) -> None:
    """Log the consolidated validation report at ERROR level."""
    for line in format_report_lines(error.message for error in field_errors):
        logger.error(line)


def _fail(field_errors: list[FieldError], policy: FailurePolicy) -> None:
    if policy is FailurePolicy.RAISE:
        raise EnvValidationError(field_errors)
    report_errors(field_errors)
    sys.exit(EXIT_CONFIG_ERROR)


def validate_env(
    schema: Schema,
    env_file: Optional[PathLike] = DEFAULT_ENV_FILE,
    environ: Optional[Mapping[str, str]] = None,
    policy: FailurePolicy = FailurePolicy.HALT,
) -> Dict[str, Any]:
    """
    Load, validate and coerce the environment described by a schema.

    Args:
        schema: Mapping of key to type tag or descriptor, or an annotated class
        env_file: .env-style file overlaid on the ambient environment, or None
        environ: Ambient environment (defaults to os.environ)
        policy: HALT to exit the process on failure, RAISE to raise instead

    Returns:
        Mapping of every resolved schema key to its typed value

    Raises:
        EnvValidationError: If validation fails under the RAISE policy
        EnvironmentSourceError: If the file is unusable under the RAISE policy
        SystemExit: On any failure under the HALT policy
    """
    policy = FailurePolicy(policy)

    try:
        raw_environ = load_environment(env_file, environ)
    except EnvironmentSourceError as e:
        if policy is FailurePolicy.RAISE:
            raise
        logger.error(f"Failed to load environment file: {e}")
        sys.exit(EXIT_CONFIG_ERROR)

    result = validate_normalized(normalize_schema(schema), raw_environ)
    if not result.ok:
        _fail(result.field_errors, policy)

    logger.debug("Environment configuration validated successfully")
    return result.config


def create_validator(
    schema: Schema,
    policy: FailurePolicy = FailurePolicy.RAISE,
) -> Callable[[Mapping[str, Optional[str]]], Dict[str, Any]]:
    """
    Build a reusable validation hook for an embedding framework.

    The schema is normalized once; the returned callable validates whatever
    mapping the framework hands it, without reading any file.

    Args:
        schema: Mapping of key to type tag or descriptor, or an annotated class
        policy: Failure policy for the hook (RAISE by default)

    Returns:
        Callable taking a raw mapping and returning the typed config
    """
    normalized = normalize_schema(schema)
    policy = FailurePolicy(policy)

    def validator(environ: Mapping[str, Optional[str]]) -> Dict[str, Any]:
        result = validate_normalized(normalized, environ)
        if not result.ok:
            _fail(result.field_errors, policy)
        return result.config

    return validator


def mask_config(schema: Schema, config: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Return a copy of config that is safe to log.

    String values are replaced with a placeholder; numbers and booleans are
    kept since they rarely carry credentials.
    """
    normalized = normalize_schema(schema)
    masked: Dict[str, Any] = {}
    for key, value in config.items():
        descriptor = normalized.get(key)
        if descriptor is not None and descriptor.field_type is FieldType.STRING:
            masked[key] = MASKED_VALUE
        else:
            masked[key] = value
    return masked
