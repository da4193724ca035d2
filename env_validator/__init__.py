#!/usr/bin/env python3
"""
Environment Validator Package

A Python package for loading environment variables from the process
environment and an optional .env file, validating them against a declarative
schema and coercing them to typed values.

Every problem is collected in one pass, so a deployer sees the complete list
of misconfigurations at once. Failures either halt the process or raise a
single error, depending on the chosen policy.
"""

from ._version import (
    __version__,
    __author__,
    __description__,
    __license__,
)

# Import models for public API
from .models import (
    FieldType,
    SchemaDescriptor,
    ErrorKind,
    FieldError,
    ValidationResult,
)

# Import constants for public API
from .constants import (
    EXIT_SUCCESS,
    EXIT_CONFIG_ERROR,
    EXIT_INPUT_ERROR,
    DEFAULT_ENV_FILE,
)

# Import core functionality for public API
from .core import (
    normalize_schema,
    validate,
)

# Import boundary layer for public API
from .config import (
    ConfigError,
    EnvironmentSourceError,
    EnvValidationError,
    FailurePolicy,
    create_validator,
    load_environment,
    validate_env,
)

# Import CLI functionality for public API
from .cli import (
    main,
)

# Public API exports
__all__ = [
    # Package metadata
    "__version__",
    "__author__",
    "__description__",
    # Data models
    "FieldType",
    "SchemaDescriptor",
    "ErrorKind",
    "FieldError",
    "ValidationResult",
    # Constants
    "EXIT_SUCCESS",
    "EXIT_CONFIG_ERROR",
    "EXIT_INPUT_ERROR",
    "DEFAULT_ENV_FILE",
    # Core functionality
    "normalize_schema",
    "validate",
    # Boundary layer
    "ConfigError",
    "EnvironmentSourceError",
    "EnvValidationError",
    "FailurePolicy",
    "create_validator",
    "load_environment",
    "validate_env",
    # CLI
    "main",
]
