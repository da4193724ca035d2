"""
Environment loading and validation boundary.

This module provides the public entry points that read the process
environment and an optional .env file, run the validation engine, and turn
failures into either a process halt or a raised error.
"""

from .errors import (
    ConfigError,
    EnvironmentSourceError,
    EnvValidationError,
    SchemaFileError,
)
from .loader import load_environment, read_env_file
from .env import FailurePolicy, create_validator, mask_config, validate_env

__all__ = [
    "ConfigError",
    "EnvironmentSourceError",
    "EnvValidationError",
    "SchemaFileError",
    "load_environment",
    "read_env_file",
    "FailurePolicy",
    "create_validator",
    "mask_config",
    "validate_env",
]
