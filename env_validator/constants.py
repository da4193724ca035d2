#!/usr/bin/env python3
"""
Application Constants

This module contains the exit codes and defaults shared by the
validation boundary layer and the command-line interface.
"""

# Exit codes for different failure modes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1  # Validation failed or the environment file was unusable
EXIT_INPUT_ERROR = 2  # Schema file missing or malformed (CLI only)

# Environment file defaults
DEFAULT_ENV_FILE = ".env"
FILE_ENCODING = "utf-8"

# Report formatting
REPORT_HEADER = "Environment validation failed:"
REPORT_BULLET = "- "
MASKED_VALUE = "***"
