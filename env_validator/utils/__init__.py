"""
Utilities module for the environment validator.

This module provides shared utility functions organized by concern:
- Logging utilities for consistent logging setup
- Schema file reading for the command-line interface
"""

# Logging utilities
from .logging import setup_logging

# Schema file utilities
from .schema_file import load_schema_file

__all__ = [
    "setup_logging",
    "load_schema_file",
]
