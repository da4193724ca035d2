"""
Logging utilities for the environment validator.

This module provides centralized logging configuration so the command-line
interface and embedding applications report validation failures the same way.
"""

import logging


def setup_logging(verbose: bool = False):
    """Setup logging configuration with appropriate level and format."""
    level = logging.DEBUG if verbose else logging.INFO
    format_string = "%(asctime)s - %(levelname)s - %(message)s"

    logging.basicConfig(level=level, format=format_string, datefmt="%Y-%m-%d %H:%M:%S")
