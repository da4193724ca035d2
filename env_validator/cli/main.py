"""
CLI main application module.

This module contains the command-line entry point: it reads a schema file,
validates the environment with the halt policy and prints the typed
configuration as JSON.
"""

import json
import logging
import sys
from typing import List, Optional

from ..config import FailurePolicy, SchemaFileError, mask_config, validate_env
from ..constants import EXIT_INPUT_ERROR
from ..utils import load_schema_file, setup_logging
from .parser import create_argument_parser

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None):
    """Main entry point for the script."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)

    try:
        schema = load_schema_file(args.schema)
    except SchemaFileError as e:
        logger.error(f"Schema error: {e}")
        sys.exit(EXIT_INPUT_ERROR)

    env_file = None if args.no_env_file else args.env_file

    # Exits with EXIT_CONFIG_ERROR after logging the report on failure
    config = validate_env(schema, env_file=env_file, policy=FailurePolicy.HALT)

    if args.mask:
        config = mask_config(schema, config)

    try:
        output = json.dumps(config, indent=2, allow_nan=False)
    except ValueError as e:
        logger.error(f"Configuration cannot be written as JSON: {e}")
        sys.exit(EXIT_INPUT_ERROR)

    print(output)
    logger.info(f"Environment valid: {len(config)} key(s) resolved")
