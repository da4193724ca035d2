"""
CLI argument parser module.

This module builds the argument parser for the env-validator command.
"""

from argparse import ArgumentParser

from ..constants import DEFAULT_ENV_FILE


def create_argument_parser() -> ArgumentParser:
    """Create and configure the argument parser."""
    parser = ArgumentParser(
        prog="env-validator",
        description="Validate environment variables against a JSON schema",
        epilog="""
Examples:
  env-validator --schema env.schema.json
  env-validator --schema env.schema.json --env-file .env.production
  env-validator --schema env.schema.json --no-env-file --mask
            """,
    )

    parser.add_argument(
        "--schema",
        required=True,
        help="JSON file mapping each key to a type name or descriptor object",
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--env-file",
        default=DEFAULT_ENV_FILE,
        help=f"Environment file overlaid on the process environment (default: {DEFAULT_ENV_FILE}, optional)",
    )
    source.add_argument(
        "--no-env-file",
        action="store_true",
        help="Validate the process environment only",
    )

    parser.add_argument(
        "--mask",
        action="store_true",
        help="Hide string values when printing the validated configuration",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging (DEBUG level)",
    )

    return parser
