"""
Schema file helpers for the command-line interface.

Schemas on disk are JSON objects mapping each key to a type name or to a
descriptor object, for example::

    {"PORT": "number", "HOST": {"type": "string", "default": "localhost", "required": false}}
"""

import json
from pathlib import Path
from typing import Any, Dict

from ..config.errors import SchemaFileError
from ..constants import FILE_ENCODING


def load_schema_file(path: str) -> Dict[str, Any]:
    """
    Read a JSON schema file.

    Args:
        path: Path to the schema file

    Returns:
        Mapping of key to schema entry, in file order

    Raises:
        SchemaFileError: If the file is missing, unreadable, not JSON or not an object
    """
    try:
        text = Path(path).read_text(encoding=FILE_ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaFileError(f"Unable to read schema file {path}: {e}") from e

    try:
        schema = json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaFileError(f"Invalid JSON in schema file {path}: {e}") from e

    if not isinstance(schema, dict):
        raise SchemaFileError(f"Schema file {path} must contain a JSON object")

    return schema
