"""
Environment source loading.

This module builds the raw environment mapping the engine validates: the
ambient process environment overlaid with key/value pairs read from a
.env-style file. Values from the file take precedence over the ambient
environment for the keys the file defines.

Missing-file policy: the conventional ``.env`` file is optional and its
absence only falls back to the ambient environment. Any other explicitly
named file must exist.
"""

import logging
import os
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from dotenv.parser import parse_stream

from ..constants import DEFAULT_ENV_FILE, FILE_ENCODING
from .errors import EnvironmentSourceError

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def is_default_env_file(env_file: PathLike) -> bool:
    """Whether env_file names the conventional, optional .env file."""
    return Path(env_file) == Path(DEFAULT_ENV_FILE)


def read_env_file(path: PathLike) -> Dict[str, Optional[str]]:
    """
    Parse a .env-style file into a flat mapping.

    Variable interpolation is not performed. A key listed without a value
    maps to None.

    Args:
        path: Path to the file

    Returns:
        Mapping of key to raw value, in file order

    Raises:
        EnvironmentSourceError: If the file cannot be read or a line is malformed
    """
    try:
        with open(path, encoding=FILE_ENCODING) as f:
            bindings = list(parse_stream(f))
    except (OSError, UnicodeDecodeError) as e:
        raise EnvironmentSourceError(f"Unable to read {path}: {e}") from e

    values: Dict[str, Optional[str]] = {}
    for binding in bindings:
        if binding.error:
            line = binding.original.string.strip()
            raise EnvironmentSourceError(
                f"Malformed line {binding.original.line} in {path}: {line!r}"
            )
        if binding.key is None:
            # Blank lines and comments
            continue
        values[binding.key] = binding.value

    logger.debug(f"Read {len(values)} value(s) from {path}")
    return values


def load_environment(
    env_file: Optional[PathLike] = DEFAULT_ENV_FILE,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Optional[str]]:
    """
    Build the raw environment for one validation call.

    Args:
        env_file: File to overlay on the ambient environment, or None to skip
        environ: Ambient environment (defaults to a snapshot of os.environ)

    Returns:
        Merged mapping; file values win over ambient ones

    Raises:
        EnvironmentSourceError: If an explicitly named file does not exist, or
            any existing file cannot be parsed
    """
    merged: Dict[str, Optional[str]] = dict(os.environ if environ is None else environ)

    if env_file is None:
        logger.debug("Environment file loading disabled, using ambient environment")
        return merged

    if not Path(env_file).exists():
        if is_default_env_file(env_file):
            logger.debug(f"{env_file} file not found, using ambient environment")
            return merged
        raise EnvironmentSourceError(f"Environment file not found: {env_file}")

    file_values = read_env_file(env_file)
    merged.update({key: value for key, value in file_values.items() if value is not None})
    logger.debug(f"Loaded configuration from {env_file}")
    return merged
