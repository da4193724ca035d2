"""
Exception hierarchy for environment loading and validation.

Per-key problems (missing values, type mismatches, unsupported types) are
never raised individually; they are collected by the engine and surface
only through EnvValidationError as one consolidated report.
"""

from typing import Iterable, List

from ..constants import REPORT_BULLET, REPORT_HEADER
from ..models import FieldError


class ConfigError(Exception):
    """Base class for configuration loading and validation failures."""
    pass


class EnvironmentSourceError(ConfigError):
    """Raised when the environment file is missing, unreadable or malformed."""
    pass


class SchemaFileError(ConfigError):
    """Raised when a schema file cannot be read or decoded."""
    pass


def format_report_lines(messages: Iterable[str]) -> List[str]:
    """Build the report: a header line followed by one bullet per message."""
    return [REPORT_HEADER] + [f"{REPORT_BULLET}{message}" for message in messages]


class EnvValidationError(ConfigError):
    """
    Raised when validation fails under the raise policy.

    The message lists every error found in the pass, one per line.

    Attributes:
        field_errors: FieldError entries in schema key order
    """

    def __init__(self, field_errors: Iterable[FieldError]):
        self.field_errors = list(field_errors)
        super().__init__("\n".join(format_report_lines(self.errors)))

    @property
    def errors(self) -> List[str]:
        """Error messages in schema key order."""
        return [error.message for error in self.field_errors]
