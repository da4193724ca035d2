"""Package metadata for env_validator."""

__version__ = "1.0.0"
__author__ = "env-validator contributors"
__description__ = (
    "Schema-driven environment variable loading and validation"
)
__license__ = "MIT"
