"""
Tests for the validation boundary layer.

This module tests validate_env under both failure policies, the embedded
validator hook and configuration masking.
"""

import os
import shutil
import tempfile
import unittest
from unittest.mock import patch

from env_validator.config import (
    ConfigError,
    EnvironmentSourceError,
    EnvValidationError,
    FailurePolicy,
    create_validator,
    mask_config,
    validate_env,
)
from env_validator.constants import EXIT_CONFIG_ERROR
from env_validator.models import ErrorKind

ENV_LOGGER = "env_validator.config.env"


class BoundaryTestCase(unittest.TestCase):
    """Base class running each test inside an empty temporary directory."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.original_cwd = os.getcwd()
        os.chdir(self.temp_dir)

    def tearDown(self):
        """Clean up after tests."""
        os.chdir(self.original_cwd)
        shutil.rmtree(self.temp_dir)

    def write_env_file(self, content: str, name: str = ".env") -> str:
        path = os.path.join(self.temp_dir, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path


class TestValidateEnvSuccess(BoundaryTestCase):
    """Test cases for successful validation."""

    def test_values_from_env_file(self):
        self.write_env_file("PORT=3000\nHOST=localhost\nDEBUG=true\n")
        schema = {"PORT": int, "HOST": str, "DEBUG": bool}

        config = validate_env(schema, environ={})

        self.assertEqual(config, {"PORT": 3000, "HOST": "localhost", "DEBUG": True})

    def test_defaults_applied(self):
        self.write_env_file("PORT=3000\n")
        schema = {
            "PORT": int,
            "HOST": {"type": str, "default": "localhost", "required": False},
            "DEBUG": {"type": bool, "default": False, "required": False},
        }

        config = validate_env(schema, environ={})

        self.assertEqual(config, {"PORT": 3000, "HOST": "localhost", "DEBUG": False})

    def test_custom_env_file(self):
        path = self.write_env_file("PORT=3000\n", name=".env.test")

        config = validate_env({"PORT": int}, env_file=path, environ={})

        self.assertEqual(config, {"PORT": 3000})

    @patch.dict(os.environ, {"PORT": "3000"}, clear=True)
    def test_process_environment_without_env_file(self):
        """Test that the ambient environment is used when no .env exists."""
        config = validate_env({"PORT": int})

        self.assertEqual(config, {"PORT": 3000})

    def test_class_schema(self):
        class AppSchema:
            PORT: int
            DEBUG: bool = False

        config = validate_env(AppSchema, env_file=None, environ={"PORT": "8000"})

        self.assertEqual(config, {"PORT": 8000, "DEBUG": False})

    def test_policy_accepts_string_values(self):
        config = validate_env({"PORT": int}, env_file=None, environ={"PORT": "1"}, policy="raise")
        self.assertEqual(config, {"PORT": 1})


class TestValidateEnvRaise(BoundaryTestCase):
    """Test cases for the raise policy."""

    def test_single_error_lists_every_problem(self):
        schema = {"PORT": int, "DEBUG": bool, "HOST": str}
        environ = {"PORT": "not-number", "DEBUG": "not-boolean"}

        with self.assertRaises(EnvValidationError) as cm:
            validate_env(schema, env_file=None, environ=environ, policy=FailurePolicy.RAISE)

        self.assertEqual(
            str(cm.exception),
            "Environment validation failed:\n"
            "- PORT should be a number\n"
            "- DEBUG should be a boolean\n"
            "- Missing required field: HOST",
        )
        self.assertEqual(
            cm.exception.errors,
            ["PORT should be a number", "DEBUG should be a boolean", "Missing required field: HOST"],
        )
        self.assertEqual(
            [e.kind for e in cm.exception.field_errors],
            [ErrorKind.TYPE_MISMATCH, ErrorKind.TYPE_MISMATCH, ErrorKind.MISSING_REQUIRED],
        )

    def test_validation_error_is_a_config_error(self):
        with self.assertRaises(ConfigError):
            validate_env({"PORT": int}, env_file=None, environ={}, policy=FailurePolicy.RAISE)

    def test_missing_explicit_file_raises(self):
        with self.assertRaises(EnvironmentSourceError) as cm:
            validate_env(
                {"PORT": int},
                env_file=".env.production",
                environ={"PORT": "1"},
                policy=FailurePolicy.RAISE,
            )
        self.assertIn("Environment file not found", str(cm.exception))

    def test_malformed_file_raises(self):
        self.write_env_file("=broken\n")

        with self.assertRaises(EnvironmentSourceError):
            validate_env({"PORT": int}, environ={"PORT": "1"}, policy=FailurePolicy.RAISE)


class TestValidateEnvHalt(BoundaryTestCase):
    """Test cases for the halt policy."""

    def test_missing_required_field_exits(self):
        with self.assertLogs(ENV_LOGGER, level="ERROR") as logs:
            with self.assertRaises(SystemExit) as cm:
                validate_env({"PORT": int}, environ={})

        self.assertEqual(cm.exception.code, EXIT_CONFIG_ERROR)
        self.assertEqual(
            logs.output,
            [
                f"ERROR:{ENV_LOGGER}:Environment validation failed:",
                f"ERROR:{ENV_LOGGER}:- Missing required field: PORT",
            ],
        )

    def test_every_type_error_logged(self):
        self.write_env_file("PORT=not-number\nDEBUG=not-boolean\n")

        with self.assertLogs(ENV_LOGGER, level="ERROR") as logs:
            with self.assertRaises(SystemExit):
                validate_env({"PORT": int, "DEBUG": bool}, environ={})

        self.assertIn(f"ERROR:{ENV_LOGGER}:- PORT should be a number", logs.output)
        self.assertIn(f"ERROR:{ENV_LOGGER}:- DEBUG should be a boolean", logs.output)

    def test_unsupported_type_logged(self):
        self.write_env_file("UNSUPPORTED=value\n")

        with self.assertLogs(ENV_LOGGER, level="ERROR") as logs:
            with self.assertRaises(SystemExit):
                validate_env({"UNSUPPORTED": "date"}, environ={})

        self.assertIn(f"ERROR:{ENV_LOGGER}:- UNSUPPORTED has an unsupported type", logs.output)

    def test_missing_explicit_file_exits(self):
        with self.assertLogs(ENV_LOGGER, level="ERROR") as logs:
            with self.assertRaises(SystemExit) as cm:
                validate_env({"PORT": int}, env_file=".env.production", environ={"PORT": "1"})

        self.assertEqual(cm.exception.code, EXIT_CONFIG_ERROR)
        self.assertIn("Environment file not found", logs.output[0])

    def test_malformed_file_exits(self):
        self.write_env_file("=broken\n")

        with self.assertLogs(ENV_LOGGER, level="ERROR") as logs:
            with self.assertRaises(SystemExit):
                validate_env({"PORT": int}, environ={"PORT": "1"})

        self.assertIn("Failed to load environment file", logs.output[0])


class TestCreateValidator(unittest.TestCase):
    """Test cases for the embedded validation hook."""

    def test_hook_returns_typed_config(self):
        validator = create_validator({"PORT": int, "DEBUG": bool})

        self.assertEqual(validator({"PORT": "1", "DEBUG": "false"}), {"PORT": 1, "DEBUG": False})

    def test_hook_raises_single_error(self):
        validator = create_validator({"PORT": int, "DEBUG": bool})

        with self.assertRaises(EnvValidationError) as cm:
            validator({})

        self.assertIn("Missing required field: PORT", str(cm.exception))
        self.assertIn("Missing required field: DEBUG", str(cm.exception))

    def test_hook_with_halt_policy(self):
        validator = create_validator({"PORT": int}, policy=FailurePolicy.HALT)

        with self.assertLogs(ENV_LOGGER, level="ERROR"):
            with self.assertRaises(SystemExit):
                validator({"PORT": "x"})


class TestMaskConfig(unittest.TestCase):
    """Test cases for masking validated configuration."""

    def test_strings_masked(self):
        schema = {"API_KEY": str, "PORT": int, "DEBUG": bool}
        config = {"API_KEY": "secret", "PORT": 3000, "DEBUG": True}

        self.assertEqual(
            mask_config(schema, config),
            {"API_KEY": "***", "PORT": 3000, "DEBUG": True},
        )

    def test_original_config_untouched(self):
        config = {"API_KEY": "secret"}

        mask_config({"API_KEY": str}, config)

        self.assertEqual(config, {"API_KEY": "secret"})


if __name__ == '__main__':
    unittest.main()
