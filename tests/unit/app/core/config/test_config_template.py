"""Unit tests for config_template module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from book_catalog.runtime.config.config_template import (
    load_templated_yaml,
    promote_environment_overrides,
    substitute_env_vars,
)


class TestSubstituteEnvVars:
    """Test cases for substitute_env_vars function."""

    def test_substitute_simple_env_var(self):
        with patch.dict(os.environ, {"TEST_VAR": "test_value"}):
            assert substitute_env_vars("${TEST_VAR}") == "test_value"

    def test_substitute_env_var_in_text(self):
        with patch.dict(os.environ, {"HOST": "postgres-service", "PORT": "5432"}):
            text = "postgresql://postgres@${HOST}:${PORT}/books_db"
            assert substitute_env_vars(text) == "postgresql://postgres@postgres-service:5432/books_db"

    def test_substitute_env_var_with_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-default_value}") == "default_value"

    def test_substitute_env_var_with_default_when_set(self):
        with patch.dict(os.environ, {"PRESENT_VAR": "actual_value"}):
            assert substitute_env_vars("${PRESENT_VAR:-default_value}") == "actual_value"

    def test_substitute_env_var_with_empty_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-}") == ""

    def test_substitute_required_env_var_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(
                ValueError, match="Required environment variable MISSING_VAR not set"
            ):
                substitute_env_vars("${MISSING_VAR}")

    def test_substitute_env_var_with_custom_error(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(
                ValueError,
                match="Required environment variable DB_PASSWORD: needed for postgres",
            ):
                substitute_env_vars("${DB_PASSWORD:?needed for postgres}")

    def test_substitute_no_env_vars(self):
        text = "This is just plain text with no variables"
        assert substitute_env_vars(text) == text


class TestPromoteEnvironmentOverrides:
    def test_prefixed_variable_is_promoted(self):
        with patch.dict(os.environ, {"PRODUCTION_DATABASE_URL": "postgresql://prod/db"}, clear=True):
            promote_environment_overrides("production")
            assert os.environ["DATABASE_URL"] == "postgresql://prod/db"

    def test_other_environments_ignored(self):
        with patch.dict(os.environ, {"PRODUCTION_DATABASE_URL": "postgresql://prod/db"}, clear=True):
            promote_environment_overrides("development")
            assert "DATABASE_URL" not in os.environ


class TestLoadTemplatedYaml:
    def write(self, tmp_path: Path, content: str) -> Path:
        path = tmp_path / "config.yaml"
        path.write_text(content)
        return path

    def test_load_with_substitution(self, tmp_path: Path):
        path = self.write(
            tmp_path,
            """
config:
  app:
    port: ${APP_PORT:-8080}
    api_prefix: /api
  database:
    url: ${DATABASE_URL:-sqlite://}
""",
        )
        with patch.dict(os.environ, {"APP_PORT": "9000"}, clear=True):
            config = load_templated_yaml(path)

        assert config.app.port == 9000
        assert config.app.api_prefix == "/api"
        assert config.database.url == "sqlite://"

    def test_missing_sections_use_defaults(self, tmp_path: Path):
        path = self.write(tmp_path, "config:\n  logging:\n    level: DEBUG\n")
        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(path)

        assert config.logging.level == "DEBUG"
        assert config.app.port == 8080
        assert config.app.expose_store_errors is True

    def test_empty_file_rejected(self, tmp_path: Path):
        path = self.write(tmp_path, "")
        with pytest.raises(ValueError, match="Failed to parse YAML"):
            load_templated_yaml(path)

    def test_invalid_yaml_rejected(self, tmp_path: Path):
        path = self.write(tmp_path, "config: [unclosed")
        with pytest.raises(ValueError, match="Error parsing YAML"):
            load_templated_yaml(path)

    def test_invalid_values_rejected(self, tmp_path: Path):
        path = self.write(tmp_path, "config:\n  app:\n    port: not-a-port\n")
        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_templated_yaml(tmp_path / "absent.yaml")

    def test_repository_config_file_loads(self):
        repo_config = Path(__file__).resolve().parents[5] / "config.yaml"
        with patch.dict(os.environ, {"DB_PASSWORD": "secret"}, clear=True):
            config = load_templated_yaml(repo_config)

        assert config.app.port == 8080
        assert config.app.api_prefix == "/api"
        assert config.database.url.startswith("postgresql://")
