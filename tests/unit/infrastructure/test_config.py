"""Unit tests for configuration loading and the context override system."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from src.bookstore.runtime.config.config_data import ConfigData, DatabaseConfig, JWTConfig
from src.bookstore.runtime.config.config_template import (
    load_config,
    load_templated_yaml,
    substitute_env_vars,
)
from src.bookstore.runtime.context import get_config, set_config, with_context


class TestSubstituteEnvVars:
    """Test cases for substitute_env_vars function."""

    def test_substitute_simple_env_var(self):
        with patch.dict(os.environ, {"TEST_VAR": "test_value"}):
            assert substitute_env_vars("${TEST_VAR}") == "test_value"

    def test_default_used_when_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-fallback}") == "fallback"

    def test_empty_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-}") == ""

    def test_required_missing_raises(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="MISSING_VAR not set"):
                substitute_env_vars("${MISSING_VAR}")

    def test_custom_error_message(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="signing key required"):
                substitute_env_vars("${JWT_SIGNING_KEY:?signing key required}")


class TestLoadConfig:
    """YAML loading with substitution and environment overrides."""

    def _write(self, tmp_path: Path, body: str) -> Path:
        path = tmp_path / "config.yaml"
        path.write_text(body)
        return path

    def test_values_are_substituted_and_validated(self, tmp_path: Path):
        path = self._write(
            tmp_path,
            "config:\n"
            "  jwt:\n"
            "    signing_key: ${TEST_SIGNING_KEY}\n"
            "    access_token_ttl_seconds: ${TEST_TTL:-120}\n",
        )
        with patch.dict(os.environ, {"TEST_SIGNING_KEY": "k" * 40}, clear=True):
            config = load_templated_yaml(path)

        assert config.jwt.signing_key == "k" * 40
        assert config.jwt.access_token_ttl_seconds == 120
        assert config.jwt.issuer == "bookstore-api"

    def test_environment_prefixed_variable_wins(self, tmp_path: Path):
        path = self._write(tmp_path, "config:\n  database:\n    url: ${DATABASE_URL:-sqlite://}\n")
        env = {
            "APP_ENVIRONMENT": "test",
            "DATABASE_URL": "sqlite:///./default.db",
            "TEST_DATABASE_URL": "sqlite:///./test.db",
        }
        with patch.dict(os.environ, env, clear=True):
            config = load_templated_yaml(path)

        assert config.database.url == "sqlite:///./test.db"

    def test_empty_file_is_rejected(self, tmp_path: Path):
        path = self._write(tmp_path, "")
        with pytest.raises(ValueError, match="empty"):
            load_templated_yaml(path)

    def test_invalid_values_are_rejected(self, tmp_path: Path):
        path = self._write(tmp_path, "config:\n  jwt:\n    access_token_ttl_seconds: 0\n")
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="Invalid configuration"):
                load_templated_yaml(path)

    def test_missing_file_falls_back_to_defaults(self, tmp_path: Path):
        config = load_config(tmp_path / "absent.yaml")

        assert config == ConfigData()

    def test_placeholders_in_comments_are_ignored(self, tmp_path: Path):
        path = self._write(
            tmp_path,
            "# Usage: ${UNSET_PLACEHOLDER} or ${UNSET_PLACEHOLDER:?never read}\n"
            "config:\n"
            "  app:\n"
            "    name: Shelf\n",
        )
        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(path)

        assert config.app.name == "Shelf"

    def test_repository_config_loads(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("VAR", raising=False)

        config = load_config(Path(__file__).parents[3] / "config.yaml")

        assert config.jwt.claims.subject_id == "nameid"
        assert config.jwt.claims.roles == "role"
        assert config.seed.roles == ["Administrator", "Customer"]


class TestDatabaseConfig:
    def test_sqlite_detection(self):
        assert DatabaseConfig(url="sqlite://").is_sqlite
        assert not DatabaseConfig(url="postgresql://u:p@db/bookstore").is_sqlite


class TestContextOverrides:
    """with_context merges only the fields that were set."""

    def test_partial_override_and_restore(self):
        original = get_config()
        override = ConfigData(jwt=JWTConfig(access_token_ttl_seconds=60))

        with with_context(override):
            current = get_config()
            assert current.jwt.access_token_ttl_seconds == 60
            assert current.jwt.issuer == original.jwt.issuer
            assert current.database.url == original.database.url

        assert get_config() is original

    def test_nested_overrides(self):
        with with_context(ConfigData(database=DatabaseConfig(url="sqlite://"))):
            with with_context(ConfigData(database=DatabaseConfig(echo=True))):
                inner = get_config()
                assert inner.database.url == "sqlite://"
                assert inner.database.echo is True
            assert get_config().database.echo is False

    def test_rejects_non_config_override(self):
        with pytest.raises(ValueError):
            with with_context({"jwt": {}}):  # type: ignore[arg-type]
                pass

    def test_set_config_replaces_configuration(self):
        original = get_config()
        replacement = ConfigData(database=DatabaseConfig(url="sqlite://"))
        try:
            set_config(replacement)
            assert get_config() is replacement
        finally:
            set_config(original)
