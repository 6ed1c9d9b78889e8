"""CLI commands against a temporary SQLite file."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from src.bookstore.core.services import CredentialVerifier, DbSessionService
from src.bookstore.entities.core.identity import IdentityRepository
from src.bookstore.runtime.config.config_data import (
    ConfigData,
    DatabaseConfig,
    SecurityConfig,
    SeedConfig,
)
from src.bookstore.runtime.context import get_config, with_context
from src.cli import app

runner = CliRunner()


@pytest.fixture
def cli_config(tmp_path: Path):
    override = ConfigData(
        database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'cli.db'}"),
        security=SecurityConfig(bcrypt_rounds=4),
        seed=SeedConfig(admin_password="Adm1n-Secret"),
    )
    with with_context(override):
        result = runner.invoke(app, ["db", "init"])
        assert result.exit_code == 0, result.output
        yield get_config()


def _session(config: ConfigData):
    return DbSessionService(config.database).session_scope()


class TestUsersCommands:
    def test_add_user(self, cli_config: ConfigData):
        result = runner.invoke(
            app,
            ["users", "add", "bob", "--email", "bob@example.com", "--password", "pw-123",
             "--role", "Customer", "--role", "Administrator"],
        )

        assert result.exit_code == 0, result.output
        with _session(cli_config) as session:
            user = IdentityRepository(session).find_by_username("bob")
            assert user is not None
            assert user.roles == ["Administrator", "Customer"]
            assert CredentialVerifier(session).password_sign_in("bob", "pw-123").succeeded

    def test_add_existing_user_fails(self, cli_config: ConfigData):
        args = ["users", "add", "bob", "--email", "bob@example.com", "--password", "pw-123"]
        assert runner.invoke(app, args).exit_code == 0

        result = runner.invoke(app, args)

        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_seed_creates_admin_once(self, cli_config: ConfigData):
        first = runner.invoke(app, ["users", "seed"])
        second = runner.invoke(app, ["users", "seed"])

        assert first.exit_code == 0, first.output
        assert second.exit_code == 0, second.output
        assert "Seeded admin account" in first.output
        assert "no admin account created" in second.output
        with _session(cli_config) as session:
            admin = IdentityRepository(session).find_by_username("admin@bookstore.com")
            assert admin is not None
            assert admin.roles == ["Administrator"]


def test_no_args_shows_help():
    result = runner.invoke(app, [])

    assert "db" in result.output
    assert "users" in result.output
