"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field


class CORSConfig(BaseModel):
    """CORS configuration for the application."""

    origins: list[str] = Field(default=["*"])
    allow_credentials: bool = False
    allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    )
    allow_headers: list[str] = Field(default=["*"])


class JWTClaimsConfig(BaseModel):
    """Claim names written into issued access tokens."""

    subject_id: str = Field(
        default="nameid", description="Claim carrying the identity's stable id"
    )
    roles: str = Field(default="role", description="Claim carrying role names")


class JWTConfig(BaseModel):
    """Access token issuance and validation configuration."""

    signing_key: str | None = Field(
        default=None, description="Symmetric key used to sign access tokens"
    )
    issuer: str = Field(
        default="bookstore-api",
        description="Issuer name; also used as the audience of issued tokens",
    )
    algorithm: Literal["HS256"] = Field(
        default="HS256", description="Signing algorithm for access tokens"
    )
    access_token_ttl_seconds: int = Field(
        default=300, gt=0, description="Access token lifetime in seconds"
    )
    clock_skew: int = Field(default=0, ge=0, description="Clock skew tolerance in seconds")
    claims: JWTClaimsConfig = Field(
        default_factory=JWTClaimsConfig, description="JWT claims mapping configuration"
    )


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log format")
    file: str | None = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./bookstore.db",
        description="Database connection URL",
    )
    echo: bool = Field(default=False, description="Echo SQL statements")
    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")
    statement_timeout_ms: int = Field(
        default=15000,
        gt=0,
        description="Upper bound for a single store round-trip in milliseconds",
    )

    @computed_field
    @property
    def is_sqlite(self) -> bool:
        """Whether the configured store is SQLite."""
        return self.url.startswith("sqlite")


class SecurityConfig(BaseModel):
    """Password hashing configuration."""

    bcrypt_rounds: int = Field(
        default=12, ge=4, le=31, description="bcrypt cost factor for new hashes"
    )


class SeedConfig(BaseModel):
    """Identity store seed applied at startup."""

    enabled: bool = Field(default=False, description="Seed roles and admin on startup")
    roles: list[str] = Field(default_factory=lambda: ["Administrator", "Customer"])
    admin_username: str = Field(default="admin@bookstore.com")
    admin_email: str = Field(default="admin@bookstore.com")
    admin_password: str | None = Field(
        default=None, description="Admin password; the admin is skipped when unset"
    )
    admin_roles: list[str] = Field(default_factory=lambda: ["Administrator"])


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    name: str = Field(default="Book Store API", description="Application title")
    host: str = Field(default="localhost", description="Application host")
    port: int = Field(default=8000, description="Application port")
    cors: CORSConfig = Field(
        default_factory=CORSConfig, description="CORS configuration"
    )


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    jwt: JWTConfig = Field(
        default_factory=JWTConfig, description="Access token configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    security: SecurityConfig = Field(
        default_factory=SecurityConfig, description="Security configuration"
    )
    seed: SeedConfig = Field(
        default_factory=SeedConfig, description="Identity seed configuration"
    )
