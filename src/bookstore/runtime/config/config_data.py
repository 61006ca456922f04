"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field


class CORSConfig(BaseModel):
    """CORS configuration for the application."""

    origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:3001"]
    )
    allow_credentials: bool = True
    allow_methods: list[str] = Field(default=["GET", "POST", "OPTIONS"])
    allow_headers: list[str] = Field(default=["*"])


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
    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")
    echo: bool = Field(default=False, description="Echo SQL statements")

    @computed_field
    @property
    def is_sqlite(self) -> bool:
        """Whether the URL points at a SQLite database."""
        return self.url.startswith("sqlite")

    @computed_field
    @property
    def is_memory(self) -> bool:
        """Whether the URL points at an in-process SQLite database."""
        return self.is_sqlite and (
            self.url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in self.url
        )


class StorageConfig(BaseModel):
    """Book storage backend selection."""

    backend: Literal["memory", "database"] = Field(
        default="memory", description="Where books are kept"
    )
    seed_sample_data: bool = Field(
        default=True, description="Seed the sample catalog when storage is empty"
    )


class RecommendationConfig(BaseModel):
    """Recommendation sampling configuration."""

    seed: int | None = Field(
        default=None,
        description="Seed for the recommendation random source (unseeded when null)",
    )


class AppConfig(BaseModel):
    """Application configuration model."""

    name: str = Field(default="Bookstore API", description="Application title")
    version: str = Field(default="0.1.0", description="Application version")
    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
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
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    storage: StorageConfig = Field(
        default_factory=StorageConfig, description="Book storage configuration"
    )
    recommendation: RecommendationConfig = Field(
        default_factory=RecommendationConfig,
        description="Recommendation configuration",
    )
