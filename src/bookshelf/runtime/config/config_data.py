"""Pydantic models for parsing the config.yaml configuration file.

The models mirror the ``config:`` section of config.yaml and handle
validation and type conversion of the loaded YAML data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class CORSConfig(BaseModel):
    """CORS configuration for the application."""

    origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"]
    )
    allow_credentials: bool = True
    allow_methods: list[str] = Field(default=["GET", "POST", "OPTIONS"])
    allow_headers: list[str] = Field(default=["*"])


class RateLimiterConfig(BaseModel):
    """Rate limiter configuration model."""

    enabled: bool = Field(default=True, description="Enable rate limiting")
    requests: int = Field(
        default=100, description="Number of requests allowed per window"
    )
    window_ms: int = Field(default=60000, description="Time window in milliseconds")
    per_endpoint: bool = Field(
        default=True, description="Apply rate limiting per endpoint"
    )
    per_method: bool = Field(
        default=True, description="Apply rate limiting per HTTP method"
    )


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log format")
    file: str = Field(default="", description="Log file path; empty disables the file sink")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )

    @field_validator("level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


class GraphQLConfig(BaseModel):
    """GraphQL endpoint configuration."""

    path: str = Field(default="/graphql", description="Mount path of the endpoint")
    graphiql: bool = Field(
        default=True, description="Serve the GraphiQL IDE outside production"
    )


class CatalogConfig(BaseModel):
    """Catalog store configuration."""

    seed: bool = Field(
        default=True, description="Load the sample books and authors at startup"
    )


class AppConfig(BaseModel):
    """Application configuration model."""

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
    rate_limiter: RateLimiterConfig = Field(
        default_factory=RateLimiterConfig, description="Rate limiter configuration"
    )
    graphql: GraphQLConfig = Field(
        default_factory=GraphQLConfig, description="GraphQL endpoint configuration"
    )
    catalog: CatalogConfig = Field(
        default_factory=CatalogConfig, description="Catalog configuration"
    )
