from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Client connection values loaded from BOOKSHELF_* variables and .env files."""

    model_config = SettingsConfigDict(
        env_prefix="BOOKSHELF_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    url: str = Field(default="http://localhost:8000/graphql")
    timeout: float = Field(default=10.0, description="Request timeout in seconds")
