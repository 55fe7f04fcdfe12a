"""Application configuration and settings management."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="MARKDOWN_DOCX_", extra="ignore")

    app_name: str = Field(default="Markdown to DOCX API", description="Human readable application name.")
    environment: Literal["local", "development", "staging", "production"] = Field(
        default="local",
        description="Deployment environment name.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root logging level.",
    )
    document_creator: str = Field(
        default="Markdown to DOCX Converter",
        description="Author recorded in the properties of generated DOCX files.",
    )
    default_title: str = Field(
        default="Converted Document",
        description="Title used when a request does not provide one.",
    )
    packaged_writer_enabled: bool = Field(
        default=True,
        description="If false, every conversion produces the Word-compatible HTML fallback.",
    )
    code_font: str = Field(
        default="Courier New",
        description="Monospaced font used for code blocks and inline code in DOCX output.",
    )
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser.",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()


settings = get_settings()
