"""
Unified configuration for the task store location and other settings.

This module provides a single source of truth for store path resolution
that works consistently for the interactive shell and the one-shot CLI.

The store path resolution:
1. Directory from TASKLIST_STORE_DIR (or .env), defaulting to the user's home
2. Logical name from TASKLIST_STORE_NAME, defaulting to "todos"
3. A fixed extension, ".json" unless TASKLIST_STORE_EXTENSION says otherwise

This module uses Pydantic Settings for type-safe configuration management
with support for .env files and environment variable overrides.
"""
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STORE_NAME = "todos"
DEFAULT_STORE_EXTENSION = ".json"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """Application settings for tasklist.

    All configuration values can be set via TASKLIST_* environment variables
    or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="TASKLIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ============================================================================
    # Store Configuration
    # ============================================================================
    store_name: str = DEFAULT_STORE_NAME
    store_dir: str = Field(default="", validate_default=True)  # Home directory when unset
    store_extension: str = DEFAULT_STORE_EXTENSION
    storage_backend: Literal["file", "memory"] = "file"

    # ============================================================================
    # Logging Configuration
    # ============================================================================
    log_level: str = "WARNING"
    log_format: str = DEFAULT_LOG_FORMAT

    @field_validator("store_dir", mode="before")
    @classmethod
    def resolve_store_dir(cls, v: Optional[str]) -> str:
        """
        Resolve the store directory to an absolute path.

        Args:
            v: Value from environment, .env file or None

        Returns:
            Absolute directory path (the user's home when unset)
        """
        if not v:
            return str(Path.home())
        return os.path.abspath(os.path.expanduser(v))

    @field_validator("store_extension", mode="before")
    @classmethod
    def normalize_extension(cls, v: Optional[str]) -> str:
        """Ensure the extension carries exactly one leading dot."""
        if not v:
            return DEFAULT_STORE_EXTENSION
        return "." + str(v).lstrip(".")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Optional[str]) -> str:
        return str(v or "WARNING").upper()


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    return Settings()


def get_store_path(
    name: Optional[str] = None,
    settings: Optional[Settings] = None,
    directory: Optional[Union[str, Path]] = None,
    extension: Optional[str] = None,
) -> Path:
    """
    Get the file path for a named task store.

    Args:
        name: Logical store name. If None, uses the configured store_name.
        settings: Settings to resolve against. If None, uses get_settings().
        directory: Store directory overriding settings.store_dir
        extension: File extension overriding settings.store_extension

    Returns:
        Path of the store file, ``<directory>/<name><extension>``
    """
    if settings is None and (not name or directory is None or extension is None):
        settings = get_settings()
    if not name:
        name = settings.store_name
    if directory is None:
        directory = settings.store_dir
    if extension is None:
        extension = settings.store_extension
    return Path(directory) / f"{name}{extension}"


def ensure_store_directory(store_path: Optional[Path] = None) -> None:
    """
    Ensure the store directory exists.

    Args:
        store_path: Path to the store file. If None, uses get_store_path().
    """
    if store_path is None:
        store_path = get_store_path()
    Path(store_path).parent.mkdir(parents=True, exist_ok=True)


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure root logging from settings.

    Logs go to stderr so they never interleave with prompts on stdout.
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format=settings.log_format,
    )
