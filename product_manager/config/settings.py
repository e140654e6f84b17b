"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management for the product manager using Pydantic Settings.

A single cached Settings instance is shared by the entry point, the catalog
and the interactive session.

Features:
---------
- Environment variable loading with type validation
- .env file support for local development
- Computed properties for derived values

Configuration Priority (highest to lowest):
------------------------------------------
1. Explicit keyword arguments (e.g. the --file command line option)
2. Environment variables (prefix PRODUCT_MANAGER_)
3. .env file
4. Default values

==============================================================================
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Title shown at the top of the menu
        debug: Enable verbose logging
        log_level: Root log level when debug is off
        products_file: Path to the products JSON backing store
        json_indent: Indentation used when writing the backing store

    Example:
        >>> settings = Settings(products_file="data/products.json")
        >>> settings.products_path
        PosixPath('data/products.json')
    """

    # =========================================================================
    # PYDANTIC SETTINGS CONFIGURATION
    # =========================================================================
    model_config = SettingsConfigDict(
        env_prefix="PRODUCT_MANAGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="Product Management System",
        description="Title shown at the top of the menu"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging"
    )

    log_level: str = Field(
        default="WARNING",
        description="Root log level used when debug is off"
    )

    # =========================================================================
    # STORAGE SETTINGS
    # =========================================================================
    products_file: str = Field(
        default="products.json",
        min_length=1,
        description="Path to the products JSON file"
    )

    json_indent: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Indentation for the pretty-printed products file"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """
        Validate log level is a standard logging level name.

        Raises:
            ValueError: If the level name is not recognized
        """
        supported = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

        if value.upper() not in supported:
            raise ValueError(
                f"Unsupported log level: {value}. "
                f"Supported: {', '.join(sorted(supported))}"
            )

        return value.upper()

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def products_path(self) -> Path:
        """Get products file as Path object."""
        return Path(self.products_file)

    @property
    def effective_log_level(self) -> int:
        """Numeric log level, DEBUG whenever debug mode is on."""
        if self.debug:
            return logging.DEBUG
        return getattr(logging, self.log_level)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"products_file={self.products_file!r}, "
            f"debug={self.debug})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance (singleton pattern).

    Uses lru_cache so environment and .env parsing happens once per process.
    Call ``get_settings.cache_clear()`` to force a re-read (used by tests).

    Returns:
        Global Settings instance
    """
    settings = Settings()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings
