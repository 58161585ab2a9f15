"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management using Pydantic Settings.

A single cached Settings instance is shared by the whole application.

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables
2. .env file
3. Default values

==============================================================================
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Display name for the application
        app_env: Environment mode (development/staging/production)
        debug: Enable debug mode for verbose logging
        host: Server bind address
        port: Server port number
        products_file: Path to product catalog JSON
        cors_origins: Allowed CORS origins (JSON array string)
        compare_min_products: Fewest IDs accepted by the compare endpoint
        compare_max_products: Most IDs accepted by the compare endpoint
        search_min_length: Shortest accepted search query

    Example:
        >>> settings = Settings()
        >>> settings.products_path
        PosixPath('data/products.json')
    """

    model_config = SettingsConfigDict(
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
        default="Products Comparison API",
        description="Display name for the application"
    )

    app_version: str = Field(
        default="1.0.0",
        description="Version reported by the API and health check"
    )

    app_env: str = Field(
        default="development",
        description="Environment mode: development, staging, production"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging"
    )

    # =========================================================================
    # SERVER SETTINGS
    # =========================================================================
    host: str = Field(
        default="0.0.0.0",
        description="Server bind address"
    )

    port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Server port number"
    )

    # =========================================================================
    # CATALOG SETTINGS
    # =========================================================================
    products_file: str = Field(
        default="data/products.json",
        description="Path to product catalog JSON"
    )

    compare_min_products: int = Field(
        default=2,
        ge=1,
        description="Minimum number of product IDs for a comparison"
    )

    compare_max_products: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum number of product IDs for a comparison"
    )

    search_min_length: int = Field(
        default=2,
        ge=1,
        description="Minimum length of a search query"
    )

    # =========================================================================
    # CORS SETTINGS
    # =========================================================================
    cors_origins: str = Field(
        default='["*"]',
        description="Allowed CORS origins as JSON array string"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        """
        Validate and normalize application environment.

        Unknown values fall back to 'development' with a warning.
        """
        valid_envs = {"development", "staging", "production"}
        normalized = value.lower().strip()

        if normalized not in valid_envs:
            logger.warning(
                f"Unknown environment '{value}', defaulting to 'development'"
            )
            return "development"

        return normalized

    @model_validator(mode="after")
    def validate_compare_bounds(self) -> "Settings":
        """Ensure the compare bounds form a usable range."""
        if self.compare_min_products > self.compare_max_products:
            raise ValueError(
                "compare_min_products cannot be greater than compare_max_products"
            )
        return self

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"

    @property
    def products_path(self) -> Path:
        """Get products file as Path object."""
        return Path(self.products_file)

    @property
    def cors_origins_list(self) -> List[str]:
        """
        Parse CORS origins from JSON string to list.

        Returns:
            List of allowed origin strings
        """
        try:
            origins = json.loads(self.cors_origins)
            if isinstance(origins, list):
                return origins
            return ["*"]
        except json.JSONDecodeError:
            logger.warning(
                f"Invalid CORS origins JSON: {self.cors_origins}, "
                "defaulting to ['*']"
            )
            return ["*"]

    def __repr__(self) -> str:
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"app_env={self.app_env!r}, "
            f"debug={self.debug})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance.

    Returns:
        Global Settings instance
    """
    settings = Settings()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings
