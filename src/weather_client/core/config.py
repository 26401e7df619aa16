"""Client configuration using Pydantic Settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    Example:
        >>> settings = Settings()
        >>> settings.UNITS
        'standard'
        >>> settings.UPSTREAM_TIMEOUT >= 0.1
        True
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Upstream API Configuration
    OPENWEATHERMAP_BASE_URL: str = Field(
        default="https://api.openweathermap.org/data/2.5",
        description="Base URL for the OpenWeatherMap API",
    )
    OPENWEATHERMAP_API_KEY: str | None = Field(
        default=None,
        description="API key sent as the appid parameter (only passed if set)",
    )
    UPSTREAM_TIMEOUT: float = Field(
        default=10.0,
        description="Timeout for OpenWeatherMap requests in seconds",
        ge=0.1,
        le=30.0,
    )
    UNITS: str = Field(
        default="standard",
        description="Measurement units (standard, metric, imperial)",
    )

    # Logging Configuration
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that LOG_LEVEL is a valid logging level.

        Example:
            >>> Settings(LOG_LEVEL="debug").LOG_LEVEL
            'DEBUG'
        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}, got {v}")
        return v_upper

    @field_validator("UNITS")
    @classmethod
    def validate_units(cls, v: str) -> str:
        valid_units = {"standard", "metric", "imperial"}
        v_lower = v.lower()
        if v_lower not in valid_units:
            raise ValueError(f"UNITS must be one of {valid_units}, got {v}")
        return v_lower

    @field_validator("OPENWEATHERMAP_BASE_URL")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate that the base URL is properly formatted.

        Args:
            v: The URL string to validate

        Returns:
            The URL string without trailing slash

        Raises:
            ValueError: If the URL is invalid
        """
        if not v.startswith(("http://", "https://")):
            raise ValueError("OPENWEATHERMAP_BASE_URL must start with http:// or https://")
        return v.rstrip("/")


# Global settings instance
settings = Settings()
