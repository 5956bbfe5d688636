"""
Configuration module for the Prompt Enhancer service.

Loads environment variables and validates required settings.
"""
import os
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()

DEFAULT_PORT = 3000


def parse_port(raw: str) -> int:
    """
    Parse a listening port from its string form.

    Args:
        raw: Port value as read from the environment

    Returns:
        The port as an integer

    Raises:
        ValueError: If the value is not an integer in 1..65535
    """
    try:
        port = int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"PORT must be an integer, got {raw!r}")

    if not 1 <= port <= 65535:
        raise ValueError(f"PORT must be between 1 and 65535, got {port}")

    return port


class Settings:
    """Application settings loaded from environment variables."""

    # Server Settings
    HOST: str = os.getenv("HOST", "0.0.0.0")
    # Kept as the raw string so a bad value is reported by validate()
    PORT_RAW: str = os.getenv("PORT", "") or str(DEFAULT_PORT)

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS Settings (only consulted in production)
    CORS_ALLOWED_ORIGINS: List[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",")
        if origin.strip()
    ]

    @property
    def PORT(self) -> int:
        """Listening port, falling back to the default when unparsable."""
        try:
            return parse_port(self.PORT_RAW)
        except ValueError:
            return DEFAULT_PORT

    @property
    def BASE_URL(self) -> str:
        """Local URL the server is reachable at."""
        return f"http://localhost:{self.PORT}"

    @classmethod
    def validate(cls) -> None:
        """
        Validate that all settings hold usable values.

        Raises:
            ValueError: If any setting is invalid.
        """
        parse_port(cls.PORT_RAW)

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production environment."""
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def is_development(cls) -> bool:
        """Check if running in development environment."""
        return cls.ENVIRONMENT.lower() == "development"


# Create a singleton instance
settings = Settings()

# Validate settings on module import (will fail fast if misconfigured)
# Skip validation during tests or when importing for introspection
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    try:
        settings.validate()
    except ValueError as e:
        # In development, warn but don't crash
        if settings.is_development():
            print(f"Warning: {e}")
            print(f"   Falling back to port {DEFAULT_PORT}.")
        else:
            # In production or staging, fail immediately
            raise
