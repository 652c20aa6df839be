"""Configuration management for the SmartChef recipe service.

Loads environment variables from system environment and .env file.
Priority order: system environment > .env file > hardcoded defaults
"""

import os

from dotenv import load_dotenv


# Load .env file (if exists, silently continues if missing)
load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        # OpenRouter API Key: optional. When empty the service runs in fallback-only mode
        # and never contacts the completion endpoint.
        self.OPENROUTER_API_KEY: str = os.getenv("OPENROUTER_API_KEY", "")
        self.OPENROUTER_BASE_URL: str = os.getenv("OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1")
        # Default: free Gemma tier on OpenRouter
        self.OPENROUTER_MODEL: str = os.getenv("OPENROUTER_MODEL", "google/gemma-3n-e4b-it:free")
        # Temperature for the normal three-recipe request
        self.TEMPERATURE: float = float(os.getenv("TEMPERATURE", "0.7"))
        # Temperature for surprise mode (single unconventional recipe)
        self.SURPRISE_TEMPERATURE: float = float(os.getenv("SURPRISE_TEMPERATURE", "0.9"))
        # Max tokens: three full recipes fit comfortably in 2000
        self.MAX_TOKENS: int = int(os.getenv("MAX_TOKENS", "2000"))
        # Request timeout (seconds) for the single completion call
        self.REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", "60"))
        # Attribution headers sent to OpenRouter (HTTP-Referer / X-Title)
        self.APP_URL: str = os.getenv("APP_URL", "http://localhost:3000")
        self.APP_TITLE: str = os.getenv("APP_TITLE", "SmartChef Recipe Generator")
        # Server Port
        self.PORT: int = int(os.getenv("PORT", "3000"))

    @property
    def has_api_key(self) -> bool:
        """True when a completion credential is configured."""
        return bool(self.OPENROUTER_API_KEY)

    def validate(self) -> None:
        """Validate configuration values.

        The API key is never required: its absence selects fallback-only mode.

        Raises:
            ValueError: If a numeric setting is out of range.
        """
        if not (0.0 <= self.TEMPERATURE <= 2.0):
            raise ValueError(f"TEMPERATURE must be between 0.0 and 2.0, got: {self.TEMPERATURE}")
        if not (0.0 <= self.SURPRISE_TEMPERATURE <= 2.0):
            raise ValueError(
                f"SURPRISE_TEMPERATURE must be between 0.0 and 2.0, got: {self.SURPRISE_TEMPERATURE}"
            )
        if self.MAX_TOKENS < 1:
            raise ValueError(f"MAX_TOKENS must be at least 1, got: {self.MAX_TOKENS}")
        if self.REQUEST_TIMEOUT <= 0:
            raise ValueError(f"REQUEST_TIMEOUT must be positive, got: {self.REQUEST_TIMEOUT}")


# Create module-level config instance and validate immediately
config = Config()
config.validate()
