"""Configuration for apikit clients."""

import os
from typing import Optional


class Config:
    """Configuration class for API clients."""

    # Default API host when none is configured
    DEFAULT_BASE_URL = "https://api.example.com"
    DEFAULT_TIMEOUT = 60.0

    @classmethod
    def get_base_url(cls, override_url: Optional[str] = None) -> str:
        """Get the base URL of the API.

        Args:
            override_url: Optional URL to override the configured base URL

        Returns:
            Base URL without a trailing slash
        """
        if override_url:
            return override_url.rstrip("/")

        # Check for environment variable
        env_url = os.getenv("APIKIT_BASE_URL")
        if env_url:
            return env_url.rstrip("/")

        return cls.DEFAULT_BASE_URL

    @classmethod
    def get_token(cls, override_token: Optional[str] = None) -> Optional[str]:
        """Get the bearer token, or None when no token is configured."""
        if override_token:
            return override_token
        return os.getenv("APIKIT_TOKEN") or None

    @classmethod
    def get_timeout(cls, override_timeout: Optional[float] = None) -> float:
        """Get the request timeout in seconds.

        Raises:
            ValueError: if APIKIT_TIMEOUT is not a number
        """
        if override_timeout is not None:
            return override_timeout

        env_timeout = os.getenv("APIKIT_TIMEOUT")
        if env_timeout:
            return float(env_timeout)

        return cls.DEFAULT_TIMEOUT


# Global configuration instance
config = Config()
