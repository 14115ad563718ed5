"""
Runtime configuration.

Settings are read from ``SR_*`` environment variables:

    SR_AUTH_USERNAME: Username accepted by the credential gate (default: "user")
    SR_AUTH_PASSWORD: Password accepted by the credential gate (default: "password")
    SR_REQUIRE_AUTH:  "true" to require credentials on student routes (default: "true")
    SR_LOG_LEVEL:     Root log level (default: "INFO")
    SR_HOST:          Bind host for ``student-registry serve`` (default: "127.0.0.1")
    SR_PORT:          Bind port for ``student-registry serve`` (default: 8080)
"""

import logging
import os
from functools import lru_cache

from pydantic import BaseModel, Field

from student_registry.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_USERNAME = "user"
DEFAULT_PASSWORD = "password"


class Settings(BaseModel):
    """Resolved application settings."""

    auth_username: str = DEFAULT_USERNAME
    auth_password: str = DEFAULT_PASSWORD
    require_auth: bool = True
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=1, le=65535)

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from the process environment.

        Raises:
            ConfigurationError: If a variable cannot be parsed
        """
        port_raw = os.getenv("SR_PORT", "8080")
        try:
            port = int(port_raw)
        except ValueError:
            raise ConfigurationError(
                f"Invalid SR_PORT: {port_raw}",
                env_var="SR_PORT",
            )
        if not 1 <= port <= 65535:
            raise ConfigurationError(
                f"SR_PORT out of range: {port}",
                env_var="SR_PORT",
            )

        log_level = os.getenv("SR_LOG_LEVEL", "INFO").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigurationError(
                f"Invalid SR_LOG_LEVEL: {log_level}",
                env_var="SR_LOG_LEVEL",
            )

        username = os.getenv("SR_AUTH_USERNAME", "")
        password = os.getenv("SR_AUTH_PASSWORD", "")
        if not username or not password:
            logger.warning(
                "SR_AUTH_USERNAME/SR_AUTH_PASSWORD not set. "
                "Using default credentials (INSECURE - set them in production!)"
            )

        return cls(
            auth_username=username or DEFAULT_USERNAME,
            auth_password=password or DEFAULT_PASSWORD,
            require_auth=os.getenv("SR_REQUIRE_AUTH", "true").lower() == "true",
            log_level=log_level,
            host=os.getenv("SR_HOST", "127.0.0.1"),
            port=port,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get settings from the environment (cached)."""
    return Settings.from_env()
