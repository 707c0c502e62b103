"""
Simple configuration management.

The ``Settings`` dataclass holds the service configuration; its
defaults are plain values and ``Settings.from_env`` fills it from
environment variables at process start.  The admin password has no
default: it has to be supplied through ``ADMIN_PASSWORD``, otherwise
``create_app`` refuses to start and raises ``ConfigurationError``.
"""

import os
from dataclasses import dataclass


class ConfigurationError(RuntimeError):
    """Raised when the process environment cannot be used to start the service."""


@dataclass
class Settings:
    """Application settings."""

    project_name: str = "Coaster API"
    api_version: str = "1.0.0"
    log_level: str = "INFO"
    log_file: str = ""

    # Password for the ``admin`` user of the Basic-auth protected portal.
    admin_password: str = ""

    host: str = "0.0.0.0"
    port: int = 8080

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the current environment.

        Raises
        ------
        ConfigurationError
            If ``PORT`` is not an integer.
        """
        port = os.getenv("PORT", str(cls.port))
        try:
            port_number = int(port)
        except ValueError:
            raise ConfigurationError(f"PORT must be an integer, got {port!r}") from None
        return cls(
            project_name=os.getenv("PROJECT_NAME", cls.project_name),
            api_version=os.getenv("API_VERSION", cls.api_version),
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            log_file=os.getenv("LOG_FILE", cls.log_file),
            admin_password=os.getenv("ADMIN_PASSWORD", ""),
            host=os.getenv("HOST", cls.host),
            port=port_number,
        )
