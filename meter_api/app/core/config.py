"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, without ``pydantic_settings``.  Defaults are
provided for all fields so the service starts with no configuration at
all.  Tests build their own ``Settings`` instance and pass it to
``create_app``.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Meter API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Versioned routes are mounted under this prefix.  Set API_PREFIX to an
    # empty string to serve ``/meters`` directly from the root.
    api_prefix: str = os.getenv("API_PREFIX", "/api/v1")

    # Load the demo meters (ids 1..5) into the store when the app starts.
    seed_fixtures: bool = _env_flag("SEED_FIXTURES", "true")

    # Used when a request leaves ``duration`` blank.
    default_duration: str = os.getenv("DEFAULT_DURATION", "1h")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
