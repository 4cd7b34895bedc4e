"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration at all.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Blood Bank API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty only the console
    # handler is attached.
    log_file: str = os.getenv("LOG_FILE", "")

    # Mount point of the versioned router.  With the default the
    # donation collection is served from ``/api/bloodbank``.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # Page size used by the pagination endpoint when ``size`` is omitted.
    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
