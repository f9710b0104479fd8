"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration at all.  In a production
deployment you should override these via environment variables.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Event Manager API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    description: str = os.getenv("API_DESCRIPTION", "Event Manager service API")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file.  When empty, logs go to the console only.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Bind address used by ``run.py``.
    host: str = os.getenv("API_HOST", "0.0.0.0")
    port: int = int(os.getenv("API_PORT", "8000"))

    # Documentation endpoints.  ``api_docs_path`` serves the complete
    # OpenAPI document, and ``<api_docs_path>/<group>`` serves one
    # document per registered group.  Set DOCS_ENABLED=false to serve no
    # documentation at all.
    docs_enabled: bool = _env_flag("DOCS_ENABLED", "true")
    api_docs_path: str = os.getenv("API_DOCS_PATH", "/v3/api-docs")
    swagger_ui_path: str = os.getenv("SWAGGER_UI_PATH", "/swagger-ui")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the defaults are
# computed when this module is imported, environment variables should
# be set before importing it.
settings = Settings()
