"""
Centralized configuration module for application-wide settings.

Every getter reads the environment at call time so tests can override
values with monkeypatch before the app factory runs.
"""

import logging
import os
import re

logger = logging.getLogger(__name__)

DEFAULT_APP_PORT = 3000
DEFAULT_APP_HOST = "0.0.0.0"
DEFAULT_DATABASE_URL = "sqlite:///./app.db"

_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUTHY


# ===========================
# Server Configuration
# ===========================


def get_app_port() -> int:
    """
    Get the listening port from the APP_PORT environment variable.

    Returns:
        int: Port number (defaults to 3000 when unset or invalid)
    """
    raw = os.getenv("APP_PORT")
    if raw is None or raw.strip() == "":
        return DEFAULT_APP_PORT

    try:
        port = int(raw)
    except ValueError:
        logger.warning(
            f"Invalid APP_PORT '{raw}'. Falling back to {DEFAULT_APP_PORT}."
        )
        return DEFAULT_APP_PORT

    if not 0 < port < 65536:
        logger.warning(
            f"APP_PORT {port} out of range. Falling back to {DEFAULT_APP_PORT}."
        )
        return DEFAULT_APP_PORT
    return port


def get_app_host() -> str:
    return os.getenv("APP_HOST", DEFAULT_APP_HOST)


def get_environment() -> str:
    return os.getenv("FLASK_ENV", "development")


def is_production() -> bool:
    return get_environment() == "production"


# ===========================
# Database Configuration
# ===========================


def get_database_url() -> str:
    return os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)


def mask_url_password(url: str) -> str:
    """Hide the password component of a database URL for logging."""
    return re.sub(r"(://[^:/?#]+):[^@]*@", r"\1:***@", url)


def should_auto_create_tables() -> bool:
    return _env_flag("AUTO_CREATE_TABLES", True)


# ===========================
# Feature Toggles
# ===========================


def is_api_docs_enabled() -> bool:
    return _env_flag("API_DOCS_ENABLED", True)


def is_log_to_file_enabled() -> bool:
    # Off by default; containers log to stdout
    return _env_flag("LOG_TO_FILE", False)


def is_sql_echo_enabled() -> bool:
    return _env_flag("SQL_ECHO", False)


def log_app_config() -> None:
    """
    Log the effective configuration.

    Should be called during application startup to provide visibility
    into the values the process is running with.
    """
    logger.info(
        "Application configuration loaded",
        extra={
            "context": {
                "environment": get_environment(),
                "app_host": get_app_host(),
                "app_port": get_app_port(),
                "database_url": mask_url_password(get_database_url()),
                "api_docs_enabled": is_api_docs_enabled(),
                "auto_create_tables": should_auto_create_tables(),
                "log_to_file": is_log_to_file_enabled(),
                "sql_echo": is_sql_echo_enabled(),
            }
        },
    )
