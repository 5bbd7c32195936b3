"""Application configuration.

This module provides environment-specific configuration settings for the application.
"""

import os
from pathlib import Path
from typing import Any, Dict


class Config:
    """Base configuration with settings common to all environments."""

    # Security
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-key-change-in-production")

    # Flask settings
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    TESTING: bool = False

    # Database settings
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False
    SQLALCHEMY_ENGINE_OPTIONS: Dict[str, Any] = {
        "pool_pre_ping": True,
        "pool_recycle": 300,  # 5 minutes
    }

    # Session settings
    SESSION_COOKIE_SECURE: bool = False
    SESSION_COOKIE_HTTPONLY: bool = True
    SESSION_COOKIE_SAMESITE: str = "Lax"
    PERMANENT_SESSION_LIFETIME: int = 3600  # 1 hour in seconds

    # CSRF
    WTF_CSRF_ENABLED: bool = True
    WTF_CSRF_TIME_LIMIT: int = 3600

    # Rate limiting
    RATELIMIT_ENABLED: bool = os.getenv("RATELIMIT_ENABLED", "true").lower() == "true"
    RATELIMIT_STORAGE_URI: str = os.getenv("RATELIMIT_STORAGE_URI", "memory://")

    # Application settings
    APP_NAME: str = os.getenv("APP_NAME", "category-admin")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "dev")
    CATEGORIES_PER_PAGE: int = int(os.getenv("CATEGORIES_PER_PAGE", "20"))

    def __init__(self) -> None:
        """Initialize configuration."""
        os.environ.setdefault("FLASK_ENV", "development")

        self.SQLALCHEMY_DATABASE_URI = self._get_database_uri()
        self._configure_cookie_security()

    def _get_database_uri(self) -> str:
        """Get the appropriate database URI for the current environment."""
        # Handle Heroku-style database URLs
        if "DATABASE_URL" in os.environ:
            uri = os.environ["DATABASE_URL"]
            if uri.startswith("postgres://"):
                uri = uri.replace("postgres://", "postgresql://", 1)
            return uri

        instance_path = Path(__file__).parent / "instance"
        instance_path.mkdir(exist_ok=True)
        return f'sqlite:///{instance_path}/app-{os.getenv("FLASK_ENV")}.db'

    def _configure_cookie_security(self) -> None:
        """Require secure cookies whenever the app is served over HTTPS."""
        if os.getenv("FORCE_HTTPS", "false").lower() == "true":
            self.SESSION_COOKIE_SECURE = True


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG: bool = True


class UnitTestConfig(Config):  # noqa: D101
    """Testing configuration."""

    TESTING: bool = True
    DEBUG: bool = True
    WTF_CSRF_ENABLED: bool = False
    RATELIMIT_ENABLED: bool = False
    SQLALCHEMY_ENGINE_OPTIONS: Dict[str, Any] = {}

    def _get_database_uri(self) -> str:
        return "sqlite:///:memory:"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG: bool = False
    TESTING: bool = False
    SESSION_COOKIE_SECURE: bool = True


def get_config(config_name: str | None = None) -> Config:
    """Get the appropriate configuration.

    Args:
        config_name: Explicit configuration name; falls back to FLASK_ENV.
    """
    env = (config_name or os.getenv("FLASK_ENV", "development")).lower()

    configs = {
        "development": DevelopmentConfig,
        "testing": UnitTestConfig,
        "production": ProductionConfig,
    }

    config_class = configs.get(env, DevelopmentConfig)
    return config_class()
