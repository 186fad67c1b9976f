"""
Application configuration classes.

Each class represents a deployment environment. The factory function
``create_app`` in ``hrdirectory/__init__.py`` selects the appropriate
config based on the FLASK_ENV environment variable.

``STORAGE_BACKEND`` picks the storage connection the facade registry
starts with:

    - ``memory``: in-process reference store, seeded with the demo
      dataset when ``SEED_DEMO_DATA`` is true.
    - ``sql``:    persistent store at ``SQLALCHEMY_DATABASE_URI``.
"""

import logging
import os

# Module-level logger for startup warnings emitted by config classes.
_logger = logging.getLogger(__name__)


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() == "true"


class BaseConfig:
    """
    Shared configuration values inherited by all environments.

    Connection strings are loaded from environment variables so they
    never appear in source control.
    """

    # -- Storage -----------------------------------------------------------
    STORAGE_BACKEND: str = os.environ.get("STORAGE_BACKEND", "sql")

    # Load the reference dataset into an empty store at startup.
    SEED_DEMO_DATA: bool = _env_flag("SEED_DEMO_DATA", "false")

    # -- SQLAlchemy --------------------------------------------------------
    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "DATABASE_URL", "sqlite:///hrdirectory.db"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False

    # Echo SQL statements to the log for debugging (override per env).
    SQLALCHEMY_ECHO: bool = False

    # -- Logging -----------------------------------------------------------
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")

    # =====================================================================
    # Production validation helpers
    # =====================================================================

    @classmethod
    def validate_production_settings(cls, app_config: dict) -> None:
        """
        Verify that the storage settings are fit for production.

        Called by ``create_app()`` when ``config_name == 'production'``.

        Raises:
            RuntimeError: If the in-memory backend is selected, since
                          every change would be lost on restart.
        """
        if app_config.get("STORAGE_BACKEND") == "memory":
            raise RuntimeError(
                "STORAGE_BACKEND=memory is not allowed in production; "
                "directory changes would be lost on restart."
            )

        # SQLite works, but only one writer at a time.
        if app_config.get("SQLALCHEMY_DATABASE_URI", "").startswith("sqlite"):
            _logger.warning(
                "Production is using SQLite; concurrent writes will be "
                "serialized. Set DATABASE_URL to a server database."
            )

        if app_config.get("LOG_LEVEL", "").upper() == "DEBUG":
            _logger.warning(
                "LOG_LEVEL=DEBUG is not recommended in production. "
                "Consider INFO or WARNING."
            )


class DevelopmentConfig(BaseConfig):
    """Development environment: in-memory demo data, verbose logging."""

    DEBUG: bool = True
    STORAGE_BACKEND: str = os.environ.get("STORAGE_BACKEND", "memory")
    SEED_DEMO_DATA: bool = _env_flag("SEED_DEMO_DATA", "true")
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "DEBUG")


class TestingConfig(BaseConfig):
    """
    Testing environment: in-memory backend seeded with the demo data.

    Tests that need the SQL backend pass ``test_config`` to
    ``create_app`` with a file-backed SQLite URI.
    """

    TESTING: bool = True
    STORAGE_BACKEND: str = "memory"
    SEED_DEMO_DATA: bool = True

    SQLALCHEMY_DATABASE_URI: str = os.environ.get("TEST_DATABASE_URL", "sqlite://")
    LOG_LEVEL: str = "DEBUG"


class ProductionConfig(BaseConfig):
    """
    Production environment: persistent backend, no debug output.

    The application factory calls ``validate_production_settings()`` at
    startup and refuses to launch on an in-memory store.
    """

    DEBUG: bool = False
    SQLALCHEMY_ECHO: bool = False
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "WARNING")


# Lookup dict used by the application factory.
config_by_name: dict[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}
