"""
Application factory for the multi-tenant organizational directory.

Usage::

    from hrdirectory import create_app
    app = create_app()           # Uses FLASK_ENV to pick config.
    app = create_app("testing")  # Explicit config for tests.
"""

import logging
import os

from flask import Flask

from .config import config_by_name
from .exceptions import (
    ConfigurationError,
    NotFoundError,
    OperationFailedError,
    ValidationError,
)
from .extensions import db

logger = logging.getLogger(__name__)


def create_app(config_name: str | None = None, test_config: dict | None = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: One of 'development', 'testing', or 'production'.
                     Defaults to the FLASK_ENV environment variable,
                     falling back to 'development'.
        test_config: Optional mapping applied on top of the config class
                     (used by tests to point at a temporary database).

    Returns:
        A fully configured Flask application instance.
    """
    # Resolve the configuration class.
    if config_name is None:
        config_name = os.environ.get("FLASK_ENV", "development")
    config_class = config_by_name.get(config_name)
    if config_class is None:
        raise ValueError(
            f"Unknown config '{config_name}'. "
            f"Valid options: {list(config_by_name.keys())}"
        )

    app = Flask(__name__)
    app.config.from_object(config_class)
    if test_config:
        app.config.update(test_config)

    if config_name == "production":
        config_class.validate_production_settings(app.config)

    # -- Configure logging -------------------------------------------------
    _configure_logging(app)

    # -- Initialize extensions ---------------------------------------------
    db.init_app(app)

    # -- Storage connection and facade registry ----------------------------
    _register_storage(app)

    # -- Register blueprints -----------------------------------------------
    _register_blueprints(app)

    # -- Register error handlers -------------------------------------------
    _register_error_handlers(app)

    # -- Register custom CLI commands --------------------------------------
    _register_cli_commands(app)

    return app


def _register_storage(app: Flask) -> None:
    """
    Build the configured storage connection and the app's facade registry.

    For the SQL backend the tables are created if missing; schema
    changes beyond that are out of scope.
    """
    # pylint: disable=import-outside-toplevel
    from .connections import BACKENDS, InMemoryConnection, SqlConnection
    from .seed import build_seed_organizations, load_seed_data
    from .services.facade_registry import EXTENSION_KEY, FacadeRegistry

    backend = app.config.get("STORAGE_BACKEND", "sql")
    seed = app.config.get("SEED_DEMO_DATA", False)

    if backend == "memory":
        connection = InMemoryConnection(None if seed else [])
    elif backend == "sql":
        from . import models  # noqa: F401  # register tables before create_all()
        from .models.organization import OrganizationRecord

        with app.app_context():
            db.create_all()
            connection = SqlConnection(db.engine)
            is_empty = db.session.query(OrganizationRecord.id).first() is None
            if seed and is_empty:
                load_seed_data(connection, build_seed_organizations())
    else:
        raise ConfigurationError(
            f"Unknown STORAGE_BACKEND '{backend}'. Valid options: {list(BACKENDS)}"
        )

    app.extensions[EXTENSION_KEY] = FacadeRegistry(connection)
    logger.info("Facade registry ready (backend=%s, seeded=%s)", backend, seed)


def _register_blueprints(app: Flask) -> None:
    """
    Import and register each blueprint with its URL prefix.

    Blueprints are imported inside this function to avoid circular
    imports.
    """
    # pylint: disable=import-outside-toplevel

    # Main blueprint: health check at the root.
    from .blueprints.main import bp as main_bp

    app.register_blueprint(main_bp)

    # Directory API under /api.
    from .blueprints.directory import bp as directory_bp

    app.register_blueprint(directory_bp, url_prefix="/api")


def _register_error_handlers(app: Flask) -> None:
    """Map directory exceptions and common HTTP errors to JSON responses."""

    @app.errorhandler(NotFoundError)
    def handle_not_found(error):
        return {"error": str(error)}, 404

    @app.errorhandler(ValidationError)
    def handle_validation(error):
        return {"error": str(error)}, 400

    @app.errorhandler(OperationFailedError)
    def handle_operation_failed(error):
        return {"error": str(error)}, 500

    @app.errorhandler(ConfigurationError)
    def handle_configuration(error):
        logger.error("Configuration error: %s", error)
        return {"error": "Service is not configured"}, 500

    @app.errorhandler(404)
    def not_found(error):  # pylint: disable=unused-argument
        """Handle 404 Not Found errors."""
        return {"error": "Not found"}, 404

    @app.errorhandler(405)
    def method_not_allowed(error):  # pylint: disable=unused-argument
        """Handle 405 Method Not Allowed errors."""
        return {"error": "Method not allowed"}, 405

    @app.errorhandler(500)
    def internal_error(error):  # pylint: disable=unused-argument
        """Handle 500 Internal Server Error."""
        return {"error": "Internal server error"}, 500


def _register_cli_commands(app: Flask) -> None:
    """Register custom Flask CLI commands (e.g., flask db-check)."""
    from .cli import register_commands  # pylint: disable=import-outside-toplevel

    register_commands(app)


def _configure_logging(app: Flask) -> None:
    """Set the root log level from ``LOG_LEVEL``."""
    log_level = app.config.get("LOG_LEVEL", "INFO")
    logging.basicConfig(level=getattr(logging, log_level, logging.INFO))

    # Quiet down noisy libraries in development.
    if app.debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
