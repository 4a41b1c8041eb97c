"""Application factory for the site configuration service."""
from __future__ import annotations

import logging
import time

from flask import Flask
from sqlalchemy.exc import OperationalError

from .config import Config
from .extensions import cors, db, limiter


def create_app(config_class: type[Config] = Config) -> Flask:
    """Create and configure the Flask application instance."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    _configure_logging(app)

    db.init_app(app)

    allowed_origins = [
        origin.strip()
        for origin in (app.config.get("CORS_ALLOWED_ORIGINS") or "").split(",")
        if origin.strip()
    ]
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": allowed_origins}},
        allow_headers=["Content-Type"],
    )

    limiter.init_app(app)

    from .api.config import bp as config_bp
    from .api.health import bp as health_bp
    from .api.images import bp as images_bp
    from .api.page import bp as page_bp

    app.register_blueprint(health_bp, url_prefix="/api")
    app.register_blueprint(config_bp, url_prefix="/api")
    app.register_blueprint(images_bp, url_prefix="/api")
    app.register_blueprint(page_bp, url_prefix="/api")

    with app.app_context():
        # Import models to ensure they are registered with SQLAlchemy before creating tables.
        from .models import settings  # noqa: F401

        _initialize_database(app)

    from . import services

    services.init_app(app)

    return app


def _configure_logging(app: Flask) -> None:
    """Apply LOG_LEVEL to the package logger, which is also ``app.logger``."""

    level = app.config.get("LOG_LEVEL") or "INFO"
    if isinstance(level, str):
        level = level.upper()
    logging.getLogger(__name__).setLevel(level)


def _initialize_database(app: Flask) -> None:
    """Initialize the database with retry logic to handle delayed availability."""

    max_retries = int(app.config.get("DB_INIT_MAX_RETRIES", 30))
    retry_delay = float(app.config.get("DB_INIT_RETRY_DELAY", 2))

    for attempt in range(1, max_retries + 1):
        try:
            db.create_all()
            return
        except OperationalError as exc:
            if attempt >= max_retries:
                app.logger.exception("Database initialization failed after %s attempts.", attempt)
                raise

            app.logger.warning(
                "Database initialization attempt %s/%s failed: %s", attempt, max_retries, exc
            )
            time.sleep(retry_delay)
