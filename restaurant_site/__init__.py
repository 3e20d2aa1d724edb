import logging
import os

from flask import Flask, request
from werkzeug.exceptions import HTTPException, InternalServerError

from restaurant_site.extensions import db, migrate, cors
from restaurant_site.routes import register_routes
from restaurant_site.utils.http import error
from restaurant_site import models  # noqa: F401  (registers tables on db.metadata)


def _configure_logging(app):
    level = getattr(logging, app.config.get("LOG_LEVEL", "INFO"), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.setLevel(level)


def _register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_exception(exc):
        # Only API paths get the JSON envelope; the SPA fallback keeps HTML
        if not request.path.startswith("/api"):
            return exc
        code = (exc.name or "ERROR").upper().replace(" ", "_")
        return error(code, exc.description or exc.name, exc.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected_exception(exc):
        db.session.rollback()
        app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        if not request.path.startswith("/api"):
            return InternalServerError()
        return error("UNKNOWN_ERROR", "Internal server error", 500)


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.from_object("config.Config")
    if overrides:
        app.config.update(overrides)

    _configure_logging(app)

    # Initialize database
    db.init_app(app)

    # Initialize Flask-Migrate
    migrate.init_app(app, db)

    # CORS Configuration
    cors.init_app(app,
                  resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
                  supports_credentials=True,
                  allow_headers=["Content-Type", "Authorization"],
                  methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
                  expose_headers=["Content-Type", "Authorization"])

    os.makedirs(app.config["UPLOAD_FOLDER"], exist_ok=True)

    register_routes(app)
    _register_error_handlers(app)

    return app
