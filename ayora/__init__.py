import logging

from flask import Flask, request
from werkzeug.exceptions import HTTPException

from ayora.extensions import db, migrate, cors
from ayora.routes import register_routes
from ayora.services.ai_client import init_nutrition_client
from ayora.utils.http import error

# Register models with SQLAlchemy metadata
from ayora.models.role import Role  # noqa: F401
from ayora.models.user import User  # noqa: F401
from ayora.models.meal import Meal  # noqa: F401

HTTP_ERROR_CODES = {
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    413: "FILE_TOO_LARGE",
}


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object("config.Config")
    if test_config:
        app.config.update(test_config)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Initialize database
    db.init_app(app)

    # Initialize Flask-Migrate
    migrate.init_app(app, db)

    # CORS Configuration
    cors.init_app(app,
                  origins=[app.config["FRONTEND_URL"]],
                  supports_credentials=True,
                  allow_headers=["Content-Type", "Authorization"],
                  methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"])

    init_nutrition_client(app)
    register_routes(app)
    register_error_handlers(app)

    @app.after_request
    def log_request(response):
        app.logger.info(f"{request.method} {request.path} {response.status_code}")
        return response

    return app


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        code = HTTP_ERROR_CODES.get(e.code, "HTTP_ERROR")
        return error(code, e.description or e.name, e.code)

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        db.session.rollback()
        app.logger.exception(f"Unhandled error on {request.method} {request.path}")
        message = str(e) if app.debug else "Internal server error"
        return error("INTERNAL_ERROR", message, 500)
