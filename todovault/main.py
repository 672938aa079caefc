"""Flask application entry point."""

import logging

from flask import Flask, jsonify
from flask_cors import CORS

from .config import Settings, settings as default_settings
from .core import EXTENSION_KEY, Core
from .exceptions import (
    AuthenticationError,
    ResourceNotFound,
    SessionError,
    SessionErrorKind,
    TodoVaultError,
    ValidationError,
)

# Configure logging
logging.basicConfig(
    level=default_settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def _error_response(error: TodoVaultError, error_type: str | None = None) -> dict:
    response = {
        "error": {
            "type": error_type or error.__class__.__name__,
            "message": error.message
        }
    }
    if error.details:
        response["error"]["details"] = error.details
    return response


# Error handlers
def handle_not_found(error):
    """Handle ResourceNotFound exceptions."""
    return jsonify(_error_response(error, "ResourceNotFound")), 404


def handle_validation_error(error):
    """Handle ValidationError exceptions."""
    return jsonify(_error_response(error, "ValidationError")), 400


def handle_authentication_error(error):
    """Handle AuthenticationError exceptions (bad credentials)."""
    return jsonify(_error_response(error, "AuthenticationError")), 401


def handle_session_error(error):
    """Handle SessionError exceptions.

    Only "Unauthorized" or "Bad request" ever leaves the server; which
    token check failed stays in the logs.
    """
    if error.kind is SessionErrorKind.BAD_REQUEST:
        return jsonify(_error_response(error, "BadRequest")), 400
    return jsonify(_error_response(error, "Unauthorized")), 401


def handle_todovault_error(error):
    """Handle generic TodoVaultError exceptions (HashingError included)."""
    logger.error(f"{error.__class__.__name__}: {error.message}")
    return jsonify(_error_response(error)), 500


def handle_internal_error(error):
    """Handle internal server errors."""
    logger.error(f"Internal error: {error}")
    return jsonify({
        "error": {
            "type": "InternalServerError",
            "message": "An internal error occurred"
        }
    }), 500


def health():
    """Health check endpoint."""
    return jsonify({"status": "ok"})


def create_app(settings: Settings | None = None, core: Core | None = None) -> Flask:
    """
    Create a Flask app with its own Core (store and services).

    Args:
        settings: Configuration; the environment-loaded settings by default
        core: Prebuilt Core to attach; built from settings by default

    Returns:
        Configured Flask application
    """
    settings = settings or default_settings

    app = Flask(__name__)
    app.extensions[EXTENSION_KEY] = core or Core(settings)

    # CORS configuration
    CORS(app, origins=settings.cors_origins, supports_credentials=True)

    app.register_error_handler(ResourceNotFound, handle_not_found)
    app.register_error_handler(ValidationError, handle_validation_error)
    app.register_error_handler(AuthenticationError, handle_authentication_error)
    app.register_error_handler(SessionError, handle_session_error)
    app.register_error_handler(TodoVaultError, handle_todovault_error)
    app.register_error_handler(500, handle_internal_error)

    app.add_url_rule("/health", "health", health)

    # Register blueprints
    from .auth.api import auth_bp
    from .todos.api import todos_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(todos_bp)

    logger.info(f"TodoVault app created (todo id policy: {settings.todo_id_policy})")
    return app


app = create_app()


def run():
    """Run the development server on the configured host and port."""
    logger.info(f"Starting server on {default_settings.host}:{default_settings.port}")
    app.run(host=default_settings.host, port=default_settings.port, threaded=True)


if __name__ == "__main__":
    run()
