"""
Main Flask Application
Quiz Portal Relay API
"""
import logging
from typing import Optional

from flask import Flask, request, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config.settings import Settings, settings as default_settings
from services import ListService, TokenService
from shared.errors import DownstreamError, RelayError
from api.base.base_schemas import ErrorResponse
from api.base.dependencies import EXTENSION_KEY

# Import blueprints
from api.health import health_bp
from api.subscription import subscription_bp
from api.quiz import quiz_bp

logger = logging.getLogger(__name__)

CORS_REJECTED_MESSAGE = "The CORS policy for this site does not allow access from the specified Origin."


def create_app(
    settings: Optional[Settings] = None,
    token_service: Optional[TokenService] = None,
    list_service: Optional[ListService] = None,
) -> Flask:
    """
    Build the relay application

    The token and list services are constructed once here and handed to
    every route through app.extensions.
    """
    settings = settings or default_settings
    settings.validate()

    app = Flask(__name__)
    app.config['REQUEST_TIMEOUT'] = settings.REQUEST_TIMEOUT
    app.extensions[EXTENSION_KEY] = {
        "settings": settings,
        "token_service": token_service or TokenService(settings),
        "list_service": list_service or ListService(settings),
    }

    # ============== CORS ==============
    CORS(app, origins=settings.CORS_ORIGINS)
    allowed_origins = set(settings.CORS_ORIGINS)

    @app.before_request
    def reject_unknown_origins():
        """Allow requests without Origin; reject origins outside the allow-list"""
        origin = request.headers.get('Origin')
        if not origin:
            return

        if origin.rstrip('/') not in allowed_origins:
            logger.warning(f"Rejected request from origin {origin} to {request.path}")
            return jsonify(ErrorResponse.of(CORS_REJECTED_MESSAGE)), 403

    # ============== REGISTER BLUEPRINTS ==============
    app.register_blueprint(health_bp)
    app.register_blueprint(subscription_bp)
    app.register_blueprint(quiz_bp)

    # ============== ERROR HANDLERS ==============
    @app.errorhandler(RelayError)
    def relay_error(error: RelayError):
        if isinstance(error, DownstreamError):
            logger.error(f"Downstream error in {request.path}: {error.message}", exc_info=error)
        else:
            logger.info(f"{request.method} {request.path} rejected ({error.status_code}): {error.message}")
        return jsonify(ErrorResponse.of(error.message)), error.status_code

    @app.errorhandler(404)
    def not_found(error):
        return jsonify(ErrorResponse.of("Endpoint not found")), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify(ErrorResponse.of(
            "Method not allowed",
            "Please check the HTTP method (GET/POST) for this endpoint"
        )), 405

    @app.errorhandler(Exception)
    def unhandled_error(error: Exception):
        if isinstance(error, HTTPException):
            return jsonify(ErrorResponse.of(error.name, error.description)), error.code

        logger.error(f"Unhandled error in {request.path}: {error}", exc_info=error)
        return jsonify(ErrorResponse.of(str(error) or "Internal server error")), 500

    return app


logging.basicConfig(
    level=default_settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

app = create_app()


# ============== APPLICATION STARTUP ==============
if __name__ == '__main__':
    if default_settings.is_development():
        default_settings.print_config_summary()

    logger.info(f"Server running on port {default_settings.PORT}")
    app.run(debug=default_settings.DEBUG, host=default_settings.HOST, port=default_settings.PORT)
