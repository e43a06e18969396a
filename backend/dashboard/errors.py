from flask import jsonify
from werkzeug.exceptions import HTTPException

from dashboard.exceptions import (
    AuthenticationError,
    ConfigurationError,
    DashboardError,
    DocumentNotFound,
    RemoteCallError,
    ValidationFailed,
)


def _error_response(error, status_code, **extra):
    body = {
        "error": type(error).__name__,
        "message": str(error),
    }
    body.update(extra)
    response = jsonify(body)
    response.status_code = status_code
    return response


def register_error_handlers(app):
    @app.errorhandler(ValidationFailed)
    def handle_validation_failed(error):
        return _error_response(error, 400, fields=error.errors)

    @app.errorhandler(AuthenticationError)
    def handle_authentication_error(error):
        return _error_response(error, 401)

    @app.errorhandler(DocumentNotFound)
    def handle_not_found(error):
        return _error_response(error, 404)

    @app.errorhandler(RemoteCallError)
    def handle_remote_call_error(error):
        app.logger.error(f"Remote call failed: {error}")
        return _error_response(error, 502)

    @app.errorhandler(ConfigurationError)
    def handle_configuration_error(error):
        app.logger.error(f"Configuration error: {error}")
        return _error_response(error, 500)

    @app.errorhandler(DashboardError)
    def handle_dashboard_error(error):
        return _error_response(error, 400)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        # Routing redirects are HTTPExceptions too
        if error.code is None or error.code < 400:
            return error
        response = jsonify({
            "error": error.name,
            "message": error.description,
        })
        response.status_code = error.code
        return response
