import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

from impact_api.extensions import db

log = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None, **extra):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.extra = extra

    def to_dict(self):
        return {"error": self.message, **self.extra}


class BadRequest(ApiError):
    status_code = 400
    default_message = "Bad request"


class Unauthorized(ApiError):
    status_code = 401
    default_message = "Unauthorized"


class Forbidden(ApiError):
    status_code = 403
    default_message = "Insufficient permissions"


class NotFound(ApiError):
    status_code = 404
    default_message = "Content not found"


class ServerMisconfiguration(ApiError):
    status_code = 500
    default_message = "Server misconfigured"


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(error):
        if isinstance(error, ServerMisconfiguration):
            log.error("%s", error.message)
        response = jsonify(error.to_dict())
        response.status_code = error.status_code
        return response

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        response = jsonify({"error": error.description})
        response.status_code = error.code
        return response

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        log.exception("Unhandled error: %s", error)
        db.session.rollback()
        response = jsonify({
            "error": "Internal server error",
            "message": str(error)
        })
        response.status_code = 500
        return response


def register_jwt_handlers(jwt):
    # Same body for missing, malformed and expired tokens.
    def _unauthorized(*_args):
        return jsonify({"error": "Unauthorized"}), 401

    jwt.unauthorized_loader(_unauthorized)
    jwt.invalid_token_loader(_unauthorized)
    jwt.expired_token_loader(_unauthorized)
    jwt.revoked_token_loader(_unauthorized)
    jwt.needs_fresh_token_loader(_unauthorized)
