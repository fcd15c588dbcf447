"""Error types raised by the task service and their JSON rendering."""

import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_response(self):
        return jsonify(message=self.message), self.status_code


class ValidationError(ApiError):
    status_code = 400


class NotFound(ApiError):
    status_code = 404


class StoreError(ApiError):
    """Any failure reported by the persistence layer."""

    status_code = 500


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(exc):
        if exc.status_code >= 500:
            logger.error("store operation failed", extra={"error": exc.message})
        else:
            logger.warning(
                "request rejected",
                extra={"error": exc.message, "status": exc.status_code},
            )
        return exc.to_response()

    @app.errorhandler(HTTPException)
    def handle_http_error(exc):
        return jsonify(message=exc.description), exc.code
