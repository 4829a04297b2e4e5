"""
API Errors

Every failure leaves the API as ``{"error": {"code": ..., "message": ...}}``.
Routes and services raise ``ApiError`` subclasses; the handlers registered
by ``register_error_handlers`` render them.
"""

import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

from classbook.extensions import db

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = 500
    code = 'INTERNAL_ERROR'

    def __init__(self, message, code=None, status_code=None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {'error': {'code': self.code, 'message': self.message}}


class ValidationError(ApiError):
    status_code = 400
    code = 'VALIDATION_ERROR'


class InvalidIdError(ApiError):
    status_code = 400
    code = 'INVALID_ID'


class Unauthorized(ApiError):
    status_code = 401
    code = 'UNAUTHORIZED'


class InvalidCredentials(ApiError):
    status_code = 401
    code = 'INVALID_CREDENTIALS'

    def __init__(self, message='Invalid credentials'):
        super().__init__(message)


class Forbidden(ApiError):
    status_code = 403
    code = 'FORBIDDEN'


class NotFound(ApiError):
    status_code = 404
    code = 'NOT_FOUND'


class Conflict(ApiError):
    status_code = 409
    code = 'CONFLICT'


class DoubleBooking(Conflict):
    code = 'DOUBLE_BOOKING'

    def __init__(self, message='User already has a booking for this session'):
        super().__init__(message)


class CapacityExceeded(Conflict):
    code = 'CAPACITY_EXCEEDED'

    def __init__(self, message='Session is at full capacity'):
        super().__init__(message)


def error_response(code, message, status_code):
    response = jsonify({'error': {'code': code, 'message': message}})
    response.status_code = status_code
    return response


def register_error_handlers(app):
    """Render every error in the API envelope."""

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        return error_response(error.code, error.message, error.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        code = {
            404: 'NOT_FOUND',
            405: 'METHOD_NOT_ALLOWED',
            429: 'RATE_LIMITED',
        }.get(error.code, 'HTTP_ERROR')
        return error_response(code, error.description or error.name, error.code)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        db.session.rollback()
        logger.exception('Unhandled error: %s', error)
        return error_response('INTERNAL_ERROR', 'Internal server error', 500)
