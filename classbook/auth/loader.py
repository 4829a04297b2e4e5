"""
Bearer Token Loader

Hooks Flask-Login up to the ``Authorization`` header so ``current_user``
and ``login_required`` work for the JSON API.
"""

import logging

import jwt
from flask import g

from classbook.errors import error_response
from classbook.extensions import db
from classbook.models import User
from classbook.services.tokens import decode_token

logger = logging.getLogger(__name__)


def load_user_from_request(request):
    """Return the user named by a valid bearer token, else None.

    The reason for a rejection is left in ``g.auth_error`` for the
    unauthorized handler.
    """
    header = request.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if not header or scheme.lower() != 'bearer' or not token.strip():
        g.auth_error = 'No token provided'
        return None

    try:
        claims = decode_token(token.strip())
    except jwt.PyJWTError as e:
        logger.debug('Rejected bearer token: %s', e)
        g.auth_error = 'Invalid token'
        return None

    user = db.session.get(User, str(claims['userId']))
    if user is None:
        g.auth_error = 'Invalid token'
    return user


def unauthorized():
    message = g.get('auth_error') or 'No token provided'
    return error_response('UNAUTHORIZED', message, 401)


def init_login_manager(login_manager):
    login_manager.request_loader(load_user_from_request)
    login_manager.unauthorized_handler(unauthorized)
