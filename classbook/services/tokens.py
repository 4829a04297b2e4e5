"""
Token Service

Issues and verifies the HS256 bearer tokens handed out at login.
"""

from datetime import datetime, timedelta, timezone

import jwt
from flask import current_app


def generate_token(user, expires_in=None):
    """Sign a token for ``user``; ``expires_in`` is in seconds."""
    if expires_in is None:
        expires_in = current_app.config['JWT_EXPIRES_IN']
    now = datetime.now(timezone.utc)
    payload = {
        'userId': user.id,
        'email': user.email,
        'role': user.role,
        'iat': now,
        'exp': now + timedelta(seconds=expires_in),
    }
    return jwt.encode(payload, current_app.config['JWT_SECRET'],
                      algorithm=current_app.config['JWT_ALGORITHM'])


def decode_token(token):
    """Return the claims of a valid token.

    Raises ``jwt.PyJWTError`` when the signature, format or expiry is wrong.
    """
    return jwt.decode(token, current_app.config['JWT_SECRET'],
                      algorithms=[current_app.config['JWT_ALGORITHM']],
                      options={'require': ['exp', 'userId']})
