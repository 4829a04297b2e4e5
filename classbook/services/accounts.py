"""
Account Services

Registration, credential checks and role changes.
"""

import logging

from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash, check_password_hash

from classbook.errors import InvalidCredentials, NotFound, ValidationError
from classbook.extensions import db
from classbook.models import User, ROLE_ADMIN, ROLE_USER

logger = logging.getLogger(__name__)


def normalize_email(email):
    if not isinstance(email, str):
        return ''
    return email.strip().lower()


def _require_credentials(email, password):
    email = normalize_email(email)
    if not email or not isinstance(password, str) or not password:
        raise ValidationError('Email and password required')
    return email


def register_user(email, password, role=ROLE_USER):
    email = _require_credentials(email, password)

    if User.query.filter_by(email=email).first():
        raise ValidationError('User already exists', code='USER_EXISTS')

    user = User(email=email,
                password_hash=generate_password_hash(password, method='pbkdf2:sha256'),
                role=role)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration of the same address
        db.session.rollback()
        raise ValidationError('User already exists', code='USER_EXISTS')

    logger.info('Registered user %s', user.id)
    return user


def authenticate(email, password):
    email = _require_credentials(email, password)

    user = User.query.filter_by(email=email).first()
    if not user or not check_password_hash(user.password_hash, password):
        logger.warning('Failed login for %s', email)
        raise InvalidCredentials()
    return user


def promote_to_admin(email):
    """Give an existing account the admin role."""
    user = User.query.filter_by(email=normalize_email(email)).first()
    if not user:
        raise NotFound(f'No user with email {email}')
    user.role = ROLE_ADMIN
    db.session.commit()
    logger.info('Promoted user %s to admin', user.id)
    return user


def ensure_admin(email, password):
    """Create the configured admin account, or promote it if it exists."""
    email = normalize_email(email)
    user = User.query.filter_by(email=email).first()
    if user is None:
        user = User(email=email,
                    password_hash=generate_password_hash(password, method='pbkdf2:sha256'),
                    role=ROLE_ADMIN)
        db.session.add(user)
        db.session.commit()
        logger.info('Created default admin %s', email)
    elif user.role != ROLE_ADMIN:
        user.role = ROLE_ADMIN
        db.session.commit()
        logger.info('Promoted default admin %s', email)
    return user
