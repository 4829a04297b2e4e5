"""
Access Decorators

Authentication comes from Flask-Login's request loader, which reads the
``Authorization: Bearer`` header. These decorators layer role checks on top.
"""

from functools import wraps

from flask import request
from flask_login import current_user, login_required

from classbook.errors import Forbidden


def admin_required(f):
    """Decorator to ensure the request is from an authenticated admin.

    Unauthenticated requests get 401 from ``login_required``; authenticated
    non-admins get 403.
    """
    @wraps(f)
    @login_required
    def wrapper(*args, **kwargs):
        if request.method != 'OPTIONS' and not current_user.is_admin:
            raise Forbidden('Admin access required')
        return f(*args, **kwargs)
    return wrapper
