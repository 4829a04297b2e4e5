"""
Auth Blueprint

Registration, login and the bearer-token helpers used by every blueprint.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from classbook.auth import routes  # noqa: E402, F401
