"""
Sessions Blueprint
"""

from flask import Blueprint

sessions_bp = Blueprint('sessions', __name__)

from classbook.sessions import routes  # noqa: E402, F401
