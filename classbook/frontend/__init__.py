"""
Frontend Blueprint

Serves the single-page client that talks to the JSON API.
"""

from flask import Blueprint

frontend_bp = Blueprint('frontend', __name__)

from classbook.frontend import routes  # noqa: E402, F401
