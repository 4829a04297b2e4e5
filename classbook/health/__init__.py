"""
Health Blueprint
"""

from flask import Blueprint

health_bp = Blueprint('health', __name__)

from classbook.health import routes  # noqa: E402, F401
