"""
Classes Blueprint
"""

from flask import Blueprint

classes_bp = Blueprint('classes', __name__)

from classbook.classes import routes  # noqa: E402, F401
