"""
Bookings Blueprint
"""

from flask import Blueprint

bookings_bp = Blueprint('bookings', __name__)

from classbook.bookings import routes  # noqa: E402, F401
