"""
Session Routes

Listing is public, scheduling is admin-only, booking needs a login.
"""

from flask import jsonify
from flask_login import current_user, login_required

from classbook.auth.decorators import admin_required
from classbook.services import booking as booking_service
from classbook.services import catalog
from classbook.sessions import sessions_bp
from classbook.utils import json_body


@sessions_bp.route('', methods=['GET'])
def list_sessions():
    """All sessions with seat counts, soonest first"""
    return jsonify([s.to_dict(include_class=True) for s in catalog.list_sessions()])


@sessions_bp.route('', methods=['POST'])
@admin_required
def create_session():
    data = json_body()
    session = catalog.create_session(data.get('classId'), data.get('dateTime'),
                                     data.get('capacity'), current_user)
    return jsonify(session.to_dict()), 201


@sessions_bp.route('/<session_id>', methods=['GET'])
def get_session(session_id):
    return jsonify(catalog.get_session(session_id).to_dict(include_class=True))


@sessions_bp.route('/<session_id>/book', methods=['POST'])
@login_required
def book_session(session_id):
    """Reserve a seat for the current user"""
    booking = booking_service.book_session(session_id, current_user)
    return jsonify(booking.to_dict()), 201
