"""
Booking Routes
"""

from flask import jsonify
from flask_login import current_user, login_required

from classbook.auth.decorators import admin_required
from classbook.bookings import bookings_bp
from classbook.services import booking as booking_service


@bookings_bp.route('', methods=['GET'])
@login_required
def my_bookings():
    """The current user's active bookings, newest first"""
    return jsonify([b.to_listing() for b in booking_service.user_bookings(current_user)])


@bookings_bp.route('/all', methods=['GET'])
@admin_required
def all_bookings():
    return jsonify([b.to_listing() for b in booking_service.all_bookings()])


@bookings_bp.route('/stats', methods=['GET'])
@admin_required
def booking_stats():
    return jsonify(booking_service.booking_stats())


@bookings_bp.route('/<booking_id>', methods=['DELETE'])
@login_required
def cancel_booking(booking_id):
    """Cancel a booking; owners may cancel their own, admins any"""
    booking = booking_service.cancel_booking(booking_service.parse_booking_id(booking_id),
                                             current_user)
    return jsonify({
        'message': 'Booking cancelled successfully',
        'bookingId': str(booking.id),
    })
