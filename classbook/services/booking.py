"""
Booking Service

Seat accounting for sessions. Two rules hold no matter how requests race:

* a session never has more active bookings than seats, because seats are
  claimed with one conditional UPDATE on ``sessions.booked_seats``;
* a user holds at most one booking row per session, because of the
  ``uq_bookings_user_session`` constraint.

Booking row, seat counter and audit entry commit in one transaction.
"""

import logging
import re

from sqlalchemy import func, update
from sqlalchemy.exc import IntegrityError

from classbook.errors import (
    CapacityExceeded,
    Conflict,
    DoubleBooking,
    Forbidden,
    InvalidIdError,
    NotFound,
)
from classbook.extensions import db
from classbook.models import Booking, ClassSession, STATUS_BOOKED, STATUS_CANCELLED
from classbook.services import audit
from classbook.utils import utcnow

logger = logging.getLogger(__name__)

BOOKING_ID_RE = re.compile(r'[0-9]+')
MAX_BOOKING_ID = 2 ** 63 - 1


def _claim_seat(session_id):
    """Take one seat if any is left. Returns False when the session is full."""
    result = db.session.execute(
        update(ClassSession)
        .where(ClassSession.id == session_id)
        .where(ClassSession.booked_seats < ClassSession.capacity)
        .values(booked_seats=ClassSession.booked_seats + 1)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount == 1


def _release_seat(session_id):
    db.session.execute(
        update(ClassSession)
        .where(ClassSession.id == session_id)
        .where(ClassSession.booked_seats > 0)
        .values(booked_seats=ClassSession.booked_seats - 1)
        .execution_options(synchronize_session=False)
    )


def _set_status(booking_id, current, new, **values):
    """Move a booking from ``current`` to ``new``; False if it was not in ``current``."""
    result = db.session.execute(
        update(Booking)
        .where(Booking.id == booking_id)
        .where(Booking.status == current)
        .values(status=new, **values)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount == 1


def book_session(session_id, user):
    """Book one seat in ``session_id`` for ``user`` and return the booking."""
    session = db.session.get(ClassSession, session_id)
    if session is None:
        raise NotFound('Session not found')

    booking = Booking.query.filter_by(user_id=user.id, session_id=session_id).first()
    if booking is not None and booking.is_active:
        raise DoubleBooking()

    if not _claim_seat(session_id):
        db.session.rollback()
        raise CapacityExceeded()

    if booking is None:
        booking = Booking(user_id=user.id, session_id=session_id,
                          status=STATUS_BOOKED, booked_at=utcnow())
        db.session.add(booking)
    elif not _set_status(booking.id, STATUS_CANCELLED, STATUS_BOOKED,
                         booked_at=utcnow(), cancelled_at=None):
        # Reactivated by a concurrent request of the same user
        db.session.rollback()
        raise DoubleBooking()

    try:
        db.session.flush()
    except IntegrityError:
        # A concurrent request from the same user inserted first
        db.session.rollback()
        raise DoubleBooking()

    audit.record('Booking', booking.id, 'BOOK', user.id, {
        'sessionId': session_id,
        'classId': session.class_id,
        'databaseId': booking.id,
    })
    db.session.commit()
    db.session.refresh(session)

    logger.info('User %s booked session %s (booking %s)', user.id, session_id, booking.id)
    return booking


def parse_booking_id(raw):
    if not isinstance(raw, str) or not BOOKING_ID_RE.fullmatch(raw):
        raise InvalidIdError('Invalid booking ID format')
    booking_id = int(raw)
    if booking_id > MAX_BOOKING_ID:
        # No row can carry an id past the INTEGER range
        raise NotFound('Booking not found')
    return booking_id


def cancel_booking(booking_id, actor):
    """Cancel a booking on behalf of its owner or an admin."""
    booking = db.session.get(Booking, booking_id)
    if booking is None:
        raise NotFound('Booking not found')

    if booking.user_id != actor.id and not actor.is_admin:
        raise Forbidden('You can only cancel your own bookings')

    if not _set_status(booking.id, STATUS_BOOKED, STATUS_CANCELLED, cancelled_at=utcnow()):
        db.session.rollback()
        raise Conflict('Booking is already cancelled', code='ALREADY_CANCELLED')
    _release_seat(booking.session_id)

    audit.record('Booking', booking.id, 'CANCEL', actor.id, {
        'sessionId': booking.session_id,
        'originalUserId': booking.user_id,
        'databaseId': booking.id,
    })
    db.session.commit()

    logger.info('User %s cancelled booking %s', actor.id, booking.id)
    return booking


def user_bookings(user):
    return (Booking.query
            .filter_by(user_id=user.id, status=STATUS_BOOKED)
            .order_by(Booking.booked_at.desc(), Booking.id.desc())
            .all())


def all_bookings():
    return Booking.query.order_by(Booking.booked_at.desc(), Booking.id.desc()).all()


def booking_stats():
    counts = dict(db.session.query(Booking.status, func.count(Booking.id))
                  .group_by(Booking.status).all())
    active = counts.get(STATUS_BOOKED, 0)
    cancelled = counts.get(STATUS_CANCELLED, 0)
    return {
        'totalBookings': sum(counts.values()),
        'activeBookings': active,
        'cancelledBookings': cancelled,
    }
