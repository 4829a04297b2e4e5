"""
Booking Model
"""

from classbook.extensions import db
from classbook.utils import utcnow, to_iso

STATUS_BOOKED = 'booked'
STATUS_CANCELLED = 'cancelled'


class Booking(db.Model):
    """A user's seat in a session.

    One row per (user, session); cancelling flips ``status`` and booking
    again reactivates the same row.
    """
    __tablename__ = 'bookings'
    __table_args__ = (
        db.UniqueConstraint('user_id', 'session_id', name='uq_bookings_user_session'),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False, index=True)
    session_id = db.Column(db.String(36), db.ForeignKey('sessions.id'), nullable=False, index=True)
    status = db.Column(db.String(20), nullable=False, default=STATUS_BOOKED, index=True)
    booked_at = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)
    cancelled_at = db.Column(db.DateTime)

    user = db.relationship('User', back_populates='bookings')
    session = db.relationship('ClassSession', back_populates='bookings')

    @property
    def is_active(self):
        return self.status == STATUS_BOOKED

    def to_dict(self):
        return {
            'id': self.id,
            'userId': self.user_id,
            'sessionId': self.session_id,
            'status': self.status,
            'bookedAt': to_iso(self.booked_at),
            'cancelledAt': to_iso(self.cancelled_at),
        }

    def to_listing(self):
        """Shape used by the booking lists: nested session, class and user."""
        session = self.session
        course = session.course if session else None
        return {
            'id': self.id,
            'sessionId': self.session_id,
            'status': self.status,
            'bookedAt': to_iso(self.booked_at),
            'session': {
                'id': self.session_id,
                'class': {'id': course.id, 'name': course.name} if course else None,
                'dateTime': to_iso(session.start_time) if session else None,
            },
            'user': self.user.to_summary() if self.user else None,
        }

    def __repr__(self):
        return f'<Booking {self.id} user:{self.user_id} session:{self.session_id} {self.status}>'
