"""
Session Model

A scheduled occurrence of a class with a fixed number of seats.
``booked_seats`` counts active bookings and is only changed through the
guarded updates in ``classbook.services.booking``.
"""

import uuid

from classbook.extensions import db
from classbook.utils import utcnow, to_iso


class ClassSession(db.Model):
    """Scheduled session of a class"""
    __tablename__ = 'sessions'
    __table_args__ = (
        db.CheckConstraint('capacity > 0', name='ck_sessions_capacity_positive'),
        db.CheckConstraint('booked_seats >= 0 AND booked_seats <= capacity',
                           name='ck_sessions_booked_seats_in_range'),
    )

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    class_id = db.Column(db.String(36), db.ForeignKey('classes.id'), nullable=False, index=True)
    start_time = db.Column(db.DateTime, nullable=False, index=True)
    end_time = db.Column(db.DateTime, nullable=False)
    capacity = db.Column(db.Integer, nullable=False)
    booked_seats = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=utcnow)

    course = db.relationship('Course', back_populates='sessions')
    bookings = db.relationship('Booking', back_populates='session', lazy=True,
                               order_by='Booking.booked_at')

    @property
    def available_seats(self):
        return max(self.capacity - (self.booked_seats or 0), 0)

    def to_dict(self, include_class=False, include_bookings=False):
        data = {
            'id': self.id,
            'classId': self.class_id,
            'dateTime': to_iso(self.start_time),
            'startTime': to_iso(self.start_time),
            'endTime': to_iso(self.end_time),
            'capacity': self.capacity,
            'bookedSeats': self.booked_seats or 0,
            'availableSeats': self.available_seats,
        }
        if include_class:
            data['class'] = self.course.to_dict() if self.course else None
        if include_bookings:
            data['bookings'] = [b.to_dict() for b in self.bookings]
        return data

    def __repr__(self):
        return f'<ClassSession {self.id} class:{self.class_id} at {self.start_time}>'
