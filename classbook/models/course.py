"""
Class Model

``Course`` is the catalogue entry ("class") that sessions are scheduled for.
"""

import uuid

from classbook.extensions import db
from classbook.utils import utcnow, to_iso


class Course(db.Model):
    """A bookable class, e.g. "Morning Yoga"."""
    __tablename__ = 'classes'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=utcnow)

    sessions = db.relationship('ClassSession', back_populates='course', lazy=True,
                               order_by='ClassSession.start_time',
                               cascade='all, delete-orphan')

    def to_dict(self, include_sessions=False, include_bookings=False):
        data = {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'createdAt': to_iso(self.created_at),
        }
        if include_sessions:
            data['sessions'] = [s.to_dict(include_bookings=include_bookings) for s in self.sessions]
        return data

    def __repr__(self):
        return f'<Course {self.name}>'
