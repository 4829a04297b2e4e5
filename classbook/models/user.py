"""
User Model
"""

import uuid

from flask_login import UserMixin

from classbook.extensions import db
from classbook.utils import utcnow

ROLE_USER = 'user'
ROLE_ADMIN = 'Admin'


class User(UserMixin, db.Model):
    """Account that can log in and book sessions"""
    __tablename__ = 'users'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    # Role-based access control
    role = db.Column(db.String(20), nullable=False, default=ROLE_USER)
    created_at = db.Column(db.DateTime, default=utcnow)

    bookings = db.relationship('Booking', back_populates='user', lazy=True)

    @property
    def is_admin(self):
        return self.role == ROLE_ADMIN

    def to_dict(self):
        return {'id': self.id, 'email': self.email, 'role': self.role}

    def to_summary(self):
        return {'email': self.email, 'role': self.role}

    def __repr__(self):
        return f'<User {self.email}>'
