"""
Audit Log Model
"""

import uuid

from classbook.extensions import db
from classbook.utils import utcnow, to_iso


class AuditLog(db.Model):
    """Who did what to which entity, and when"""
    __tablename__ = 'audit_logs'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    entity = db.Column(db.String(50), nullable=False, index=True)
    entity_id = db.Column(db.String(64), nullable=False, index=True)
    action = db.Column(db.String(50), nullable=False, index=True)
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False, index=True)
    details = db.Column(db.JSON)
    timestamp = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)

    user = db.relationship('User')

    def to_dict(self):
        return {
            'id': self.id,
            'entity': self.entity,
            'entityId': self.entity_id,
            'action': self.action,
            'userId': self.user_id,
            'details': self.details,
            'timestamp': to_iso(self.timestamp),
            'user': self.user.to_summary() if self.user else None,
        }

    def __repr__(self):
        return f'<AuditLog {self.action} {self.entity}:{self.entity_id}>'
