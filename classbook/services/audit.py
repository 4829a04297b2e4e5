"""
Audit Service

Audit rows are added to the caller's transaction so they commit (or roll
back) together with the change they describe.
"""

from sqlalchemy.orm import joinedload

from classbook.extensions import db
from classbook.models import AuditLog

MAX_LIMIT = 500
DEFAULT_LIMIT = 100


def record(entity, entity_id, action, user_id, details=None):
    entry = AuditLog(entity=entity, entity_id=str(entity_id), action=action,
                     user_id=user_id, details=details or {})
    db.session.add(entry)
    return entry


def list_audit_logs(entity=None, action=None, limit=DEFAULT_LIMIT):
    query = AuditLog.query.options(joinedload(AuditLog.user))
    if entity:
        query = query.filter(AuditLog.entity == entity)
    if action:
        query = query.filter(AuditLog.action == action)
    return (query.order_by(AuditLog.timestamp.desc(), AuditLog.id.desc())
            .limit(limit).all())
