"""
Audit Log Routes
"""

from flask import jsonify, request

from classbook.audit import audit_bp
from classbook.auth.decorators import admin_required
from classbook.errors import ValidationError
from classbook.services import audit


@audit_bp.route('', methods=['GET'])
@admin_required
def list_audit_logs():
    """Audit trail, newest first.

    Query Parameters:
        entity: only entries for this entity type (``Class``, ``Session``, ``Booking``)
        action: only entries with this action (``BOOK``, ``CANCEL``, ...)
        limit: maximum number of entries, 1 to 500
    """
    raw_limit = request.args.get('limit')
    try:
        limit = int(raw_limit) if raw_limit is not None else audit.DEFAULT_LIMIT
    except ValueError:
        limit = None
    if limit is None or not 1 <= limit <= audit.MAX_LIMIT:
        raise ValidationError(f'limit must be between 1 and {audit.MAX_LIMIT}')

    entries = audit.list_audit_logs(entity=request.args.get('entity'),
                                    action=request.args.get('action'),
                                    limit=limit)
    return jsonify([e.to_dict() for e in entries])
