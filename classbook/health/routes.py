"""
Health Routes

Liveness and database connectivity checks for load balancers.
"""

import logging
import time

from flask import current_app, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from classbook.extensions import db
from classbook.health import health_bp
from classbook.utils import to_iso, utcnow

logger = logging.getLogger(__name__)

STARTED_AT = time.monotonic()


def _base_status():
    return {
        'timestamp': to_iso(utcnow()),
        'uptime': round(time.monotonic() - STARTED_AT, 3),
        'environment': current_app.config.get('ENVIRONMENT', 'development'),
        'version': current_app.config.get('APP_VERSION', '1.0.0'),
    }


@health_bp.route('', methods=['GET'])
def health():
    """Report healthy only when the database answers"""
    status = _base_status()
    try:
        db.session.execute(text('SELECT 1'))
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error('Health check failed: %s', e)
        status.update({'status': 'unhealthy', 'database': 'disconnected', 'error': str(e)})
        return jsonify(status), 503

    status.update({'status': 'healthy', 'database': 'connected'})
    return jsonify(status)


@health_bp.route('/ping', methods=['GET'])
def ping():
    return jsonify({'message': 'pong', 'timestamp': to_iso(utcnow())})
