"""
Classbook - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask
from sqlalchemy.engine import make_url

from classbook.config import Config
from classbook.extensions import cors, db, login_manager, limiter

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    from classbook.logging_config import configure_logging
    configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    limiter.init_app(app)
    cors.init_app(app, origins=app.config['CORS_ORIGINS'], supports_credentials=True,
                  methods=['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS', 'PATCH'],
                  allow_headers=['Content-Type', 'Authorization', 'X-Requested-With'])

    from classbook.auth.loader import init_login_manager
    init_login_manager(login_manager)

    # Register blueprints
    from classbook.auth import auth_bp
    from classbook.classes import classes_bp
    from classbook.sessions import sessions_bp
    from classbook.bookings import bookings_bp
    from classbook.audit import audit_bp
    from classbook.health import health_bp
    from classbook.frontend import frontend_bp

    app.register_blueprint(health_bp, url_prefix='/health')
    app.register_blueprint(auth_bp, url_prefix='/auth')
    app.register_blueprint(sessions_bp, url_prefix='/sessions')
    app.register_blueprint(classes_bp, url_prefix='/classes')
    app.register_blueprint(bookings_bp, url_prefix='/bookings')
    app.register_blueprint(audit_bp, url_prefix='/audit-logs')
    app.register_blueprint(frontend_bp)

    from classbook.errors import register_error_handlers
    register_error_handlers(app)

    from classbook.commands import register_commands
    register_commands(app)

    # Create database tables
    with app.app_context():
        url = make_url(app.config['SQLALCHEMY_DATABASE_URI'])
        if url.get_backend_name() == 'sqlite' and url.database and url.database != ':memory:':
            os.makedirs(os.path.dirname(os.path.abspath(url.database)), exist_ok=True)
        db.create_all()
        _ensure_default_data(app)

    logger.info('Classbook API ready (%s)', app.config.get('ENVIRONMENT'))
    return app


def _ensure_default_data(app):
    """Ensure the configured administrator account exists."""
    email = app.config.get('ADMIN_EMAIL')
    password = app.config.get('ADMIN_PASSWORD')
    if not email or not password:
        return

    from classbook.services.accounts import ensure_admin
    ensure_admin(email, password)
