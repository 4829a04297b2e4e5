"""
Configuration settings for the Classbook API
"""
import os


def _env_list(name, default):
    raw = os.environ.get(name)
    if not raw:
        return list(default)
    return [item.strip() for item in raw.split(',') if item.strip()]


class Config:
    """Flask application configuration"""

    # Flask secret key
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'classbook.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Bearer tokens
    JWT_SECRET = os.environ.get('JWT_SECRET') or 'supersecret'
    JWT_ALGORITHM = 'HS256'
    JWT_EXPIRES_IN = int(os.environ.get('JWT_EXPIRES_IN') or 24 * 60 * 60)

    # Booking settings
    SESSION_DURATION_HOURS = int(os.environ.get('SESSION_DURATION_HOURS') or 2)

    # Origins allowed to call the API from a browser
    CORS_ORIGINS = _env_list('CORS_ORIGINS', [
        'https://class-book-management-full-stack.vercel.app',
        'http://localhost:3000',
    ])

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'

    # Flask-Limiter
    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URI = os.environ.get('RATELIMIT_STORAGE_URI') or 'memory://'
    AUTH_RATE_LIMIT = os.environ.get('AUTH_RATE_LIMIT') or '20 per minute'

    # Default administrator, ensured at start-up when both are set
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')

    APP_VERSION = os.environ.get('APP_VERSION') or '1.0.0'
    ENVIRONMENT = os.environ.get('ENVIRONMENT') or os.environ.get('FLASK_ENV') or 'development'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    JWT_SECRET = 'test-secret'
    RATELIMIT_ENABLED = False
    ADMIN_EMAIL = None
    ADMIN_PASSWORD = None
    ENVIRONMENT = 'test'
