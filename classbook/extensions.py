"""
Flask Extensions

Shared extension instances, bound to the application in ``create_app``.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_cors import CORS

# Database instance
db = SQLAlchemy()

# Resolves the current user from the bearer token on every request
login_manager = LoginManager()

# Throttling for the credential endpoints
limiter = Limiter(key_func=get_remote_address)

# Cross-origin access for the browser frontend
cors = CORS()
