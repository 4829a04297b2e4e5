"""
Auth Routes

Account registration and token issue.
"""

from flask import current_app, jsonify
from flask_login import current_user, login_required

from classbook.auth import auth_bp
from classbook.extensions import limiter
from classbook.services import accounts
from classbook.services.tokens import generate_token
from classbook.utils import json_body


def _auth_limit():
    return current_app.config['AUTH_RATE_LIMIT']


@auth_bp.route('/register', methods=['POST'])
@limiter.limit(_auth_limit)
def register():
    """Create a regular user account"""
    data = json_body()
    user = accounts.register_user(data.get('email'), data.get('password'))
    return jsonify(user.to_dict())


@auth_bp.route('/login', methods=['POST'])
@limiter.limit(_auth_limit)
def login():
    """Exchange credentials for a bearer token"""
    data = json_body()
    user = accounts.authenticate(data.get('email'), data.get('password'))
    return jsonify({'token': generate_token(user), 'user': user.to_dict()})


@auth_bp.route('/me')
@login_required
def me():
    return jsonify(current_user.to_dict())
