from datetime import datetime, timedelta

import pytest
from werkzeug.security import generate_password_hash

from classbook import create_app
from classbook.config import TestConfig
from classbook.extensions import db
from classbook.models import ClassSession, Course, User, ROLE_ADMIN, ROLE_USER
from classbook.services.tokens import generate_token

PASSWORD = 'password123'


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


def create_user(app, email, role=ROLE_USER, password=PASSWORD):
    with app.app_context():
        user = User(email=email, password_hash=generate_password_hash(password), role=role)
        db.session.add(user)
        db.session.commit()
        return {'id': user.id, 'email': user.email, 'role': user.role,
                'token': generate_token(user)}


def bearer(token):
    return {'Authorization': f'Bearer {token}'}


def create_course(app, name='Test Class', description='A test class for unit testing'):
    with app.app_context():
        course = Course(name=name, description=description)
        db.session.add(course)
        db.session.commit()
        return course.id


def create_session(app, course_id, capacity=2, start=None):
    start = start or datetime(2030, 12, 31, 10, 0)
    with app.app_context():
        session = ClassSession(class_id=course_id, start_time=start,
                               end_time=start + timedelta(hours=2),
                               capacity=capacity, booked_seats=0)
        db.session.add(session)
        db.session.commit()
        return session.id


@pytest.fixture()
def user(app):
    return create_user(app, 'user@example.com')


@pytest.fixture()
def other_user(app):
    return create_user(app, 'another@example.com')


@pytest.fixture()
def admin(app):
    return create_user(app, 'admin@example.com', role=ROLE_ADMIN)


@pytest.fixture()
def user_headers(user):
    return bearer(user['token'])


@pytest.fixture()
def admin_headers(admin):
    return bearer(admin['token'])


@pytest.fixture()
def course_id(app):
    return create_course(app)


@pytest.fixture()
def session_id(app, course_id):
    return create_session(app, course_id, capacity=2)
