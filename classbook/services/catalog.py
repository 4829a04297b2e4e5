"""
Catalog Services

Classes and their scheduled sessions.
"""

import logging
from datetime import timedelta

from flask import current_app
from sqlalchemy.orm import joinedload, selectinload

from classbook.errors import NotFound, ValidationError
from classbook.extensions import db
from classbook.models import ClassSession, Course
from classbook.services import audit
from classbook.utils import parse_datetime

logger = logging.getLogger(__name__)

MAX_CAPACITY = 2 ** 31 - 1


def list_courses():
    return (Course.query
            .options(selectinload(Course.sessions))
            .order_by(Course.name)
            .all())


def get_course(course_id, with_bookings=False):
    options = selectinload(Course.sessions)
    if with_bookings:
        options = options.selectinload(ClassSession.bookings)
    course = Course.query.options(options).filter_by(id=course_id).first()
    if course is None:
        raise NotFound('Class not found')
    return course


def create_course(name, description, actor):
    if not isinstance(name, str) or not name.strip():
        raise ValidationError('Class name is required')
    name = name.strip()
    if description is not None and not isinstance(description, str):
        raise ValidationError('Description must be text')

    course = Course(name=name, description=description)
    db.session.add(course)
    db.session.flush()
    audit.record('Class', course.id, 'CREATE_CLASS', actor.id,
                 {'name': name, 'description': description})
    db.session.commit()

    logger.info('User %s created class %s (%s)', actor.id, course.id, name)
    return course


def list_sessions():
    return (ClassSession.query
            .options(joinedload(ClassSession.course))
            .order_by(ClassSession.start_time)
            .all())


def get_session(session_id):
    session = (ClassSession.query
               .options(joinedload(ClassSession.course))
               .filter_by(id=session_id)
               .first())
    if session is None:
        raise NotFound('Session not found')
    return session


def _parse_capacity(raw):
    if isinstance(raw, bool):
        raise ValidationError('Capacity must be a whole number')
    if isinstance(raw, float):
        if not raw.is_integer():
            raise ValidationError('Capacity must be a whole number')
        raw = int(raw)
    try:
        capacity = int(raw)
    except (TypeError, ValueError):
        raise ValidationError('Capacity must be a whole number')
    if capacity <= 0:
        raise ValidationError('Capacity must be greater than 0')
    if capacity > MAX_CAPACITY:
        raise ValidationError(f'Capacity must be at most {MAX_CAPACITY}')
    return capacity


def create_session(class_id, date_time, capacity, actor):
    if not class_id or not date_time or capacity in (None, ''):
        raise ValidationError('Class ID, date/time, and capacity are required')

    if not isinstance(class_id, str):
        raise ValidationError('Invalid class ID')

    seats = _parse_capacity(capacity)
    duration = timedelta(hours=current_app.config['SESSION_DURATION_HOURS'])
    try:
        start_time = parse_datetime(date_time)
        end_time = start_time + duration
    except (ValueError, OverflowError):
        raise ValidationError('Invalid date/time format')

    course = db.session.get(Course, class_id)
    if course is None:
        raise NotFound('Class not found')

    session = ClassSession(class_id=course.id, start_time=start_time,
                           end_time=end_time, capacity=seats,
                           booked_seats=0)
    db.session.add(session)
    db.session.flush()
    audit.record('Session', session.id, 'CREATE_SESSION', actor.id,
                 {'classId': course.id, 'dateTime': date_time, 'capacity': seats})
    db.session.commit()

    logger.info('User %s created session %s for class %s', actor.id, session.id, course.id)
    return session
