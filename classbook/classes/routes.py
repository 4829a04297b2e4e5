"""
Class Routes

Public catalogue reads; admins create classes.
"""

from flask import jsonify
from flask_login import current_user

from classbook.auth.decorators import admin_required
from classbook.classes import classes_bp
from classbook.services import catalog
from classbook.utils import json_body


@classes_bp.route('', methods=['GET'])
def list_classes():
    """All classes with their sessions"""
    courses = catalog.list_courses()
    return jsonify([c.to_dict(include_sessions=True) for c in courses])


@classes_bp.route('', methods=['POST'])
@admin_required
def create_class():
    data = json_body()
    course = catalog.create_course(data.get('name'), data.get('description'), current_user)
    return jsonify(course.to_dict()), 201


@classes_bp.route('/<class_id>', methods=['GET'])
def get_class(class_id):
    """One class with its sessions and their bookings"""
    course = catalog.get_course(class_id, with_bookings=True)
    return jsonify(course.to_dict(include_sessions=True, include_bookings=True))
