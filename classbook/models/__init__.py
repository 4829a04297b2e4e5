"""
Models Package

Exports all models for easy importing.
"""

from classbook.models.user import User, ROLE_ADMIN, ROLE_USER
from classbook.models.course import Course
from classbook.models.class_session import ClassSession
from classbook.models.booking import Booking, STATUS_BOOKED, STATUS_CANCELLED
from classbook.models.audit_log import AuditLog

__all__ = [
    'User', 'Course', 'ClassSession', 'Booking', 'AuditLog',
    'ROLE_ADMIN', 'ROLE_USER', 'STATUS_BOOKED', 'STATUS_CANCELLED',
]
