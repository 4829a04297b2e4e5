"""
Shared helpers for timestamps and request parsing.
"""

from datetime import datetime, timezone

from flask import request


def utcnow():
    """Naive UTC now; every stored timestamp is naive UTC."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_iso(value):
    """Serialise a naive UTC datetime as ``2024-12-31T10:00:00.000Z``."""
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec='milliseconds') + 'Z'


def parse_datetime(raw):
    """Parse an ISO-8601 string into naive UTC.

    Values without an offset (``<input type="datetime-local">``) are taken as UTC.
    Raises ``ValueError`` for anything unparseable.
    """
    if not isinstance(raw, str) or not raw.strip():
        raise ValueError('empty date/time')
    text = raw.strip()
    if text.endswith(('Z', 'z')):
        text = text[:-1] + '+00:00'
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def json_body():
    """Request JSON as a dict; a missing or malformed body reads as ``{}``."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
