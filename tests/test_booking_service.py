import pytest
from sqlalchemy.exc import IntegrityError

from classbook.errors import CapacityExceeded, Conflict, DoubleBooking, InvalidIdError, NotFound
from classbook.extensions import db
from classbook.models import Booking, ClassSession, User
from classbook.services import booking as booking_service
from conftest import create_session, create_user


def test_seat_claim_stops_at_capacity(app, session_id):
    with app.app_context():
        assert booking_service._claim_seat(session_id)
        assert booking_service._claim_seat(session_id)
        assert not booking_service._claim_seat(session_id)
        db.session.commit()
        assert db.session.get(ClassSession, session_id).booked_seats == 2


def test_seat_release_never_goes_negative(app, session_id):
    with app.app_context():
        booking_service._release_seat(session_id)
        db.session.commit()
        assert db.session.get(ClassSession, session_id).booked_seats == 0


def test_duplicate_booking_rows_are_rejected_by_the_database(app, user, session_id):
    with app.app_context():
        db.session.add(Booking(user_id=user['id'], session_id=session_id))
        db.session.commit()
        db.session.add(Booking(user_id=user['id'], session_id=session_id))
        with pytest.raises(IntegrityError):
            db.session.commit()
        db.session.rollback()


def test_racing_insert_is_reported_as_double_booking(app, user, session_id, monkeypatch):
    with app.app_context():
        # Another request inserted the row after our lookup ran
        db.session.add(Booking(user_id=user['id'], session_id=session_id, status='cancelled'))
        db.session.commit()

        class StaleLookup:
            def filter_by(self, **kwargs):
                return self

            def first(self):
                return None

        monkeypatch.setattr(booking_service.Booking, 'query', StaleLookup())
        member = db.session.get(User, user['id'])
        with pytest.raises(DoubleBooking):
            booking_service.book_session(session_id, member)
        monkeypatch.undo()

        # The seat claimed before the failed insert was rolled back
        assert db.session.get(ClassSession, session_id).booked_seats == 0


def test_full_session_leaves_counter_untouched(app, course_id):
    session_id = create_session(app, course_id, capacity=1)
    first = create_user(app, 'first@example.com')
    second = create_user(app, 'second@example.com')
    with app.app_context():
        booking_service.book_session(session_id, db.session.get(User, first['id']))
        with pytest.raises(CapacityExceeded):
            booking_service.book_session(session_id, db.session.get(User, second['id']))
        assert db.session.get(ClassSession, session_id).booked_seats == 1
        assert Booking.query.count() == 1


def test_double_booking_does_not_claim_a_seat(app, user, session_id):
    with app.app_context():
        member = db.session.get(User, user['id'])
        booking_service.book_session(session_id, member)
        with pytest.raises(DoubleBooking):
            booking_service.book_session(session_id, member)
        assert db.session.get(ClassSession, session_id).booked_seats == 1


def test_book_missing_session(app, user):
    with app.app_context():
        with pytest.raises(NotFound):
            booking_service.book_session('missing', db.session.get(User, user['id']))


def test_parse_booking_id():
    assert booking_service.parse_booking_id('42') == 42
    with pytest.raises(Exception) as excinfo:
        booking_service.parse_booking_id('4x2')
    assert excinfo.value.code == 'INVALID_ID'

    with pytest.raises(InvalidIdError):
        booking_service.parse_booking_id('4_2')
    with pytest.raises(NotFound):
        booking_service.parse_booking_id(str(2 ** 63))


def _concurrent_reactivation(real_set_status):
    """Let another request flip the row first, then run ours against it."""
    def set_status(booking_id, current, new, **values):
        real_set_status(booking_id, current, new, **values)
        return real_set_status(booking_id, current, new, **values)
    return set_status


def test_concurrent_reactivation_is_double_booking(app, user, session_id, monkeypatch):
    with app.app_context():
        member = db.session.get(User, user['id'])
        booking = booking_service.book_session(session_id, member)
        booking_service.cancel_booking(booking.id, member)
        booking_id = booking.id

        monkeypatch.setattr(booking_service, '_set_status',
                            _concurrent_reactivation(booking_service._set_status))
        with pytest.raises(DoubleBooking):
            booking_service.book_session(session_id, member)

        assert db.session.get(Booking, booking_id).status == 'cancelled'
        assert db.session.get(ClassSession, session_id).booked_seats == 0


def test_concurrent_cancel_is_already_cancelled(app, user, session_id, monkeypatch):
    with app.app_context():
        member = db.session.get(User, user['id'])
        booking_id = booking_service.book_session(session_id, member).id

        monkeypatch.setattr(booking_service, '_set_status',
                            _concurrent_reactivation(booking_service._set_status))
        with pytest.raises(Conflict) as excinfo:
            booking_service.cancel_booking(booking_id, member)
        assert excinfo.value.code == 'ALREADY_CANCELLED'

        assert db.session.get(Booking, booking_id).status == 'booked'
        assert db.session.get(ClassSession, session_id).booked_seats == 1
