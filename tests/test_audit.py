"""
Unit tests for the audit stamping gateway. No database needed: objects only
have to be pending or dirty in a plain Session.
"""

from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import Session

from app.db.base import stamp_audit_fields, _next_stamp
from app.models import Booking, Driver, Review


def test_new_objects_get_equal_timestamps():
    session = Session()
    driver = Driver(name="ABCD", license_number="1")
    session.add(driver)

    stamp_audit_fields(session)

    assert driver.created_at is not None
    assert driver.created_at == driver.updated_at
    assert driver.created_at.tzinfo is not None


def test_cascaded_objects_are_stamped():
    session = Session()
    review = Review(content="Excellent", rating=5.0)
    session.add(Booking(review=review))

    stamp_audit_fields(session)

    assert review.created_at is not None
    assert review.created_at == review.updated_at


def test_next_stamp_moves_forward_when_clock_has_not():
    now = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)

    assert _next_stamp(None, now) == now
    assert _next_stamp(now - timedelta(seconds=1), now) == now
    assert _next_stamp(now, now) == now + timedelta(microseconds=1)


def test_next_stamp_accepts_naive_previous_value():
    now = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
    naive_later = datetime(2026, 10, 19, 12, 5)

    assert _next_stamp(naive_later, now) == naive_later.replace(tzinfo=timezone.utc) + timedelta(microseconds=1)
