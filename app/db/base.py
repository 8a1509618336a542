"""
Declarative base and the audit-field contract shared by every entity.

Audit timestamps are written by `stamp_audit_fields`, which the repository
layer calls on every write path right before flushing. Nothing is stamped
implicitly through ORM events, so a row only gets timestamps by going
through a repository.
"""

from datetime import datetime, timedelta, timezone

from sqlalchemy import Column, DateTime, Integer, inspect
from sqlalchemy.orm import ONETOMANY, DeclarativeBase, Session

_CLOCK_STEP = timedelta(microseconds=1)


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    """Surrogate integer key plus creation/update timestamps."""

    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone=True columns
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _next_stamp(previous: datetime | None, now: datetime) -> datetime:
    if previous is None:
        return now
    previous = _as_utc(previous)
    if now <= previous:
        return previous + _CLOCK_STEP
    return now


def stamp_audit_fields(session: Session) -> None:
    """
    Stamp audit fields on everything the next flush will write.

    New objects get created_at == updated_at. Persistent objects with real
    column changes only get a fresh updated_at, strictly greater than the
    previous one. Objects pulled in by cascade are covered because they are
    already in session.new / session.dirty by the time this runs. Rows whose
    foreign key the flush will null out because their parent is being
    deleted (a booking losing its review or driver) are stamped as well.

    Reading a previous stamp may load expired state, so async callers must
    run this through AsyncSession.run_sync.
    """
    with session.no_autoflush:
        _stamp(session, utc_now())


def _stamp(session: Session, now: datetime) -> None:
    for obj in list(session.new):
        if isinstance(obj, TimestampMixin):
            obj.created_at = now
            obj.updated_at = now

    touched = [
        obj for obj in list(session.dirty)
        if isinstance(obj, TimestampMixin) and session.is_modified(obj, include_collections=False)
    ]
    deleted = list(session.deleted)
    for obj in deleted:
        for child in _detached_children(obj):
            if child not in deleted and child not in touched:
                touched.append(child)

    for obj in touched:
        obj.updated_at = _next_stamp(obj.updated_at, now)


def _detached_children(obj) -> list:
    """Children the ORM will un-link (not delete) when obj is deleted."""
    children = []
    for rel in inspect(obj).mapper.relationships:
        if rel.direction is not ONETOMANY or rel.cascade.delete or rel.passive_deletes:
            continue
        value = getattr(obj, rel.key)
        if value is None:
            continue
        for child in (value if rel.uselist else [value]):
            if isinstance(child, TimestampMixin):
                children.append(child)
    return children
