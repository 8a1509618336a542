"""
Storage error taxonomy raised by the repository layer.

Lookups that find nothing return None and never raise. Everything else the
database rejects is re-raised as one of the kinds below, chained to the
original driver error.
"""

from sqlalchemy.exc import (
    DataError,
    DBAPIError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    ProgrammingError,
)


class RepositoryError(Exception):
    """Base class for errors surfaced by repositories."""

    metric_kind = "repository_error"


class ConstraintViolation(RepositoryError):
    """A write violated a unique, not-null, foreign-key or column type/length constraint."""

    metric_kind = "constraint_violation"


class ConnectivityFailure(RepositoryError):
    """The storage engine was unreachable or rejected the statement itself."""

    metric_kind = "connectivity_failure"


def classify_storage_error(exc: DBAPIError) -> type[RepositoryError] | None:
    """
    Map a SQLAlchemy driver error to its repository error kind.

    DataError (value too long, out of range, bad type) is a value the column
    refuses, so it counts as a constraint violation. ProgrammingError is what
    PostgreSQL drivers raise for malformed SQL or unknown tables/columns;
    SQLite reports the same problems as OperationalError.
    """
    if isinstance(exc, (IntegrityError, DataError)):
        return ConstraintViolation
    if isinstance(exc, (OperationalError, InterfaceError, ProgrammingError)):
        return ConnectivityFailure
    return None
