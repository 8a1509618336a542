"""
Tests for how storage errors reach the caller.
"""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import DataError, DBAPIError, IntegrityError, OperationalError, ProgrammingError

from app.core.exceptions import (
    ConnectivityFailure,
    ConstraintViolation,
    RepositoryError,
    classify_storage_error,
)
from app.db.base import Base
from app.db.session import engine
from app.models import Driver
from app.repositories import DriverRepository


def _driver_error(cls):
    return cls("INSERT INTO drivers", {}, Exception("rejected"))


@pytest.mark.asyncio
async def test_constraint_violation_is_chained(driver_repo, test_driver):
    with pytest.raises(ConstraintViolation) as exc_info:
        await driver_repo.save(Driver(license_number="1"))

    assert isinstance(exc_info.value, RepositoryError)
    assert exc_info.value.__cause__ is not None


@pytest.mark.asyncio
async def test_session_usable_after_constraint_violation(driver_repo, test_driver):
    with pytest.raises(ConstraintViolation):
        await driver_repo.save(Driver(license_number="1"))

    saved = await driver_repo.save(Driver(name="Next", license_number="3"))
    assert saved.id is not None
    assert await driver_repo.count() == 2


@pytest.mark.asyncio
async def test_update_after_constraint_violation_stamps_expired_entity(driver_repo, test_driver):
    """The rollback expires loaded entities; updating one afterwards still works."""
    driver_id = test_driver.id
    updated_at = test_driver.updated_at

    with pytest.raises(ConstraintViolation):
        await driver_repo.save(Driver(license_number="1"))

    test_driver.name = "ABCD Renamed"
    await driver_repo.save(test_driver)

    assert test_driver.updated_at > updated_at
    reloaded = await driver_repo.find_by_id(driver_id)
    assert reloaded.name == "ABCD Renamed"


@pytest.mark.asyncio
async def test_missing_table_is_connectivity_failure(driver_repo):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    with pytest.raises(ConnectivityFailure):
        await driver_repo.count()


class _BrokenQueryRepository(DriverRepository):
    async def run_malformed(self):
        return await self._scalars(text("SELEC * FROM drivers"))


@pytest.mark.asyncio
async def test_malformed_statement_is_connectivity_failure(db_session, test_driver):
    repo = _BrokenQueryRepository(db_session)

    with pytest.raises(ConnectivityFailure) as exc_info:
        await repo.run_malformed()

    assert isinstance(exc_info.value.__cause__, DBAPIError)
    # the session is rolled back and still usable
    assert await repo.count() == 1


@pytest.mark.asyncio
async def test_data_error_on_write_is_constraint_violation(driver_repo, monkeypatch):
    """A value the column refuses surfaces as ConstraintViolation, not a raw driver error."""

    async def refuse(*args, **kwargs):
        raise _driver_error(DataError)

    monkeypatch.setattr(driver_repo.session, "flush", refuse)

    with pytest.raises(ConstraintViolation) as exc_info:
        await driver_repo.save(Driver(name="X" * 300, license_number="DL-LONG"))

    assert isinstance(exc_info.value.__cause__, DataError)


@pytest.mark.parametrize(
    "error_cls, expected",
    [
        (IntegrityError, ConstraintViolation),
        (DataError, ConstraintViolation),
        (OperationalError, ConnectivityFailure),
        (ProgrammingError, ConnectivityFailure),
    ],
)
def test_classify_storage_error(error_cls, expected):
    assert classify_storage_error(_driver_error(error_cls)) is expected


def test_unclassified_driver_error_is_left_alone():
    assert classify_storage_error(_driver_error(DBAPIError)) is None
