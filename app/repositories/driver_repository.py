"""
Driver repository with the license lookups.

Both lookups bind id and license_number as parameters. The native variant
is plain SQL against the drivers table, so column names are the physical
ones and a typo only shows up when the statement runs. The ORM variant is
built from mapped attributes, so a bad column reference fails as soon as
the expression is constructed.
"""

from sqlalchemy import select, text

from app.models.driver import Driver
from app.repositories.base import CrudRepository

_RAW_FIND_BY_ID_AND_LICENSE = text(
    "SELECT * FROM drivers WHERE id = :id AND license_number = :license_number"
)


class DriverRepository(CrudRepository[Driver]):
    """Repository for driver CRUD operations and license lookups."""

    model_class = Driver

    async def raw_find_by_id_and_license_number(self, driver_id: int, license_number: str) -> Driver | None:
        return await self._scalar_one_or_none(
            select(Driver).from_statement(_RAW_FIND_BY_ID_AND_LICENSE),
            {"id": driver_id, "license_number": license_number},
        )

    async def find_by_id_and_license_number(self, driver_id: int, license_number: str) -> Driver | None:
        return await self._scalar_one_or_none(
            select(Driver).where(
                Driver.id == driver_id,
                Driver.license_number == license_number,
            )
        )

    async def find_by_license_number(self, license_number: str) -> Driver | None:
        return await self._scalar_one_or_none(select(Driver).where(Driver.license_number == license_number))
