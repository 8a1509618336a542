"""Booking repository for CRUD operations."""

from sqlalchemy import select

from app.models.booking import Booking
from app.repositories.base import CrudRepository


class BookingRepository(CrudRepository[Booking]):
    """Repository for booking CRUD operations."""

    model_class = Booking

    async def find_all_by_driver_id(self, driver_id: int) -> list[Booking]:
        return await self._scalars(
            select(Booking)
            .where(Booking.driver_id == driver_id)
            .order_by(Booking.id)
        )
