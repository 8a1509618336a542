"""
Run the startup demo against the configured database.

    python -m app.bootstrap
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.logging import setup_logging
from app.db.session import async_session_maker, engine, init_models
from app.repositories import BookingRepository, DriverRepository, ReviewRepository
from app.services.review_service import BootstrapResult, ReviewService


def build_review_service(session: AsyncSession) -> ReviewService:
    return ReviewService(
        review_repository=ReviewRepository(session),
        booking_repository=BookingRepository(session),
        driver_repository=DriverRepository(session),
    )


async def run_bootstrap() -> BootstrapResult:
    async with async_session_maker() as session:
        return await build_review_service(session).run()


async def main() -> None:
    setup_logging()
    if get_settings().CREATE_SCHEMA_ON_STARTUP:
        await init_models()
    try:
        await run_bootstrap()
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
