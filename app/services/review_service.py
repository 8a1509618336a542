"""
Startup demo for the review/booking persistence contract.

Builds a booking with a freshly constructed review (saved through the
booking's cascade), makes sure the sample driver exists, then reads it back
with the native license lookup. There is no error handling here: any
storage error propagates and aborts startup.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from app.core.logging import get_logger
from app.models.booking import Booking, BookingStatus
from app.models.driver import Driver
from app.models.review import Review
from app.repositories import BookingRepository, DriverRepository, ReviewRepository
from app.schemas.booking import BookingCreate
from app.schemas.driver import DriverCreate
from app.schemas.review import ReviewCreate

logger = get_logger(__name__)

SAMPLE_DRIVER = DriverCreate(name="ABCD", license_number="1")
SAMPLE_REVIEW = ReviewCreate(content="Excellent", rating=5.0)


@dataclass
class BootstrapResult:
    booking_id: int
    review_id: int
    driver_id: int
    driver_name: str | None


class ReviewService:
    def __init__(
        self,
        review_repository: ReviewRepository,
        booking_repository: BookingRepository,
        driver_repository: DriverRepository,
    ):
        self.review_repository = review_repository
        self.booking_repository = booking_repository
        self.driver_repository = driver_repository

    async def run(self) -> BootstrapResult:
        logger.info("bootstrap_started")

        review = Review(**SAMPLE_REVIEW.model_dump())
        booking = Booking(
            review=review,
            **BookingCreate(
                booking_status=BookingStatus.COMPLETED,
                end_time=datetime.now(timezone.utc),
            ).model_dump(),
        )
        await self.booking_repository.save(booking)
        logger.info("bootstrap_booking_saved", booking_id=booking.id, review_id=review.id)

        driver = await self.driver_repository.find_by_license_number(SAMPLE_DRIVER.license_number)
        if driver is None:
            driver = await self.driver_repository.save(Driver(**SAMPLE_DRIVER.model_dump()))
            logger.info("bootstrap_driver_saved", driver_id=driver.id)

        found = await self.driver_repository.raw_find_by_id_and_license_number(
            driver.id, SAMPLE_DRIVER.license_number
        )
        if found is None:
            raise LookupError(f"Driver {driver.id} not found by license {SAMPLE_DRIVER.license_number}")

        logger.info(
            "bootstrap_completed",
            driver_id=found.id,
            driver_name=found.name,
            reviews=await self.review_repository.count(),
        )
        return BootstrapResult(
            booking_id=booking.id,
            review_id=review.id,
            driver_id=found.id,
            driver_name=found.name,
        )
