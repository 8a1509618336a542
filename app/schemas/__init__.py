from app.schemas.driver import DriverCreate, DriverResponse
from app.schemas.review import ReviewCreate, PassengerReviewCreate, ReviewResponse
from app.schemas.booking import BookingCreate, BookingResponse

__all__ = [
    "DriverCreate", "DriverResponse",
    "ReviewCreate", "PassengerReviewCreate", "ReviewResponse",
    "BookingCreate", "BookingResponse",
]
