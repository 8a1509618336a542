from app.models.booking import Booking, BookingStatus
from app.models.course import Course, Student, course_student
from app.models.driver import Driver
from app.models.passenger import Passenger
from app.models.review import PassengerReview, Review

__all__ = [
    "Booking", "BookingStatus",
    "Course", "Student", "course_student",
    "Driver", "Passenger",
    "PassengerReview", "Review",
]
