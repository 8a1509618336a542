"""
Repository layer: one CrudRepository subclass per entity type.
"""

from .base import CrudRepository
from .booking_repository import BookingRepository
from .course_repository import CourseRepository, StudentRepository
from .driver_repository import DriverRepository
from .passenger_repository import PassengerRepository
from .review_repository import PassengerReviewRepository, ReviewRepository

__all__ = [
    'CrudRepository',
    'BookingRepository',
    'CourseRepository',
    'StudentRepository',
    'DriverRepository',
    'PassengerRepository',
    'PassengerReviewRepository',
    'ReviewRepository',
]
