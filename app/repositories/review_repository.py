"""
Review repositories.

ReviewRepository sees every row in booking_reviews; PassengerReviewRepository
is restricted to passenger reviews by the mapper's discriminator. Both point
at the same rows, so a delete through either one removes the review for both.
"""

from app.models.review import PassengerReview, Review
from app.repositories.base import CrudRepository


class ReviewRepository(CrudRepository[Review]):
    model_class = Review


class PassengerReviewRepository(CrudRepository[PassengerReview]):
    model_class = PassengerReview
