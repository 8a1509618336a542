"""
Review model and its passenger-specific subtype.

Both live in the single booking_reviews table. review_type tags each row so
a query through Review returns every review (passenger reviews come back as
PassengerReview instances) while a query through PassengerReview only sees
its own rows. Only one row exists per review, whichever class built it.
"""

from sqlalchemy import Column, Float, String
from sqlalchemy.orm import relationship

from app.db.base import Base, TimestampMixin


class Review(Base, TimestampMixin):
    __tablename__ = "booking_reviews"

    content = Column(String(1000), nullable=False)
    rating = Column(Float, nullable=True)
    review_type = Column(String(32), nullable=False)

    # Relationships
    booking = relationship("Booking", back_populates="review", uselist=False, lazy="selectin")

    __mapper_args__ = {
        "polymorphic_on": review_type,
        "polymorphic_identity": "review",
        # base queries also load subtype columns, so a Review query returns complete PassengerReviews
        "with_polymorphic": "*",
    }

    def __repr__(self) -> str:
        return f"<Review(id={self.id}, rating={self.rating})>"

    def __str__(self) -> str:
        return f"{self.content} {self.created_at} {self.updated_at}"


class PassengerReview(Review):
    passenger_comment = Column(String(1000), nullable=True)

    __mapper_args__ = {
        "polymorphic_identity": "passenger_review",
    }

    def __repr__(self) -> str:
        return f"<PassengerReview(id={self.id}, rating={self.rating})>"
