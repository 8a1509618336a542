"""
Booking model: one ride between a driver and a passenger.

Key design decisions:
- The booking owns the review link (review_id), so a new Review attached to
  a new Booking is inserted first and the FK is filled in on the same flush
- Review cascade is save-update only: deleting a booking never deletes its review
- Driver, passenger and review FKs are nullable and SET NULL on delete so a
  booking outlives any of them
- Status is stored as the enum name, not an ordinal
"""

import enum

from sqlalchemy import BigInteger, Column, DateTime, Enum, ForeignKey, Integer
from sqlalchemy.orm import relationship

from app.db.base import Base, TimestampMixin


class BookingStatus(str, enum.Enum):
    SCHEDULED = "SCHEDULED"
    CANCELLED = "CANCELLED"
    CAR_ARRIVED = "CAR_ARRIVED"
    ASSIGNING_DRIVER = "ASSIGNING_DRIVER"
    IN_RIDE = "IN_RIDE"
    COMPLETED = "COMPLETED"


class Booking(Base, TimestampMixin):
    __tablename__ = "bookings"

    booking_status = Column(
        Enum(BookingStatus, native_enum=False, length=32, name="booking_status"),
        nullable=True,
    )
    start_time = Column(DateTime(timezone=True), nullable=True)
    end_time = Column(DateTime(timezone=True), nullable=True)
    total_distance = Column(BigInteger, nullable=False, default=0)

    review_id = Column(
        Integer,
        ForeignKey("booking_reviews.id", ondelete="SET NULL"),
        nullable=True,
        unique=True,
    )
    driver_id = Column(Integer, ForeignKey("drivers.id", ondelete="SET NULL"), nullable=True, index=True)
    passenger_id = Column(Integer, ForeignKey("passengers.id", ondelete="SET NULL"), nullable=True, index=True)

    # Relationships
    review = relationship("Review", back_populates="booking", cascade="save-update, merge", lazy="selectin")
    driver = relationship("Driver", back_populates="bookings", lazy="selectin")
    passenger = relationship("Passenger", back_populates="bookings", lazy="selectin")

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, status={self.booking_status}, driver={self.driver_id}, review={self.review_id})>"
