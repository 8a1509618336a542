"""
Driver model.

license_number is the natural key: unique and required at the DB level, so a
duplicate surfaces as an IntegrityError on flush.
"""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from app.db.base import Base, TimestampMixin


class Driver(Base, TimestampMixin):
    __tablename__ = "drivers"

    name = Column(String(255), nullable=True)
    license_number = Column(String(64), unique=True, index=True, nullable=False)

    # Relationships
    bookings = relationship("Booking", back_populates="driver", lazy="selectin")

    def __repr__(self) -> str:
        return f"<Driver(id={self.id}, name={self.name}, license={self.license_number})>"
