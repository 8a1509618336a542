from sqlalchemy.orm import relationship

from app.db.base import Base, TimestampMixin


class Passenger(Base, TimestampMixin):
    __tablename__ = "passengers"

    # Relationships
    bookings = relationship("Booking", back_populates="passenger", lazy="selectin")

    def __repr__(self) -> str:
        return f"<Passenger(id={self.id})>"
