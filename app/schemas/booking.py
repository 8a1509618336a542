"""
Pydantic schemas for booking construction and responses.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from app.models.booking import BookingStatus
from app.schemas.review import ReviewResponse


class BookingCreate(BaseModel):
    booking_status: Optional[BookingStatus] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    total_distance: int = Field(default=0, ge=0)
    driver_id: Optional[int] = None
    passenger_id: Optional[int] = None


class BookingResponse(BaseModel):
    id: int
    booking_status: Optional[BookingStatus]
    start_time: Optional[datetime]
    end_time: Optional[datetime]
    total_distance: int
    driver_id: Optional[int]
    passenger_id: Optional[int]
    review: Optional[ReviewResponse]
    created_at: datetime

    model_config = {"from_attributes": True}
