"""
Pydantic schemas for reviews. One response shape covers both review kinds;
passenger_comment stays None for plain reviews.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class ReviewCreate(BaseModel):
    content: str = Field(..., min_length=1, max_length=1000)
    rating: Optional[float] = Field(None, ge=0, le=5)


class PassengerReviewCreate(ReviewCreate):
    passenger_comment: Optional[str] = Field(None, max_length=1000)


class ReviewResponse(BaseModel):
    id: int
    content: str
    rating: Optional[float]
    review_type: str
    passenger_comment: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
