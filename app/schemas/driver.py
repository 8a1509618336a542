"""
Pydantic schemas for driver construction and responses.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class DriverCreate(BaseModel):
    name: Optional[str] = Field(None, max_length=255)
    license_number: str = Field(..., min_length=1, max_length=64)


class DriverResponse(BaseModel):
    id: int
    name: Optional[str]
    license_number: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
