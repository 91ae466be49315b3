# backend/restaurant_slots/schemas/slots.py
"""
Pydantic schemas for slots API.
"""

from datetime import date
from typing import Optional
from pydantic import BaseModel, Field

from ..services.slots.advisor import Occasion


class SlotInfo(BaseModel):
    """Availability of a single slot."""
    time: str  # "HH:MM"
    availability: int = Field(ge=0, description="Remaining seats")
    popularity: int = Field(ge=0, description="Reservations in this exact slot")

    model_config = {"from_attributes": True}


class SlotsAdvisoryResponse(BaseModel):
    """Per-slot availability, suggested slot and wait estimate for a day."""
    restaurant_id: int
    date: date
    party_size: int
    occasion: Optional[Occasion] = None
    total_capacity: int
    availability: list[SlotInfo]
    suggestion: Optional[str] = None
    wait_estimate_minutes: Optional[int] = Field(None, ge=0, le=45)

    model_config = {"from_attributes": True}
