# backend/restaurant_slots/schemas/restaurants.py

from typing import Optional
from pydantic import BaseModel


class RestaurantRead(BaseModel):
    id: int
    name: str
    slug: str
    city: Optional[str] = None

    # NULL → settings defaults
    seating_capacity: Optional[int] = None
    opening_hour: Optional[int] = None
    closing_hour: Optional[int] = None

    is_active: bool
    created_at: Optional[str] = None

    booking_count: int = 0

    model_config = {"from_attributes": True}
