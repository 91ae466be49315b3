# backend/restaurant_slots/routers/slots.py
"""
Slots API endpoints.

GET /slots/advisory - Per-slot availability, suggested slot and wait estimate
"""

import logging
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.generated import Restaurants as DBRestaurants
from ..schemas.slots import SlotsAdvisoryResponse
from ..services.slots import (
    Occasion,
    calculate_restaurant_advisory,
    generate_service_slots,
    get_advisor_config,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/slots", tags=["slots"])


@router.get("/advisory", response_model=SlotsAdvisoryResponse)
def get_slots_advisory(
    restaurant_id: int,
    target_date: date = Query(..., alias="date"),
    party_size: int = Query(..., ge=1, le=100),
    occasion: Occasion | None = None,
    requested_time: str | None = Query(None, alias="time", pattern=r"^\d{2}:\d{2}$"),
    db: Session = Depends(get_db),
):
    """Get slot availability and suggestion for a restaurant day."""
    restaurant = db.get(DBRestaurants, restaurant_id)
    if not restaurant or not restaurant.is_active:
        raise HTTPException(status_code=404, detail="Restaurant not found")

    # Stored capacity / hours may be unusable (e.g. 0 seats while closed)
    try:
        config = get_advisor_config().for_restaurant(restaurant)
    except ValueError as e:
        logger.warning(f"Restaurant {restaurant_id} has no usable slot config: {e}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    if requested_time is not None and requested_time not in generate_service_slots(config):
        raise HTTPException(
            status_code=400,
            detail=f"Time {requested_time} is outside the restaurant's booking slots",
        )

    result = calculate_restaurant_advisory(
        db=db,
        restaurant=restaurant,
        target_date=target_date,
        party_size=party_size,
        occasion=occasion,
        requested_time=requested_time,
        config=get_advisor_config(),
    )

    return SlotsAdvisoryResponse(**result)
