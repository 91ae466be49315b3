# backend/restaurant_slots/services/slots/availability.py
"""
Restaurant advisory calculation.

Calculates per-slot availability, a suggested slot and (optionally)
a wait estimate for one restaurant on one day.

Takes into account:
- Restaurant capacity and service hours (or settings defaults)
- Existing PENDING / CONFIRMED bookings of that day
- Party size and occasion of the request
"""

import logging
from dataclasses import asdict
from datetime import date
from sqlalchemy.orm import Session

from .advisor import AdvisoryRequest, Occasion, advise
from .config import AdvisorConfig, get_advisor_config
from .store import list_reservations

logger = logging.getLogger(__name__)


def calculate_restaurant_advisory(
    db: Session,
    restaurant,
    target_date: date,
    party_size: int,
    occasion: Occasion | None = None,
    requested_time: str | None = None,
    config: AdvisorConfig | None = None,
) -> dict:
    """
    Calculate slot advisory for a restaurant.

    Args:
        restaurant: Restaurants row, already looked up by the caller

    Returns:
        Dict for SlotsAdvisoryResponse.

    Raises:
        ValueError: restaurant capacity or hours are not a valid AdvisorConfig
    """
    config = config or get_advisor_config()
    restaurant_id = restaurant.id

    # Step 1: Apply restaurant's own capacity / hours
    config = config.for_restaurant(restaurant)

    # Step 2: Snapshot of the day's active reservations
    reservations = list_reservations(db, restaurant_id, target_date)

    # Step 3: Run advisor
    availability, result = advise(
        reservations,
        AdvisoryRequest(
            party_size=party_size,
            occasion=occasion,
            requested_time=requested_time,
        ),
        config,
    )

    logger.info(
        f"Advisory computed: restaurant_id={restaurant_id}, date={target_date}, "
        f"reservations={len(reservations)}, party_size={party_size}, "
        f"suggestion={result.suggested_time}, wait={result.estimated_wait_minutes}"
    )

    return {
        "restaurant_id": restaurant_id,
        "date": target_date.isoformat(),
        "party_size": party_size,
        "occasion": occasion,
        "total_capacity": config.total_capacity,
        "availability": [asdict(slot) for slot in availability],
        "suggestion": result.suggested_time,
        "wait_estimate_minutes": result.estimated_wait_minutes,
    }

