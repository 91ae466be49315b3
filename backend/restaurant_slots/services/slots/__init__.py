# backend/restaurant_slots/services/slots/__init__.py
"""
Slot advisory module.

Pure layer: slot generation, availability, suggestion, wait estimate
Store layer: reservation snapshot and per-restaurant advisory
"""

from .config import AdvisorConfig, get_advisor_config
from .advisor import (
    AdvisoryRequest,
    AdvisoryResult,
    Occasion,
    ReservationSummary,
    SlotAvailability,
    advise,
    compute_availability,
    estimate_wait_minutes,
    generate_service_slots,
    suggest_best_slot,
)
from .store import ACTIVE_STATUSES, list_reservations
from .availability import calculate_restaurant_advisory

__all__ = [
    "AdvisorConfig",
    "get_advisor_config",
    "AdvisoryRequest",
    "AdvisoryResult",
    "Occasion",
    "ReservationSummary",
    "SlotAvailability",
    "advise",
    "compute_availability",
    "estimate_wait_minutes",
    "generate_service_slots",
    "suggest_best_slot",
    "ACTIVE_STATUSES",
    "list_reservations",
    "calculate_restaurant_advisory",
]
