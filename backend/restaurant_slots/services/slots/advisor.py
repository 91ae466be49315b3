# backend/restaurant_slots/services/slots/advisor.py
"""
Slot advisor: availability, suggestion and wait-time heuristics.

Works on a snapshot of a day's reservations passed in by the caller.
Times are "HH:MM" strings and are compared as text against stored
booking times.

Contains:
✓ Service window slot generation
✓ Per-slot remaining capacity and popularity (exact slot match)
✓ Occasion-biased best slot suggestion
✓ Wait estimate for a requested slot (±1 hour window)

Does NOT contain:
✗ Storage access (see store.py)
✗ Input validation (done at the intake boundary)
✗ Overbooking prevention
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from .config import AdvisorConfig, minutes_to_time_str, slot_hour


MAX_WAIT_MINUTES = 45
BASE_WAIT_SCALE = 30
LARGE_PARTY_SIZE = 4
LARGE_PARTY_BUFFER = 10


class Occasion(str, Enum):
    DATE = "DATE"
    BIRTHDAY = "BIRTHDAY"
    ANNIVERSARY = "ANNIVERSARY"
    BUSINESS = "BUSINESS"
    CASUAL = "CASUAL"
    CELEBRATION = "CELEBRATION"


@dataclass(frozen=True)
class ReservationSummary:
    """Projection of a stored booking: slot time and party size."""
    time_of_day: str
    party_size: int


@dataclass(frozen=True)
class SlotAvailability:
    time: str
    availability: int  # remaining capacity, never negative
    popularity: int  # number of reservations in this exact slot


@dataclass(frozen=True)
class AdvisoryRequest:
    party_size: int
    occasion: Optional[Occasion] = None
    requested_time: Optional[str] = None


@dataclass(frozen=True)
class AdvisoryResult:
    suggested_time: Optional[str]
    estimated_wait_minutes: Optional[int] = None


# Occasion → inclusive hour range preferred for that occasion.
# Checked before the capacity/popularity ranking.
OCCASION_HOURS: dict[Occasion, tuple[int, int]] = {
    Occasion.DATE: (19, 21),
    Occasion.ANNIVERSARY: (19, 21),
    Occasion.CELEBRATION: (20, 23),
    Occasion.BIRTHDAY: (20, 23),
    Occasion.BUSINESS: (18, 20),
}


def generate_service_slots(config: AdvisorConfig | None = None) -> list[str]:
    """
    Generate the day's slot times, ascending.

    Default window 12..23 with a 30 min step:
    ["12:00", "12:30", ..., "23:30"] (24 slots).
    """
    config = config or AdvisorConfig()
    start_min, end_min = config.window_minutes
    return [
        minutes_to_time_str(t)
        for t in range(start_min, end_min, config.slot_step_minutes)
    ]


def compute_availability(
    slots: Iterable[str],
    reservations: Iterable[ReservationSummary],
    total_capacity: int,
) -> list[SlotAvailability]:
    """
    Remaining capacity and popularity for every slot.

    Reservations match a slot only on exact time. Every slot is
    returned, in input order, including ones nobody has booked.
    """
    booked_people: dict[str, int] = {}
    booked_count: dict[str, int] = {}
    for r in reservations:
        booked_people[r.time_of_day] = booked_people.get(r.time_of_day, 0) + r.party_size
        booked_count[r.time_of_day] = booked_count.get(r.time_of_day, 0) + 1

    return [
        SlotAvailability(
            time=time_str,
            availability=max(0, total_capacity - booked_people.get(time_str, 0)),
            popularity=booked_count.get(time_str, 0),
        )
        for time_str in slots
    ]


def suggest_best_slot(
    availabilities: list[SlotAvailability],
    party_size: int,
    occasion: Occasion | str | None = None,
) -> str | None:
    """
    Suggest a slot that fits the party.

    Returns None when no slot has room for party_size.

    Occasion buckets return the first fitting slot in list order.
    Without an occasion (or with an empty bucket) the slot with the best
    availability / (popularity + 1) ratio wins; ties keep list order.
    """
    fitting = [s for s in availabilities if s.availability >= party_size]
    if not fitting:
        return None

    hours = _occasion_hours(occasion)
    if hours is not None:
        low, high = hours
        for slot in fitting:
            if low <= slot_hour(slot.time) <= high:
                return slot.time

    # sorted() is stable, reverse=True keeps equal scores in list order
    ranked = sorted(fitting, key=_slot_score, reverse=True)
    return ranked[0].time


def estimate_wait_minutes(
    reservations: Iterable[ReservationSummary],
    requested_time: str,
    party_size: int,
    total_capacity: int,
) -> int:
    """
    Estimated wait in minutes for a requested slot, 0..45.

    Counts people booked within ±1 hour of the requested hour (a wider
    window than compute_availability uses). Parties above 4 get a flat
    10 minute buffer.
    """
    hour = slot_hour(requested_time)
    total_people = sum(
        r.party_size
        for r in reservations
        if abs(slot_hour(r.time_of_day) - hour) <= 1
    )
    utilization = total_people / total_capacity

    wait = _round_half_up(utilization * BASE_WAIT_SCALE)
    if party_size > LARGE_PARTY_SIZE:
        wait += LARGE_PARTY_BUFFER

    return min(wait, MAX_WAIT_MINUTES)


def advise(
    reservations: list[ReservationSummary],
    request: AdvisoryRequest,
    config: AdvisorConfig | None = None,
) -> tuple[list[SlotAvailability], AdvisoryResult]:
    """Run the full advisory for one day: availability, suggestion, wait."""
    config = config or AdvisorConfig()

    slots = generate_service_slots(config)
    availability = compute_availability(slots, reservations, config.total_capacity)
    suggestion = suggest_best_slot(availability, request.party_size, request.occasion)

    wait = None
    if request.requested_time is not None:
        wait = estimate_wait_minutes(
            reservations,
            request.requested_time,
            request.party_size,
            config.total_capacity,
        )

    return availability, AdvisoryResult(suggested_time=suggestion, estimated_wait_minutes=wait)


# ── Helpers ──────────────────────────────────────────────────────────────


def _occasion_hours(occasion: Occasion | str | None) -> tuple[int, int] | None:
    if not occasion:
        return None
    try:
        return OCCASION_HOURS.get(Occasion(occasion))
    except ValueError:
        return None


def _slot_score(slot: SlotAvailability) -> float:
    return slot.availability / (slot.popularity + 1)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
