import random

import pytest

from restaurant_slots.services.slots import (
    AdvisorConfig,
    AdvisoryRequest,
    Occasion,
    ReservationSummary,
    SlotAvailability,
    advise,
    compute_availability,
    estimate_wait_minutes,
    generate_service_slots,
    suggest_best_slot,
)


def r(time, persons):
    return ReservationSummary(time_of_day=time, party_size=persons)


def slot(time, availability, popularity=0):
    return SlotAvailability(time=time, availability=availability, popularity=popularity)


# ── generate_service_slots ───────────────────────────────────────────────


def test_default_service_slots():
    slots = generate_service_slots()

    assert len(slots) == 24
    assert slots[0] == "12:00"
    assert slots[1] == "12:30"
    assert slots[-1] == "23:30"
    assert slots == sorted(set(slots))


def test_service_slots_follow_config():
    config = AdvisorConfig(opening_hour=18, closing_hour=21, slot_step_minutes=60)

    assert generate_service_slots(config) == ["18:00", "19:00", "20:00", "21:00"]


# ── compute_availability ─────────────────────────────────────────────────


def test_availability_keeps_every_slot_in_order():
    slots = generate_service_slots()

    result = compute_availability(slots, [], 50)

    assert [s.time for s in result] == slots
    assert all(s.availability == 50 and s.popularity == 0 for s in result)


def test_availability_counts_exact_slot_only():
    slots = ["19:00", "19:30", "20:00"]
    reservations = [r("19:00", 4), r("19:00", 2), r("19:30", 6)]

    result = compute_availability(slots, reservations, 50)

    assert result == [
        slot("19:00", 44, 2),
        slot("19:30", 44, 1),
        slot("20:00", 50, 0),
    ]


def test_availability_is_clamped_at_zero():
    result = compute_availability(["20:00"], [r("20:00", 30), r("20:00", 30)], 50)

    assert result == [slot("20:00", 0, 2)]


def test_availability_never_exceeds_capacity():
    rng = random.Random(7)
    slots = generate_service_slots()

    for capacity in (1, 10, 50):
        reservations = [
            r(rng.choice(slots), rng.randint(1, 20)) for _ in range(rng.randint(0, 60))
        ]
        for s in compute_availability(slots, reservations, capacity):
            booked = sum(x.party_size for x in reservations if x.time_of_day == s.time)
            assert 0 <= s.availability <= capacity
            if booked >= capacity:
                assert s.availability == 0


# ── suggest_best_slot ────────────────────────────────────────────────────


def test_suggest_only_fitting_slot():
    availabilities = [slot("18:00", 0, 5), slot("20:30", 8, 1)]

    assert suggest_best_slot(availabilities, 4) == "20:30"


def test_suggest_returns_none_when_fully_booked():
    availabilities = [slot("18:00", 3), slot("20:30", 2)]

    assert suggest_best_slot(availabilities, 4) is None
    assert suggest_best_slot([], 1) is None


def test_date_prefers_evening_over_better_ratio():
    availabilities = [slot("13:00", 50, 0), slot("20:00", 5, 4)]

    assert suggest_best_slot(availabilities, 2, Occasion.DATE) == "20:00"
    assert suggest_best_slot(availabilities, 2) == "13:00"


def test_occasion_bucket_returns_first_match_not_best():
    availabilities = [
        slot("18:00", 50),
        slot("19:00", 3, 2),
        slot("20:00", 50, 0),
        slot("21:30", 50, 0),
    ]

    assert suggest_best_slot(availabilities, 2, Occasion.ANNIVERSARY) == "19:00"
    assert suggest_best_slot(availabilities, 2, Occasion.BIRTHDAY) == "20:00"
    assert suggest_best_slot(availabilities, 2, Occasion.CELEBRATION) == "20:00"
    assert suggest_best_slot(availabilities, 2, Occasion.BUSINESS) == "18:00"


def test_occasion_bucket_ignores_slots_without_room():
    availabilities = [slot("19:00", 1), slot("20:00", 1), slot("21:00", 6)]

    assert suggest_best_slot(availabilities, 4, "DATE") == "21:00"


def test_empty_occasion_bucket_falls_back_to_ranking():
    availabilities = [slot("12:00", 10, 4), slot("13:00", 30, 2), slot("14:00", 40, 9)]

    # No slot at 20:00 or later: ranking by availability / (popularity + 1)
    assert suggest_best_slot(availabilities, 2, Occasion.BIRTHDAY) == "13:00"


def test_casual_and_unknown_occasions_use_ranking():
    availabilities = [slot("19:00", 10, 4), slot("15:00", 30, 0)]

    assert suggest_best_slot(availabilities, 2, Occasion.CASUAL) == "15:00"
    assert suggest_best_slot(availabilities, 2, "BRUNCH") == "15:00"


def test_ranking_ties_keep_list_order():
    availabilities = [slot("14:00", 20, 1), slot("12:00", 10, 0), slot("16:00", 20, 1)]

    assert suggest_best_slot(availabilities, 2) == "14:00"


# ── estimate_wait_minutes ────────────────────────────────────────────────


def test_wait_example():
    reservations = [r("19:00", 4), r("19:30", 6)]

    assert estimate_wait_minutes(reservations, "19:30", 2, 50) == 6


def test_wait_uses_one_hour_window():
    reservations = [r("17:30", 20), r("18:00", 5), r("20:30", 5), r("21:00", 20)]

    # 18:xx and 20:xx count for 19:xx; 17:xx and 21:xx don't
    assert estimate_wait_minutes(reservations, "19:00", 2, 50) == 6


def test_wait_large_party_buffer():
    assert estimate_wait_minutes([], "19:00", 4, 50) == 0
    assert estimate_wait_minutes([], "19:00", 5, 50) == 10


def test_wait_is_capped():
    reservations = [r("19:00", 100)]

    assert estimate_wait_minutes(reservations, "19:00", 2, 50) == 45
    assert estimate_wait_minutes(reservations, "19:00", 8, 50) == 45


def test_wait_rounds_half_up():
    # 1 / 4 * 30 = 7.5
    assert estimate_wait_minutes([r("19:00", 1)], "19:00", 2, 4) == 8


@pytest.mark.parametrize("party_size", [2, 6])
def test_wait_is_monotonic_in_booked_people(party_size):
    waits = [
        estimate_wait_minutes([r("19:00", people)], "19:00", party_size, 50)
        for people in range(0, 120)
    ]

    assert waits == sorted(waits)
    assert all(0 <= w <= 45 for w in waits)


# ── advise ───────────────────────────────────────────────────────────────


def test_advise_without_requested_time():
    availability, result = advise([r("19:00", 48)], AdvisoryRequest(party_size=4))

    assert len(availability) == 24
    assert availability[14] == slot("19:00", 2, 1)
    assert result.suggested_time == "12:00"
    assert result.estimated_wait_minutes is None


def test_advise_with_requested_time_and_config():
    config = AdvisorConfig(total_capacity=10, opening_hour=18, closing_hour=20)
    request = AdvisoryRequest(party_size=2, occasion=Occasion.DATE, requested_time="19:00")

    availability, result = advise([r("19:00", 9), r("20:00", 5)], request, config)

    assert [s.time for s in availability] == [
        "18:00", "18:30", "19:00", "19:30", "20:00", "20:30",
    ]
    # 19:00 has one seat left, 19:30 is the first evening slot with room
    assert result.suggested_time == "19:30"
    # (9 + 5) / 10 * 30 = 42
    assert result.estimated_wait_minutes == 42
