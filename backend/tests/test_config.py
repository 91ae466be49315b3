from types import SimpleNamespace

import pytest

from restaurant_slots.config import BASE_DIR, Settings
from restaurant_slots.services.slots.config import (
    AdvisorConfig,
    minutes_to_time_str,
    slot_hour,
    time_str_to_minutes,
)


def test_default_advisor_config():
    config = AdvisorConfig()

    assert config.total_capacity == 50
    assert config.slots_per_day == 24
    assert config.window_minutes == (12 * 60, 24 * 60)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"total_capacity": 0},
        {"opening_hour": -1},
        {"closing_hour": 24},
        {"opening_hour": 20, "closing_hour": 18},
        {"slot_step_minutes": 45},
    ],
)
def test_invalid_advisor_config(kwargs):
    with pytest.raises(ValueError):
        AdvisorConfig(**kwargs)


def test_restaurant_overrides():
    base = AdvisorConfig()
    restaurant = SimpleNamespace(seating_capacity=20, opening_hour=17, closing_hour=None)

    config = base.for_restaurant(restaurant)

    assert config == AdvisorConfig(total_capacity=20, opening_hour=17, closing_hour=23)


def test_restaurant_without_overrides_keeps_base():
    base = AdvisorConfig(total_capacity=40)
    restaurant = SimpleNamespace(seating_capacity=None, opening_hour=None, closing_hour=None)

    assert base.for_restaurant(restaurant) is base


def test_time_helpers():
    assert time_str_to_minutes("19:30") == 1170
    assert minutes_to_time_str(1170) == "19:30"
    assert minutes_to_time_str(12 * 60) == "12:00"
    assert slot_hour("09:30") == 9


def test_relative_sqlite_url_is_resolved():
    s = Settings(database_url="sqlite:///./data/test.db")

    assert s.resolved_database_url == f"sqlite:///{BASE_DIR / 'data/test.db'}"


def test_absolute_database_url_is_kept():
    s = Settings(database_url="postgresql://user@localhost/slots")

    assert s.resolved_database_url == "postgresql://user@localhost/slots"
