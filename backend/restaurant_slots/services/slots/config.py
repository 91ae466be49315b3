# backend/restaurant_slots/services/slots/config.py
"""
Advisor configuration for slot calculation.

Capacity and service window are injected into every advisor operation,
so restaurants with different seating and hours share one implementation.
"""

from dataclasses import dataclass, replace
from functools import lru_cache


@dataclass(frozen=True)
class AdvisorConfig:
    """
    Configuration for the slot advisor.

    Attributes:
        total_capacity: Seats available per slot (and for wait estimation)
        opening_hour: First service hour, inclusive (0-23)
        closing_hour: Last service hour, inclusive (0-23)
        slot_step_minutes: Grid step in minutes (15/30/60)
    """
    total_capacity: int = 50
    opening_hour: int = 12
    closing_hour: int = 23
    slot_step_minutes: int = 30  # 15 / 30 / 60

    def __post_init__(self):
        """Validate configuration."""
        if self.total_capacity <= 0:
            raise ValueError(f"total_capacity must be positive, got {self.total_capacity}")
        for name in ("opening_hour", "closing_hour"):
            value = getattr(self, name)
            if not 0 <= value <= 23:
                raise ValueError(f"{name} must be within 0..23, got {value}")
        if self.opening_hour > self.closing_hour:
            raise ValueError(
                f"opening_hour ({self.opening_hour}) is after closing_hour ({self.closing_hour})"
            )
        if self.slot_step_minutes not in (15, 30, 60):
            raise ValueError(f"slot_step_minutes must be 15, 30, or 60, got {self.slot_step_minutes}")

    @property
    def slots_per_day(self) -> int:
        """
        Number of slots in the service window.

        12..23 with a 30 min step → 24 slots.
        """
        hours = self.closing_hour - self.opening_hour + 1
        return hours * 60 // self.slot_step_minutes

    @property
    def window_minutes(self) -> tuple[int, int]:
        """Service window as [start, end) in minutes since midnight."""
        return self.opening_hour * 60, (self.closing_hour + 1) * 60

    def for_restaurant(self, restaurant) -> "AdvisorConfig":
        """Overlay a restaurant's own capacity and hours on this config."""
        overrides = {}
        if getattr(restaurant, "seating_capacity", None) is not None:
            overrides["total_capacity"] = restaurant.seating_capacity
        if getattr(restaurant, "opening_hour", None) is not None:
            overrides["opening_hour"] = restaurant.opening_hour
        if getattr(restaurant, "closing_hour", None) is not None:
            overrides["closing_hour"] = restaurant.closing_hour
        if not overrides:
            return self
        return replace(self, **overrides)


def time_str_to_minutes(time_str: str) -> int:
    """Convert "HH:MM" to minutes since midnight."""
    hour, minute = time_str.split(":")
    return int(hour) * 60 + int(minute)


def minutes_to_time_str(minutes: int) -> str:
    """Convert minutes since midnight to "HH:MM"."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def slot_hour(time_str: str) -> int:
    """Hour part of "HH:MM"."""
    return int(time_str.split(":")[0])


@lru_cache
def get_advisor_config() -> AdvisorConfig:
    """
    Get default advisor configuration (singleton).

    Built from environment settings; per-restaurant values are
    applied with AdvisorConfig.for_restaurant().
    """
    from ...config import settings

    return AdvisorConfig(
        total_capacity=settings.default_capacity,
        opening_hour=settings.opening_hour,
        closing_hour=settings.closing_hour,
        slot_step_minutes=settings.slot_step_minutes,
    )
