# backend/restaurant_slots/schemas/bookings.py

import json
import re
from datetime import date
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator

from ..services.booking_status import BookingStatus
from ..services.slots.advisor import Occasion

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_CHARS_RE = re.compile(r"^[\d\s\+\-\(\)]+$")
TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class SeatingPreference(str, Enum):
    WINDOW = "WINDOW"
    OUTDOOR = "OUTDOOR"
    PRIVATE = "PRIVATE"
    BAR = "BAR"
    NO_PREFERENCE = "NO_PREFERENCE"


class BookingCreate(BaseModel):
    restaurant_id: int
    customer_name: str = Field(min_length=2, max_length=50)
    customer_email: str
    customer_phone: str
    person_count: int = Field(ge=1, le=100)

    occasion: Optional[Occasion] = None
    seating_preference: Optional[SeatingPreference] = None

    booking_date: date
    booking_time: str = Field(description="Time in HH:MM format")

    special_requests: Optional[str] = None
    priority_booking: bool = False
    pre_order_items: Optional[list[Any]] = None

    model_config = {"from_attributes": True, "str_strip_whitespace": True}

    @field_validator("customer_email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        if not EMAIL_RE.match(v):
            raise ValueError("Invalid email address")
        return v.lower()

    @field_validator("customer_phone")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        if not PHONE_CHARS_RE.match(v):
            raise ValueError(
                "Phone number can only contain digits, spaces, +, -, and parentheses"
            )
        digits = re.sub(r"\D", "", v)
        if len(digits) != 10:
            raise ValueError("Phone number must be exactly 10 digits")
        if re.match(r"^(\d)\1{9}$", digits):
            raise ValueError("Please enter a valid phone number")
        return v

    @field_validator("booking_date")
    @classmethod
    def validate_date(cls, v: date) -> date:
        if v < date.today():
            raise ValueError("Booking date cannot be in the past")
        return v

    @field_validator("booking_time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        if not TIME_RE.match(v):
            raise ValueError("Time must be in HH:MM format")
        return v


class BookingStatusUpdate(BaseModel):
    status: BookingStatus


class BookingRead(BaseModel):
    id: int
    restaurant_id: int

    customer_name: str
    customer_email: str
    customer_phone: str
    person_count: int

    occasion: Optional[str] = None
    seating_preference: Optional[str] = None

    booking_date: date
    booking_time: str

    special_requests: Optional[str] = None
    priority_booking: bool
    pre_order_items: Optional[list[Any]] = None

    status: str
    confirmed_at: Optional[str] = None
    cancelled_at: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    model_config = {"from_attributes": True}

    @field_validator("pre_order_items", mode="before")
    @classmethod
    def parse_pre_order_items(cls, v):
        # Stored as JSON text
        if isinstance(v, str):
            return json.loads(v)
        return v
