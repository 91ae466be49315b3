"""
backend/restaurant_slots/services/booking_status.py

Booking status transitions.

PENDING → CONFIRMED / CANCELLED, and back. Each transition only
maintains the confirmed_at / cancelled_at timestamps; there are no
other guards.
"""

import logging
from datetime import datetime
from enum import Enum

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class BookingStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


def apply_status(booking, status: BookingStatus | str, now: datetime | None = None) -> None:
    """
    Set booking status and its timestamps in place.

    Raises:
        ValueError: unknown status
    """
    status = BookingStatus(status)
    now_str = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    previous = booking.status

    booking.status = status.value
    if status == BookingStatus.CONFIRMED:
        booking.confirmed_at = now_str
        booking.cancelled_at = None
    elif status == BookingStatus.CANCELLED:
        booking.cancelled_at = now_str
        booking.confirmed_at = None
    elif status == BookingStatus.PENDING:
        booking.confirmed_at = None
        booking.cancelled_at = None
    booking.updated_at = now_str

    logger.info(f"Booking {booking.id} status: {previous} → {status.value}")


def soft_cancel(booking, now: datetime | None = None) -> None:
    """
    Cancel a booking without touching confirmed_at.

    Used by DELETE: the row stays, a previous confirmation time is kept.
    """
    now_str = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    previous = booking.status

    booking.status = BookingStatus.CANCELLED.value
    booking.cancelled_at = now_str
    booking.updated_at = now_str

    logger.info(f"Booking {booking.id} cancelled (was {previous})")
