# backend/restaurant_slots/services/slots/store.py
"""
Reservation snapshot for the slot advisor.

Plain read without locking: two bookings created concurrently for the
same slot can both succeed and jointly exceed capacity.
"""

from datetime import date
from sqlalchemy.orm import Session

from .advisor import ReservationSummary


ACTIVE_STATUSES = ("PENDING", "CONFIRMED")


def list_reservations(
    db: Session,
    restaurant_id: int,
    target_date: date,
    statuses: tuple[str, ...] = ACTIVE_STATUSES,
) -> list[ReservationSummary]:
    """
    List reservations of a restaurant on a date.

    Returns:
        List of ReservationSummary (booking_time, person_count).
    """
    from ...models.generated import Bookings

    date_str = target_date.isoformat()

    rows = (
        db.query(Bookings.booking_time, Bookings.person_count)
        .filter(
            Bookings.restaurant_id == restaurant_id,
            Bookings.booking_date == date_str,
            Bookings.status.in_(list(statuses)),
        )
        .order_by(Bookings.booking_time, Bookings.id)
        .all()
    )

    return [
        ReservationSummary(time_of_day=booking_time, party_size=person_count)
        for booking_time, person_count in rows
    ]
