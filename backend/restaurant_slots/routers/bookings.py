# backend/restaurant_slots/routers/bookings.py
# DELETE is a soft cancel: the row stays with status CANCELLED, confirmed_at kept

import json
import logging
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from ..config import settings
from ..database import get_db
from ..models.generated import (
    Bookings as DBBookings,
    Restaurants as DBRestaurants,
)
from ..schemas.bookings import (
    BookingCreate,
    BookingRead,
    BookingStatusUpdate,
)
from ..services.booking_status import BookingStatus, apply_status, soft_cancel

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.get("/", response_model=list[BookingRead])
def list_bookings(
    restaurant_id: int | None = None,
    status_filter: BookingStatus | None = Query(None, alias="status"),
    db: Session = Depends(get_db),
):
    query = db.query(DBBookings)
    if restaurant_id is not None:
        query = query.filter(DBBookings.restaurant_id == restaurant_id)
    if status_filter is not None:
        query = query.filter(DBBookings.status == status_filter.value)

    return (
        query
        .order_by(DBBookings.booking_date.desc(), DBBookings.booking_time.desc())
        .limit(settings.bookings_list_limit)
        .all()
    )


@router.get("/{id}", response_model=BookingRead)
def get_booking(id: int, db: Session = Depends(get_db)):
    obj = db.get(DBBookings, id)
    if not obj:
        raise HTTPException(status_code=404, detail="Booking not found")
    return obj


@router.post("/", response_model=BookingRead, status_code=status.HTTP_201_CREATED)
def create_booking(
    data: BookingCreate,
    db: Session = Depends(get_db),
):
    restaurant = db.get(DBRestaurants, data.restaurant_id)
    if not restaurant or not restaurant.is_active:
        raise HTTPException(status_code=404, detail="Restaurant not found")

    # No capacity check here: concurrent bookings may overbook a slot
    obj = DBBookings(
        restaurant_id=data.restaurant_id,
        customer_name=data.customer_name,
        customer_email=data.customer_email,
        customer_phone=data.customer_phone,
        person_count=data.person_count,
        occasion=data.occasion.value if data.occasion else None,
        seating_preference=data.seating_preference.value if data.seating_preference else None,
        booking_date=data.booking_date.isoformat(),
        booking_time=data.booking_time,
        special_requests=data.special_requests,
        priority_booking=int(data.priority_booking),
        pre_order_items=json.dumps(data.pre_order_items) if data.pre_order_items is not None else None,
        status=BookingStatus.PENDING.value,
    )
    db.add(obj)
    db.commit()
    db.refresh(obj)

    logger.info(
        f"Booking created: booking_id={obj.id}, restaurant_id={obj.restaurant_id}, "
        f"time={obj.booking_date} {obj.booking_time}, persons={obj.person_count}"
    )
    return obj


@router.patch("/{id}", response_model=BookingRead)
def update_booking_status(
    id: int,
    data: BookingStatusUpdate,
    db: Session = Depends(get_db),
):
    obj = db.get(DBBookings, id)
    if not obj:
        raise HTTPException(status_code=404, detail="Booking not found")

    apply_status(obj, data.status)

    db.commit()
    db.refresh(obj)
    return obj


@router.delete("/{id}")
def cancel_booking(id: int, db: Session = Depends(get_db)):
    obj = db.get(DBBookings, id)
    if not obj:
        raise HTTPException(status_code=404, detail="Booking not found")

    soft_cancel(obj)
    db.commit()
    return {"message": "Booking cancelled"}
