# backend/restaurant_slots/routers/restaurants.py
# Read-only: restaurants are seeded, not created over the API

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.generated import (
    Bookings as DBBookings,
    Restaurants as DBRestaurants,
)
from ..schemas.restaurants import RestaurantRead

router = APIRouter(prefix="/restaurants", tags=["restaurants"])


def _with_booking_counts(db: Session):
    return (
        db.query(DBRestaurants, func.count(DBBookings.id))
        .outerjoin(DBBookings, DBBookings.restaurant_id == DBRestaurants.id)
        .group_by(DBRestaurants.id)
    )


def _to_read(restaurant, booking_count: int) -> RestaurantRead:
    data = RestaurantRead.model_validate(restaurant)
    return data.model_copy(update={"booking_count": booking_count})


@router.get("/", response_model=list[RestaurantRead])
def list_restaurants(
    slug: str | None = None,
    is_active: bool | None = None,
    db: Session = Depends(get_db),
):
    query = _with_booking_counts(db)
    if slug:
        query = query.filter(DBRestaurants.slug == slug)
    if is_active is not None:
        query = query.filter(DBRestaurants.is_active == int(is_active))

    rows = query.order_by(DBRestaurants.id).all()
    return [_to_read(restaurant, count) for restaurant, count in rows]


@router.get("/{id}", response_model=RestaurantRead)
def get_restaurant(id: int, db: Session = Depends(get_db)):
    row = _with_booking_counts(db).filter(DBRestaurants.id == id).first()
    if not row:
        raise HTTPException(status_code=404, detail="Restaurant not found")
    return _to_read(*row)
