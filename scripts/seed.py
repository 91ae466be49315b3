"""
Create tables and seed demo restaurants.

Idempotent: restaurants are matched by slug and only inserted once.
"""

from restaurant_slots.database import SessionLocal, init_db
from restaurant_slots.models.generated import Restaurants


# ======================================================
# DEMO DATA
# ======================================================

RESTAURANTS = [
    {"name": "The Golden Spoon", "slug": "the-golden-spoon", "city": "Mumbai", "seating_capacity": 60},
    {"name": "Moonlight Terrace", "slug": "moonlight-terrace", "city": "Delhi", "seating_capacity": 30},
    {"name": "Electric Nights", "slug": "electric-nights", "city": "Bangalore", "closing_hour": 23},
    # No own values → settings defaults (50 seats, 12:00–23:30)
    {"name": "Canvas Kitchen", "slug": "canvas-kitchen", "city": "Pune"},
]


def seed(db) -> int:
    """Insert missing demo restaurants. Returns number of inserted rows."""
    existing = {slug for (slug,) in db.query(Restaurants.slug).all()}
    created = 0

    for data in RESTAURANTS:
        if data["slug"] in existing:
            continue
        db.add(Restaurants(**data))
        created += 1

    db.commit()
    return created


def main():
    init_db()
    db = SessionLocal()
    try:
        created = seed(db)
        print(f"[SEED] Restaurants created: {created}")
    finally:
        db.close()


if __name__ == "__main__":
    main()
