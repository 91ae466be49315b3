from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from restaurant_slots.database import get_db, init_db
from restaurant_slots.main import app
from restaurant_slots.models.generated import Bookings, Restaurants


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def tomorrow():
    return date.today() + timedelta(days=1)


@pytest.fixture
def restaurant(db):
    obj = Restaurants(name="The Golden Spoon", slug="the-golden-spoon", city="Mumbai")
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


@pytest.fixture
def add_booking(db, tomorrow):
    def _add(restaurant, time, persons, status="PENDING", day=None):
        obj = Bookings(
            restaurant_id=restaurant.id,
            customer_name="Asha Rao",
            customer_email="asha@example.com",
            customer_phone="98765 43210",
            person_count=persons,
            booking_date=(day or tomorrow).isoformat(),
            booking_time=time,
            status=status,
        )
        db.add(obj)
        db.commit()
        db.refresh(obj)
        return obj

    return _add
