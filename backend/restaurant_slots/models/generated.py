from sqlalchemy import Column, ForeignKey, Index, Integer, Text, text

from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()
metadata = Base.metadata


class Restaurants(Base):
    __tablename__ = 'restaurants'

    name = Column(Text, nullable=False)
    slug = Column(Text, nullable=False, unique=True)
    id = Column(Integer, primary_key=True)
    city = Column(Text)
    # NULL → fall back to settings defaults
    seating_capacity = Column(Integer)
    opening_hour = Column(Integer)
    closing_hour = Column(Integer)
    is_active = Column(Integer, nullable=False, server_default=text('1'))
    created_at = Column(Text, server_default=text('CURRENT_TIMESTAMP'))

    bookings = relationship('Bookings', back_populates='restaurant')


class Bookings(Base):
    __tablename__ = 'bookings'
    __table_args__ = (
        Index('ix_bookings_restaurant_date', 'restaurant_id', 'booking_date'),
    )

    restaurant_id = Column(ForeignKey('restaurants.id', ondelete='CASCADE'), nullable=False)
    customer_name = Column(Text, nullable=False)
    customer_email = Column(Text, nullable=False)
    customer_phone = Column(Text, nullable=False)
    person_count = Column(Integer, nullable=False)
    booking_date = Column(Text, nullable=False)  # YYYY-MM-DD
    booking_time = Column(Text, nullable=False)  # HH:MM
    status = Column(Text, nullable=False, server_default=text("'PENDING'"))
    priority_booking = Column(Integer, nullable=False, server_default=text('0'))
    created_at = Column(Text, nullable=False, server_default=text('CURRENT_TIMESTAMP'))
    updated_at = Column(Text, nullable=False, server_default=text('CURRENT_TIMESTAMP'))
    id = Column(Integer, primary_key=True)
    occasion = Column(Text)
    seating_preference = Column(Text)
    special_requests = Column(Text)
    pre_order_items = Column(Text)  # JSON list
    confirmed_at = Column(Text)
    cancelled_at = Column(Text)

    restaurant = relationship('Restaurants', back_populates='bookings')
