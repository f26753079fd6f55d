from datetime import date, time

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from venue_booking.core.dependencies import get_booking_coordinator, get_primary_repository
from venue_booking.db.session import Base, make_session_factory
from venue_booking.main import app
from venue_booking.models.booking import Booking
from venue_booking.models.customer import Customer
from venue_booking.models.ids import new_id
from venue_booking.models.pricing import PricingRule
from venue_booking.models.resource import Resource
from venue_booking.models.tenant import Tenant
from venue_booking.repositories.sql import SqlBookingRepository
from venue_booking.services.booking_service import BookingCoordinator
from venue_booking.services.slot_locks import SlotLockManager

# Monday; the dates below are relative to it
TODAY = date(2026, 10, 19)
TUESDAY = date(2026, 10, 20)
SATURDAY = date(2026, 10, 24)


# ------------------ engine ------------------
@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield make_session_factory(engine)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def repo(session_factory):
    return SqlBookingRepository(session_factory, name="primary")


@pytest.fixture
def fallback_repo(session_factory):
    return SqlBookingRepository(session_factory, name="fallback")


# ------------------ seed data ------------------
class Seed:
    def __init__(self, session_factory):
        self.session_factory = session_factory

    def _add(self, obj):
        with self.session_factory() as db:
            db.add(obj)
            db.commit()
        return obj

    def tenant(self, role="hall_owner", **kwargs):
        kwargs.setdefault("name", "Grand Hall Co")
        kwargs.setdefault("email", "owner@grandhall.test")
        kwargs.setdefault("event_types", ["wedding", "conference"])
        return self._add(Tenant(id=new_id(), role=role, **kwargs))

    def resource(self, tenant, name="Main Hall", **kwargs):
        return self._add(Resource(id=new_id(), tenant_id=tenant.id, name=name, **kwargs))

    def rule(self, tenant, resource, rate_type="hourly", weekday_rate=100.0, weekend_rate=150.0):
        return self._add(PricingRule(
            id=new_id(),
            tenant_id=tenant.id,
            resource_id=resource.id,
            resource_name=resource.name,
            rate_type=rate_type,
            weekday_rate=weekday_rate,
            weekend_rate=weekend_rate,
        ))

    def customer(self, tenant, **kwargs):
        return self._add(Customer(id=new_id(), tenant_id=tenant.id, **kwargs))

    def booking(self, tenant, resources, booking_date=TUESDAY, start="10:00", end="12:00",
                status="pending", legacy_only=False, **kwargs):
        resource_ids = [r.id for r in resources]
        values = dict(
            id=new_id(),
            tenant_id=tenant.id,
            resource_ids=[] if legacy_only else resource_ids,
            resource_names=[] if legacy_only else [r.name for r in resources],
            resource_id=resource_ids[0],
            resource_name=resources[0].name,
            booking_date=booking_date,
            start_time=time.fromisoformat(start),
            end_time=time.fromisoformat(end),
            customer_name="Existing Guest",
            customer_email="existing@guest.test",
            customer_phone="5550001111",
            event_type="wedding",
            status=status,
            calculated_price=0.0,
            booking_code=f"BK-{booking_date.strftime('%Y%m%d')}-{new_id()[-5:].upper()}",
        )
        values.update(kwargs)
        return self._add(Booking(**values))


@pytest.fixture
def seed(session_factory):
    return Seed(session_factory)


def booking_payload(tenant, resources, booking_date=TUESDAY, start="10:00", end="12:00", **overrides):
    payload = {
        "hallOwnerId": tenant.id,
        "customerName": "  Jane Doe ",
        "customerEmail": "Jane.Doe@Example.com",
        "customerPhone": "+44 (20) 7946-0958",
        "eventType": "wedding",
        "selectedHalls": [r.id for r in resources],
        "bookingDate": booking_date.isoformat(),
        "startTime": start,
        "endTime": end,
        "guestCount": 80,
    }
    payload.update(overrides)
    return payload


# ------------------ coordinator / client ------------------
@pytest.fixture
def coordinator(repo, fallback_repo):
    return BookingCoordinator(repo, fallback_repo, SlotLockManager(wait_seconds=1), today=lambda: TODAY)


@pytest.fixture
def client(repo, coordinator):
    app.dependency_overrides[get_primary_repository] = lambda: repo
    app.dependency_overrides[get_booking_coordinator] = lambda: coordinator
    yield TestClient(app)
    app.dependency_overrides.clear()


def inline_schedule():
    """Scheduler that records tasks instead of running them."""
    calls = []

    def schedule(func, *args):
        calls.append((func, args))

    schedule.calls = calls
    return schedule
