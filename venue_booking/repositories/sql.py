from datetime import date
from typing import List, Optional

from sqlalchemy.orm import sessionmaker

from venue_booking.models.booking import Booking
from venue_booking.models.customer import Customer
from venue_booking.models.ids import new_id
from venue_booking.models.notification import Notification
from venue_booking.models.pricing import PricingRule
from venue_booking.models.resource import Resource
from venue_booking.models.tenant import Tenant
from venue_booking.repositories.base import BookingRepository
from venue_booking.schemas.booking import BookingRecord
from venue_booking.schemas.pricing import PricingRuleRecord
from venue_booking.schemas.resource import ResourceRecord
from venue_booking.schemas.tenant import CustomerRecord, TenantRecord


class SqlBookingRepository(BookingRepository):
    """SQLAlchemy-backed repository; one short-lived session per call."""

    def __init__(self, session_factory: sessionmaker, name: str = "primary"):
        self.session_factory = session_factory
        self.name = name

    # ------------------------------------------------------------------
    # TENANTS / CUSTOMERS
    # ------------------------------------------------------------------
    def get_tenant(self, tenant_id: str) -> Optional[TenantRecord]:
        with self.session_factory() as db:
            tenant = db.get(Tenant, tenant_id)
            return TenantRecord.model_validate(tenant) if tenant else None

    def get_customer(self, customer_id: str) -> Optional[CustomerRecord]:
        with self.session_factory() as db:
            customer = db.get(Customer, customer_id)
            return CustomerRecord.model_validate(customer) if customer else None

    # ------------------------------------------------------------------
    # RESOURCES / PRICING
    # ------------------------------------------------------------------
    def get_resource(self, resource_id: str) -> Optional[ResourceRecord]:
        with self.session_factory() as db:
            resource = db.get(Resource, resource_id)
            return ResourceRecord.model_validate(resource) if resource else None

    def list_resources(self, tenant_id: str) -> List[ResourceRecord]:
        with self.session_factory() as db:
            resources = (
                db.query(Resource)
                .filter(Resource.tenant_id == tenant_id)
                .order_by(Resource.name.asc())
                .all()
            )
            return [ResourceRecord.model_validate(r) for r in resources]

    def get_pricing_rule(self, tenant_id: str, resource_id: str) -> Optional[PricingRuleRecord]:
        with self.session_factory() as db:
            rule = (
                db.query(PricingRule)
                .filter(
                    PricingRule.tenant_id == tenant_id,
                    PricingRule.resource_id == resource_id,
                )
                .first()
            )
            return PricingRuleRecord.model_validate(rule) if rule else None

    def list_pricing_rules(self, tenant_id: str) -> List[PricingRuleRecord]:
        with self.session_factory() as db:
            rules = (
                db.query(PricingRule)
                .filter(PricingRule.tenant_id == tenant_id)
                .order_by(PricingRule.resource_name.asc())
                .all()
            )
            return [PricingRuleRecord.model_validate(r) for r in rules]

    # ------------------------------------------------------------------
    # BOOKINGS
    # ------------------------------------------------------------------
    def bookings_on_date(self, tenant_id: str, booking_date: date) -> List[BookingRecord]:
        with self.session_factory() as db:
            bookings = (
                db.query(Booking)
                .filter(
                    Booking.tenant_id == tenant_id,
                    Booking.booking_date == booking_date,
                )
                .all()
            )
            return [BookingRecord.model_validate(b) for b in bookings]

    def list_bookings(self, tenant_id: str) -> List[BookingRecord]:
        with self.session_factory() as db:
            bookings = (
                db.query(Booking)
                .filter(Booking.tenant_id == tenant_id)
                .order_by(Booking.booking_date.asc(), Booking.start_time.asc())
                .all()
            )
            return [BookingRecord.model_validate(b) for b in bookings]

    def booking_code_exists(self, booking_code: str) -> bool:
        with self.session_factory() as db:
            found = db.query(Booking.id).filter(Booking.booking_code == booking_code).first()
            return found is not None

    def reserve_booking_id(self) -> str:
        return new_id()

    def insert_booking(self, values: dict) -> BookingRecord:
        with self.session_factory() as db:
            booking = Booking(**values)
            db.add(booking)
            try:
                db.commit()
            except Exception:
                db.rollback()
                raise
            return BookingRecord.model_validate(booking)

    # ------------------------------------------------------------------
    # NOTIFICATIONS
    # ------------------------------------------------------------------
    def add_notification(self, values: dict) -> None:
        with self.session_factory() as db:
            db.add(Notification(**values))
            try:
                db.commit()
            except Exception:
                db.rollback()
                raise
