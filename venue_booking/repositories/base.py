"""Storage interface consumed by the booking pipeline.

Two implementations of the same interface back the primary and the
fallback write paths; services never touch a session or ORM object.
"""
from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from venue_booking.schemas.booking import BookingRecord
from venue_booking.schemas.pricing import PricingRuleRecord
from venue_booking.schemas.resource import ResourceRecord
from venue_booking.schemas.tenant import CustomerRecord, TenantRecord


class BookingRepository(ABC):
    name = "repository"

    # ---- tenants / customers ----
    @abstractmethod
    def get_tenant(self, tenant_id: str) -> Optional[TenantRecord]: ...

    @abstractmethod
    def get_customer(self, customer_id: str) -> Optional[CustomerRecord]: ...

    # ---- resources / pricing ----
    @abstractmethod
    def get_resource(self, resource_id: str) -> Optional[ResourceRecord]: ...

    @abstractmethod
    def list_resources(self, tenant_id: str) -> List[ResourceRecord]: ...

    @abstractmethod
    def get_pricing_rule(self, tenant_id: str, resource_id: str) -> Optional[PricingRuleRecord]: ...

    @abstractmethod
    def list_pricing_rules(self, tenant_id: str) -> List[PricingRuleRecord]: ...

    # ---- bookings ----
    @abstractmethod
    def bookings_on_date(self, tenant_id: str, booking_date: date) -> List[BookingRecord]: ...

    @abstractmethod
    def list_bookings(self, tenant_id: str) -> List[BookingRecord]: ...

    @abstractmethod
    def booking_code_exists(self, booking_code: str) -> bool: ...

    @abstractmethod
    def reserve_booking_id(self) -> str: ...

    @abstractmethod
    def insert_booking(self, values: dict) -> BookingRecord: ...

    # ---- side effects ----
    @abstractmethod
    def add_notification(self, values: dict) -> None: ...
