"""Admission checks that run before any slot is examined.

``validate_request_fields`` works on the request body alone and stops at the
first bad field. ``validate_tenant_resources`` resolves the venue, each
requested resource and, for logged-in customers, the customer's venue.
"""
import re
from datetime import date, datetime
from typing import List, Optional, Tuple

from venue_booking.core.errors import Forbidden, NotFound, ValidationFailed
from venue_booking.repositories.base import BookingRepository
from venue_booking.schemas.booking import BookingCreate, TimeWindow
from venue_booking.schemas.resource import ResourceRecord
from venue_booking.schemas.tenant import TenantRecord

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_RE = re.compile(r"^\+?[1-9]\d{0,15}$")
PHONE_NOISE_RE = re.compile(r"[\s\-()]")
TIME_RE = re.compile(r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$")


def clean_phone(phone: str) -> str:
    return PHONE_NOISE_RE.sub("", phone)


def parse_booking_date(value: str) -> Optional[date]:
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        return None


def parse_time_of_day(value: str):
    return datetime.strptime(value, "%H:%M").time()


# ---------------------------------------------------------------------
# FIELDS + TIME WINDOW
# ---------------------------------------------------------------------
def validate_request_fields(data: BookingCreate, today: Optional[date] = None) -> TimeWindow:
    required = (
        data.hall_owner_id,
        data.customer_name,
        data.customer_email,
        data.customer_phone,
        data.event_type,
        data.selected_halls,
        data.booking_date,
        data.start_time,
        data.end_time,
    )
    if not all(required):
        raise ValidationFailed("required", "Missing required fields")

    if not EMAIL_RE.fullmatch(data.customer_email):
        raise ValidationFailed("customerEmail", "Invalid email format")

    phone = clean_phone(data.customer_phone)
    if not PHONE_RE.fullmatch(phone):
        raise ValidationFailed("customerPhone", "Invalid phone number format")

    booking_date = parse_booking_date(data.booking_date)
    if booking_date is None:
        raise ValidationFailed("bookingDate", "Invalid booking date format")
    # Same-day bookings are allowed; anything before today's midnight is not
    if booking_date < (today or date.today()):
        raise ValidationFailed("bookingDate", "Booking date cannot be in the past")

    if not TIME_RE.fullmatch(data.start_time) or not TIME_RE.fullmatch(data.end_time):
        raise ValidationFailed("time", "Invalid time format")

    start_time = parse_time_of_day(data.start_time)
    end_time = parse_time_of_day(data.end_time)
    if start_time >= end_time:
        raise ValidationFailed("time", "Start time must be before end time")

    return TimeWindow(
        booking_date=booking_date,
        start_time=start_time,
        end_time=end_time,
        customer_phone=phone,
    )


# ---------------------------------------------------------------------
# TENANT / RESOURCES / CUSTOMER
# ---------------------------------------------------------------------
def require_hall_owner(repo: BookingRepository, tenant_id: str) -> TenantRecord:
    tenant = repo.get_tenant(tenant_id)
    if not tenant or not tenant.is_hall_owner:
        raise NotFound("Hall owner not found")
    return tenant


def validate_tenant_resources(
    repo: BookingRepository,
    tenant_id: str,
    resource_ids: List[str],
    customer_id: Optional[str] = None,
) -> Tuple[TenantRecord, List[ResourceRecord]]:
    tenant = require_hall_owner(repo, tenant_id)

    resources = []
    for resource_id in resource_ids:
        resource = repo.get_resource(resource_id)
        if not resource:
            raise NotFound(f"Selected resource not found: {resource_id}")
        if resource.tenant_id != tenant_id:
            raise ValidationFailed(
                "selectedHalls",
                f"Selected resource does not belong to the specified hall owner: {resource_id}",
            )
        resources.append(resource)

    # A customer registered at venue A cannot book venue B
    if customer_id:
        customer = repo.get_customer(customer_id)
        if not customer or customer.tenant_id != tenant_id:
            raise Forbidden(
                "Account does not belong to this hall. Please login/register for this venue."
            )

    return tenant, resources
