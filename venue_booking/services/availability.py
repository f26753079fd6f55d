from typing import Optional

from venue_booking.models.enums import ACTIVE_BOOKING_STATUSES
from venue_booking.repositories.base import BookingRepository
from venue_booking.schemas.booking import hhmm
from venue_booking.services.validation import require_hall_owner


def unavailable_dates(
    repo: BookingRepository,
    tenant_id: str,
    resource_id: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> dict:
    """Active bookings of a venue grouped by date, then by resource.

    ``start_date`` / ``end_date`` are inclusive ``YYYY-MM-DD`` bounds.
    """
    require_hall_owner(repo, tenant_id)

    selected = []
    for booking in repo.list_bookings(tenant_id):
        if booking.status not in ACTIVE_BOOKING_STATUSES:
            continue
        day = booking.booking_date.isoformat()
        if resource_id and str(resource_id) not in booking.occupied_resource_ids():
            continue
        if start_date and day < start_date:
            continue
        if end_date and day > end_date:
            continue
        selected.append(booking)

    by_date = {}
    for booking in selected:
        resources = booking.occupied_resource_ids()
        if not resources:
            continue
        day = by_date.setdefault(booking.booking_date.isoformat(), {})
        for rid in resources:
            day.setdefault(rid, []).append({
                "bookingId": booking.id,
                "startTime": hhmm(booking.start_time),
                "endTime": hhmm(booking.end_time),
                "customerName": booking.customer_name or "Unknown",
                "eventType": booking.event_type or "Unknown",
                "status": booking.status,
            })

    return {
        "unavailableDates": by_date,
        "totalBookings": len(selected),
        "message": "Successfully fetched unavailable dates",
    }
