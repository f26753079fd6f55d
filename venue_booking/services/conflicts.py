from datetime import date, time
from typing import Iterable, Optional

from venue_booking.core.errors import BookingConflict
from venue_booking.core.logging_config import get_logger
from venue_booking.models.enums import ACTIVE_BOOKING_STATUSES
from venue_booking.repositories.base import BookingRepository
from venue_booking.schemas.booking import BookingRecord, hhmm

logger = get_logger("booking")


def overlaps(start: time, end: time, other_start: time, other_end: time) -> bool:
    # Half-open windows: back-to-back bookings do not collide
    return start < other_end and end > other_start


def find_conflict(
    repo: BookingRepository,
    tenant_id: str,
    booking_date: date,
    resource_ids: Iterable[str],
    start_time: time,
    end_time: time,
) -> Optional[BookingRecord]:
    requested = set(resource_ids)

    for booking in repo.bookings_on_date(tenant_id, booking_date):
        if booking.status not in ACTIVE_BOOKING_STATUSES:
            continue
        if not requested.intersection(booking.occupied_resource_ids()):
            continue
        if overlaps(start_time, end_time, booking.start_time, booking.end_time):
            return booking

    return None


def ensure_slot_free(
    repo: BookingRepository,
    tenant_id: str,
    booking_date: date,
    resource_ids: Iterable[str],
    start_time: time,
    end_time: time,
) -> None:
    conflict = find_conflict(repo, tenant_id, booking_date, resource_ids, start_time, end_time)
    if conflict is None:
        return

    logger.info(
        f"Booking Conflict | Tenant={tenant_id} | Date={booking_date} "
        f"| Requested={hhmm(start_time)}-{hhmm(end_time)} | Existing={conflict.id}"
    )
    raise BookingConflict(
        "Time slot is already booked. Please choose a different time.",
        payload={
            "conflictingBooking": {
                "bookingId": conflict.id,
                "startTime": hhmm(conflict.start_time),
                "endTime": hhmm(conflict.end_time),
                "customerName": conflict.customer_name,
                "status": conflict.status,
            },
            "debug": {
                "requestedTime": f"{hhmm(start_time)} - {hhmm(end_time)}",
                "bookedTime": f"{hhmm(conflict.start_time)} - {hhmm(conflict.end_time)}",
                "date": booking_date.isoformat(),
                "resource": "one or more selected resources",
            },
        },
    )
