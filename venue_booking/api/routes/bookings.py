from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends

from venue_booking.core.auth_utils import resolve_customer_id
from venue_booking.core.dependencies import get_booking_coordinator, get_primary_repository
from venue_booking.repositories.base import BookingRepository
from venue_booking.schemas.booking import BookingCreate
from venue_booking.services.availability import unavailable_dates
from venue_booking.services.booking_service import BookingCoordinator

router = APIRouter(prefix="/bookings", tags=["Bookings"])


# ---------------------------------------------------------------------
# CREATE BOOKING
# ---------------------------------------------------------------------
@router.post("/")
def create_booking(
    data: BookingCreate,
    background_tasks: BackgroundTasks,
    token: Optional[str] = None,
    coordinator: BookingCoordinator = Depends(get_booking_coordinator),
):
    customer_id = resolve_customer_id(token) if token else None

    booking = coordinator.create_booking(
        data,
        customer_id=customer_id,
        schedule=background_tasks.add_task,
    )

    return {
        "message": "Booking created successfully",
        "bookingId": booking.id,
        "bookingCode": booking.booking_code,
        "bookingSource": booking.source,
        "calculatedPrice": booking.calculated_price,
        "status": booking.status,
    }


# ---------------------------------------------------------------------
# UNAVAILABLE DATES
# ---------------------------------------------------------------------
@router.get("/unavailable-dates/{hall_owner_id}")
def get_unavailable_dates(
    hall_owner_id: str,
    resourceId: Optional[str] = None,
    startDate: Optional[str] = None,
    endDate: Optional[str] = None,
    repo: BookingRepository = Depends(get_primary_repository),
):
    return unavailable_dates(
        repo,
        hall_owner_id,
        resource_id=resourceId,
        start_date=startDate,
        end_date=endDate,
    )
