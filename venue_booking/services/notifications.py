"""Best-effort side effects of a created booking.

Each function absorbs its own failure and reports it on the
``notification`` log channel; the booking response never depends on them.
"""
from venue_booking.core.logging_config import get_logger
from venue_booking.repositories.base import BookingRepository
from venue_booking.schemas.booking import BookingRecord
from venue_booking.schemas.tenant import TenantRecord
from venue_booking.services import email_service

logger = get_logger("notification")


def record_booking_notification(repo: BookingRepository, booking: BookingRecord) -> bool:
    try:
        repo.add_notification({
            "user_id": booking.tenant_id,
            "type": "new_booking",
            "title": "New Booking Request",
            "message": (
                f"New booking request from {booking.customer_name} "
                f"for {booking.booking_date.isoformat()}"
            ),
            "data": {
                "bookingId": booking.id,
                "bookingCode": booking.booking_code,
                "customerName": booking.customer_name,
                "bookingDate": booking.booking_date.isoformat(),
                "hallName": booking.resource_name,
            },
            "is_read": False,
        })
        logger.info(f"Notification stored | Tenant={booking.tenant_id} | Booking={booking.id}")
        return True
    except Exception as e:
        logger.opt(exception=e).warning(f"Notification failed for Booking={booking.id}")
        return False


async def send_booking_emails(tenant: TenantRecord, booking: BookingRecord) -> bool:
    try:
        subject, html = email_service.render_customer_confirmation(booking)
        await email_service.send_email(booking.customer_email, subject, html)

        if tenant.email:
            subject, html = email_service.render_owner_notification(booking)
            await email_service.send_email(tenant.email, subject, html)
        return True
    except Exception as e:
        logger.opt(exception=e).warning(f"Booking emails failed for Booking={booking.id}")
        return False
