from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType

from venue_booking.core import config
from venue_booking.core.logging_config import get_logger
from venue_booking.schemas.booking import BookingRecord, hhmm

logger = get_logger("notification")


def get_mail_config():
    if not (config.MAIL_USERNAME and config.MAIL_PASSWORD and config.MAIL_FROM):
        return None

    return ConnectionConfig(
        MAIL_USERNAME=config.MAIL_USERNAME,
        MAIL_PASSWORD=config.MAIL_PASSWORD,
        MAIL_FROM=config.MAIL_FROM,
        MAIL_PORT=config.MAIL_PORT,
        MAIL_SERVER=config.MAIL_SERVER,
        MAIL_STARTTLS=True,
        MAIL_SSL_TLS=False,
        USE_CREDENTIALS=True,
    )


async def send_email(to: str, subject: str, html: str) -> bool:
    conf = get_mail_config()
    if conf is None:
        logger.info(f"Mail not configured, skipping '{subject}' to {to}")
        return False

    message = MessageSchema(
        subject=subject,
        recipients=[to],
        body=html,
        subtype=MessageType.html,
    )
    await FastMail(conf).send_message(message)
    logger.info(f"Email sent | To={to} | Subject={subject}")
    return True


def _slot_line(booking: BookingRecord) -> str:
    return (
        f"{booking.booking_date.isoformat()} "
        f"{hhmm(booking.start_time)} - {hhmm(booking.end_time)}"
    )


def render_customer_confirmation(booking: BookingRecord):
    hall_name = booking.resource_name or "the venue"
    subject = f"Booking Request Received - {booking.event_type} at {hall_name}"
    html = f"""
    <html>
    <body>
        <h2>Hi {booking.customer_name},</h2>
        <p>Your booking request has been received.</p>
        <p>Booking code: <b>{booking.booking_code}</b></p>
        <p>{hall_name} on <b>{_slot_line(booking)}</b></p>
        <p>Estimated price: {booking.calculated_price:.2f}</p>
        <p>We will let you know once the venue confirms it.</p>
    </body>
    </html>
    """
    return subject, html


def render_owner_notification(booking: BookingRecord):
    hall_names = ", ".join(booking.resource_names or []) or booking.resource_name or ""
    subject = f"New Booking Request - {booking.customer_name}"
    html = f"""
    <html>
    <body>
        <h2>New booking request</h2>
        <p>Code: {booking.booking_code}</p>
        <p>Resources: {hall_names}</p>
        <p>Date & time: {_slot_line(booking)}</p>
        <p>Event: {booking.event_type} ({booking.guest_count or '-'} guests)</p>
        <p>Name: {booking.customer_name}</p>
        <p>Email: {booking.customer_email}</p>
        <p>Phone: {booking.customer_phone}</p>
        <p>Price: {booking.calculated_price:.2f}</p>
    </body>
    </html>
    """
    return subject, html
