from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Date, Time, Float, ForeignKey, JSON, DateTime
from venue_booking.db.session import Base


def _utcnow():
    return datetime.now(timezone.utc)


class Booking(Base):
    __tablename__ = "bookings"

    # Assigned by the repository before the write (booking codes may embed it)
    id = Column(String(32), primary_key=True)
    tenant_id = Column(String(32), ForeignKey("tenants.id"), nullable=False, index=True)

    # RESOURCES -------------------------------------
    resource_ids = Column(JSON, nullable=False, default=list)
    resource_names = Column(JSON, nullable=False, default=list)
    # Legacy single-resource fields, kept equal to the first list entry
    resource_id = Column(String(32), nullable=True)
    resource_name = Column(String, nullable=True)

    # SLOT ------------------------------------------
    booking_date = Column(Date, nullable=False, index=True)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)

    # CUSTOMER --------------------------------------
    customer_id = Column(String(32), nullable=True)
    customer_name = Column(String, nullable=False)
    customer_email = Column(String, nullable=False)
    customer_phone = Column(String, nullable=False)
    customer_avatar = Column(String, nullable=True)

    event_type = Column(String, nullable=False)
    guest_count = Column(Integer, nullable=True)
    additional_description = Column(String, nullable=False, default="")

    status = Column(String, nullable=False, default="pending")

    # PRICE -----------------------------------------
    calculated_price = Column(Float, nullable=False, default=0.0)
    price_breakdown = Column(JSON, nullable=True)

    booking_code = Column(String, nullable=False, unique=True, index=True)
    source = Column(String, nullable=False, default="website")

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)
