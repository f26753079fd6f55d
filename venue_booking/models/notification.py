from datetime import datetime, timezone

from sqlalchemy import Column, String, Boolean, JSON, DateTime
from venue_booking.db.session import Base
from venue_booking.models.ids import new_id


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(String(32), primary_key=True, default=new_id)
    user_id = Column(String(32), nullable=False, index=True)  # tenant receiving it

    type = Column(String, nullable=False, default="new_booking")
    title = Column(String, nullable=False)
    message = Column(String, nullable=False)
    data = Column(JSON, nullable=False, default=dict)

    is_read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
