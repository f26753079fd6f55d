from sqlalchemy import Column, String, JSON
from sqlalchemy.orm import relationship
from venue_booking.db.session import Base
from venue_booking.models.enums import TenantRole
from venue_booking.models.ids import new_id


class Tenant(Base):
    __tablename__ = "tenants"

    id = Column(String(32), primary_key=True, default=new_id)
    role = Column(String, nullable=False, default=TenantRole.HALL_OWNER.value)

    name = Column(String)
    email = Column(String, index=True)
    business_name = Column(String)
    address = Column(String)
    phone = Column(String)

    # Event labels the venue accepts (wedding, conference, ...)
    event_types = Column(JSON, nullable=False, default=list)

    resources = relationship("Resource", back_populates="tenant", cascade="all, delete")
