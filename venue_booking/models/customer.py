from sqlalchemy import Column, String, ForeignKey
from venue_booking.db.session import Base
from venue_booking.models.ids import new_id


class Customer(Base):
    __tablename__ = "customers"

    id = Column(String(32), primary_key=True, default=new_id)

    # A customer account is registered at exactly one venue
    tenant_id = Column(String(32), ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False, index=True)

    name = Column(String)
    email = Column(String, index=True)
