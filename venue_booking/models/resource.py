from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from venue_booking.db.session import Base
from venue_booking.models.ids import new_id


class Resource(Base):
    __tablename__ = "resources"

    id = Column(String(32), primary_key=True, default=new_id)

    # Ownership
    tenant_id = Column(String(32), ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False, index=True)

    name = Column(String, nullable=False, default="")
    type = Column(String, nullable=False, default="hall")
    capacity = Column(Integer, nullable=False, default=0)
    code = Column(String, nullable=False, default="")
    description = Column(String, nullable=False, default="")

    tenant = relationship("Tenant", back_populates="resources")
