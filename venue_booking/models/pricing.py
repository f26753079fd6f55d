from sqlalchemy import Column, Float, String, ForeignKey
from venue_booking.db.session import Base
from venue_booking.models.enums import RateType
from venue_booking.models.ids import new_id


class PricingRule(Base):
    __tablename__ = "pricing_rules"

    id = Column(String(32), primary_key=True, default=new_id)
    tenant_id = Column(String(32), ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False, index=True)
    resource_id = Column(String(32), ForeignKey("resources.id", ondelete="CASCADE"), nullable=False, index=True)
    resource_name = Column(String, nullable=False, default="")

    rate_type = Column(String, nullable=False, default=RateType.HOURLY.value)
    weekday_rate = Column(Float, nullable=False, default=0.0)
    weekend_rate = Column(Float, nullable=False, default=0.0)

    description = Column(String, nullable=False, default="")
