from pydantic import BaseModel
from typing import List, Optional

from venue_booking.models.enums import TenantRole


class TenantRecord(BaseModel):
    id: str
    role: str
    name: Optional[str] = None
    email: Optional[str] = None
    business_name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    event_types: Optional[List[str]] = None

    model_config = {"from_attributes": True}

    @property
    def is_hall_owner(self) -> bool:
        return self.role == TenantRole.HALL_OWNER.value


class CustomerRecord(BaseModel):
    id: str
    tenant_id: str
    name: Optional[str] = None
    email: Optional[str] = None

    model_config = {"from_attributes": True}


class TenantProfileOut(BaseModel):
    """Public venue card shown next to the resource list."""
    name: str
    address: str
    phone: str
    email: str
    businessName: str
    eventTypes: List[str]

    @classmethod
    def from_record(cls, tenant: TenantRecord) -> "TenantProfileOut":
        return cls(
            name=tenant.name or tenant.business_name or "Hall Owner",
            address=tenant.address or "Address not provided",
            phone=tenant.phone or "Phone not provided",
            email=tenant.email or "Email not provided",
            businessName=tenant.business_name or tenant.name or "Business Name",
            eventTypes=list(tenant.event_types or []),
        )
