from pydantic import BaseModel
from typing import List

from venue_booking.schemas.tenant import TenantProfileOut


class ResourceRecord(BaseModel):
    id: str
    tenant_id: str
    name: str = ""
    type: str = "hall"
    capacity: int = 0
    code: str = ""
    description: str = ""

    model_config = {"from_attributes": True}


class ResourceOut(BaseModel):
    id: str
    name: str
    type: str
    capacity: int
    code: str
    description: str
    hallOwnerId: str

    @classmethod
    def from_record(cls, resource: ResourceRecord) -> "ResourceOut":
        return cls(
            id=resource.id,
            name=resource.name,
            type=resource.type,
            capacity=resource.capacity,
            code=resource.code,
            description=resource.description,
            hallOwnerId=resource.tenant_id,
        )


class PublicResourcesOut(BaseModel):
    resources: List[ResourceOut]
    hallOwner: TenantProfileOut
