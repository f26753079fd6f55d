from fastapi import APIRouter, Depends

from venue_booking.core.dependencies import get_primary_repository
from venue_booking.repositories.base import BookingRepository
from venue_booking.schemas.resource import PublicResourcesOut, ResourceOut
from venue_booking.schemas.tenant import TenantProfileOut
from venue_booking.services.validation import require_hall_owner

router = APIRouter(prefix="/resources", tags=["Resources"])


@router.get("/public/{hall_owner_id}", response_model=PublicResourcesOut)
def public_resources(hall_owner_id: str, repo: BookingRepository = Depends(get_primary_repository)):
    tenant = require_hall_owner(repo, hall_owner_id)

    resources = [ResourceOut.from_record(r) for r in repo.list_resources(hall_owner_id)]
    return PublicResourcesOut(
        resources=resources,
        hallOwner=TenantProfileOut.from_record(tenant),
    )
