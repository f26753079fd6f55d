from fastapi import APIRouter, Depends

from venue_booking.core.dependencies import get_primary_repository
from venue_booking.repositories.base import BookingRepository
from venue_booking.schemas.pricing import PricingOut
from venue_booking.services.validation import require_hall_owner

router = APIRouter(prefix="/pricing", tags=["Pricing"])


@router.get("/public/{hall_owner_id}", response_model=list[PricingOut])
def public_pricing(hall_owner_id: str, repo: BookingRepository = Depends(get_primary_repository)):
    require_hall_owner(repo, hall_owner_id)
    return [PricingOut.from_record(rule) for rule in repo.list_pricing_rules(hall_owner_id)]
