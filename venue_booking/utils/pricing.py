from typing import List, Optional

from pydantic import BaseModel

from venue_booking.core.logging_config import get_logger
from venue_booking.models.enums import RateType
from venue_booking.repositories.base import BookingRepository
from venue_booking.schemas.booking import TimeWindow
from venue_booking.schemas.pricing import PricingRuleRecord

logger = get_logger("booking")

# Daily rates charge half when the booking is shorter than this
FULL_DAY_HOURS = 8


class PriceQuote(BaseModel):
    total: float
    breakdown: Optional[dict] = None
    matched_rule: bool = False


def resource_price(rule: PricingRuleRecord, duration_hours: float, is_weekend: bool) -> float:
    rate = rule.weekend_rate if is_weekend else rule.weekday_rate

    if rule.rate_type == RateType.HOURLY.value:
        return rate * duration_hours

    # daily
    if duration_hours >= FULL_DAY_HOURS:
        return rate
    return rate * 0.5


def _fallback_quote(estimated_price: Optional[float]) -> PriceQuote:
    return PriceQuote(total=float(estimated_price or 0))


def calculate_price(
    repo: BookingRepository,
    tenant_id: str,
    resource_ids: List[str],
    window: TimeWindow,
    estimated_price: Optional[float] = None,
) -> PriceQuote:
    """Sum per-resource prices from the tenant's rate rules.

    Resources without a rule contribute nothing. When no resource has a
    rule, or the lookup fails, the client estimate (or 0) is used instead.
    """
    try:
        duration_hours = window.duration_hours
        is_weekend = window.is_weekend

        total = 0.0
        breakdown = []
        for resource_id in resource_ids:
            rule = repo.get_pricing_rule(tenant_id, resource_id)
            if not rule:
                continue

            price = resource_price(rule, duration_hours, is_weekend)
            total += float(price or 0)
            breakdown.append({
                "resourceId": resource_id,
                "weekdayRate": rule.weekday_rate,
                "weekendRate": rule.weekend_rate,
                "rateType": rule.rate_type,
                "appliedRate": rule.weekend_rate if is_weekend else rule.weekday_rate,
                "durationHours": duration_hours,
                "isWeekend": is_weekend,
                "calculatedPrice": price,
            })

    except Exception as e:
        logger.warning(f"Pricing failed for Tenant={tenant_id}, using client estimate: {e}")
        return _fallback_quote(estimated_price)

    if not breakdown:
        logger.info(f"No pricing rule for Tenant={tenant_id} Resources={resource_ids}, using client estimate")
        return _fallback_quote(estimated_price)

    return PriceQuote(
        total=total,
        breakdown={
            "multiResource": True,
            "breakdown": breakdown,
            "total": total,
            "calculationMethod": "sum_per_resource",
            "frontendEstimatedPrice": estimated_price or None,
        },
        matched_rule=True,
    )
