from pydantic import BaseModel, Field


class PricingRuleRecord(BaseModel):
    id: str
    tenant_id: str
    resource_id: str
    resource_name: str = ""
    rate_type: str = "hourly"
    weekday_rate: float = Field(default=0.0, ge=0)
    weekend_rate: float = Field(default=0.0, ge=0)
    description: str = ""

    model_config = {"from_attributes": True}


class PricingOut(BaseModel):
    id: str
    resourceId: str
    resourceName: str
    rateType: str
    weekdayRate: float
    weekendRate: float
    description: str
    hallOwnerId: str

    @classmethod
    def from_record(cls, rule: PricingRuleRecord) -> "PricingOut":
        return cls(
            id=rule.id,
            resourceId=rule.resource_id,
            resourceName=rule.resource_name,
            rateType=rule.rate_type,
            weekdayRate=rule.weekday_rate,
            weekendRate=rule.weekend_rate,
            description=rule.description,
            hallOwnerId=rule.tenant_id,
        )
