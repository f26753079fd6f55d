from pydantic import BaseModel, Field, field_validator, model_validator
from datetime import date, datetime, time
from typing import Any, List, Optional


def normalize_resource_ids(selected_halls: Any, selected_hall: Any) -> List[str]:
    """Merge the multi-resource list and the legacy single field into one list.

    The list wins when it has entries; ids are stringified, blanks dropped
    and duplicates removed keeping the first occurrence.
    """
    if isinstance(selected_halls, (list, tuple)) and len(selected_halls) > 0:
        raw = [h for h in selected_halls if h]
    elif selected_hall:
        raw = [selected_hall]
    else:
        raw = []

    seen = []
    for item in raw:
        value = str(item)
        if value not in seen:
            seen.append(value)
    return seen


class BookingCreate(BaseModel):
    """Create-booking request body.

    Fields stay loosely typed so the admission pipeline can validate them
    in a fixed order and report the first offending field.
    """
    hall_owner_id: Optional[str] = Field(default=None, alias="hallOwnerId")

    customer_id: Optional[str] = Field(default=None, alias="customerId")
    customer_name: Optional[str] = Field(default=None, alias="customerName")
    customer_email: Optional[str] = Field(default=None, alias="customerEmail")
    customer_phone: Optional[str] = Field(default=None, alias="customerPhone")
    customer_avatar: Optional[str] = Field(default=None, alias="customerAvatar")

    event_type: Optional[str] = Field(default=None, alias="eventType")
    selected_halls: List[str] = Field(default_factory=list, alias="selectedHalls")

    booking_date: Optional[str] = Field(default=None, alias="bookingDate")
    start_time: Optional[str] = Field(default=None, alias="startTime")
    end_time: Optional[str] = Field(default=None, alias="endTime")

    guest_count: Optional[int] = Field(default=None, alias="guestCount")
    additional_description: Optional[str] = Field(default="", alias="additionalDescription")
    estimated_price: Optional[float] = Field(default=None, alias="estimatedPrice")
    booking_source: Optional[str] = Field(default="website", alias="bookingSource")

    model_config = {"populate_by_name": True}

    @model_validator(mode="before")
    @classmethod
    def merge_legacy_resource(cls, data: Any):
        if not isinstance(data, dict):
            return data
        data = dict(data)
        halls = data.pop("selectedHalls", data.pop("selected_halls", None))
        single = data.pop("selectedHall", data.pop("selected_hall", None))
        data["selectedHalls"] = normalize_resource_ids(halls, single)
        return data

    @field_validator(
        "hall_owner_id", "customer_id", "customer_name", "customer_email",
        "customer_phone", "event_type", "booking_date", "start_time", "end_time",
        mode="before",
    )
    @classmethod
    def scalar_to_str(cls, value: Any):
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (int, float)):
            return str(value)
        return value


class TimeWindow(BaseModel):
    """Validated slot of a request, plus the cleaned phone number."""
    booking_date: date
    start_time: time
    end_time: time
    customer_phone: str

    @property
    def duration_hours(self) -> float:
        start = self.start_time.hour * 60 + self.start_time.minute
        end = self.end_time.hour * 60 + self.end_time.minute
        return (end - start) / 60

    @property
    def is_weekend(self) -> bool:
        return self.booking_date.weekday() >= 5


class BookingRecord(BaseModel):
    id: str
    tenant_id: str

    resource_ids: Optional[List[str]] = None
    resource_names: Optional[List[str]] = None
    resource_id: Optional[str] = None
    resource_name: Optional[str] = None

    booking_date: date
    start_time: time
    end_time: time

    customer_id: Optional[str] = None
    customer_name: str
    customer_email: str
    customer_phone: str
    customer_avatar: Optional[str] = None

    event_type: str
    guest_count: Optional[int] = None
    additional_description: str = ""

    status: str
    calculated_price: float = 0.0
    price_breakdown: Optional[dict] = None

    booking_code: str
    source: str = "website"

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

    def occupied_resource_ids(self) -> List[str]:
        if self.resource_ids:
            return [str(r) for r in self.resource_ids]
        return [str(self.resource_id)] if self.resource_id else []


def hhmm(value: time) -> str:
    return value.strftime("%H:%M")
