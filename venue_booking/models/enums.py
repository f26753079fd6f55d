from enum import Enum


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    REJECTED = "rejected"


# Only these statuses occupy a slot
ACTIVE_BOOKING_STATUSES = (BookingStatus.PENDING.value, BookingStatus.CONFIRMED.value)


class RateType(str, Enum):
    HOURLY = "hourly"
    DAILY = "daily"


class TenantRole(str, Enum):
    HALL_OWNER = "hall_owner"
    CUSTOMER = "customer"
