from functools import lru_cache

from fastapi import Depends

from venue_booking.core.config import DATABASE_URL, FALLBACK_DATABASE_URL
from venue_booking.core.redis import get_redis_client
from venue_booking.db.session import SessionLocal, FallbackSessionLocal
from venue_booking.repositories.base import BookingRepository
from venue_booking.repositories.sql import SqlBookingRepository
from venue_booking.services.booking_service import BookingCoordinator
from venue_booking.services.slot_locks import LocalSlotLocks, RedisSlotLocks, SlotLockManager


# Built once per process; both repositories share one interface
@lru_cache
def get_primary_repository() -> BookingRepository:
    return SqlBookingRepository(SessionLocal, name="primary")


@lru_cache
def get_fallback_repository() -> BookingRepository:
    return SqlBookingRepository(FallbackSessionLocal, name="fallback")


@lru_cache
def get_slot_locks() -> SlotLockManager:
    client = get_redis_client()
    if client is not None:
        return SlotLockManager(RedisSlotLocks(client))
    return SlotLockManager(LocalSlotLocks())


def get_booking_coordinator(
    primary: BookingRepository = Depends(get_primary_repository),
    fallback: BookingRepository = Depends(get_fallback_repository),
    slot_locks: SlotLockManager = Depends(get_slot_locks),
) -> BookingCoordinator:
    return BookingCoordinator(
        primary, fallback, slot_locks, separate_fallback_store=FALLBACK_DATABASE_URL != DATABASE_URL
    )
