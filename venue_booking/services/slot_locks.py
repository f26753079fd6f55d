"""Advisory locks held from the conflict check through the booking write.

One lock per (tenant, resource, date). Redis locks are used when Redis is
reachable so that several workers share them; otherwise a process-local
registry provides the same guarantee for a single worker.
"""
import threading
from contextlib import contextmanager
from datetime import date
from typing import Iterable

from redis.exceptions import LockError, RedisError

from venue_booking.core.config import SLOT_LOCK_TIMEOUT_SECONDS, SLOT_LOCK_WAIT_SECONDS
from venue_booking.core.errors import BookingConflict
from venue_booking.core.logging_config import get_logger

logger = get_logger("booking")


def slot_key(tenant_id: str, resource_id: str, booking_date: date) -> str:
    return f"venue_booking:slot:{tenant_id}:{resource_id}:{booking_date.isoformat()}"


class _LocalHandle:
    def __init__(self, registry: "LocalSlotLocks", key: str):
        self.registry = registry
        self.key = key

    def release(self):
        self.registry.release(self.key)


class LocalSlotLocks:
    def __init__(self):
        self._guard = threading.Lock()
        # key -> [lock, number of holders and waiters]
        self._locks = {}

    def acquire(self, key: str, wait_seconds: float):
        with self._guard:
            entry = self._locks.setdefault(key, [threading.Lock(), 0])
            entry[1] += 1

        if entry[0].acquire(timeout=wait_seconds):
            return _LocalHandle(self, key)

        with self._guard:
            self._drop_ref(key)
        return None

    def release(self, key: str):
        with self._guard:
            self._locks[key][0].release()
            self._drop_ref(key)

    def _drop_ref(self, key: str):
        entry = self._locks[key]
        entry[1] -= 1
        if entry[1] == 0:
            del self._locks[key]


class RedisSlotLocks:
    def __init__(self, client, timeout_seconds: float = SLOT_LOCK_TIMEOUT_SECONDS):
        self.client = client
        self.timeout_seconds = timeout_seconds
        self.local = LocalSlotLocks()

    def acquire(self, key: str, wait_seconds: float):
        lock = self.client.lock(key, timeout=self.timeout_seconds, blocking_timeout=wait_seconds)
        try:
            if lock.acquire():
                return lock
            return None
        except RedisError as e:
            logger.warning(f"Redis lock failed for {key}, using local lock: {e}")
            return self.local.acquire(key, wait_seconds)


class SlotLockManager:
    def __init__(self, backend=None, wait_seconds: float = SLOT_LOCK_WAIT_SECONDS):
        self.backend = backend or LocalSlotLocks()
        self.wait_seconds = wait_seconds

    @contextmanager
    def hold(self, tenant_id: str, booking_date: date, resource_ids: Iterable[str]):
        # Sorted so two requests over the same resources never deadlock
        keys = sorted({slot_key(tenant_id, r, booking_date) for r in resource_ids})
        handles = []
        try:
            for key in keys:
                handle = self.backend.acquire(key, self.wait_seconds)
                if handle is None:
                    raise BookingConflict(
                        "This time slot is being booked right now. Please try again."
                    )
                handles.append(handle)
            yield
        finally:
            for handle in reversed(handles):
                try:
                    handle.release()
                except (LockError, RedisError) as e:
                    # Expired lock: the slot is already free again
                    logger.warning(f"Slot lock release failed: {e}")
