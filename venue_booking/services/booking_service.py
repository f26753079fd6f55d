"""Booking admission pipeline and persistence with backend failover.

A request goes through field validation, tenant/resource validation,
conflict detection, pricing, code allocation and the write. Only a failure
of the write stage switches to the fallback repository; every other stage
either short-circuits with a BookingError or, for pricing, degrades to the
client estimate.
"""
import asyncio
import inspect
from datetime import date
from typing import Callable, List, Optional, Tuple

from venue_booking.core.config import REQUIRE_PRICING_RULE
from venue_booking.core.errors import BookingError, InternalError, ValidationFailed
from venue_booking.core.logging_config import get_logger
from venue_booking.models.enums import BookingStatus
from venue_booking.repositories.base import BookingRepository
from venue_booking.schemas.booking import BookingCreate, BookingRecord, TimeWindow
from venue_booking.schemas.resource import ResourceRecord
from venue_booking.services.conflicts import ensure_slot_free
from venue_booking.services.notifications import record_booking_notification, send_booking_emails
from venue_booking.services.slot_locks import SlotLockManager
from venue_booking.services.validation import validate_request_fields, validate_tenant_resources
from venue_booking.utils.booking_code import allocate_booking_code
from venue_booking.utils.pricing import PriceQuote, calculate_price

logger = get_logger("booking")


def run_inline(func: Callable, *args):
    """Scheduler used outside a request: run the task right away."""
    result = func(*args)
    if inspect.isawaitable(result):
        asyncio.run(result)


def build_booking_values(
    data: BookingCreate,
    window: TimeWindow,
    resources: List[ResourceRecord],
    quote: PriceQuote,
    customer_id: Optional[str],
) -> dict:
    resource_ids = [r.id for r in resources]
    resource_names = [r.name or r.id for r in resources]

    return {
        "tenant_id": data.hall_owner_id,
        "resource_ids": resource_ids,
        "resource_names": resource_names,
        "resource_id": resource_ids[0],
        "resource_name": resource_names[0],
        "booking_date": window.booking_date,
        "start_time": window.start_time,
        "end_time": window.end_time,
        "customer_id": customer_id or None,
        "customer_name": data.customer_name.strip(),
        "customer_email": data.customer_email.lower().strip(),
        "customer_phone": window.customer_phone,
        "customer_avatar": data.customer_avatar or None,
        "event_type": data.event_type,
        "guest_count": data.guest_count or None,
        "additional_description": data.additional_description or "",
        "status": BookingStatus.PENDING.value,
        "calculated_price": quote.total,
        "price_breakdown": quote.breakdown,
        "source": data.booking_source or "website",
    }


class BookingCoordinator:
    def __init__(
        self,
        primary: BookingRepository,
        fallback: Optional[BookingRepository] = None,
        slot_locks: Optional[SlotLockManager] = None,
        require_pricing_rule: bool = REQUIRE_PRICING_RULE,
        today: Callable[[], date] = date.today,
        separate_fallback_store: bool = False,
    ):
        self.primary = primary
        self.fallback = fallback
        # Bookings saved on a separate fallback store must still block the slot
        self.separate_fallback_store = separate_fallback_store
        self.slot_locks = slot_locks or SlotLockManager()
        self.require_pricing_rule = require_pricing_rule
        self.today = today

    # ------------------------------------------------------------------
    # CREATE BOOKING
    # ------------------------------------------------------------------
    def create_booking(
        self,
        data: BookingCreate,
        customer_id: Optional[str] = None,
        schedule: Callable = run_inline,
    ) -> BookingRecord:
        customer_id = customer_id or data.customer_id
        window = validate_request_fields(data, today=self.today())

        try:
            tenant, resources = validate_tenant_resources(
                self.primary, data.hall_owner_id, data.selected_halls, customer_id
            )
            resource_ids = [r.id for r in resources]

            with self.slot_locks.hold(data.hall_owner_id, window.booking_date, resource_ids):
                ensure_slot_free(
                    self.primary,
                    data.hall_owner_id,
                    window.booking_date,
                    resource_ids,
                    window.start_time,
                    window.end_time,
                )
                self.check_fallback_store(data.hall_owner_id, window, resource_ids)

                quote = calculate_price(
                    self.primary, data.hall_owner_id, resource_ids, window, data.estimated_price
                )
                if self.require_pricing_rule and not quote.matched_rule:
                    raise ValidationFailed(
                        "selectedHalls", "No pricing is configured for the selected resources"
                    )

                values = build_booking_values(data, window, resources, quote, customer_id)
                booking, repo = self.persist(values, window.booking_date)

        except BookingError:
            raise
        except Exception as e:
            logger.error(f"Booking admission failed for Tenant={data.hall_owner_id}: {e}")
            raise InternalError(str(e) or "Internal server error") from e

        logger.info(
            f"Booking Created | Tenant={booking.tenant_id} | Code={booking.booking_code} "
            f"| Resources={booking.resource_ids} | Price={booking.calculated_price} | Backend={repo.name}"
        )

        schedule(record_booking_notification, repo, booking)
        schedule(send_booking_emails, tenant, booking)

        return booking

    def check_fallback_store(self, tenant_id: str, window: TimeWindow, resource_ids: List[str]) -> None:
        if self.fallback is None or not self.separate_fallback_store:
            return

        try:
            ensure_slot_free(
                self.fallback, tenant_id, window.booking_date, resource_ids, window.start_time, window.end_time
            )
        except BookingError:
            raise
        except Exception as e:
            logger.warning(f"Conflict check skipped on {self.fallback.name}: {e}")

    # ------------------------------------------------------------------
    # WRITE (PRIMARY -> FALLBACK)
    # ------------------------------------------------------------------
    def persist(self, values: dict, booking_date: date) -> Tuple[BookingRecord, BookingRepository]:
        # Shared between both attempts so the fallback writes the same payload
        state = {"id": None, "code": None}

        try:
            return self._write(self.primary, values, booking_date, state), self.primary
        except Exception as e:
            if self.fallback is None:
                logger.error(f"Booking write failed on {self.primary.name}: {e}")
                raise InternalError("Could not save booking") from e
            logger.warning(f"Booking write failed on {self.primary.name}, retrying on {self.fallback.name}: {e}")

        try:
            return self._write(self.fallback, values, booking_date, state), self.fallback
        except Exception as e:
            logger.error(f"Booking write failed on {self.fallback.name}: {e}")
            raise InternalError("Could not save booking") from e

    def _write(self, repo: BookingRepository, values: dict, booking_date: date, state: dict) -> BookingRecord:
        if state["id"] is None:
            state["id"] = repo.reserve_booking_id()
        if state["code"] is None:
            state["code"] = allocate_booking_code(repo, booking_date, state["id"])

        return repo.insert_booking({
            **values,
            "id": state["id"],
            "booking_code": state["code"],
        })
