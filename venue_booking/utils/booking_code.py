"""Human readable booking codes: ``BK-YYYYMMDD-XXXXX``."""
import re
import secrets
from datetime import date

from venue_booking.repositories.base import BookingRepository

# 32 symbols, no I, O, 0 or 1
BOOKING_CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
BOOKING_CODE_LENGTH = 5
MAX_CODE_ATTEMPTS = 12

# Random codes carry 5 symbols, storage-id fallbacks carry 6
BOOKING_CODE_RE = re.compile(r"^BK-\d{8}-[A-Z0-9]{5,6}$")


def code_prefix(booking_date: date) -> str:
    return f"BK-{booking_date.strftime('%Y%m%d')}-"


def random_suffix(length: int = BOOKING_CODE_LENGTH, choice=secrets.choice) -> str:
    return "".join(choice(BOOKING_CODE_ALPHABET) for _ in range(length))


def fallback_booking_code(booking_date: date, storage_id: str) -> str:
    return code_prefix(booking_date) + storage_id[-6:].upper()


def allocate_booking_code(
    repo: BookingRepository,
    booking_date: date,
    storage_id: str,
    choice=secrets.choice,
) -> str:
    """Return the first random code not present in the store.

    After MAX_CODE_ATTEMPTS collisions the code is derived from the new
    record's storage id and is not checked again.
    """
    for _ in range(MAX_CODE_ATTEMPTS):
        candidate = code_prefix(booking_date) + random_suffix(choice=choice)
        if not repo.booking_code_exists(candidate):
            return candidate

    return fallback_booking_code(booking_date, storage_id)


def is_valid_booking_code(code: str) -> bool:
    return bool(BOOKING_CODE_RE.fullmatch(code or ""))
