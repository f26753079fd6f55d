from datetime import time

import pytest

from conftest import SATURDAY, TUESDAY
from venue_booking.core.errors import BookingConflict
from venue_booking.services.conflicts import ensure_slot_free, find_conflict, overlaps


def t(value):
    return time.fromisoformat(value)


@pytest.mark.parametrize("start,end,expected", [
    ("09:00", "10:00", False),  # ends exactly when the other begins
    ("12:00", "13:00", False),  # begins exactly when the other ends
    ("09:00", "10:01", True),
    ("11:59", "14:00", True),
    ("10:30", "11:30", True),   # inside
    ("08:00", "14:00", True),   # around
])
def test_half_open_overlap(start, end, expected):
    assert overlaps(t(start), t(end), t("10:00"), t("12:00")) is expected


@pytest.fixture
def venue(seed):
    tenant = seed.tenant()
    r1 = seed.resource(tenant, name="R1")
    r2 = seed.resource(tenant, name="R2")
    return tenant, r1, r2


def test_overlap_on_shared_resource_conflicts(repo, seed, venue):
    tenant, r1, r2 = venue
    existing = seed.booking(tenant, [r1, r2], start="10:00", end="12:00")

    found = find_conflict(repo, tenant.id, TUESDAY, [r2.id], t("11:00"), t("13:00"))
    assert found.id == existing.id


def test_back_to_back_is_free(repo, seed, venue):
    tenant, r1, _ = venue
    seed.booking(tenant, [r1], start="08:00", end="10:00")
    assert find_conflict(repo, tenant.id, TUESDAY, [r1.id], t("10:00"), t("12:00")) is None


def test_disjoint_resources_do_not_conflict(repo, seed, venue):
    tenant, r1, r2 = venue
    seed.booking(tenant, [r1], start="10:00", end="12:00")
    assert find_conflict(repo, tenant.id, TUESDAY, [r2.id], t("10:00"), t("12:00")) is None


def test_other_date_does_not_conflict(repo, seed, venue):
    tenant, r1, _ = venue
    seed.booking(tenant, [r1], booking_date=SATURDAY)
    assert find_conflict(repo, tenant.id, TUESDAY, [r1.id], t("10:00"), t("12:00")) is None


@pytest.mark.parametrize("status", ["cancelled", "rejected"])
def test_inactive_bookings_never_block(repo, seed, venue, status):
    tenant, r1, _ = venue
    seed.booking(tenant, [r1], status=status)
    assert find_conflict(repo, tenant.id, TUESDAY, [r1.id], t("10:00"), t("12:00")) is None


def test_confirmed_booking_blocks(repo, seed, venue):
    tenant, r1, _ = venue
    seed.booking(tenant, [r1], status="confirmed")
    assert find_conflict(repo, tenant.id, TUESDAY, [r1.id], t("11:00"), t("11:30")) is not None


def test_legacy_single_resource_field_is_used(repo, seed, venue):
    tenant, r1, _ = venue
    seed.booking(tenant, [r1], legacy_only=True)
    assert find_conflict(repo, tenant.id, TUESDAY, [r1.id], t("11:00"), t("13:00")) is not None


def test_other_tenant_bookings_are_ignored(repo, seed, venue):
    tenant, r1, _ = venue
    other = seed.tenant(email="other@venue.test")
    seed.booking(other, [r1])
    assert find_conflict(repo, tenant.id, TUESDAY, [r1.id], t("10:00"), t("12:00")) is None


def test_conflict_error_carries_diagnostics(repo, seed, venue):
    tenant, r1, _ = venue
    existing = seed.booking(tenant, [r1], start="10:00", end="12:00", customer_name="Ana")

    with pytest.raises(BookingConflict) as exc:
        ensure_slot_free(repo, tenant.id, TUESDAY, [r1.id], t("11:00"), t("13:00"))

    body = exc.value.to_dict()
    assert exc.value.status_code == 409
    assert body["conflictingBooking"] == {
        "bookingId": existing.id,
        "startTime": "10:00",
        "endTime": "12:00",
        "customerName": "Ana",
        "status": "pending",
    }
    assert body["debug"]["requestedTime"] == "11:00 - 13:00"
    assert body["debug"]["bookedTime"] == "10:00 - 12:00"
    assert body["debug"]["date"] == TUESDAY.isoformat()
