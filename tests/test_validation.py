from types import SimpleNamespace

import pytest

from conftest import TODAY, TUESDAY, booking_payload
from venue_booking.core.errors import Forbidden, NotFound, ValidationFailed
from venue_booking.schemas.booking import BookingCreate
from venue_booking.services.validation import validate_request_fields, validate_tenant_resources


def make_request(**overrides):
    payload = booking_payload(SimpleNamespace(id="tenant-1"), [SimpleNamespace(id="res-1")], **overrides)
    return BookingCreate.model_validate(payload)


# ------------------ request body ------------------
def test_legacy_single_resource_becomes_list():
    data = BookingCreate.model_validate({"selectedHall": 42})
    assert data.selected_halls == ["42"]


def test_resource_list_is_deduplicated_in_order():
    data = BookingCreate.model_validate({"selectedHalls": ["b", "a", "b", "", None], "selectedHall": "z"})
    assert data.selected_halls == ["b", "a"]


# ------------------ field checks ------------------
def test_valid_request_returns_window():
    window = validate_request_fields(make_request(), today=TODAY)
    assert window.booking_date == TUESDAY
    assert window.customer_phone == "+442079460958"
    assert window.duration_hours == 2


@pytest.mark.parametrize("field", [
    "hallOwnerId", "customerName", "customerEmail", "customerPhone",
    "eventType", "bookingDate", "startTime", "endTime",
])
def test_missing_field_is_rejected(field):
    with pytest.raises(ValidationFailed) as exc:
        validate_request_fields(make_request(**{field: None}), today=TODAY)
    assert exc.value.message == "Missing required fields"


def test_empty_resource_list_is_rejected():
    with pytest.raises(ValidationFailed):
        validate_request_fields(make_request(selectedHalls=[]), today=TODAY)


def test_bad_email():
    with pytest.raises(ValidationFailed) as exc:
        validate_request_fields(make_request(customerEmail="jane@example"), today=TODAY)
    assert exc.value.field == "customerEmail"


def test_email_with_trailing_newline():
    with pytest.raises(ValidationFailed) as exc:
        validate_request_fields(make_request(customerEmail="jane@example.com\n"), today=TODAY)
    assert exc.value.field == "customerEmail"


def test_phone_whitespace_including_newline_is_stripped():
    window = validate_request_fields(make_request(customerPhone="5550001111\n"), today=TODAY)
    assert window.customer_phone == "5550001111"


@pytest.mark.parametrize("phone", ["0123456", "12345678901234567", "555-abc-1234"])
def test_bad_phone(phone):
    with pytest.raises(ValidationFailed) as exc:
        validate_request_fields(make_request(customerPhone=phone), today=TODAY)
    assert exc.value.field == "customerPhone"


def test_email_checked_before_phone():
    with pytest.raises(ValidationFailed) as exc:
        validate_request_fields(make_request(customerEmail="nope", customerPhone="0"), today=TODAY)
    assert exc.value.field == "customerEmail"


def test_unparseable_date():
    with pytest.raises(ValidationFailed) as exc:
        validate_request_fields(make_request(bookingDate="20-10-2026"), today=TODAY)
    assert exc.value.message == "Invalid booking date format"


def test_same_day_allowed_past_day_rejected():
    validate_request_fields(make_request(bookingDate=TODAY.isoformat()), today=TODAY)

    with pytest.raises(ValidationFailed) as exc:
        validate_request_fields(make_request(bookingDate="2026-10-18"), today=TODAY)
    assert exc.value.message == "Booking date cannot be in the past"


@pytest.mark.parametrize("start,end", [
    ("24:00", "25:00"), ("10:60", "11:00"), ("10am", "11am"), ("10:00\n", "12:00"), ("10:00", "12:00\n"),
])
def test_bad_time_format(start, end):
    with pytest.raises(ValidationFailed) as exc:
        validate_request_fields(make_request(startTime=start, endTime=end), today=TODAY)
    assert exc.value.message == "Invalid time format"


@pytest.mark.parametrize("start,end", [("12:00", "12:00"), ("14:00", "09:00")])
def test_start_must_precede_end(start, end):
    with pytest.raises(ValidationFailed) as exc:
        validate_request_fields(make_request(startTime=start, endTime=end), today=TODAY)
    assert exc.value.message == "Start time must be before end time"


def test_single_digit_hour_accepted():
    window = validate_request_fields(make_request(startTime="9:30", endTime="11:00"), today=TODAY)
    assert window.duration_hours == 1.5


# ------------------ tenant / resources ------------------
def test_tenant_and_resources_resolved(repo, seed):
    tenant = seed.tenant()
    a = seed.resource(tenant, name="A")
    b = seed.resource(tenant, name="B")

    found_tenant, resources = validate_tenant_resources(repo, tenant.id, [b.id, a.id])
    assert found_tenant.id == tenant.id
    assert [r.name for r in resources] == ["B", "A"]


def test_unknown_tenant(repo):
    with pytest.raises(NotFound) as exc:
        validate_tenant_resources(repo, "missing", ["x"])
    assert exc.value.message == "Hall owner not found"


def test_tenant_must_be_hall_owner(repo, seed):
    tenant = seed.tenant(role="customer")
    with pytest.raises(NotFound):
        validate_tenant_resources(repo, tenant.id, [])


def test_unknown_resource_names_the_id(repo, seed):
    tenant = seed.tenant()
    with pytest.raises(NotFound) as exc:
        validate_tenant_resources(repo, tenant.id, ["ghost"])
    assert "ghost" in exc.value.message


def test_resource_of_other_tenant(repo, seed):
    tenant = seed.tenant()
    other = seed.tenant(email="other@venue.test")
    foreign = seed.resource(other)

    with pytest.raises(ValidationFailed) as exc:
        validate_tenant_resources(repo, tenant.id, [foreign.id])
    assert foreign.id in exc.value.message


def test_customer_of_other_venue_is_forbidden(repo, seed):
    tenant = seed.tenant()
    other = seed.tenant(email="other@venue.test")
    hall = seed.resource(tenant)
    stranger = seed.customer(other, name="Sam")

    with pytest.raises(Forbidden):
        validate_tenant_resources(repo, tenant.id, [hall.id], customer_id=stranger.id)


def test_unknown_customer_is_forbidden(repo, seed):
    tenant = seed.tenant()
    hall = seed.resource(tenant)
    with pytest.raises(Forbidden):
        validate_tenant_resources(repo, tenant.id, [hall.id], customer_id="nobody")


def test_customer_of_same_venue_passes(repo, seed):
    tenant = seed.tenant()
    hall = seed.resource(tenant)
    regular = seed.customer(tenant, name="Sam")
    validate_tenant_resources(repo, tenant.id, [hall.id], customer_id=regular.id)
