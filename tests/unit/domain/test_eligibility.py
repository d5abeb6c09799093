from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from booking_rules.domain import constants as msg
from booking_rules.domain.entities.booking_request import BookingRequest
from booking_rules.domain.entities.policy import BookingPolicy
from booking_rules.domain.services import validate
from booking_rules.domain.value_objects.delivery import Airport, MapLocation

pytestmark = pytest.mark.eligibility


def test_eligible_request_has_no_errors(booking_request, requirements):
    result = validate(booking_request, requirements)

    assert result.is_valid is True
    assert result.blocking_errors == ()
    assert result.errors == ()


def test_missing_requirements_returns_loading_sentinel(booking_request):
    result = validate(booking_request, None)

    assert result.is_valid is False
    assert result.blocking_errors == ("Loading requirements...",)
    assert result.errors == ()


def test_loading_sentinel_ignores_form_contents():
    result = validate(BookingRequest(), None)

    assert result.blocking_errors == (msg.LOADING_REQUIREMENTS,)
    assert result.errors == ()


def test_underage_driver_reports_single_age_error(booking_request, requirements):
    result = validate(replace(booking_request, driver_age="17"), requirements)

    age_errors = [e for e in result.blocking_errors if "years old" in e]
    assert result.is_valid is False
    assert age_errors == ["Driver must be at least 18 years old"]


def test_driver_below_vehicle_minimum_age(booking_request, requirements):
    result = validate(replace(booking_request, driver_age="19"), requirements)

    assert result.blocking_errors == ("Driver must be at least 21 years old for this vehicle",)


def test_minimum_age_check_can_be_disabled(booking_request, requirements):
    lenient = replace(requirements, require_minimum_age=False)

    result = validate(replace(booking_request, driver_age="19"), lenient)

    assert result.is_valid is True


def test_legal_minimum_age_applies_even_when_vehicle_check_disabled(booking_request, requirements):
    lenient = replace(requirements, require_minimum_age=False)

    result = validate(replace(booking_request, driver_age="16"), lenient)

    assert result.blocking_errors == ("Driver must be at least 18 years old",)


@pytest.mark.parametrize("age,expected", [
    ("", msg.DRIVER_AGE_REQUIRED),
    ("   ", msg.DRIVER_AGE_REQUIRED),
    ("twenty", msg.DRIVER_AGE_INVALID),
    ("25.5", msg.DRIVER_AGE_INVALID),
    ("-3", msg.DRIVER_AGE_INVALID),
])
def test_missing_or_unparseable_age_is_blocking(booking_request, requirements, age, expected):
    result = validate(replace(booking_request, driver_age=age), requirements)

    assert result.blocking_errors == (expected,)
    assert result.errors == ()


@pytest.mark.parametrize("days,min_days,ok", [
    (1, 2, False),
    (2, 2, True),
    (3, 2, True),
    (6, 7, False),
    (7, 7, True),
])
def test_minimum_rental_days(booking_request, requirements, days, min_days, ok):
    form = replace(
        booking_request,
        pickup_date=date(2024, 6, 1),
        dropoff_date=date(2024, 6, 1 + days),
    )
    result = validate(form, replace(requirements, minimum_rental_days=min_days))

    expected = msg.MINIMUM_RENTAL_DAYS.format(days=min_days)
    assert (expected in result.blocking_errors) is (not ok)
    assert result.is_valid is ok


def test_missing_dates_are_blocking(booking_request, requirements):
    form = replace(booking_request, pickup_date=None, dropoff_date=None)

    result = validate(form, requirements)

    assert result.blocking_errors == (msg.PICKUP_DATE_REQUIRED, msg.DROPOFF_DATE_REQUIRED)


@pytest.mark.parametrize("dropoff", [date(2024, 6, 1), date(2024, 5, 28)])
def test_dropoff_must_follow_pickup(booking_request, requirements, dropoff):
    form = replace(booking_request, pickup_date=date(2024, 6, 1), dropoff_date=dropoff)

    result = validate(form, requirements)

    assert result.blocking_errors == (msg.DROPOFF_BEFORE_PICKUP,)


def test_missing_license_is_blocking_only_when_required(booking_request, requirements):
    form = replace(booking_request, has_driver_license=False)

    assert validate(form, requirements).blocking_errors == (msg.DRIVER_LICENSE_REQUIRED,)
    assert validate(form, replace(requirements, require_driver_license=False)).is_valid


def test_insufficient_experience_is_blocking(booking_request, requirements):
    form = replace(booking_request, driving_experience="1")

    result = validate(form, requirements)

    assert result.blocking_errors == ("Minimum 2 years of driving experience required",)


@pytest.mark.parametrize("experience,expected", [
    ("", msg.DRIVING_EXPERIENCE_REQUIRED),
    ("a lot", msg.DRIVING_EXPERIENCE_INVALID),
    ("-1", msg.DRIVING_EXPERIENCE_INVALID),
])
def test_missing_or_invalid_experience_is_blocking(booking_request, requirements, experience, expected):
    result = validate(replace(booking_request, driving_experience=experience), requirements)

    assert result.blocking_errors == (expected,)


def test_experience_check_can_be_disabled(booking_request, requirements):
    lenient = replace(requirements, require_driving_experience=False)

    result = validate(replace(booking_request, driving_experience="0"), lenient)

    assert result.is_valid is True


def test_missing_delivery_is_blocking(booking_request, requirements):
    result = validate(replace(booking_request, delivery=None), requirements)

    assert result.blocking_errors == (msg.DELIVERY_REQUIRED,)


def test_blank_map_location_is_blocking(booking_request, requirements):
    result = validate(replace(booking_request, delivery=MapLocation("   ")), requirements)

    assert result.blocking_errors == (msg.DELIVERY_REQUIRED,)


def test_supported_airport_is_accepted(booking_request, requirements):
    result = validate(replace(booking_request, delivery=Airport("UVF")), requirements)

    assert result.is_valid is True


def test_unknown_airport_is_blocking(booking_request, requirements):
    result = validate(replace(booking_request, delivery=Airport("JFK")), requirements)

    assert result.blocking_errors == (msg.DELIVERY_AIRPORT_UNSUPPORTED,)


def test_maps_url_required_by_policy(booking_request, requirements):
    policy = BookingPolicy(require_maps_url_for_delivery=True)

    text_result = validate(booking_request, requirements, policy)
    url_form = replace(
        booking_request,
        delivery=MapLocation("https://maps.google.com/?q=13.9,-60.9"),
    )

    assert text_result.blocking_errors == (msg.DELIVERY_MAPS_URL_INVALID,)
    assert validate(url_form, requirements, policy).is_valid is True


def test_contact_issues_are_advisory(booking_request, requirements):
    form = replace(booking_request, first_name="", last_name=" ", email="", phone_number="+1")

    result = validate(form, requirements)

    assert result.is_valid is True
    assert result.blocking_errors == ()
    assert result.errors == (
        msg.FIRST_NAME_REQUIRED,
        msg.LAST_NAME_REQUIRED,
        msg.EMAIL_REQUIRED,
        msg.PHONE_REQUIRED,
    )


@pytest.mark.parametrize("email", ["jane", "jane@", "jane@example", "ja ne@example.com"])
def test_malformed_email_is_advisory(booking_request, requirements, email):
    result = validate(replace(booking_request, email=email), requirements)

    assert result.is_valid is True
    assert result.errors == (msg.EMAIL_INVALID,)


def test_all_failures_are_accumulated_in_rule_order(requirements):
    result = validate(BookingRequest(), requirements)

    assert result.blocking_errors == (
        msg.PICKUP_DATE_REQUIRED,
        msg.DROPOFF_DATE_REQUIRED,
        msg.DRIVER_LICENSE_REQUIRED,
        msg.DRIVER_AGE_REQUIRED,
        msg.DRIVING_EXPERIENCE_REQUIRED,
        msg.DELIVERY_REQUIRED,
    )
    assert result.errors == (
        msg.FIRST_NAME_REQUIRED,
        msg.LAST_NAME_REQUIRED,
        msg.EMAIL_REQUIRED,
        msg.PHONE_REQUIRED,
    )


def test_validation_is_deterministic(booking_request, requirements):
    form = replace(booking_request, driver_age="17", delivery=None, email="bad")

    assert validate(form, requirements) == validate(form, requirements)


@pytest.mark.parametrize("form", [
    BookingRequest(),
    BookingRequest(driver_age="30", driving_experience="10", has_driver_license=True),
    BookingRequest(
        pickup_date=date(2024, 1, 1),
        dropoff_date=date(2024, 1, 10),
        driver_age="40",
        driving_experience="20",
        has_driver_license=True,
        delivery=Airport("GFL"),
    ),
])
def test_is_valid_matches_blocking_errors(form, requirements):
    for reqs in (requirements, None, replace(requirements, price_per_day=Decimal("0"))):
        result = validate(form, reqs)
        assert result.is_valid == (len(result.blocking_errors) == 0)


@pytest.mark.parametrize("phone,blank", [
    ("", True),
    ("   ", True),
    ("+1", True),
    (" +1 ", True),
    ("+123", False),
    ("+44", False),
    ("+17585551234", False),
])
def test_only_prefilled_prefix_counts_as_missing_phone(booking_request, requirements, phone, blank):
    result = validate(replace(booking_request, phone_number=phone), requirements)

    assert (msg.PHONE_REQUIRED in result.errors) is blank
    assert result.is_valid is True
