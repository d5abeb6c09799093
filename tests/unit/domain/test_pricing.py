from datetime import date
from decimal import Decimal

import pytest

from booking_rules.domain.entities.policy import BookingPolicy
from booking_rules.domain.entities.pricing import PricingInput
from booking_rules.domain.services import price
from booking_rules.domain.value_objects.money import Money

pytestmark = pytest.mark.pricing


def _input(**overrides) -> PricingInput:
    data = {
        "pickup_date": date(2024, 6, 1),
        "dropoff_date": date(2024, 6, 4),
        "price_per_day": Decimal("100"),
        "driver_age": "25",
        "is_international_license": False,
        "minimum_driver_age": 21,
        "require_damage_deposit": False,
        "damage_deposit_amount": Decimal("0"),
    }
    data.update(overrides)
    return PricingInput(**data)


class TestPricingFormula:
    """Fórmula base: días × precio por día."""

    def test_three_day_quote(self):
        res = price(_input())

        assert res.rental_days == 3
        assert res.subtotal == Money(Decimal("300"))
        assert res.international_license_surcharge.is_zero()
        assert res.damage_deposit.is_zero()
        assert res.total == Money(Decimal("300"))

    @pytest.mark.parametrize("rate,days,expected", [
        ("100", 3, "300.00"),
        ("49.99", 7, "349.93"),
        ("0.10", 3, "0.30"),
        ("33.33", 3, "99.99"),
        ("1234.56", 30, "37036.80"),
    ])
    def test_subtotal_is_exact(self, rate, days, expected):
        res = price(_input(
            price_per_day=Decimal(rate),
            pickup_date=date(2024, 1, 1),
            dropoff_date=date(2024, 1, 1 + days),
        ))

        assert res.rental_days == days
        assert res.subtotal.amount == Decimal(expected)
        assert res.subtotal.amount == Decimal(rate) * days

    def test_float_rate_does_not_drift(self):
        res = price(_input(price_per_day=0.1, dropoff_date=date(2024, 6, 4)))

        assert res.subtotal.amount == Decimal("0.30")

    def test_string_dates_are_accepted(self):
        res = price(_input(pickup_date="2024-06-01", dropoff_date="2024-06-04T10:00"))

        assert res.rental_days == 3


class TestDegradedInputs:
    """Entradas incompletas producen una cotización en cero, nunca una excepción."""

    @pytest.mark.parametrize("pickup,dropoff", [
        (None, date(2024, 6, 4)),
        (date(2024, 6, 1), None),
        (None, None),
        (date(2024, 6, 4), date(2024, 6, 1)),
        (date(2024, 6, 1), date(2024, 6, 1)),
        ("", "not-a-date"),
    ])
    def test_invalid_window_yields_zero_days(self, pickup, dropoff):
        res = price(_input(pickup_date=pickup, dropoff_date=dropoff))

        assert res.rental_days == 0
        assert res.subtotal.is_zero()
        assert res.total.is_zero()

    def test_negative_amounts_are_clamped(self):
        res = price(_input(
            price_per_day=Decimal("-50"),
            require_damage_deposit=True,
            damage_deposit_amount=Decimal("-10"),
        ))

        assert res.subtotal.is_zero()
        assert res.damage_deposit.is_zero()


class TestSurchargesAndDeposits:

    def test_flat_international_license_surcharge(self):
        res = price(_input(is_international_license=True))

        assert res.international_license_surcharge == Money(Decimal("23.00"))
        assert res.total == Money(Decimal("323.00"))

    def test_percentage_international_license_surcharge(self):
        policy = BookingPolicy(
            international_license_surcharge_mode="percentage",
            international_license_surcharge_rate=Decimal("0.15"),
        )

        res = price(_input(is_international_license=True), policy)

        assert res.international_license_surcharge == Money(Decimal("45.00"))
        assert res.total == Money(Decimal("345.00"))

    def test_no_surcharge_for_local_license(self):
        res = price(_input(is_international_license=False))

        assert res.international_license_surcharge.is_zero()

    def test_damage_deposit_is_separate_from_total(self):
        res = price(_input(require_damage_deposit=True, damage_deposit_amount=Decimal("150")))

        assert res.damage_deposit == Money(Decimal("150"))
        assert res.total == Money(Decimal("300"))

    def test_damage_deposit_ignored_when_not_required(self):
        res = price(_input(require_damage_deposit=False, damage_deposit_amount=Decimal("150")))

        assert res.damage_deposit.is_zero()

    def test_underage_deposit(self):
        res = price(_input(driver_age="19", minimum_driver_age=21))

        assert res.underage_deposit == Money(Decimal("1000.00"))
        assert res.total == Money(Decimal("300"))

    @pytest.mark.parametrize("age", ["21", "40", "", "abc"])
    def test_no_underage_deposit(self, age):
        res = price(_input(driver_age=age, minimum_driver_age=21))

        assert res.underage_deposit.is_zero()

    def test_deposits_total(self):
        res = price(_input(
            driver_age="19",
            require_damage_deposit=True,
            damage_deposit_amount=Decimal("250"),
        ))

        assert res.deposits_total == Money(Decimal("1250.00"))

    def test_confirmation_fee_and_balance(self):
        res = price(_input())

        assert res.confirmation_fee == Money(Decimal("36.00"))
        assert res.balance_due == Money(Decimal("264.00"))


def test_price_is_idempotent():
    data = _input(is_international_license=True, require_damage_deposit=True, damage_deposit_amount=150)

    first = price(data)
    second = price(data)

    assert first == second
    assert first.total.amount.as_tuple() == second.total.amount.as_tuple()


def test_currency_is_carried_through():
    res = price(_input(currency_code="XCD"))

    assert res.currency_code == "XCD"
    assert res.subtotal.currency_code == "XCD"
