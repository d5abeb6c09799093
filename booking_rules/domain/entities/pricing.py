"""Entrada y resultado del cálculo de precio."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from booking_rules.domain.constants import (
    DEFAULT_CURRENCY_CODE,
    DEFAULT_MINIMUM_DRIVER_AGE,
)
from booking_rules.domain.entities.booking_request import BookingRequest
from booking_rules.domain.entities.vehicle_requirements import VehicleRequirements
from booking_rules.domain.value_objects.money import Money, to_decimal


@dataclass(frozen=True)
class PricingInput:
    """Parámetros que determinan una cotización."""

    pickup_date: date | str | None
    dropoff_date: date | str | None
    price_per_day: Decimal
    driver_age: str = ""
    is_international_license: bool = False
    minimum_driver_age: int = DEFAULT_MINIMUM_DRIVER_AGE
    require_damage_deposit: bool = False
    damage_deposit_amount: Decimal = Decimal("0")
    currency_code: str = DEFAULT_CURRENCY_CODE

    def __post_init__(self) -> None:
        object.__setattr__(self, "price_per_day", to_decimal(self.price_per_day))
        object.__setattr__(self, "damage_deposit_amount", to_decimal(self.damage_deposit_amount))

    @classmethod
    def from_booking(
        cls,
        request: BookingRequest,
        requirements: VehicleRequirements,
    ) -> "PricingInput":
        """Arma la entrada de precio desde el formulario y los requisitos del vehículo."""
        return cls(
            pickup_date=request.pickup_date,
            dropoff_date=request.dropoff_date,
            price_per_day=requirements.price_per_day,
            driver_age=request.driver_age,
            is_international_license=request.is_international_license,
            minimum_driver_age=requirements.minimum_driver_age,
            require_damage_deposit=requirements.require_damage_deposit,
            damage_deposit_amount=requirements.damage_deposit_amount,
            currency_code=requirements.currency_code,
        )


@dataclass(frozen=True)
class PricingResult:
    """
    Desglose inmutable de una cotización.

    `total` incluye solo lo que se cobra por la renta (subtotal + recargo).
    Los depósitos son reembolsables y se reportan aparte. `confirmation_fee`
    es la parte del total que se paga al confirmar.
    """

    rental_days: int
    price_per_day: Money
    subtotal: Money
    international_license_surcharge: Money
    damage_deposit: Money
    underage_deposit: Money
    confirmation_fee: Money
    total: Money

    @property
    def currency_code(self) -> str:
        return self.total.currency_code

    @property
    def balance_due(self) -> Money:
        """Monto pendiente después de la tarifa de confirmación."""
        return self.total - self.confirmation_fee

    @property
    def deposits_total(self) -> Money:
        return self.damage_deposit + self.underage_deposit
