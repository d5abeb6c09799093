"""Entidad VehicleRequirements - precio y política de reserva de un vehículo."""

from dataclasses import dataclass
from decimal import Decimal

from booking_rules.domain.constants import (
    DEFAULT_CURRENCY_CODE,
    DEFAULT_DAMAGE_DEPOSIT_AMOUNT,
    DEFAULT_DAMAGE_DEPOSIT_TYPE,
    DEFAULT_MINIMUM_DRIVER_AGE,
    DEFAULT_MINIMUM_DRIVING_EXPERIENCE,
    DEFAULT_MINIMUM_RENTAL_DAYS,
)
from booking_rules.domain.value_objects.money import to_decimal


@dataclass(frozen=True)
class VehicleRequirements:
    """
    Requisitos de reserva de un vehículo, combinando el precio del vehículo
    con la configuración de la compañía que lo ofrece.

    Es de solo lectura durante una evaluación.
    """

    price_per_day: Decimal
    require_driver_license: bool = True
    require_minimum_age: bool = True
    minimum_driver_age: int = DEFAULT_MINIMUM_DRIVER_AGE
    require_driving_experience: bool = True
    minimum_driving_experience: int = DEFAULT_MINIMUM_DRIVING_EXPERIENCE
    minimum_rental_days: int = DEFAULT_MINIMUM_RENTAL_DAYS
    require_damage_deposit: bool = False
    damage_deposit_amount: Decimal = DEFAULT_DAMAGE_DEPOSIT_AMOUNT
    damage_deposit_type: str = DEFAULT_DAMAGE_DEPOSIT_TYPE
    currency_code: str = DEFAULT_CURRENCY_CODE

    def __post_init__(self) -> None:
        object.__setattr__(self, "price_per_day", to_decimal(self.price_per_day))
        object.__setattr__(self, "damage_deposit_amount", to_decimal(self.damage_deposit_amount))
