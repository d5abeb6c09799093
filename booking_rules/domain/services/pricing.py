"""
Calculador de precios de reservas.

Toda la aritmética monetaria se hace con `Money` (Decimal redondeado a
centavos). Entradas incompletas producen una cotización en cero en lugar de
una excepción, para poder recalcular en cada cambio del formulario.
"""

from booking_rules.domain.constants import SURCHARGE_MODE_PERCENTAGE
from booking_rules.domain.entities.policy import BookingPolicy
from booking_rules.domain.entities.pricing import PricingInput, PricingResult
from booking_rules.domain.services.form_fields import parse_whole_number
from booking_rules.domain.value_objects.money import Money
from booking_rules.domain.value_objects.rental_window import RentalWindow


def _international_license_surcharge(
    data: PricingInput,
    subtotal: Money,
    policy: BookingPolicy,
) -> Money:
    if not data.is_international_license:
        return Money.zero(subtotal.currency_code)
    if policy.international_license_surcharge_mode == SURCHARGE_MODE_PERCENTAGE:
        return subtotal.percentage(policy.international_license_surcharge_rate)
    return Money.non_negative(policy.international_license_surcharge_amount, subtotal.currency_code)


def _underage_deposit(data: PricingInput, policy: BookingPolicy) -> Money:
    age = parse_whole_number(data.driver_age)
    if age is not None and age < data.minimum_driver_age:
        return Money.non_negative(policy.underage_deposit_amount, data.currency_code)
    return Money.zero(data.currency_code)


def price(data: PricingInput, policy: BookingPolicy | None = None) -> PricingResult:
    """
    Calcula el desglose de precio de una reserva.

    Reglas:
        - días = dropoff - pickup; 0 si falta una fecha o el rango está invertido.
        - subtotal = días × precio por día.
        - recargo por licencia internacional solo si la licencia es internacional.
        - depósito por daños solo si el vehículo lo exige; nunca entra al total.
        - depósito por edad si el conductor es menor a la edad mínima del vehículo.
        - tarifa de confirmación = subtotal × tasa de la política (parte del total).
        - total = subtotal + recargo.
    """
    policy = policy or BookingPolicy()
    currency = data.currency_code

    window = RentalWindow.from_dates(data.pickup_date, data.dropoff_date)
    rental_days = window.rental_days if window else 0

    price_per_day = Money.non_negative(data.price_per_day, currency)
    subtotal = price_per_day * rental_days
    surcharge = _international_license_surcharge(data, subtotal, policy)

    if data.require_damage_deposit:
        damage_deposit = Money.non_negative(data.damage_deposit_amount, currency)
    else:
        damage_deposit = Money.zero(currency)

    return PricingResult(
        rental_days=rental_days,
        price_per_day=price_per_day,
        subtotal=subtotal,
        international_license_surcharge=surcharge,
        damage_deposit=damage_deposit,
        underage_deposit=_underage_deposit(data, policy),
        confirmation_fee=subtotal.percentage(policy.confirmation_fee_rate),
        total=subtotal + surcharge,
    )
