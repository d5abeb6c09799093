"""Entidad BookingIntent - reserva validada y cotizada lista para enviarse."""

from dataclasses import dataclass
from datetime import date

from booking_rules.domain.entities.pricing import PricingResult
from booking_rules.domain.value_objects.delivery import DeliveryType


@dataclass(frozen=True)
class BookingIntent:
    """
    Resultado de preparar una reserva elegible.

    Se entrega al servicio de pagos (tarifa de confirmación) y al servicio de
    persistencia; aquí no se guarda nada.
    """

    vehicle_id: str
    pickup_date: date
    dropoff_date: date
    first_name: str
    last_name: str
    email: str
    phone_number: str
    driver_age: int
    driving_experience: int
    is_international_license: bool
    delivery_type: DeliveryType
    delivery_location: str
    pricing: PricingResult
    pending_fields: tuple[str, ...] = ()

    @property
    def amount_due_now_cents(self) -> int:
        """Tarifa de confirmación en centavos, tal como la espera el procesador de pagos."""
        return self.pricing.confirmation_fee.to_cents()
