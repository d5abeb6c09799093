"""Entidad BookingRequest - estado del formulario de reserva."""

from dataclasses import dataclass
from datetime import date

from booking_rules.domain.value_objects.delivery import DeliverySelection


@dataclass(frozen=True)
class BookingRequest:
    """
    Solicitud de reserva tal como la envía el formulario.

    Se construye de nuevo en cada cambio del formulario y se pasa por valor
    al validador y al calculador de precios. Edad y experiencia se mantienen
    como texto crudo: interpretarlas es responsabilidad del validador.
    """

    # Ventana del viaje
    pickup_date: date | None = None
    dropoff_date: date | None = None

    # Datos del arrendatario
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone_number: str = ""

    # Datos del conductor
    driver_age: str = ""
    driving_experience: str = ""
    has_driver_license: bool = False
    is_international_license: bool = False

    # Entrega
    delivery: DeliverySelection | None = None
