"""Value Objects del dominio de reservas."""

from booking_rules.domain.value_objects.delivery import (
    Airport,
    DeliverySelection,
    DeliveryType,
    MapLocation,
    decode_delivery,
)
from booking_rules.domain.value_objects.money import Money
from booking_rules.domain.value_objects.rental_window import RentalWindow, parse_trip_date

__all__ = [
    "Airport",
    "DeliverySelection",
    "DeliveryType",
    "MapLocation",
    "Money",
    "RentalWindow",
    "decode_delivery",
    "parse_trip_date",
]
