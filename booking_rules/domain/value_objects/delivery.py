"""Value Objects de entrega: ubicación en mapa o aeropuerto."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Mapping

from booking_rules.domain.errors import InvalidDeliverySelectionError

GOOGLE_MAPS_URL = re.compile(r"^https://(www\.)?(google\.com/maps|maps\.google\.com|goo\.gl/maps)")


class DeliveryType(str, Enum):
    """Modos de entrega del vehículo."""

    MAP_LOCATION = "map_location"
    AIRPORT = "airport"


def is_google_maps_url(url: str) -> bool:
    if not url:
        return False
    return bool(GOOGLE_MAPS_URL.match(url.strip()))


@dataclass(frozen=True)
class MapLocation:
    """Entrega en un punto marcado en el mapa (texto libre o URL)."""

    text: str

    kind: ClassVar[DeliveryType] = DeliveryType.MAP_LOCATION

    def describe(self, airports: Mapping[str, str] | None = None) -> str:
        return self.text.strip()


@dataclass(frozen=True)
class Airport:
    """Entrega en un aeropuerto identificado por su código IATA."""

    code: str

    kind: ClassVar[DeliveryType] = DeliveryType.AIRPORT

    def describe(self, airports: Mapping[str, str] | None = None) -> str:
        name = (airports or {}).get(self.code)
        return f"{self.code} – {name}" if name else self.code


DeliverySelection = MapLocation | Airport


def decode_delivery(
    delivery_type: DeliveryType | str | None,
    location: str | None = None,
    airport_code: str | None = None,
) -> DeliverySelection | None:
    """
    Decodifica los campos crudos del formulario en una selección tipada.

    Solo se lee el campo que corresponde al modo elegido. Retorna None cuando
    ese campo está vacío, para que el validador lo reporte como bloqueante.

    Raises:
        InvalidDeliverySelectionError: si el modo no es uno de DeliveryType.
    """
    try:
        mode = DeliveryType(delivery_type) if delivery_type is not None else DeliveryType.MAP_LOCATION
    except ValueError as exc:
        raise InvalidDeliverySelectionError(f"Unknown delivery type: {delivery_type}") from exc

    if mode is DeliveryType.AIRPORT:
        code = (airport_code or "").strip().upper()
        return Airport(code=code) if code else None

    text = (location or "").strip()
    return MapLocation(text=text) if text else None
