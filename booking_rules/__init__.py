"""Reglas de precio y elegibilidad para reservas de vehículos."""

from booking_rules.domain.services import price, validate

__all__ = ["price", "validate"]
