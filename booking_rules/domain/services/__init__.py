"""Reglas de negocio puras: elegibilidad y precio."""

from booking_rules.domain.services.eligibility import validate
from booking_rules.domain.services.pricing import price

__all__ = ["price", "validate"]
