"""Entidades del dominio de reservas."""

from booking_rules.domain.entities.booking_intent import BookingIntent
from booking_rules.domain.entities.booking_request import BookingRequest
from booking_rules.domain.entities.policy import BookingPolicy
from booking_rules.domain.entities.pricing import PricingInput, PricingResult
from booking_rules.domain.entities.validation_result import ValidationResult
from booking_rules.domain.entities.vehicle_requirements import VehicleRequirements

__all__ = [
    "BookingIntent",
    "BookingPolicy",
    "BookingRequest",
    "PricingInput",
    "PricingResult",
    "ValidationResult",
    "VehicleRequirements",
]
