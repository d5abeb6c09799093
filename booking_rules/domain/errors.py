"""Excepciones de dominio para la evaluación de reservas."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from booking_rules.domain.entities.validation_result import ValidationResult


class DomainError(Exception):
    """Clase base para todos los errores de dominio."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


# === Errores de Vehículo ===


class VehicleNotFoundError(DomainError):
    """No existen requisitos registrados para el vehículo."""

    def __init__(self, vehicle_id: str):
        super().__init__(
            message=f"Vehicle not found: {vehicle_id}",
            code="VEHICLE_NOT_FOUND",
        )
        self.vehicle_id = vehicle_id


# === Errores de Reserva ===


class BookingNotEligibleError(DomainError):
    """La solicitud tiene violaciones bloqueantes y no puede enviarse."""

    def __init__(self, vehicle_id: str, validation: "ValidationResult"):
        super().__init__(
            message=f"Booking for vehicle {vehicle_id} does not meet the requirements",
            code="BOOKING_NOT_ELIGIBLE",
        )
        self.vehicle_id = vehicle_id
        self.validation = validation


# === Errores de Validación ===


class InvalidDateRangeError(DomainError):
    """Rango de fechas inválido."""

    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_DATE_RANGE")


class InvalidMoneyError(DomainError):
    """Monto monetario inválido."""

    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_MONEY")


class InvalidDeliverySelectionError(DomainError):
    """La selección de entrega no corresponde a ningún modo conocido."""

    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_DELIVERY_SELECTION")
