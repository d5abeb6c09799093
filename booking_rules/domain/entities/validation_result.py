"""Resultado de la validación de elegibilidad."""

from dataclasses import dataclass

from booking_rules.domain.constants import LOADING_REQUIREMENTS


@dataclass(frozen=True)
class ValidationResult:
    """
    Resultado inmutable de validar una solicitud de reserva.

    Attributes:
        blocking_errors: Violaciones de política que impiden enviar la reserva.
        errors: Campos pendientes que se muestran pero no bloquean el envío.
    """

    blocking_errors: tuple[str, ...] = ()
    errors: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.blocking_errors

    @classmethod
    def loading(cls) -> "ValidationResult":
        """Estado centinela mientras los requisitos del vehículo no están disponibles."""
        return cls(blocking_errors=(LOADING_REQUIREMENTS,), errors=())
