"""Implementación in-memory del repositorio de requisitos de vehículos."""

import logging

from booking_rules.application.interfaces.requirements_repo import RequirementsRepo
from booking_rules.domain.entities.vehicle_requirements import VehicleRequirements

logger = logging.getLogger(__name__)


class InMemoryRequirementsRepo(RequirementsRepo):
    """Implementación in-memory del repositorio de requisitos para desarrollo y testing."""

    def __init__(self) -> None:
        self._requirements: dict[str, VehicleRequirements] = {}

    async def get_by_vehicle_id(self, vehicle_id: str) -> VehicleRequirements | None:
        """Obtiene los requisitos de un vehículo."""
        return self._requirements.get(str(vehicle_id))

    async def save(self, vehicle_id: str, requirements: VehicleRequirements) -> None:
        """Registra o reemplaza los requisitos de un vehículo."""
        self._requirements[str(vehicle_id)] = requirements
        logger.info(f"Requisitos registrados para vehículo {vehicle_id}")

    def clear(self) -> None:
        """Elimina todos los requisitos (útil en tests)."""
        self._requirements.clear()
