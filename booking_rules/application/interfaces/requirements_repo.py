"""Interface RequirementsRepo - Puerto para los requisitos de reserva por vehículo."""

from abc import ABC, abstractmethod

from booking_rules.domain.entities.vehicle_requirements import VehicleRequirements


class RequirementsRepo(ABC):
    """
    Puerto para el almacén de requisitos de vehículos.

    En producción lo implementa el servicio de datos externo; aquí solo se
    define el contrato que consumen los casos de uso.
    """

    @abstractmethod
    async def get_by_vehicle_id(self, vehicle_id: str) -> VehicleRequirements | None:
        """
        Obtiene los requisitos de un vehículo.

        Args:
            vehicle_id: Identificador del vehículo.

        Returns:
            VehicleRequirements o None si el vehículo no existe.
        """
        raise NotImplementedError

    @abstractmethod
    async def save(self, vehicle_id: str, requirements: VehicleRequirements) -> None:
        """
        Registra o reemplaza los requisitos de un vehículo.

        Args:
            vehicle_id: Identificador del vehículo.
            requirements: Requisitos a guardar.
        """
        raise NotImplementedError
