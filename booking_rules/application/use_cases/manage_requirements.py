from booking_rules.application.interfaces.requirements_repo import RequirementsRepo
from booking_rules.domain.entities.vehicle_requirements import VehicleRequirements
from booking_rules.domain.errors import VehicleNotFoundError


class GetRequirementsUseCase:
    def __init__(self, requirements_repo: RequirementsRepo) -> None:
        self._requirements_repo = requirements_repo

    async def execute(self, vehicle_id: str) -> VehicleRequirements:
        requirements = await self._requirements_repo.get_by_vehicle_id(vehicle_id)
        if requirements is None:
            raise VehicleNotFoundError(vehicle_id)
        return requirements


class SaveRequirementsUseCase:
    def __init__(self, requirements_repo: RequirementsRepo) -> None:
        self._requirements_repo = requirements_repo

    async def execute(self, vehicle_id: str, requirements: VehicleRequirements) -> VehicleRequirements:
        await self._requirements_repo.save(vehicle_id, requirements)
        return requirements
